# users_api/log_setup.py

import logging
import sys
from typing import Optional

from users_api.exceptions import StartupError

logger = logging.getLogger(__name__)

LOG_FILE = "app.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Handler installed on the root logger by the last setup_logging() call.
_handler: Optional[logging.Handler] = None


def setup_logging(
    destination: Optional[str],
    level: int = logging.INFO,
    log_file: str = LOG_FILE,
) -> logging.Handler:
    """
    Point the root logger at a file or stdout. Called once, before anything
    else is initialised.

    destination:
        "file"    append to `log_file` (created if missing)
        "stdout"  standard output
        other     standard output, with a warning
    """
    global _handler

    if destination == "file":
        try:
            handler: logging.Handler = logging.FileHandler(log_file, mode="a")
        except OSError as exc:
            raise StartupError(f"Error opening log file: {exc}") from exc
    else:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
        _handler.close()
    root.addHandler(handler)
    root.setLevel(level)
    _handler = handler

    if destination not in ("file", "stdout"):
        logger.warning(
            "Invalid logging destination specified (%r). Defaulting to stdout.",
            destination,
        )

    return handler


def teardown_logging() -> None:
    """Remove the handler installed by setup_logging(), if any."""
    global _handler

    if _handler is not None:
        logging.getLogger().removeHandler(_handler)
        _handler.close()
        _handler = None
