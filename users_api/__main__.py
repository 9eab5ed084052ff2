# users_api/__main__.py
"""
Process entrypoint.

Usage:
    python -m users_api
    users-api
"""

import logging
import sys

import uvicorn

from users_api.config import get_server_settings, load_config
from users_api.db.engine import connect
from users_api.exceptions import StartupError
from users_api.log_setup import setup_logging
from users_api.main import create_app

logger = logging.getLogger("users_api")


def parse_port(value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise StartupError(f"invalid PORT {value!r}") from exc


def main() -> None:
    settings = get_server_settings()

    try:
        setup_logging(settings.log_destination)
    except StartupError as exc:
        # No handler is configured yet.
        print(exc, file=sys.stderr)
        sys.exit(1)

    logger.info("Starting application")

    try:
        port = parse_port(settings.port)
    except StartupError as exc:
        logger.critical("Error loading config: %s", exc)
        sys.exit(1)

    try:
        engine = connect(load_config())
    except StartupError as exc:
        logger.critical("Error connecting to database: %s", exc)
        sys.exit(1)

    try:
        app = create_app(engine)
        logger.info("Server listening on port %s", port)
        # log_config=None keeps uvicorn's loggers on the handler chosen above.
        uvicorn.run(app, host="0.0.0.0", port=port, log_config=None)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
