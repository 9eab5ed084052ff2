import logging
from typing import Optional

from sqlalchemy.engine import Engine

from users_api.config import load_config
from users_api.db.engine import connect
from users_api.db.schema import metadata

logger = logging.getLogger(__name__)


def main(engine: Optional[Engine] = None):
    """Create the users table for local development. Existing data is kept."""
    engine = engine or connect(load_config())
    metadata.create_all(engine, checkfirst=True)
    logger.info("users table ready")


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    main()
