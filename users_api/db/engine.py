# users_api/db/engine.py

import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError

from users_api.config import Config
from users_api.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)

DRIVER = "mysql+pymysql"


def build_url(config: Config) -> URL:
    """
    MariaDB/MySQL URL for the pymysql driver. Empty values are left out so
    the driver falls back to its own defaults.
    """
    try:
        port = int(config.db_port) if config.db_port else None
    except ValueError as exc:
        raise DatabaseConnectionError(
            f"invalid database port {config.db_port!r}"
        ) from exc

    return URL.create(
        DRIVER,
        username=config.db_username or None,
        password=config.db_password or None,
        host=config.db_host or None,
        port=port,
        database=config.db_name or None,
    )


def ping(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def connect(config: Config) -> Engine:
    """
    Create the shared engine and check the database answers.

    Raises DatabaseConnectionError if the engine can't be built or the ping
    fails.
    """
    url = build_url(config)

    try:
        engine = create_engine(url)
    except SQLAlchemyError as exc:
        raise DatabaseConnectionError(str(exc)) from exc

    try:
        ping(engine)
    except SQLAlchemyError as exc:
        engine.dispose()
        raise DatabaseConnectionError(str(exc)) from exc

    logger.info("Connected to database %s", url.render_as_string(hide_password=True))
    return engine


def get_engine(request: Request) -> Engine:
    # The engine is owned by the app; handlers only borrow it.
    return request.app.state.engine
