# users_api/config.py
"""
Settings loaded from the environment.

Two groups are kept apart:
    Config          database credentials, read from the process environment
                    only when a local .env file is present.
    ServerSettings  port and log destination, always read from the
                    environment (and .env if it exists).
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

ENV_FILE = ".env"


class Config(BaseSettings):
    """Database connection settings (DB_USERNAME, DB_PASSWORD, ...)."""

    model_config = SettingsConfigDict(env_file_encoding="utf-8", extra="ignore")

    db_username: str = ""
    db_password: str = ""
    db_host: str = ""
    db_port: str = ""
    db_name: str = ""

    def missing_fields(self) -> List[str]:
        return [name for name, value in self.model_dump().items() if not value]


class ServerSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding="utf-8", extra="ignore"
    )

    port: str = "8000"
    log_destination: str = ""


def load_config(env_file: str = ENV_FILE) -> Config:
    """
    Build the database Config.

    A missing env file is not an error: every field is left empty and the
    problem shows up later as a connection failure.
    """
    if not Path(env_file).is_file():
        logger.warning(
            "Environment file %s not found; database settings left empty", env_file
        )
        return Config.model_construct()

    config = Config(_env_file=env_file)

    missing = config.missing_fields()
    if missing:
        logger.warning("Database settings not set: %s", ", ".join(missing))

    return config


@lru_cache()
def get_server_settings() -> ServerSettings:
    return ServerSettings()
