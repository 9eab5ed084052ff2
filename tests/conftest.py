# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Fixtures shared by the test modules:
# - a file-backed SQLite engine with the users table created
# - an engine that can never connect, standing in for a database that is down
# - TestClients built around either engine
# =============================================================================

import logging
import os

# Keep the developer's own settings out of the tests.
for _name in ("DB_USERNAME", "DB_PASSWORD", "DB_HOST", "DB_PORT", "DB_NAME",
              "PORT", "LOG_DESTINATION"):
    os.environ.pop(_name, None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from users_api.db.schema import metadata
from users_api.log_setup import teardown_logging
from users_api.main import create_app


# =============================================================================
# Database fixtures
# =============================================================================

@pytest.fixture
def engine(tmp_path):
    """SQLite engine with an empty users table."""
    engine = create_engine(f"sqlite:///{tmp_path / 'users.db'}")
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def bare_engine(tmp_path):
    """Reachable database without the users table."""
    engine = create_engine(f"sqlite:///{tmp_path / 'bare.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def broken_engine(tmp_path):
    """Engine whose database file lives in a directory that doesn't exist."""
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'users.db'}")
    yield engine
    engine.dispose()


# =============================================================================
# Client fixtures
# =============================================================================

@pytest.fixture
def client(engine):
    with TestClient(create_app(engine)) as client:
        yield client


@pytest.fixture
def broken_client(broken_engine):
    with TestClient(create_app(broken_engine)) as client:
        yield client


# =============================================================================
# Logging
# =============================================================================

@pytest.fixture
def restore_logging():
    """Undo setup_logging() after the test."""
    root = logging.getLogger()
    level = root.level
    yield
    teardown_logging()
    root.setLevel(level)
