# users_api/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.engine import Engine

from users_api.api.form import router as form_router
from users_api.api.health import router as health_router
from users_api.api.users import router as users_router
from users_api.config import load_config
from users_api.db.engine import connect
from users_api.exceptions import (
    UsersAPIError,
    users_api_exception_handler,
    validation_exception_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connect on startup when no engine was handed in, and release it on
    shutdown. An engine passed to create_app belongs to the caller.
    """
    engine = app.state.engine
    owns_engine = engine is None

    if owns_engine:
        engine = connect(load_config())
        app.state.engine = engine

    try:
        yield
    finally:
        if owns_engine:
            logger.info("Closing database engine")
            engine.dispose()
            app.state.engine = None


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    app = FastAPI(
        title="Users API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.engine = engine

    app.add_exception_handler(UsersAPIError, users_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(form_router)
    app.include_router(users_router)
    app.include_router(health_router)

    return app


app = create_app()
