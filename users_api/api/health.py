# users_api/api/health.py
"""
Probes for orchestrators.

/health says the process is up and never touches the database.
/readiness says whether requests can be served, i.e. the database answers.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from users_api.db.engine import get_engine, ping
from users_api.exceptions import ReadinessFailure

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_class=PlainTextResponse)
def liveness_check() -> str:
    return "OK"


@router.get("/readiness", response_class=PlainTextResponse)
def readiness_check(engine: Engine = Depends(get_engine)) -> str:
    try:
        ping(engine)
    except SQLAlchemyError as exc:
        logger.warning("Readiness check failed: %s", exc)
        raise ReadinessFailure() from exc

    return "OK"
