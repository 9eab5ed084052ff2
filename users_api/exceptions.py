# users_api/exceptions.py
"""
Error types for the service and the handlers that turn them into responses.

Errors reach the client as plain text carrying the underlying message; no
sanitisation is applied.
"""

from typing import Any, Dict, List

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

DB_UNAVAILABLE_MESSAGE = "Database is not available"


class UsersAPIError(Exception):
    """Base exception; `status_code` is used when rendered as a response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StartupError(UsersAPIError):
    """Fatal error raised before the server starts serving."""


class DatabaseConnectionError(StartupError):
    """The database could not be opened or did not answer the ping."""


class RequestDecodeError(UsersAPIError):
    status_code = 400


class DatabaseOperationError(UsersAPIError):
    status_code = 500


class ReadinessFailure(UsersAPIError):
    status_code = 503

    def __init__(self, message: str = DB_UNAVAILABLE_MESSAGE):
        super().__init__(message)


def _describe(errors: List[Dict[str, Any]]) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


async def users_api_exception_handler(
    request: Request, exc: UsersAPIError
) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    # Undecodable bodies are a 400 here, not FastAPI's default 422.
    decode_error = RequestDecodeError(_describe(exc.errors()))
    return await users_api_exception_handler(request, decode_error)
