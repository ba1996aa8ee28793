"""API error types and their JSON rendering.

Every failure leaves the service as a flat ``{"error": "<message>"}`` body;
the HTTP status is the only thing distinguishing failure kinds.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for errors rendered as ``{"error": message}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(APIError):
    """Missing or malformed request input."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(APIError):
    """Bearer token problems."""

    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class MissingTokenError(AuthError):
    """No bearer token was presented."""

    def __init__(self, message: str = "Token required"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Token signature, claims or expiry failed verification."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class NotFoundError(APIError):
    """A referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(APIError):
    """The backing store failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


@contextmanager
def store_guard(message: str) -> Iterator[None]:
    """Convert storage failures inside the block into a ``StoreError``."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception(f"{message}: {e}")
        raise StoreError(message) from e


def _error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Summarize request validation errors as one readable sentence."""
    missing = []
    invalid = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())[1:]) or "request body"
        if error.get("type") == "missing":
            missing.append(field)
        else:
            invalid.append(f"{field}: {error.get('msg', 'invalid value')}")

    parts = []
    if missing:
        parts.append(f"{', '.join(missing)} {'is' if len(missing) == 1 else 'are'} required")
    parts.extend(invalid)
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers rendering every error as ``{"error": ...}``."""

    @app.exception_handler(APIError)
    async def handle_api_error(request: Request, exc: APIError):
        return _error_response(exc.status_code, exc.message, exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return _error_response(status.HTTP_400_BAD_REQUEST, describe_validation_errors(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(request: Request, exc: SQLAlchemyError):
        logger.exception(f"Unhandled storage error on {request.url.path}: {exc}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
