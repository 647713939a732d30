"""
Maps domain errors to HTTP responses.

This is the only place that knows which status code a BookstoreError kind
becomes. Unknown kinds and unexpected exceptions become a 500 with a generic
message; internal details are logged, never returned.
"""
import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.errors import (
    BookstoreError,
    InternalError,
    InvalidStateError,
    InvalidStatusError,
    NotFoundError,
    ValidationError,
)

from .responses import ErrorEnvelope

logger = structlog.get_logger(__name__)

ERROR_STATUS_CODES: dict[type[BookstoreError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidStatusError: status.HTTP_400_BAD_REQUEST,
    InvalidStateError: status.HTTP_400_BAD_REQUEST,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

GENERIC_ERROR_MESSAGE = "Internal server error"


def status_code_for(exc: BookstoreError) -> int:
    for kind in type(exc).__mro__:
        if kind in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[kind]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(error=message).model_dump(),
    )


async def bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("request_failed", path=request.url.path, error_type=type(exc).__name__, error=exc.message)
        # Only InternalError carries a message written for callers
        message = exc.message if isinstance(exc, InternalError) else GENERIC_ERROR_MESSAGE
        return error_response(message, status_code)

    logger.warning("request_rejected", path=request.url.path, error_type=type(exc).__name__, error=exc.message)
    return error_response(exc.message, status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"
    logger.warning("request_invalid", path=request.url.path, error=message)
    return error_response(message, status.HTTP_400_BAD_REQUEST)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = "Route not found"
    else:
        message = str(exc.detail)
    return error_response(message, exc.status_code)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_exception", path=request.url.path, error=str(exc))
    return error_response(GENERIC_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookstoreError, bookstore_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
