"""
Central exception handlers.

Maps the shared exception taxonomy onto HTTP status codes and the
{success: false, message} envelope. Internal details (driver errors,
tracebacks) are logged here and never sent to the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from modules.media.exceptions import MediaUploadError
from shared.exceptions import (
    ProfileHubError,
    ValidationError,
    UnauthorizedError,
    ConflictError,
    NotFoundError,
    UpstreamError,
)
from shared.repository import DatabaseError

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Checked in order; subclasses before their bases
STATUS_BY_ERROR: list[tuple[type[ProfileHubError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (DatabaseError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (MediaUploadError, status.HTTP_502_BAD_GATEWAY),
    (UpstreamError, status.HTTP_502_BAD_GATEWAY),
]


def status_for(exc: ProfileHubError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
        headers=headers,
    )


async def handle_app_error(request: Request, exc: ProfileHubError) -> JSONResponse:
    status_code = status_for(exc)
    headers = None

    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    if status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.to_dict())
        message = exc.message if isinstance(exc, UpstreamError) else INTERNAL_ERROR_MESSAGE
        return error_response(status_code, message)

    return error_response(status_code, exc.message, headers)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")

    first = errors[0]
    # Drop the "body"/"query" prefix from the location
    field = ".".join(str(part) for part in first["loc"][1:])
    message = f"{field}: {first['msg']}" if field else first["msg"]
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on an application."""
    app.add_exception_handler(ProfileHubError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
