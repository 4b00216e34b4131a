"""Global exception handlers that map domain exceptions to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from policy_desk.errors import (
    DUPLICATE_RESOURCE,
    INTERNAL_ERROR,
    NOT_FOUND,
    DuplicateResourceError,
    NotFoundError,
    UnauthorizedError,
)
from policy_desk.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int, detail: str, code: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Return a standardized error response with detail and machine-readable code."""
    body = ErrorResponse(detail=detail, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def duplicate_resource_error_handler(
    _request: Request, exc: DuplicateResourceError
) -> JSONResponse:
    return _error_response(
        status.HTTP_409_CONFLICT,
        str(exc),
        DUPLICATE_RESOURCE,
    )


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        str(exc),
        NOT_FOUND,
    )


def unauthorized_error_handler(_request: Request, exc: UnauthorizedError) -> JSONResponse:
    # Subclasses carry their own code (INVALID_CREDENTIALS, TOKEN_EXPIRED, INVALID_TOKEN)
    return _error_response(
        status.HTTP_401_UNAUTHORIZED,
        str(exc),
        exc.code,
        headers={"WWW-Authenticate": "Bearer"},
    )


def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Called after Starlette has caught the exception, so exc_info must be passed explicitly
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        INTERNAL_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain exception handlers on the FastAPI app."""
    app.add_exception_handler(DuplicateResourceError, duplicate_resource_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(UnauthorizedError, unauthorized_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
