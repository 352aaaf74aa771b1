"""Global exception handlers for FastAPI application.

Every error leaves the service as an RFC 7807 problem details body. The
``instance`` member is the request path only; query strings can carry
pagination tokens that are neither short nor meant to be echoed back.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from kickstart_service.core.database import StoreError
from kickstart_service.core.exceptions import AppException
from kickstart_service.core.pagination import InvalidTokenError, TokenEncodingError
from kickstart_service.core.schemas import FieldError, ProblemDetails

logger = logging.getLogger(__name__)


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state."""
    return getattr(request.state, "request_id", None)


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    type_: str = "about:blank",
    title: str | None = None,
    extra: dict[str, Any] | None = None,
) -> JSONResponse:
    """Build a problem details ``JSONResponse`` for the current request."""
    problem = ProblemDetails(
        type=type_,
        title=title or AppException._default_title(status_code),
        status=status_code,
        detail=detail,
        instance=request.url.path,
        **(extra or {}),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.to_response_body(_get_request_id(request)),
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Render an ``AppException`` with its own status, type and extension members."""
    logger.warning(
        "Application exception occurred",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": exc.type,
            "status_code": exc.status_code,
            "detail": exc.detail,
        },
    )
    return _problem_response(
        request,
        status_code=exc.status_code,
        detail=exc.detail,
        type_=exc.type,
        title=exc.title,
        extra=exc.extra,
    )


async def invalid_token_handler(request: Request, exc: InvalidTokenError) -> JSONResponse:
    """A malformed ``next_token`` is the client's fault: 400."""
    logger.info(
        "Rejected pagination token",
        extra={"path": request.url.path, "reason": exc.reason},
    )
    return _problem_response(
        request,
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Invalid pagination token",
        type_="invalid-pagination-token",
    )


async def token_encoding_handler(request: Request, exc: TokenEncodingError) -> JSONResponse:
    """A cursor that cannot be encoded is a server fault: 500."""
    logger.error(
        "Failed to encode pagination token",
        extra={"path": request.url.path, "reason": exc.reason},
        exc_info=exc,
    )
    return _problem_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Failed to build pagination token",
        type_="token-encoding-error",
    )


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Store failures are logged with the driver error and hidden from the client."""
    logger.error(
        "Store operation failed",
        extra={
            "path": request.url.path,
            "operation": exc.operation,
            "error": str(exc.original),
        },
        exc_info=exc,
    )
    return _problem_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="The record store failed to process the request",
        type_="store-error",
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI request validation errors with field-level detail."""
    errors = [
        FieldError(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
        )
        for error in exc.errors()
    ]

    logger.warning(
        "Request validation failed",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_count": len(errors),
        },
    )
    return _problem_response(
        request,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=f"Request validation failed for {len(errors)} field(s)",
        type_="validation-error",
        title="Validation Error",
        extra={"errors": [e.model_dump() for e in errors]},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log the traceback and return a generic 500."""
    logger.error(
        "Unexpected exception occurred",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
        },
        exc_info=exc,
    )
    # Don't expose internal details
    return _problem_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred while processing your request",
        type_="internal-error",
    )


def configure_exception_handlers(app: FastAPI) -> None:
    """Register every handler on ``app``.

    Example:
        app = FastAPI()
        configure_exception_handlers(app)
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(InvalidTokenError, invalid_token_handler)
    app.add_exception_handler(TokenEncodingError, token_encoding_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Catch-all for unexpected exceptions
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers configured")
