"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with a consistent error
format. Messages are the exceptions' user-safe messages; ``details``,
tracebacks, SQL and secrets only ever reach the log.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Usage:
    from userbase.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from userbase.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
    InfrastructureError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins
EXCEPTION_TO_STATUS: list[tuple[type[DomainException], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InfrastructureError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception."""
    for exc_type, status_code in EXCEPTION_TO_STATUS:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    headers: dict[str, str] | None = None,
    errors: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: dict[str, Any] = {
        "detail": message,
        "code": code,
    }
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _field_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Summarize pydantic errors without echoing the submitted values."""
    summary = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        summary.append(
            {
                "field": ".".join(location) or "body",
                "message": error.get("msg", "Invalid value"),
            },
        )
    return summary


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response."""
        status_code = _get_status_for_exception(exc)

        if isinstance(exc, InfrastructureError):
            logger.error(
                "Infrastructure failure on %s %s: %r",
                request.method,
                request.url.path,
                exc.__cause__,
            )
        else:
            logger.warning(
                "Domain exception on %s %s: %s (code=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.code.value,
                exc.details,
            )

        headers = None
        if isinstance(exc, UnauthenticatedError):
            headers = {"WWW-Authenticate": "Bearer"}

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Render malformed or missing request fields as 400."""
        errors = _field_errors(exc)
        logger.info(
            "Request validation failed on %s %s: %s",
            request.method,
            request.url.path,
            [error["field"] for error in errors],
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Request validation failed",
            code=ErrorCode.VALIDATION_ERROR.value,
            errors=errors,
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """Handle database errors that escaped the repositories (e.g. on commit)."""
        logger.exception(
            "Database error on %s %s",
            request.method,
            request.url.path,
        )
        fallback = InfrastructureError()
        return _create_error_response(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            message=fallback.message,
            code=fallback.code.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        This is the catch-all handler for any exceptions not handled by
        the handlers above.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
