"""Error Handlers - global exception handlers for the API.

Invariants:
    - ChampionshipApiError below 500 -> its own status code and to_response() body
    - ChampionshipApiError at 500+ -> generic INTERNAL_ERROR body, details only in logs
    - RequestValidationError (malformed JSON, non-object body) -> generic 500, details only in logs
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Only "not found" is translated into a resource-specific answer; invalid
      record fields and storage failures surface as plain server errors
    - Three-layer handler: domain (ChampionshipApiError), validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so the app factory stays a list of registrations
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from championship_api.core.errors import (
    ChampionshipApiError, ErrorCategory, ErrorSeverity,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def internal_error_response() -> JSONResponse:
    """The one body every server-side failure answers with."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ChampionshipApiError)
    async def domain_error_handler(request: Request, exc: ChampionshipApiError):
        """Client errors keep their envelope; server errors stay opaque."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "record_id": exc.context.record_id,
        }
        if exc.http_status < 500:
            logger.warning(f"{type(exc).__name__}: {exc.message}", extra=extra)
            return JSONResponse(
                status_code=exc.http_status, content=exc.to_response(),
            )
        logger.error(f"{type(exc).__name__}: {exc.to_response()}", extra=extra)
        return internal_error_response()


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Unparseable request bodies are server errors like any other."""
        logger.error(
            f"Request validation failed on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return internal_error_response()


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return internal_error_response()
