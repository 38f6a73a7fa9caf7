"""Error Handlers — global exception handlers for the beerpong API.

Invariants:
    - BeerPongError → structured JSON with error code, message, severity
    - Exception (catch-all) → never leaks internal details
    - Errors below 500 logged at WARNING (INFO for denials), 500+ at ERROR

Design Decisions:
    - Two-layer handler: domain (BeerPongError), catch-all (Exception)
    - No request-validation layer: routes parse their own bodies into BeerPongErrors
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from beerpong.core.errors import BeerPongError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _log_level_for(exc: BeerPongError) -> int:
    if exc.http_status >= 500:
        return logging.ERROR
    if exc.severity == ErrorSeverity.INFO:
        return logging.INFO
    return logging.WARNING


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register beerpong domain/infrastructure error handler."""

    @app.exception_handler(BeerPongError)
    async def beerpong_error_handler(request: Request, exc: BeerPongError):
        """Handle all beerpong domain/infrastructure errors."""
        logger.log(
            _log_level_for(exc),
            f"BeerPongError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
