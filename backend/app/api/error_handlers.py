"""Error Handlers — global exception handlers for the Exercise Tracker API.

Invariants:
    - ExerciseTrackerError → its http_status with {"error": <message>}
    - RequestValidationError → 400 {"error": "invalid request"}
    - Exception (catch-all) → 500 {"error": "server error"}, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ExerciseTrackerError), validation (Pydantic), catch-all (Exception)
    - 4xx logged at WARNING, 5xx at ERROR: client mistakes are not incidents
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import ExerciseTrackerError, StoreError, SERVER_ERROR_MESSAGE

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ExerciseTrackerError)
    async def tracker_error_handler(request: Request, exc: ExerciseTrackerError):
        """Handle all Exercise Tracker domain/infrastructure errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if isinstance(exc, StoreError):
            logger.error(f"StoreError: {exc.detail}", extra=extra)
        elif exc.http_status >= 500:
            logger.error(f"ExerciseTrackerError: {exc.message}", extra=extra)
        else:
            logger.warning(f"Rejected request: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "invalid request"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": SERVER_ERROR_MESSAGE},
        )
