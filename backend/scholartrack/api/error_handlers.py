"""Error Handlers — global exception handlers for the ScholarTrack API.

Invariants:
    - ScholarTrackError → its http_status with to_response() body
    - RequestValidationError → 400 {"message", "field"} from the FIRST error only
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ScholarTrackError), validation (Pydantic), catch-all (Exception)
    - First-error-only body kept for client compatibility; the full list is logged
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from scholartrack.core.errors import PayloadValidationError, ScholarTrackError

logger = logging.getLogger(__name__)

_REQUEST_PARTS = frozenset({"body", "path", "query", "header", "cookie"})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register ScholarTrack domain/infrastructure error handler."""

    @app.exception_handler(ScholarTrackError)
    async def scholartrack_error_handler(request: Request, exc: ScholarTrackError):
        """Handle all ScholarTrack domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"ScholarTrackError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
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
            content=first_validation_error(exc.errors()).to_response(),
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
            content={"message": "An unexpected error occurred"},
        )


def first_validation_error(errors) -> PayloadValidationError:
    """Collapse a Pydantic error list into its first entry."""
    if not errors:
        return PayloadValidationError("Invalid request data", "")
    first = errors[0]
    return PayloadValidationError(first["msg"], _dotted_field(first["loc"]))


def _dotted_field(loc) -> str:
    """('body', 'requiredDocuments', 1) -> 'requiredDocuments.1'."""
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _REQUEST_PARTS:
        parts = parts[1:]
    return ".".join(str(p) for p in parts)
