"""Error Handlers - global exception handlers for the AutoConnect API.

Invariants:
    - AutoConnectError -> its http_status with {message, status: "error", error}
    - RequestValidationError -> 400 with the same envelope, error listing the bad fields
    - Exception (catch-all) -> 500 "Unknown server error", never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from autoconnect.core.errors import AutoConnectError, ErrorSeverity

logger = logging.getLogger(__name__)

_LOG_LEVEL = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AutoConnectError)
    async def autoconnect_error_handler(request: Request, exc: AutoConnectError):
        logger.log(
            _LOG_LEVEL[exc.severity],
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "operation": exc.context.operation,
                "resource_id": exc.context.resource_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc.errors()),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": "Unknown server error",
                "status": "error",
                "error": "An unexpected error occurred",
            },
        )


def format_validation_errors(errors) -> str:
    """Flatten pydantic error dicts to 'loc: msg; loc: msg'."""
    parts = []
    for e in errors:
        loc = ".".join(str(part) for part in e.get("loc", ()) if part != "body")
        parts.append(f"{loc}: {e['msg']}" if loc else e["msg"])
    return "; ".join(parts)


def build_validation_error_response(errors) -> dict:
    return {
        "message": "Invalid request data",
        "status": "error",
        "error": format_validation_errors(errors),
    }
