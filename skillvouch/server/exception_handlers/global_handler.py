"""
Catch-all exception handler and handler registration.

Anything not mapped to a specific status code ends up here as a 500 whose
body carries an ``error_id`` matching the server log entry.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from skillvouch.core.errors import AIServiceError, DatabaseUnavailableError
from skillvouch.core.logging_config import get_logger
from skillvouch.core.monitoring import log_error

from .app_errors import ai_service_error_handler, database_unavailable_handler, validation_error_handler

logger = get_logger(__name__)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an unexpected failure and answer 500.

    Args:
        request: Request being served when ``exc`` escaped
        exc: The unhandled exception

    Returns:
        JSONResponse with ``detail``, ``error_id`` and ``error_type``
    """
    error_id = id(exc)
    path = request.url.path

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {path}: {exc}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        },
    )
    log_error(type(exc).__name__, str(exc), {"error_id": error_id, "path": path})

    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error_id": error_id, "error_type": type(exc).__name__},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the SkillVouch error mappings (503, 502, 400, 500) on ``app``."""
    app.add_exception_handler(DatabaseUnavailableError, database_unavailable_handler)
    app.add_exception_handler(AIServiceError, ai_service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered")
