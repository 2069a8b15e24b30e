"""
Handlers for SkillVouch's own error types and request validation failures.
"""

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from skillvouch.core.errors import AIServiceError, DatabaseUnavailableError
from skillvouch.core.logging_config import get_logger
from skillvouch.core.monitoring import log_error

logger = get_logger(__name__)


async def database_unavailable_handler(request: Request, exc: DatabaseUnavailableError) -> JSONResponse:
    """Answer 503 while the connection monitor reports the database as down."""
    logger.warning(f"Rejected {request.method} {request.url.path}: database unavailable ({exc.reason})")
    return JSONResponse(status_code=503, content={"detail": str(exc)})


async def ai_service_error_handler(request: Request, exc: AIServiceError) -> JSONResponse:
    """Answer 502 when the LLM provider failed after all retries."""
    log_error(
        "AIServiceError",
        str(exc),
        {"operation": exc.operation, "attempts": exc.attempts, "path": request.url.path},
    )
    return JSONResponse(
        status_code=502,
        content={"success": False, "message": "AI service unavailable", "error": str(exc)},
    )


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer 400 with the first validation problem spelled out.

    Missing or malformed fields are client errors; the full list stays
    available under ``errors``.
    """
    errors = exc.errors()
    detail = _describe(errors[0]) if errors else "Invalid request"
    logger.info(f"Invalid request to {request.method} {request.url.path}: {detail}")
    return JSONResponse(
        status_code=400,
        content={"detail": detail, "errors": jsonable_encoder(errors)},
    )
