"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for tracing of the
SkillVouch server, including:
- API endpoint tracing
- Database operation monitoring and connection health events
- LLM model calls and token usage
- Error tracking

Logfire stays dormant unless ``LOGFIRE_ENABLED`` is set and a token is
available. The ``log_*`` helpers are always safe to call: when Logfire is not
configured they fall back to a debug log line.
"""

import logging
import os
from typing import Any, Optional

import logfire
from fastapi import FastAPI

logger = logging.getLogger(__name__)

# Logfire configuration from environment
LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in ("true", "1", "yes")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "skillvouch-server")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.0.0")

# Feature flags
LOGFIRE_TRACE_PYDANTIC_AI = os.getenv("LOGFIRE_TRACE_PYDANTIC_AI", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_SQLALCHEMY = os.getenv("LOGFIRE_TRACE_SQLALCHEMY", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_HTTPX = os.getenv("LOGFIRE_TRACE_HTTPX", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_FASTAPI = os.getenv("LOGFIRE_TRACE_FASTAPI", "true").lower() in ("true", "1", "yes")

_configured = False


def is_configured() -> bool:
    return _configured


def initialize_logfire(app: Optional[FastAPI] = None, engine: Any = None) -> bool:
    """
    Initialize Logfire for monitoring and tracing.

    Args:
        app: FastAPI application instance; enables endpoint tracing when given.
        engine: SQLAlchemy engine (sync or async); enables query tracing when given.

    Returns:
        True when Logfire was configured.
    """
    global _configured

    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    if LOGFIRE_TRACE_PYDANTIC_AI:
        try:
            logfire.instrument_pydantic_ai()
            logger.info("Logfire: Pydantic AI instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument Pydantic AI: {e}")

    if LOGFIRE_TRACE_SQLALCHEMY and engine is not None:
        try:
            logfire.instrument_sqlalchemy(engine=getattr(engine, "sync_engine", engine))
            logger.info("Logfire: SQLAlchemy instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument SQLAlchemy: {e}")

    if LOGFIRE_TRACE_HTTPX:
        try:
            logfire.instrument_httpx()
            logger.info("Logfire: HTTPX instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument HTTPX: {e}")

    if LOGFIRE_TRACE_FASTAPI and app is not None:
        try:
            logfire.instrument_fastapi(app=app)
            logger.info("Logfire: FastAPI instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument FastAPI: {e}")

    _configured = True
    logger.info(
        f"Logfire monitoring initialized: environment={LOGFIRE_ENVIRONMENT}, service={LOGFIRE_SERVICE_NAME}"
    )
    return True


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    if not _configured:
        logger.debug(f"{method} {path} -> {status_code} ({duration_ms:.1f}ms)")
        return
    logfire.info(
        "API request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def log_llm_call(model: str, operation: str, input_tokens: Optional[int], output_tokens: Optional[int]) -> None:
    """
    Log an LLM model call with usage metrics.

    Args:
        model: The model name
        operation: What the call produced (quiz, roadmap, chat, ...)
        input_tokens: Prompt tokens reported by the provider
        output_tokens: Completion tokens reported by the provider
    """
    if not _configured:
        logger.debug(f"LLM call {operation} on {model}: input={input_tokens} output={output_tokens}")
        return
    logfire.info(
        "LLM call completed",
        model=model,
        operation=operation,
        input_tokens=input_tokens,
        output_tokens=output_tokens,
    )


def log_db_health(connected: bool, attempts: int, error: Optional[str] = None) -> None:
    """
    Log a database connection health transition.

    Args:
        connected: Whether the database is reachable after the check
        attempts: Attempts spent in the current retry cycle
        error: Last driver error, if any
    """
    if not _configured:
        logger.debug(f"Database health: connected={connected} attempts={attempts} error={error}")
        return
    logfire.info("Database health changed", connected=connected, attempts=attempts, error=error)


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    if not _configured:
        logger.debug(f"{error_type}: {error_message}")
        return
    logfire.error("{error_type}: {error_message}", error_type=error_type, error_message=error_message, **(context or {}))
