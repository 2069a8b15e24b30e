"""
Request timing middleware.

Every request is reported through ``log_api_request`` (a Logfire event when
monitoring is on, a debug line otherwise) and the response gets an
``X-Process-Time`` header with the handling time in milliseconds.
"""

import time
from typing import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from skillvouch.core.logging_config import get_logger
from skillvouch.core.monitoring import log_api_request
from skillvouch.server.core.constant import SLOW_REQUEST_MS

logger = get_logger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class LogfireMiddleware(BaseHTTPMiddleware):
    """Time each request and flag the ones slower than ``SLOW_REQUEST_MS``."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed = _elapsed_ms(started)
            logger.error(f"{route} raised after {elapsed:.2f}ms: {e}", exc_info=True)
            log_api_request(method=request.method, path=request.url.path, status_code=500, duration_ms=elapsed)
            raise

        elapsed = _elapsed_ms(started)
        log_api_request(
            method=request.method, path=request.url.path, status_code=response.status_code, duration_ms=elapsed
        )
        response.headers["X-Process-Time"] = f"{elapsed:.2f}"
        if elapsed > SLOW_REQUEST_MS:
            logger.warning(f"Slow API request: {route} took {elapsed:.2f}ms (status {response.status_code})")
        return response
