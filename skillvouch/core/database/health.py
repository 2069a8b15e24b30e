"""
Database connection-health monitor.

The server must stay up while MySQL is unreachable: data endpoints then fail
fast with ``DatabaseUnavailableError`` instead of hanging on the pool. This
module owns the ``connected`` flag those endpoints consult, and the
bookkeeping that keeps it current:

- a retry cycle at startup (``max_retries`` attempts, ``retry_delay``
  seconds apart, multiplied by ``backoff`` after each failure);
- periodic polling afterwards, which detects outages and recoveries and
  starts a fresh retry cycle when the connection drops.
"""

from __future__ import annotations

import asyncio
import time
from datetime import datetime
from typing import Awaitable, Callable, Optional

from pydantic import BaseModel, Field
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from skillvouch.core.errors import DatabaseUnavailableError
from skillvouch.core.logging_config import get_logger
from skillvouch.core.monitoring import log_db_health

from .base import utc_now

logger = get_logger(__name__)

OnConnect = Callable[[], Awaitable[None]]
Sleep = Callable[[float], Awaitable[None]]


class DatabaseStatus(BaseModel):
    """Point-in-time view of the connection monitor."""

    connected: bool
    attempts: int = Field(description="Attempts spent in the current retry cycle")
    max_retries: int
    last_error: Optional[str] = None
    last_checked_at: Optional[datetime] = None
    uptime_seconds: float = Field(description="Seconds since the monitor was created")


class DatabaseHealthMonitor:
    """Track whether the database is reachable, retrying and polling in the background.

    Args:
        engine: Engine whose pool is probed with ``SELECT 1``.
        max_retries: Attempts per retry cycle before giving up until the next poll.
        retry_delay: Delay in seconds after the first failed attempt.
        backoff: Factor applied to the delay after each further failure; ``1.0`` keeps it constant.
        poll_interval: Seconds between health polls once a retry cycle has ended.
        on_connect: Coroutine run every time the monitor transitions to connected.
        sleep: Awaitable sleep, replaceable in tests.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        *,
        max_retries: int = 5,
        retry_delay: float = 5.0,
        backoff: float = 1.0,
        poll_interval: float = 30.0,
        on_connect: Optional[OnConnect] = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self.engine = engine
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.backoff = backoff
        self.poll_interval = poll_interval
        self.on_connect = on_connect
        self._sleep = sleep

        self.connected = False
        self.attempts = 0
        self.last_error: Optional[str] = None
        self.last_checked_at: Optional[datetime] = None
        self._started_monotonic = time.monotonic()
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def uptime(self) -> float:
        return time.monotonic() - self._started_monotonic

    def retry_delay_for(self, attempt: int) -> float:
        """Delay to wait after failed attempt number ``attempt`` (1-based)."""
        return self.retry_delay * (self.backoff ** max(attempt - 1, 0))

    async def _ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def check_connection(self) -> bool:
        """Run a single connection attempt and update the bookkeeping.

        Returns:
            True when the database answered ``SELECT 1``.
        """
        self.attempts += 1
        self.last_checked_at = utc_now()
        logger.info(f"Checking database connection (attempt {self.attempts}/{self.max_retries})...")

        try:
            await self._ping()
        except (SQLAlchemyError, OSError) as e:
            was_connected = self.connected
            self.connected = False
            self.last_error = str(e)
            logger.error(f"Database connection failed (attempt {self.attempts}): {e}")
            if was_connected:
                log_db_health(False, self.attempts, self.last_error)
            return False

        if not self.connected:
            self.connected = True
            self.last_error = None
            logger.info(f"Database connected successfully ({self.engine.url.render_as_string(hide_password=True)})")
            log_db_health(True, self.attempts)
            await self._fire_on_connect()
        return True

    async def _fire_on_connect(self) -> None:
        if self.on_connect is None:
            return
        try:
            await self.on_connect()
        except Exception as e:
            logger.error(f"Post-connect hook failed: {e}", exc_info=True)

    async def connect_with_retry(self) -> bool:
        """Attempt to connect until success or the retry budget is spent.

        Continues the current cycle: attempts already made count against
        ``max_retries``.

        Returns:
            True once connected, False when every attempt failed.
        """
        while True:
            if await self.check_connection():
                return True
            if self.attempts >= self.max_retries:
                logger.critical(
                    "Maximum database connection attempts reached. "
                    "Server will continue running but database features will be limited."
                )
                log_db_health(False, self.attempts, self.last_error)
                return False
            delay = self.retry_delay_for(self.attempts)
            logger.info(f"Retrying database connection in {delay:g} seconds...")
            await self._sleep(delay)

    async def poll_once(self) -> bool:
        """Run one periodic health check with a fresh retry budget.

        A failed poll while connected starts a new retry cycle immediately.
        """
        self.attempts = 0
        was_connected = self.connected
        if await self.check_connection():
            return True
        if was_connected:
            logger.warning("Database connection lost, starting a new retry cycle")
            await self._sleep(self.retry_delay_for(self.attempts))
            return await self.connect_with_retry()
        return False

    async def _run(self) -> None:
        if not self.connected and self.attempts < self.max_retries:
            await self._sleep(self.retry_delay_for(self.attempts))
            await self.connect_with_retry()
        while True:
            await self._sleep(self.poll_interval)
            await self.poll_once()

    async def start(self) -> bool:
        """Make the first connection attempt and start background retry/polling.

        The first attempt is awaited so the caller knows whether the database
        is usable right away; remaining retries happen in the background.
        Calling ``start`` on a running monitor only reports the current state.

        Returns:
            Whether the database is connected after the first attempt.
        """
        if self.running:
            return self.connected
        self.attempts = 0
        await self.check_connection()
        self._task = asyncio.create_task(self._run(), name="db-health-monitor")
        return self.connected

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Database health monitor stopped")

    def require_connected(self) -> None:
        """Raise ``DatabaseUnavailableError`` unless the database is reachable."""
        if not self.connected:
            raise DatabaseUnavailableError(self.last_error)

    def snapshot(self) -> DatabaseStatus:
        return DatabaseStatus(
            connected=self.connected,
            attempts=self.attempts,
            max_retries=self.max_retries,
            last_error=self.last_error,
            last_checked_at=self.last_checked_at,
            uptime_seconds=round(self.uptime, 3),
        )
