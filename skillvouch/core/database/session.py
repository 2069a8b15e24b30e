"""
Global database session, engine and health monitor management.

This module manages the global AsyncEngine, async_sessionmaker and
DatabaseHealthMonitor instances used throughout the application.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from skillvouch.server.core.config import settings

from .health import DatabaseHealthMonitor
from .utils import create_engine, create_sessionmaker, ensure_tables

engine = create_engine(
    settings.sqlalchemy_url,
    pool_size=settings.mysql.pool_size,
    pool_timeout=settings.mysql.pool_timeout,
)
async_session_maker = create_sessionmaker(engine)


async def init_db() -> None:
    """Create missing tables on the global engine.

    Runs every time the health monitor (re)connects.
    """
    await ensure_tables(engine)


_monitor_config = settings.db_monitor
db_monitor = DatabaseHealthMonitor(
    engine,
    max_retries=_monitor_config.max_retries,
    retry_delay=_monitor_config.retry_delay,
    backoff=_monitor_config.backoff,
    poll_interval=_monitor_config.poll_interval,
    on_connect=init_db,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


def get_db_monitor() -> DatabaseHealthMonitor:
    """Dependency returning the global connection monitor."""
    return db_monitor
