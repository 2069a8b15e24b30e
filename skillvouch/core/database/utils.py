"""
Database utility functions for engine and session management.

Functions:
- normalize_url: rewrites MySQL URLs to the async ``aiomysql`` driver
- create_engine: creates an async SQLAlchemy engine with pool settings
- create_sessionmaker: creates an async session factory with safe defaults
- check_tables: reports which required tables exist
- ensure_tables: creates missing tables from the ORM metadata
"""

from __future__ import annotations

import re
from typing import Dict, Iterable

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from skillvouch.core.logging_config import get_logger

from .base import Base
from .entities import REQUIRED_TABLES

logger = get_logger(__name__)

_MYSQL_URL = re.compile(r"^mysql(?:\+[a-z0-9_]+)?://")


def normalize_url(db_url: str) -> str:
    """Rewrite ``mysql://`` and other MySQL driver variants to ``mysql+aiomysql://``.

    Non-MySQL URLs (e.g. ``sqlite+aiosqlite://`` in tests) are returned unchanged.
    """
    return _MYSQL_URL.sub("mysql+aiomysql://", db_url, count=1)


def create_engine(db_url: str, *, pool_size: int = 10, pool_timeout: float = 60.0) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    Args:
        db_url: Database connection URL
        pool_size: Maximum number of pooled connections (MySQL only)
        pool_timeout: Seconds to wait for a free pooled connection (MySQL only)

    Returns:
        Configured AsyncEngine instance
    """
    url = normalize_url(db_url)
    if url.startswith("mysql+aiomysql://"):
        return create_async_engine(
            url,
            pool_pre_ping=True,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_recycle=3600,
        )
    return create_async_engine(url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project."""
    return async_sessionmaker(engine, expire_on_commit=False)


async def check_tables(engine: AsyncEngine, tables: Iterable[str] = REQUIRED_TABLES) -> Dict[str, bool]:
    """Report, for each table name, whether it exists in the connected database."""
    names = list(tables)
    async with engine.connect() as conn:
        existing = await conn.run_sync(lambda sync_conn: set(inspect(sync_conn).get_table_names()))
    return {name: name in existing for name in names}


async def ensure_tables(engine: AsyncEngine) -> Dict[str, bool]:
    """Create any missing required table.

    Existing tables are left untouched, so this is safe to call on every
    (re)connection. Production deployments run the Alembic migration instead.

    Returns:
        Table presence before the call.
    """
    before = await check_tables(engine)
    for name, present in before.items():
        if present:
            logger.debug(f"Table '{name}' exists")
        else:
            logger.warning(f"Table '{name}' missing, creating...")

    if not all(before.values()):
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Created tables: {', '.join(n for n, present in before.items() if not present)}")
    return before
