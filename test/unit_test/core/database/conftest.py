"""Test configuration for database unit tests.

Provides a fresh in-memory SQLite engine with every table created, and a
session bound to it, for each test.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from skillvouch.core.database import Base, create_sessionmaker
from skillvouch.core.database.entities import User


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest.fixture
async def users(in_memory_session) -> dict[str, User]:
    """Three users: alice, bob and carol."""
    created = {}
    for user_id, name in (("u-alice", "Alice"), ("u-bob", "Bob"), ("u-carol", "Carol")):
        user = User(id=user_id, name=name, email=f"{name.lower()}@example.com")
        user.set_skills_known(["Python"])
        in_memory_session.add(user)
        created[name.lower()] = user
    await in_memory_session.commit()
    return created
