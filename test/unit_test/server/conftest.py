"""
Fixtures for API tests.

Each test gets a fresh in-memory SQLite database. The session, the
connection monitor and the AI service dependencies are overridden, and the
lifespan never runs (ASGITransport does not send lifespan events), so no
test touches MySQL or a real model.
"""

from typing import AsyncGenerator, Callable
from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pydantic_ai.models import Model
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from skillvouch.ai import SkillAIService
from skillvouch.core.database import Base, DatabaseHealthMonitor, create_sessionmaker
from skillvouch.server.core.config import MistralConfig

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


async def _no_sleep(delay: float) -> None:
    return None


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # SQLite leaves foreign keys unchecked unless each connection opts in
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    async with create_sessionmaker(test_engine)() as session:
        yield session


@pytest_asyncio.fixture
async def db_monitor(test_engine) -> DatabaseHealthMonitor:
    """A monitor that has already connected to the test database."""
    monitor = DatabaseHealthMonitor(test_engine, max_retries=1, retry_delay=0, sleep=_no_sleep)
    await monitor.check_connection()
    return monitor


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession, db_monitor: DatabaseHealthMonitor) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with overridden dependencies."""
    from skillvouch.core.database import get_db_monitor, get_session
    from skillvouch.server.main import app
    from skillvouch.server.services.deps import get_ai_service

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    unconfigured_ai = SkillAIService(config=MistralConfig())

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_db_monitor] = lambda: db_monitor
    app.dependency_overrides[get_ai_service] = lambda: unconfigured_ai

    # The lifespan would start the real monitor against the configured database
    async def mock_lifespan(app):
        yield

    with patch("skillvouch.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()


@pytest.fixture
def use_ai_model() -> Callable[..., SkillAIService]:
    """Route the AI endpoints to a service running ``model``."""
    from skillvouch.server.main import app
    from skillvouch.server.services.deps import get_ai_service

    def _use(model: Model, max_retries: int = 1) -> SkillAIService:
        service = SkillAIService(model, MistralConfig(api_key="test-key", max_retries=max_retries), sleep=_no_sleep)
        app.dependency_overrides[get_ai_service] = lambda: service
        return service

    return _use


@pytest_asyncio.fixture
async def registered_users(client: AsyncClient) -> dict:
    """Register alice, bob and carol through the API."""
    users = {}
    for name in ("alice", "bob", "carol"):
        response = await client.post(
            "/api/users",
            json={
                "id": f"u-{name}",
                "name": name.title(),
                "email": f"{name}@example.com",
                "password": f"{name}-pw",
                "skillsKnown": ["Python"],
                "skillsToLearn": ["Guitar"],
            },
        )
        assert response.status_code == 201, response.text
        users[name] = response.json()
    return users
