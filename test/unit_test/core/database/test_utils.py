"""Unit tests for engine helpers and table checks."""

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel.pool import StaticPool

from skillvouch.core.database import check_tables, create_engine, ensure_tables, normalize_url
from skillvouch.core.database.entities import REQUIRED_TABLES


class TestNormalizeUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "mysql://u:p@h:3306/db",
            "mysql+pymysql://u:p@h:3306/db",
            "mysql+mysqldb://u:p@h:3306/db",
            "mysql+aiomysql://u:p@h:3306/db",
        ],
    )
    def test_mysql_urls_use_aiomysql(self, url):
        assert normalize_url(url) == "mysql+aiomysql://u:p@h:3306/db"

    def test_other_urls_untouched(self):
        assert normalize_url("sqlite+aiosqlite:///:memory:") == "sqlite+aiosqlite:///:memory:"


class TestCreateEngine:
    async def test_mysql_engine_gets_pool_settings(self):
        engine = create_engine("mysql://u:p@localhost/db", pool_size=7, pool_timeout=12.0)
        try:
            assert engine.url.drivername == "mysql+aiomysql"
            assert engine.pool.size() == 7
            assert engine.pool._timeout == 12.0
        finally:
            await engine.dispose()

    async def test_sqlite_engine(self):
        engine = create_engine("sqlite+aiosqlite:///:memory:")
        try:
            assert engine.url.drivername == "sqlite+aiosqlite"
        finally:
            await engine.dispose()


class TestTables:
    @pytest.fixture
    async def empty_engine(self):
        engine = create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        yield engine
        await engine.dispose()

    async def test_check_tables_on_empty_database(self, empty_engine):
        assert await check_tables(empty_engine) == {name: False for name in REQUIRED_TABLES}

    async def test_check_tables_after_create(self, in_memory_engine):
        assert await check_tables(in_memory_engine) == {name: True for name in REQUIRED_TABLES}

    async def test_ensure_tables_creates_missing(self, empty_engine):
        before = await ensure_tables(empty_engine)

        assert not any(before.values())
        assert all((await check_tables(empty_engine)).values())

    async def test_ensure_tables_is_idempotent_and_keeps_data(self, empty_engine):
        await ensure_tables(empty_engine)
        async with empty_engine.begin() as conn:
            await conn.execute(text("INSERT INTO users (id, name, email, password, bio, skills_known, skills_to_learn, discord_link, rating, created_at, updated_at) VALUES ('u1', 'A', 'a@x', '', '', '[]', '[]', '', 5.0, '2026-01-01', '2026-01-01')"))

        before = await ensure_tables(empty_engine)

        assert all(before.values())
        async with empty_engine.connect() as conn:
            count = (await conn.execute(text("SELECT COUNT(*) FROM users"))).scalar_one()
        assert count == 1

    async def test_ensure_tables_recreates_a_dropped_table(self, empty_engine):
        await ensure_tables(empty_engine)
        async with empty_engine.begin() as conn:
            await conn.execute(text("DROP TABLE quiz_attempts"))

        before = await ensure_tables(empty_engine)

        assert before["quiz_attempts"] is False
        assert before["users"] is True
        assert (await check_tables(empty_engine))["quiz_attempts"] is True
