"""Unit tests for UserRepository."""

import pytest
from sqlalchemy.exc import IntegrityError

from skillvouch.core.database.entities import User
from skillvouch.core.database.repositories import UserRepository


class TestUserRepository:
    async def test_create_and_get(self, in_memory_session):
        repo = UserRepository(in_memory_session)

        await repo.create(User(id="u1", name="Alice", email="alice@example.com"))
        user = await repo.get_by_id("u1")

        assert user is not None
        assert user.name == "Alice"
        assert user.created_at is not None

    async def test_get_unknown_returns_none(self, in_memory_session):
        assert await UserRepository(in_memory_session).get_by_id("missing") is None

    async def test_get_by_email(self, in_memory_session, users):
        user = await UserRepository(in_memory_session).get_by_email("bob@example.com")

        assert user.id == "u-bob"

    async def test_duplicate_email_violates_unique_constraint(self, in_memory_session, users):
        repo = UserRepository(in_memory_session)

        with pytest.raises(IntegrityError):
            await repo.create(User(id="u-other", name="Other", email="alice@example.com"))

    async def test_list_all(self, in_memory_session, users):
        listed = await UserRepository(in_memory_session).list_all()

        assert {u.id for u in listed} == {"u-alice", "u-bob", "u-carol"}

    async def test_get_many_ignores_unknown_ids(self, in_memory_session, users):
        found = await UserRepository(in_memory_session).get_many(["u-alice", "ghost"])

        assert list(found) == ["u-alice"]

    async def test_get_many_empty(self, in_memory_session):
        assert await UserRepository(in_memory_session).get_many([]) == {}

    async def test_delete(self, in_memory_session, users):
        repo = UserRepository(in_memory_session)

        assert await repo.delete("u-carol") is True
        assert await repo.delete("u-carol") is False


class TestBaseRepositoryListing:
    async def test_filters_skip_none_and_unknown_columns(self, in_memory_session, users):
        repo = UserRepository(in_memory_session)

        listed = await repo.list(filters={"name": "Bob", "email": None, "no_such_column": 1})

        assert [u.id for u in listed] == ["u-bob"]

    async def test_ordering_and_pagination(self, in_memory_session, users):
        repo = UserRepository(in_memory_session)

        page = await repo.list(limit=2, offset=1, order_by=User.name.asc())

        assert [u.name for u in page] == ["Bob", "Carol"]
