"""Unit tests for MessageRepository."""

import pytest

from skillvouch.core.database.entities import Message
from skillvouch.core.database.repositories import MessageRepository


@pytest.fixture
async def messages(in_memory_session, users):
    """A short exchange between alice and bob plus one message from carol."""
    rows = [
        Message(id="m1", sender_id="u-alice", receiver_id="u-bob", content="hi bob", timestamp=1000),
        Message(id="m2", sender_id="u-bob", receiver_id="u-alice", content="hi alice", timestamp=2000),
        Message(id="m3", sender_id="u-bob", receiver_id="u-alice", content="you there?", timestamp=3000),
        Message(id="m4", sender_id="u-carol", receiver_id="u-alice", content="hello", timestamp=2500, read=True),
        Message(id="m5", sender_id="u-bob", receiver_id="u-carol", content="unrelated", timestamp=4000),
    ]
    in_memory_session.add_all(rows)
    await in_memory_session.commit()
    return rows


class TestMessageRepository:
    async def test_list_for_user_newest_first(self, in_memory_session, messages):
        listed = await MessageRepository(in_memory_session).list_for_user("u-alice")

        assert [m.id for m in listed] == ["m3", "m4", "m2", "m1"]

    async def test_list_between_oldest_first_both_directions(self, in_memory_session, messages):
        listed = await MessageRepository(in_memory_session).list_between("u-bob", "u-alice")

        assert [m.id for m in listed] == ["m1", "m2", "m3"]

    async def test_count_unread(self, in_memory_session, messages):
        repo = MessageRepository(in_memory_session)

        assert await repo.count_unread("u-alice") == 2
        assert await repo.count_unread("u-bob") == 1
        assert await repo.count_unread("nobody") == 0

    async def test_mark_read_only_touches_sender(self, in_memory_session, messages):
        repo = MessageRepository(in_memory_session)

        updated = await repo.mark_read("u-alice", "u-bob")

        assert updated == 2
        assert await repo.count_unread("u-alice") == 0
        assert await repo.count_unread("u-bob") == 1
        assert await repo.mark_read("u-alice", "u-bob") == 0

    async def test_conversation_summaries(self, in_memory_session, messages):
        summaries = await MessageRepository(in_memory_session).conversation_summaries("u-alice")

        assert [s.partner_id for s in summaries] == ["u-bob", "u-carol"]
        bob = summaries[0]
        assert bob.last_message.id == "m3"
        assert bob.last_message_time == 3000
        assert bob.unread_count == 2
        assert summaries[1].unread_count == 0

    async def test_conversation_summaries_count_only_received_unread(self, in_memory_session, messages):
        summaries = await MessageRepository(in_memory_session).conversation_summaries("u-bob")

        by_partner = {s.partner_id: s for s in summaries}
        assert by_partner["u-alice"].unread_count == 1
        assert by_partner["u-carol"].unread_count == 0
        assert [s.partner_id for s in summaries] == ["u-carol", "u-alice"]
