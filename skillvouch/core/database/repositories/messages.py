"""
Message repository.

Data access for direct messages, unread counters and per-partner
conversation summaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from sqlalchemy import and_, func, or_, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.messages import Message
from .base import AsyncBaseRepository


@dataclass
class ConversationSummary:
    """Aggregated view of the messages a user exchanged with one partner."""

    partner_id: str
    last_message: Message
    last_message_time: int
    unread_count: int


class MessageRepository(AsyncBaseRepository[Message]):
    """Repository for message data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Message)

    async def list_for_user(self, user_id: str) -> List[Message]:
        """All messages sent or received by ``user_id``, newest first."""
        stmt = (
            select(Message)
            .where(or_(Message.sender_id == user_id, Message.receiver_id == user_id))
            .order_by(Message.timestamp.desc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_between(self, user1_id: str, user2_id: str) -> List[Message]:
        """Messages exchanged by two users in either direction, oldest first."""
        stmt = (
            select(Message)
            .where(
                or_(
                    and_(Message.sender_id == user1_id, Message.receiver_id == user2_id),
                    and_(Message.sender_id == user2_id, Message.receiver_id == user1_id),
                )
            )
            .order_by(Message.timestamp.asc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_unread(self, user_id: str) -> int:
        stmt = select(func.count()).select_from(Message).where(
            Message.receiver_id == user_id, Message.read == False  # noqa: E712
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def mark_read(self, user_id: str, sender_id: str) -> int:
        """Mark every unread message from ``sender_id`` to ``user_id`` as read.

        Returns:
            Number of messages updated
        """
        stmt = (
            update(Message)
            .where(
                Message.receiver_id == user_id,
                Message.sender_id == sender_id,
                Message.read == False,  # noqa: E712
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0

    async def conversation_summaries(self, user_id: str) -> List[ConversationSummary]:
        """Summarize each conversation of ``user_id``, most recent first."""
        summaries: Dict[str, ConversationSummary] = {}
        for message in await self.list_for_user(user_id):
            partner_id = message.receiver_id if message.sender_id == user_id else message.sender_id
            summary: Optional[ConversationSummary] = summaries.get(partner_id)
            if summary is None:
                # Messages arrive newest first, so the first one seen is the latest
                summary = ConversationSummary(
                    partner_id=partner_id,
                    last_message=message,
                    last_message_time=message.timestamp,
                    unread_count=0,
                )
                summaries[partner_id] = summary
            if message.receiver_id == user_id and not message.read:
                summary.unread_count += 1
        return sorted(summaries.values(), key=lambda s: s.last_message_time, reverse=True)
