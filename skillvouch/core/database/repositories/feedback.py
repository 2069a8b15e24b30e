"""
Exchange feedback repository.

Data access for feedback entries and the rating aggregates derived from them.
"""

from __future__ import annotations

from typing import List, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.feedback import ExchangeFeedback
from ..entities.users import User
from .base import AsyncBaseRepository


class FeedbackRepository(AsyncBaseRepository[ExchangeFeedback]):
    """Repository for exchange feedback data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ExchangeFeedback)

    async def list_received(self, user_id: str) -> List[ExchangeFeedback]:
        stmt = (
            select(ExchangeFeedback)
            .where(ExchangeFeedback.to_user_id == user_id)
            .order_by(ExchangeFeedback.created_at.desc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def stats_for_user(self, user_id: str) -> Tuple[float, int]:
        """Average stars and number of feedback entries received by ``user_id``.

        The average is 0.0 when the user has no feedback.
        """
        stmt = select(func.avg(ExchangeFeedback.rating), func.count(ExchangeFeedback.id)).where(
            ExchangeFeedback.to_user_id == user_id
        )
        result = await self.session.execute(stmt)
        avg, count = result.one()
        return round(float(avg or 0.0), 2), int(count or 0)

    async def record(self, feedback: ExchangeFeedback) -> float:
        """Store ``feedback`` and refresh the receiver's average rating.

        Both writes are committed together.

        Returns:
            The receiver's new average rating
        """
        try:
            self.session.add(feedback)
            await self.session.flush()

            avg_stars, _ = await self.stats_for_user(feedback.to_user_id)
            receiver = await self.session.get(User, feedback.to_user_id)
            if receiver is not None:
                receiver.rating = avg_stars
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(feedback)
        return avg_stars
