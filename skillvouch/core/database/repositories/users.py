"""
User repository.

Data access for user profiles and login lookups.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.users import User
from .base import AsyncBaseRepository


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_all(self) -> List[User]:
        return await self.list(order_by=User.created_at.asc())  # type: ignore[attr-defined]

    async def get_many(self, user_ids: List[str]) -> dict[str, User]:
        """Load several users at once, keyed by id. Unknown ids are absent."""
        if not user_ids:
            return {}
        stmt = select(User).where(User.id.in_(user_ids))  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return {user.id: user for user in result.scalars().all()}
