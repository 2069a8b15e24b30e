"""
Exchange request repository.

Data access for skill exchange requests and their status transitions.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now
from ..entities.exchange_requests import ExchangeRequest, ExchangeStatus
from .base import AsyncBaseRepository


class ExchangeRequestRepository(AsyncBaseRepository[ExchangeRequest]):
    """Repository for exchange request data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ExchangeRequest)

    async def list_for_user(self, user_id: str) -> List[ExchangeRequest]:
        """Requests where ``user_id`` is requester or target, newest first."""
        stmt = (
            select(ExchangeRequest)
            .where(or_(ExchangeRequest.requester_id == user_id, ExchangeRequest.target_id == user_id))
            .order_by(ExchangeRequest.created_at.desc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_status(self, request_id: str, status: ExchangeStatus) -> Optional[ExchangeRequest]:
        """Set the status of a request.

        Returns:
            The updated request, or None when ``request_id`` is unknown
        """
        request = await self.get_by_id(request_id)
        if request is None:
            return None
        request.status = status.value
        request.updated_at = utc_now()
        return await self.update(request)
