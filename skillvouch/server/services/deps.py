"""
API Dependencies.

Annotated dependency aliases used by the routers:

- ``SessionDep``: an ``AsyncSession`` for endpoints that tolerate a missing
  database (health and status checks).
- ``DatabaseDep``: an ``AsyncSession`` that is only handed out while the
  connection monitor reports the database as reachable; otherwise the
  request fails fast with 503.
- ``require_users``: 404 guard for request bodies that reference users.
- ``MonitorDep``: the connection monitor itself.
- ``AIServiceDep``: the process-wide ``SkillAIService``.
"""

from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from skillvouch.ai import SkillAIService
from skillvouch.core.database import DatabaseHealthMonitor, get_db_monitor, get_session
from skillvouch.core.database.repositories import UserRepository

MonitorDep = Annotated[DatabaseHealthMonitor, Depends(get_db_monitor)]
SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def require_database(monitor: MonitorDep, session: SessionDep) -> AsyncGenerator[AsyncSession, None]:
    """Yield the request session once the monitor confirms the database is up."""
    monitor.require_connected()
    yield session


DatabaseDep = Annotated[AsyncSession, Depends(require_database)]


async def require_users(session: AsyncSession, *user_ids: str) -> None:
    """Answer 404 unless every referenced user exists."""
    wanted = set(user_ids)
    found = await UserRepository(session).get_many(list(wanted))
    if len(found) != len(wanted):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


_ai_service: Optional[SkillAIService] = None


def get_ai_service() -> SkillAIService:
    """Return the shared AI service, creating it on first use."""
    global _ai_service
    if _ai_service is None:
        _ai_service = SkillAIService()
    return _ai_service


AIServiceDep = Annotated[SkillAIService, Depends(get_ai_service)]
