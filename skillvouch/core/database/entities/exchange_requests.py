"""
Exchange request entity model.

An exchange request proposes a swap: the requester teaches one skill to the
target in return for learning another.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, String, Text
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class ExchangeStatus(str, Enum):
    """Lifecycle status of an exchange request."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    COMPLETED = "completed"


class ExchangeRequest(Base, table=True):
    """Entity for skill exchange requests.

    Table: exchange_requests
    """

    __tablename__ = "exchange_requests"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    requester_id: str = Field(foreign_key="users.id", ondelete="CASCADE", max_length=36, index=True)
    target_id: str = Field(foreign_key="users.id", ondelete="CASCADE", max_length=36, index=True)
    skill_to_teach: str = Field(max_length=255)
    skill_to_learn: str = Field(max_length=255)
    message: str = Field(default="", sa_type=Text)
    status: str = Field(default=ExchangeStatus.PENDING.value, sa_type=String(16), index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"ExchangeRequest(id={self.id}, status={self.status})"
