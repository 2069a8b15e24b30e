"""
Exchange feedback entity model.

Feedback is left by one participant of an exchange for the other and feeds
the receiving user's average rating.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Text
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class ExchangeFeedback(Base, table=True):
    """Entity for feedback on a completed exchange.

    Table: exchange_feedback
    """

    __tablename__ = "exchange_feedback"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    exchange_request_id: str = Field(
        foreign_key="exchange_requests.id", ondelete="CASCADE", max_length=36, index=True
    )
    from_user_id: str = Field(foreign_key="users.id", ondelete="CASCADE", max_length=36, index=True)
    to_user_id: str = Field(foreign_key="users.id", ondelete="CASCADE", max_length=36, index=True)
    rating: float = Field(description="Stars from 1 to 5")
    comment: str = Field(default="", sa_type=Text)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)

    def __repr__(self) -> str:
        return f"ExchangeFeedback(id={self.id}, to_user_id={self.to_user_id}, rating={self.rating})"
