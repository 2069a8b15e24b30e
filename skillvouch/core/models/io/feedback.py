"""
Exchange feedback I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from skillvouch.core.database.entities import ExchangeFeedback

from .base import CamelModel


class FeedbackRead(CamelModel):
    id: str
    exchange_request_id: str
    from_user_id: str
    to_user_id: str
    stars: float
    comment: str = ""
    created_at: datetime

    @classmethod
    def from_entity(cls, feedback: ExchangeFeedback) -> "FeedbackRead":
        return cls(
            id=feedback.id,
            exchange_request_id=feedback.exchange_request_id,
            from_user_id=feedback.from_user_id,
            to_user_id=feedback.to_user_id,
            stars=feedback.rating,
            comment=feedback.comment,
            created_at=feedback.created_at,
        )


class FeedbackCreate(CamelModel):
    """Schema for rating the other party of an exchange."""

    exchange_request_id: str = Field(min_length=1)
    from_user_id: str = Field(min_length=1)
    to_user_id: str = Field(min_length=1)
    stars: int = Field(ge=1, le=5)
    comment: str = ""


class FeedbackStats(CamelModel):
    avg_stars: float
    count: int
