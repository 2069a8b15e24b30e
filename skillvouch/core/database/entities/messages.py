"""
Direct message entity model.

Messages carry a client-visible epoch-millisecond ``timestamp`` used for
ordering, alongside the row's ``created_at``.
"""

from __future__ import annotations

import time
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Text
from sqlmodel import Field

from ..base import Base, new_id, utc_now


def epoch_millis() -> int:
    return int(time.time() * 1000)


class Message(Base, table=True):
    """Entity for direct messages between two users.

    Table: messages
    """

    __tablename__ = "messages"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    sender_id: str = Field(foreign_key="users.id", ondelete="CASCADE", max_length=36, index=True)
    receiver_id: str = Field(foreign_key="users.id", ondelete="CASCADE", max_length=36, index=True)
    content: str = Field(sa_type=Text)
    timestamp: int = Field(default_factory=epoch_millis, sa_type=BigInteger, index=True)
    read: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    def __repr__(self) -> str:
        return f"Message(id={self.id}, sender_id={self.sender_id}, receiver_id={self.receiver_id})"
