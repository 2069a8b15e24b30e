"""
Message and conversation I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import CamelModel


class MessageRead(CamelModel):
    """Schema for reading a direct message."""

    id: str
    sender_id: str
    receiver_id: str
    content: str
    timestamp: int = Field(description="Send time in milliseconds since the epoch")
    read: bool


class MessageCreate(CamelModel):
    """Schema for sending a direct message."""

    sender_id: str = Field(min_length=1)
    receiver_id: str = Field(min_length=1)
    content: str = Field(min_length=1)


class MarkAsReadRequest(CamelModel):
    user_id: str = Field(min_length=1, description="Receiver whose messages are marked read")
    sender_id: str = Field(min_length=1)


class MarkAsReadResponse(CamelModel):
    updated: int


class UnreadCountResponse(CamelModel):
    unread_count: int


class LastMessage(CamelModel):
    content: str
    timestamp: int
    is_from_user: bool


class ConversationRead(CamelModel):
    """Schema for one entry of a user's conversation list."""

    partner_id: str
    partner_name: str
    partner_avatar: Optional[str] = None
    last_message: Optional[LastMessage] = None
    unread_count: int = 0
    last_message_time: int
