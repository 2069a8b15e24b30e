"""
Direct message endpoints.

The fixed paths (``unread-count``, ``conversation``, ``mark-as-read``) are
declared before ``/messages/{user_id}`` so the path parameter never
captures them.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from skillvouch.core.database.entities import Message
from skillvouch.core.database.repositories import MessageRepository
from skillvouch.core.logging_config import get_logger
from skillvouch.core.models.io import (
    MarkAsReadRequest,
    MarkAsReadResponse,
    MessageCreate,
    MessageRead,
    UnreadCountResponse,
)
from skillvouch.server.services.deps import DatabaseDep, require_users

logger = get_logger(__name__)

router = APIRouter(tags=["messages"])


@router.post(
    "/messages",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
    summary="Send Message",
    description="Send a direct message. The id and timestamp are assigned by the server.",
    responses={404: {"description": "Sender or receiver not found"}},
)
async def send_message(body: MessageCreate, session: DatabaseDep) -> MessageRead:
    await require_users(session, body.sender_id, body.receiver_id)
    message = await MessageRepository(session).create(
        Message(sender_id=body.sender_id, receiver_id=body.receiver_id, content=body.content)
    )
    logger.debug(f"Message {message.id} sent from {message.sender_id} to {message.receiver_id}")
    return MessageRead.model_validate(message)


@router.get(
    "/messages/unread-count",
    response_model=UnreadCountResponse,
    summary="Count Unread Messages",
    responses={400: {"description": "userId is required"}},
)
async def unread_count(
    session: DatabaseDep,
    user_id: Optional[str] = Query(default=None, alias="userId"),
) -> UnreadCountResponse:
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="userId is required")
    count = await MessageRepository(session).count_unread(user_id)
    return UnreadCountResponse(unread_count=count)


@router.get(
    "/messages/conversation",
    response_model=List[MessageRead],
    summary="Get Conversation",
    description="Messages exchanged by two users, oldest first.",
    responses={400: {"description": "user1Id and user2Id are required"}},
)
async def get_conversation(
    session: DatabaseDep,
    user1_id: Optional[str] = Query(default=None, alias="user1Id"),
    user2_id: Optional[str] = Query(default=None, alias="user2Id"),
) -> List[MessageRead]:
    if not user1_id or not user2_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="user1Id and user2Id are required")
    messages = await MessageRepository(session).list_between(user1_id, user2_id)
    return [MessageRead.model_validate(m) for m in messages]


@router.post(
    "/messages/mark-as-read",
    response_model=MarkAsReadResponse,
    summary="Mark Messages as Read",
    description="Mark every unread message from `senderId` to `userId` as read.",
)
async def mark_as_read(body: MarkAsReadRequest, session: DatabaseDep) -> MarkAsReadResponse:
    updated = await MessageRepository(session).mark_read(body.user_id, body.sender_id)
    return MarkAsReadResponse(updated=updated)


@router.get(
    "/messages/{user_id}",
    response_model=List[MessageRead],
    summary="List User Messages",
    description="All messages sent or received by the user, newest first.",
)
async def list_user_messages(user_id: str, session: DatabaseDep) -> List[MessageRead]:
    messages = await MessageRepository(session).list_for_user(user_id)
    return [MessageRead.model_validate(m) for m in messages]
