"""
Conversation list endpoint.

Summarizes a user's messages per conversation partner for the inbox view.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from skillvouch.core.database.repositories import MessageRepository, UserRepository
from skillvouch.core.logging_config import get_logger
from skillvouch.core.models.io import ConversationRead, LastMessage
from skillvouch.server.services.deps import DatabaseDep

logger = get_logger(__name__)

router = APIRouter(tags=["conversations"])


@router.get(
    "/conversations",
    response_model=List[ConversationRead],
    summary="List Conversations",
    description="One entry per conversation partner, most recent conversation first.",
    responses={400: {"description": "userId is required"}},
)
async def list_conversations(
    session: DatabaseDep,
    user_id: Optional[str] = Query(default=None, alias="userId"),
) -> List[ConversationRead]:
    """
    List the conversations of a user.

    ``unreadCount`` counts unread messages sent by the partner to the user.
    Partners whose account no longer exists are left out.
    """
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="userId is required")

    summaries = await MessageRepository(session).conversation_summaries(user_id)
    partners = await UserRepository(session).get_many([s.partner_id for s in summaries])

    conversations: List[ConversationRead] = []
    for summary in summaries:
        partner = partners.get(summary.partner_id)
        if partner is None:
            logger.debug(f"Skipping conversation with missing user {summary.partner_id}")
            continue
        conversations.append(
            ConversationRead(
                partner_id=partner.id,
                partner_name=partner.name,
                partner_avatar=partner.avatar,
                last_message=LastMessage(
                    content=summary.last_message.content,
                    timestamp=summary.last_message.timestamp,
                    is_from_user=summary.last_message.sender_id == user_id,
                ),
                unread_count=summary.unread_count,
                last_message_time=summary.last_message_time,
            )
        )
    return conversations
