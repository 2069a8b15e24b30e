"""
Exchange feedback endpoints.

Leaving feedback recomputes the receiving user's rating as the average of
all the stars they have received.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from skillvouch.core.database.entities import ExchangeFeedback
from skillvouch.core.database.repositories import ExchangeRequestRepository, FeedbackRepository
from skillvouch.core.logging_config import get_logger
from skillvouch.core.models.io import FeedbackCreate, FeedbackRead, FeedbackStats
from skillvouch.server.services.deps import DatabaseDep, require_users

logger = get_logger(__name__)

router = APIRouter(tags=["feedback"])


def _require_user_id(user_id: Optional[str]) -> str:
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="userId is required")
    return user_id


@router.post(
    "/feedback",
    response_model=FeedbackRead,
    status_code=status.HTTP_201_CREATED,
    summary="Leave Feedback",
    description="Rate the other party of an exchange with 1 to 5 stars.",
    responses={
        400: {"description": "Stars outside 1..5 or missing fields"},
        404: {"description": "Exchange request or user not found"},
    },
)
async def create_feedback(body: FeedbackCreate, session: DatabaseDep) -> FeedbackRead:
    if await ExchangeRequestRepository(session).get_by_id(body.exchange_request_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exchange request not found")
    await require_users(session, body.from_user_id, body.to_user_id)

    feedback = ExchangeFeedback(
        exchange_request_id=body.exchange_request_id,
        from_user_id=body.from_user_id,
        to_user_id=body.to_user_id,
        rating=body.stars,
        comment=body.comment,
    )
    new_rating = await FeedbackRepository(session).record(feedback)
    logger.info(f"Feedback {feedback.id} recorded; user {body.to_user_id} rating is now {new_rating}")
    return FeedbackRead.from_entity(feedback)


@router.get(
    "/feedback/received",
    response_model=List[FeedbackRead],
    summary="List Received Feedback",
    description="Feedback received by the user, newest first.",
)
async def list_received_feedback(
    session: DatabaseDep,
    user_id: Optional[str] = Query(default=None, alias="userId"),
) -> List[FeedbackRead]:
    entries = await FeedbackRepository(session).list_received(_require_user_id(user_id))
    return [FeedbackRead.from_entity(f) for f in entries]


@router.get(
    "/feedback/stats",
    response_model=FeedbackStats,
    summary="Feedback Statistics",
    description="Average stars and number of feedback entries the user received.",
)
async def feedback_stats(
    session: DatabaseDep,
    user_id: Optional[str] = Query(default=None, alias="userId"),
) -> FeedbackStats:
    avg_stars, count = await FeedbackRepository(session).stats_for_user(_require_user_id(user_id))
    return FeedbackStats(avg_stars=avg_stars, count=count)
