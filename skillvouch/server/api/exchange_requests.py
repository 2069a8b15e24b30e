"""
Skill exchange request endpoints.

Each operation is also reachable under the shorter ``/requests`` paths used
by the frontend; those aliases are hidden from the OpenAPI schema.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from skillvouch.core.database.entities import ExchangeRequest, ExchangeStatus
from skillvouch.core.database.repositories import ExchangeRequestRepository
from skillvouch.core.logging_config import get_logger
from skillvouch.core.models.io import ExchangeRequestCreate, ExchangeRequestRead, ExchangeStatusUpdate
from skillvouch.server.services.deps import DatabaseDep, require_users

logger = get_logger(__name__)

router = APIRouter(tags=["exchange-requests"])


@router.post(
    "/exchange-requests",
    response_model=ExchangeRequestRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Exchange Request",
    description="Propose to teach one skill in exchange for learning another.",
    responses={404: {"description": "Requester or target not found"}},
)
@router.post(
    "/requests",
    response_model=ExchangeRequestRead,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_exchange_request(body: ExchangeRequestCreate, session: DatabaseDep) -> ExchangeRequestRead:
    await require_users(session, body.requester_id, body.target_id)
    request = await ExchangeRequestRepository(session).create(
        ExchangeRequest(
            requester_id=body.requester_id,
            target_id=body.target_id,
            skill_to_teach=body.skill_to_teach,
            skill_to_learn=body.skill_to_learn,
            message=body.message,
        )
    )
    logger.info(f"Exchange request {request.id} created: {request.requester_id} -> {request.target_id}")
    return ExchangeRequestRead.model_validate(request)


@router.get(
    "/exchange-requests/{user_id}",
    response_model=List[ExchangeRequestRead],
    summary="List Exchange Requests",
    description="Requests the user sent or received, newest first.",
)
async def list_exchange_requests(user_id: str, session: DatabaseDep) -> List[ExchangeRequestRead]:
    requests = await ExchangeRequestRepository(session).list_for_user(user_id)
    return [ExchangeRequestRead.model_validate(r) for r in requests]


@router.get("/requests", response_model=List[ExchangeRequestRead], include_in_schema=False)
async def list_requests_by_query(
    session: DatabaseDep,
    user_id: Optional[str] = Query(default=None, alias="userId"),
) -> List[ExchangeRequestRead]:
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="userId is required")
    return await list_exchange_requests(user_id, session)


@router.put(
    "/exchange-requests/{request_id}",
    response_model=ExchangeRequestRead,
    summary="Update Exchange Request Status",
    responses={
        400: {"description": "Invalid status"},
        404: {"description": "Exchange request not found"},
    },
)
@router.put("/requests/{request_id}/status", response_model=ExchangeRequestRead, include_in_schema=False)
async def update_exchange_request_status(
    request_id: str, body: ExchangeStatusUpdate, session: DatabaseDep
) -> ExchangeRequestRead:
    """
    Move a request to another status.

    Accepted values are ``pending``, ``accepted``, ``declined`` and
    ``completed``.
    """
    try:
        new_status = ExchangeStatus(body.status)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status")

    request = await ExchangeRequestRepository(session).update_status(request_id, new_status)
    if request is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exchange request not found")
    logger.info(f"Exchange request {request_id} is now {new_status.value}")
    return ExchangeRequestRead.model_validate(request)
