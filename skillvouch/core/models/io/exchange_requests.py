"""
Exchange request I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class ExchangeRequestRead(CamelModel):
    """Schema for reading an exchange request."""

    id: str
    requester_id: str
    target_id: str
    skill_to_teach: str
    skill_to_learn: str
    message: str = ""
    status: str
    created_at: datetime
    updated_at: datetime


class ExchangeRequestCreate(CamelModel):
    """Schema for proposing a skill exchange."""

    requester_id: str = Field(min_length=1)
    target_id: str = Field(min_length=1)
    skill_to_teach: str = Field(min_length=1, description="Skill the requester offers")
    skill_to_learn: str = Field(min_length=1, description="Skill the requester wants in return")
    message: str = ""


class ExchangeStatusUpdate(CamelModel):
    """Schema for moving a request to another status.

    The value is checked against the known statuses by the endpoint, so an
    unknown value yields ``Invalid status`` rather than a schema error.
    """

    status: str
