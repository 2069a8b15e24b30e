"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the database layer using SQLModel.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now() -> datetime:
    """Get the current time as a timezone-aware UTC datetime.

    Datetime columns are declared with ``DateTime(timezone=True)``; MySQL
    DATETIME keeps no offset, so stored values are always read as UTC.
    """
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate a 36-character UUID4 string primary key."""
    return str(uuid.uuid4())
