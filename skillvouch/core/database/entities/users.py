"""
User entity model.

A user lists the skills they can teach and the skills they want to learn.
Both lists are stored as JSON array text and decoded leniently.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, Text
from sqlmodel import Field

from skillvouch.core.serialization import parse_json_list, safe_dump_json

from ..base import Base, utc_now


class User(Base, table=True):
    """Entity for platform users.

    Table: users
    """

    __tablename__ = "users"

    id: str = Field(primary_key=True, max_length=36)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)
    password: str = Field(default="", max_length=255, description="bcrypt hash, empty when unset")
    avatar: Optional[str] = Field(default=None, sa_type=Text)
    bio: str = Field(default="", sa_type=Text)
    skills_known: str = Field(default="[]", sa_type=Text, description="JSON array of skill names")
    skills_to_learn: str = Field(default="[]", sa_type=Text, description="JSON array of skill names")
    discord_link: str = Field(default="", max_length=255)
    rating: float = Field(default=5.0)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def get_skills_known(self) -> List[str]:
        return parse_json_list(self.skills_known)

    def set_skills_known(self, skills: List[str]) -> None:
        self.skills_known = safe_dump_json(list(skills))

    def get_skills_to_learn(self) -> List[str]:
        return parse_json_list(self.skills_to_learn)

    def set_skills_to_learn(self, skills: List[str]) -> None:
        self.skills_to_learn = safe_dump_json(list(skills))

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
