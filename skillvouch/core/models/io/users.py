"""
User I/O models for API requests and responses.

The stored password hash never appears in a response schema.
"""

from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import AfterValidator, Field

from skillvouch.core.database.entities import User
from skillvouch.core.security import MAX_PASSWORD_BYTES

from .base import CamelModel


def _check_password_length(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    return value


# bcrypt limit is in bytes, so multi-byte characters count more than once
Password = Annotated[str, AfterValidator(_check_password_length)]


class UserRead(CamelModel):
    """Schema for reading a user profile from the API."""

    id: str
    name: str
    email: str
    avatar: Optional[str] = None
    bio: str = ""
    skills_known: List[str] = Field(default_factory=list)
    skills_to_learn: List[str] = Field(default_factory=list)
    discord_link: Optional[str] = Field(default=None, description="Omitted when the user has not set one")
    rating: float = 5.0

    @classmethod
    def from_entity(cls, user: User) -> "UserRead":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            avatar=user.avatar,
            bio=user.bio or "",
            skills_known=user.get_skills_known(),
            skills_to_learn=user.get_skills_to_learn(),
            discord_link=user.discord_link or None,
            rating=user.rating,
        )


class UserCreate(CamelModel):
    """Schema for registering a user via the API."""

    id: str = Field(min_length=1, max_length=36, description="Client-generated user id")
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: Optional[Password] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    skills_known: Optional[List[str]] = None
    skills_to_learn: Optional[List[str]] = None
    discord_link: Optional[str] = None


class UserUpdate(CamelModel):
    """Schema for updating (or upserting) a user via the API.

    ``None`` means the field was not sent. For ``name``, ``bio`` and
    ``discordLink`` an empty string is treated the same as not sent, while
    an empty skills list clears the stored list.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[Password] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    skills_known: Optional[List[str]] = None
    skills_to_learn: Optional[List[str]] = None
    discord_link: Optional[str] = None


class LoginRequest(CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(CamelModel):
    user: UserRead
    token: str
