"""
User profile and login endpoints.

Profiles are keyed by a client-generated id. Passwords are stored as bcrypt
hashes and never returned; login hands back an opaque ``token-<id>`` string.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError

from skillvouch.core.database.entities import User
from skillvouch.core.database.repositories import UserRepository
from skillvouch.core.logging_config import get_logger
from skillvouch.core.models.io import LoginRequest, LoginResponse, UserCreate, UserRead, UserUpdate
from skillvouch.core.security import hash_password, issue_token, verify_password
from skillvouch.server.services.deps import DatabaseDep

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


@router.post(
    "/users",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register User",
    description="Create a user profile. `id`, `name` and `email` are required.",
    responses={
        201: {"description": "User created"},
        400: {"description": "Missing required fields"},
        409: {"description": "Email already exists"},
    },
)
async def create_user(body: UserCreate, session: DatabaseDep) -> UserRead:
    """
    Register a new user.

    Skills default to empty lists and the rating starts at 5.0. The email
    must be unique across all users.
    """
    repo = UserRepository(session)
    if await repo.get_by_email(body.email) is not None or await repo.get_by_id(body.id) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    user = User(
        id=body.id,
        name=body.name,
        email=body.email,
        password=hash_password(body.password or ""),
        avatar=body.avatar,
        bio=body.bio or "",
        discord_link=body.discord_link or "",
    )
    user.set_skills_known(body.skills_known or [])
    user.set_skills_to_learn(body.skills_to_learn or [])
    try:
        user = await repo.create(user)
    except IntegrityError:
        # Lost a race with a concurrent registration
        await session.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    logger.info(f"User registered: {user.id}")
    return UserRead.from_entity(user)


@router.get(
    "/users",
    response_model=List[UserRead],
    summary="List Users",
    description="Retrieve every user profile.",
)
async def list_users(session: DatabaseDep) -> List[UserRead]:
    users = await UserRepository(session).list_all()
    return [UserRead.from_entity(u) for u in users]


@router.get(
    "/users/{user_id}",
    response_model=UserRead,
    summary="Get User",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: str, session: DatabaseDep) -> UserRead:
    user = await UserRepository(session).get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.from_entity(user)


@router.put(
    "/users/{user_id}",
    response_model=UserRead,
    summary="Update User",
    description="Update a user profile, creating it when the id is unknown.",
    responses={
        200: {"description": "User updated"},
        201: {"description": "User created from the request body"},
    },
)
async def update_user(user_id: str, body: UserUpdate, response: Response, session: DatabaseDep) -> UserRead:
    """
    Update (or create) a user profile.

    For an existing user, empty or missing ``name``, ``bio`` and
    ``discordLink`` keep the stored value. Skill lists are replaced whenever
    they are sent, so an empty list clears them. A new password is hashed.
    """
    repo = UserRepository(session)
    user = await repo.get_by_id(user_id)

    if user is None:
        user = User(
            id=user_id,
            name=body.name or "",
            email=body.email or "",
            password=hash_password(body.password or ""),
            avatar=body.avatar,
            bio=body.bio or "",
            discord_link=body.discord_link or "",
        )
        user.set_skills_known(body.skills_known or [])
        user.set_skills_to_learn(body.skills_to_learn or [])
        try:
            user = await repo.create(user)
        except IntegrityError:
            await session.rollback()
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")
        response.status_code = status.HTTP_201_CREATED
        logger.info(f"User created on update: {user.id}")
        return UserRead.from_entity(user)

    if body.name:
        user.name = body.name
    if body.bio:
        user.bio = body.bio
    if body.discord_link:
        user.discord_link = body.discord_link
    if body.avatar is not None:
        user.avatar = body.avatar
    if body.password:
        user.password = hash_password(body.password)
    if body.skills_known is not None:
        user.set_skills_known(body.skills_known)
    if body.skills_to_learn is not None:
        user.set_skills_to_learn(body.skills_to_learn)

    user = await repo.update(user)
    return UserRead.from_entity(user)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log In",
    responses={
        400: {"description": "Missing email or password"},
        401: {"description": "Invalid email or password"},
    },
)
async def login(body: LoginRequest, session: DatabaseDep) -> LoginResponse:
    user = await UserRepository(session).get_by_email(body.email)
    if user is None or not verify_password(body.password, user.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    logger.info(f"User logged in: {user.id}")
    return LoginResponse(user=UserRead.from_entity(user), token=issue_token(user.id))
