"""
Quiz endpoints.

Quizzes are listed, taken (an attempt is scored on submission) and
generated on demand by the AI service.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from skillvouch.core.database.entities import Quiz, QuizDifficulty
from skillvouch.core.database.repositories import QuizAttemptRepository, QuizRepository, UserRepository
from skillvouch.core.logging_config import get_logger
from skillvouch.core.models.io import QuizAttemptCreate, QuizAttemptRead, QuizGenerateRequest, QuizRead
from skillvouch.server.services.deps import AIServiceDep, DatabaseDep, require_users

logger = get_logger(__name__)

router = APIRouter(tags=["quizzes"])


@router.get(
    "/quizzes",
    response_model=List[QuizRead],
    summary="List Quizzes",
    description=(
        "Quizzes newest first, optionally narrowed by skill and difficulty. "
        "Unreadable question data is returned as an empty list."
    ),
)
async def list_quizzes(
    session: DatabaseDep,
    skill: Optional[str] = None,
    difficulty: Optional[QuizDifficulty] = None,
) -> List[QuizRead]:
    quizzes = await QuizRepository(session).list_newest_first(skill, difficulty.value if difficulty else None)
    return [QuizRead.from_entity(q) for q in quizzes]


@router.post(
    "/quizzes/generate",
    response_model=QuizRead,
    status_code=status.HTTP_201_CREATED,
    summary="Generate Quiz",
    description="Ask the AI service for a quiz on a skill and store it.",
    responses={502: {"description": "AI service unavailable"}},
)
async def generate_quiz(body: QuizGenerateRequest, session: DatabaseDep, ai: AIServiceDep) -> QuizRead:
    """
    Generate and store a quiz.

    The requesting user is recorded as the author when the user exists.
    """
    generated = await ai.generate_quiz(body.skill, body.difficulty.value, body.num_questions)

    author = None
    if body.user_id and await UserRepository(session).get_by_id(body.user_id) is not None:
        author = body.user_id

    quiz = Quiz(
        title=generated.title,
        description=generated.description,
        skill=body.skill,
        difficulty=body.difficulty.value,
        created_by=author,
    )
    quiz.set_questions([q.model_dump(by_alias=True, exclude_none=True) for q in generated.questions])
    quiz = await QuizRepository(session).create(quiz)
    logger.info(f"Generated quiz {quiz.id} on {quiz.skill} ({len(generated.questions)} questions)")
    return QuizRead.from_entity(quiz)


@router.post(
    "/quiz-attempts",
    response_model=QuizAttemptRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Quiz Attempt",
    description="Record the answers to a quiz and score them.",
    responses={404: {"description": "Quiz or user not found"}},
)
@router.post(
    "/quizzes/submit",
    response_model=QuizAttemptRead,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def submit_quiz_attempt(body: QuizAttemptCreate, session: DatabaseDep) -> QuizAttemptRead:
    """
    Submit a quiz attempt.

    The score is the percentage of answers matching each question's
    ``correctAnswer``.
    """
    quiz = await QuizRepository(session).get_by_id(body.quiz_id)
    if quiz is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quiz not found")
    await require_users(session, body.user_id)

    attempt = await QuizAttemptRepository(session).submit(body.user_id, quiz, body.answers)
    logger.info(f"Quiz attempt {attempt.id} on quiz {quiz.id} scored {attempt.score}")
    return QuizAttemptRead.from_entity(attempt)


@router.get(
    "/quiz-attempts",
    response_model=List[QuizAttemptRead],
    summary="List Quiz Attempts",
    description="Attempts submitted by the user, newest first.",
    responses={400: {"description": "userId is required"}},
)
async def list_quiz_attempts(
    session: DatabaseDep,
    user_id: Optional[str] = Query(default=None, alias="userId"),
) -> List[QuizAttemptRead]:
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="userId is required")
    attempts = await QuizAttemptRepository(session).list_for_user(user_id)
    return [QuizAttemptRead.from_entity(a) for a in attempts]


@router.get(
    "/quizzes/{quiz_id}",
    response_model=QuizRead,
    summary="Get Quiz",
    responses={404: {"description": "Quiz not found"}},
)
async def get_quiz(quiz_id: str, session: DatabaseDep) -> QuizRead:
    quiz = await QuizRepository(session).get_by_id(quiz_id)
    if quiz is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quiz not found")
    return QuizRead.from_entity(quiz)
