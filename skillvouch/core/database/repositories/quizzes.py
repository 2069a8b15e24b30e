"""
Quiz repository.

Data access for quizzes and quiz attempts, including attempt scoring.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from skillvouch.core.logging_config import get_logger

from ..base import utc_now
from ..entities.quizzes import Quiz, QuizAttempt
from .base import AsyncBaseRepository

logger = get_logger(__name__)


def score_answers(questions: Sequence[Dict[str, Any]], answers: Sequence[Any]) -> float:
    """Percentage of questions answered correctly, rounded to 2 decimals.

    Answer ``i`` is correct when it equals question ``i``'s ``correctAnswer``.
    Missing answers count as wrong. A quiz without questions scores 0.
    """
    if not questions:
        return 0.0
    correct = 0
    for index, question in enumerate(questions):
        if index < len(answers) and answers[index] is not None and answers[index] == question.get("correctAnswer"):
            correct += 1
    return round(correct / len(questions) * 100, 2)


class QuizRepository(AsyncBaseRepository[Quiz]):
    """Repository for quiz data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Quiz)

    async def list_newest_first(self, skill: Optional[str] = None, difficulty: Optional[str] = None) -> List[Quiz]:
        """Quizzes ordered by creation time, optionally narrowed to a skill and difficulty."""
        return await self.list(
            filters={"skill": skill or None, "difficulty": difficulty or None},
            order_by=Quiz.created_at.desc(),  # type: ignore[attr-defined]
        )


class QuizAttemptRepository(AsyncBaseRepository[QuizAttempt]):
    """Repository for quiz attempt data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, QuizAttempt)

    async def submit(self, user_id: str, quiz: Quiz, answers: List[Any]) -> QuizAttempt:
        """Record a completed attempt and its score in a single transaction.

        The attempt is inserted, scored and stamped as completed before the
        commit; any failure rolls the whole attempt back.
        """
        attempt = QuizAttempt(user_id=user_id, quiz_id=quiz.id)
        attempt.set_answers(answers)
        try:
            self.session.add(attempt)
            await self.session.flush()

            attempt.score = score_answers(quiz.get_questions(), answers)
            attempt.completed = True
            attempt.completed_at = utc_now()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(attempt)
        logger.debug(f"Quiz attempt {attempt.id} scored {attempt.score} for user {user_id}")
        return attempt

    async def list_for_user(self, user_id: str) -> List[QuizAttempt]:
        stmt = (
            select(QuizAttempt)
            .where(QuizAttempt.user_id == user_id)
            .order_by(QuizAttempt.started_at.desc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
