"""
Quiz and quiz attempt entity models.

Quiz questions and attempt answers are JSON array text. A question is a
mapping with ``question``, ``options`` and the index of the
``correctAnswer``; an attempt's answers are option indices in question order.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from sqlalchemy import DateTime, String, Text
from sqlmodel import Field

from skillvouch.core.serialization import parse_json_list, safe_dump_json

from ..base import Base, new_id, utc_now


class QuizDifficulty(str, Enum):
    """Difficulty level of a quiz."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Quiz(Base, table=True):
    """Entity for skill quizzes.

    Table: quizzes
    """

    __tablename__ = "quizzes"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    title: str = Field(max_length=255)
    description: str = Field(default="", sa_type=Text)
    skill: str = Field(max_length=255, index=True)
    difficulty: str = Field(default=QuizDifficulty.INTERMEDIATE.value, sa_type=String(16), index=True)
    questions: str = Field(default="[]", sa_type=Text, description="JSON array of question objects")
    created_by: Optional[str] = Field(default=None, foreign_key="users.id", ondelete="SET NULL", max_length=36)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def get_questions(self) -> List[Dict[str, Any]]:
        return [q for q in parse_json_list(self.questions) if isinstance(q, dict)]

    def set_questions(self, questions: List[Dict[str, Any]]) -> None:
        self.questions = safe_dump_json(list(questions))

    def __repr__(self) -> str:
        return f"Quiz(id={self.id}, skill={self.skill}, difficulty={self.difficulty})"


class QuizAttempt(Base, table=True):
    """Entity for a user's submitted answers to a quiz.

    Table: quiz_attempts
    """

    __tablename__ = "quiz_attempts"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    user_id: str = Field(foreign_key="users.id", ondelete="CASCADE", max_length=36, index=True)
    quiz_id: str = Field(foreign_key="quizzes.id", ondelete="CASCADE", max_length=36, index=True)
    answers: str = Field(default="[]", sa_type=Text, description="JSON array of chosen option indices")
    score: Optional[float] = Field(default=None, description="Percentage of correct answers, 0-100")
    completed: bool = Field(default=False, index=True)

    started_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    completed_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    def get_answers(self) -> List[Any]:
        return parse_json_list(self.answers)

    def set_answers(self, answers: List[Any]) -> None:
        self.answers = safe_dump_json(list(answers))

    def __repr__(self) -> str:
        return f"QuizAttempt(id={self.id}, quiz_id={self.quiz_id}, score={self.score})"
