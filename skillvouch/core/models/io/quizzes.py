"""
Quiz I/O models for API requests and responses.

Stored questions are returned as they were saved, so a quiz written by an
older client still renders.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from skillvouch.core.database.entities import Quiz, QuizAttempt, QuizDifficulty

from .base import CamelModel


class QuizRead(CamelModel):
    id: str
    title: str
    description: str = ""
    skill: str
    difficulty: str
    questions: List[Dict[str, Any]] = Field(default_factory=list)
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, quiz: Quiz) -> "QuizRead":
        return cls(
            id=quiz.id,
            title=quiz.title,
            description=quiz.description,
            skill=quiz.skill,
            difficulty=quiz.difficulty,
            questions=quiz.get_questions(),
            created_by=quiz.created_by,
            created_at=quiz.created_at,
            updated_at=quiz.updated_at,
        )


class QuizAttemptCreate(CamelModel):
    """Schema for submitting answers to a quiz."""

    user_id: str = Field(min_length=1)
    quiz_id: str = Field(min_length=1)
    answers: List[Optional[int]] = Field(description="Chosen option index per question; null when skipped")


class QuizAttemptRead(CamelModel):
    id: str
    user_id: str
    quiz_id: str
    answers: List[Any] = Field(default_factory=list)
    score: Optional[float] = None
    completed: bool
    started_at: datetime
    completed_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, attempt: QuizAttempt) -> "QuizAttemptRead":
        return cls(
            id=attempt.id,
            user_id=attempt.user_id,
            quiz_id=attempt.quiz_id,
            answers=attempt.get_answers(),
            score=attempt.score,
            completed=attempt.completed,
            started_at=attempt.started_at,
            completed_at=attempt.completed_at,
        )


class QuizGenerateRequest(CamelModel):
    """Schema for asking the AI service to write and store a quiz."""

    skill: str = Field(min_length=1)
    difficulty: QuizDifficulty = QuizDifficulty.INTERMEDIATE
    num_questions: int = Field(default=5, ge=1, le=20)
    user_id: Optional[str] = Field(default=None, description="Recorded as the quiz author")
