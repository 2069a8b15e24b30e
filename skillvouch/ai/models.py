"""
Structured outputs requested from the LLM.

These models double as the agents' ``output_type`` and as API response
bodies, so they use the same camelCase aliases as the rest of the API.
A generated quiz that fails validation is sent back to the model for a
retry by Pydantic AI before the service sees it.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from skillvouch.core.models.io.base import CamelModel


class GeneratedQuestion(CamelModel):
    """A multiple-choice question."""

    question: str = Field(min_length=1)
    options: List[str] = Field(description="Answer choices, at least two")
    correct_answer: int = Field(description="Zero-based index of the correct option")
    explanation: Optional[str] = None

    @model_validator(mode="after")
    def _check_answer_index(self) -> "GeneratedQuestion":
        if len(self.options) < 2:
            raise ValueError("a question needs at least two options")
        if not 0 <= self.correct_answer < len(self.options):
            raise ValueError(f"correctAnswer {self.correct_answer} is outside the {len(self.options)} options")
        return self


class GeneratedQuiz(CamelModel):
    title: str = Field(min_length=1)
    description: str = ""
    questions: List[GeneratedQuestion] = Field(min_length=1)


class RoadmapMilestone(CamelModel):
    title: str
    description: str = ""
    resources: List[str] = Field(default_factory=list)
    estimated_weeks: Optional[int] = Field(default=None, ge=1)


class Roadmap(CamelModel):
    """An ordered learning plan for one skill."""

    skill: str
    milestones: List[RoadmapMilestone] = Field(min_length=1)


class SkillSuggestion(CamelModel):
    skill: str
    reason: str = ""


class SkillSuggestions(CamelModel):
    suggestions: List[SkillSuggestion] = Field(default_factory=list)
