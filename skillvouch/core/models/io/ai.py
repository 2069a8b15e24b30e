"""
AI endpoint I/O models.

Structured LLM outputs (quizzes, roadmaps, suggestions) live in
``skillvouch.ai.models`` and are returned as-is.
"""

from __future__ import annotations

from typing import List

from pydantic import Field

from .base import CamelModel


class AIPromptRequest(CamelModel):
    prompt: str = Field(min_length=1)


class AIPromptResponse(CamelModel):
    success: bool = True
    model: str
    content: str


class RoadmapRequest(CamelModel):
    skill: str = Field(min_length=1)


class SkillSuggestRequest(CamelModel):
    current_skills: List[str] = Field(default_factory=list)
    current_goals: List[str] = Field(default_factory=list)
