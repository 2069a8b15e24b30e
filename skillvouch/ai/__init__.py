"""
LLM-backed generation for SkillVouch.

``SkillAIService`` wraps Pydantic AI agents running on a Mistral model and
returns validated, structured results for quizzes, learning roadmaps and
skill suggestions.
"""

from .models import GeneratedQuestion, GeneratedQuiz, Roadmap, RoadmapMilestone, SkillSuggestion, SkillSuggestions
from .service import SkillAIService

__all__ = [
    "GeneratedQuestion",
    "GeneratedQuiz",
    "Roadmap",
    "RoadmapMilestone",
    "SkillAIService",
    "SkillSuggestion",
    "SkillSuggestions",
]
