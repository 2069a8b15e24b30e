"""
AI endpoints.

``POST /ai`` answers a free-form prompt; the other endpoints return
structured, validated results. All of them answer 502 when the AI service
fails after its retries.
"""

from __future__ import annotations

from fastapi import APIRouter

from skillvouch.ai import Roadmap, SkillSuggestions
from skillvouch.core.models.io import AIPromptRequest, AIPromptResponse, RoadmapRequest, SkillSuggestRequest
from skillvouch.server.core.constant import API_PREFIX
from skillvouch.server.services.deps import AIServiceDep

router = APIRouter(tags=["ai"])

_AI_ERRORS = {502: {"description": "AI service unavailable"}}


@router.post(
    "/ai",
    response_model=AIPromptResponse,
    summary="Prompt the AI",
    description="Send a free-form prompt to the configured model.",
    responses=_AI_ERRORS,
)
async def prompt_ai(body: AIPromptRequest, ai: AIServiceDep) -> AIPromptResponse:
    content = await ai.chat(body.prompt)
    return AIPromptResponse(success=True, model=ai.model_name, content=content)


@router.post(
    f"{API_PREFIX}/roadmap/generate",
    response_model=Roadmap,
    summary="Generate Learning Roadmap",
    responses=_AI_ERRORS,
)
async def generate_roadmap(body: RoadmapRequest, ai: AIServiceDep) -> Roadmap:
    return await ai.generate_roadmap(body.skill)


@router.post(
    f"{API_PREFIX}/skills/suggest",
    response_model=SkillSuggestions,
    summary="Suggest Skills",
    description="Suggest skills to learn next from the user's current skills and goals.",
    responses=_AI_ERRORS,
)
async def suggest_skills(body: SkillSuggestRequest, ai: AIServiceDep) -> SkillSuggestions:
    return await ai.suggest_skills(body.current_skills, body.current_goals)
