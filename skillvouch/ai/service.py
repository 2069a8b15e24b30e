"""
SkillVouch AI service.

Every operation runs a Pydantic AI agent and retries failed runs with a
linear delay (``retry_delay * attempt``). When all attempts fail the last
error is wrapped in ``AIServiceError`` so the API can answer 502.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional, Sequence

import httpx
from pydantic_ai import Agent
from pydantic_ai.exceptions import AgentRunError
from pydantic_ai.models import Model
from pydantic_ai.models.mistral import MistralModel
from pydantic_ai.providers.mistral import MistralProvider

from skillvouch.core.errors import AIServiceError
from skillvouch.core.logging_config import get_logger
from skillvouch.core.monitoring import log_llm_call
from skillvouch.server.core.config import MistralConfig, settings

from . import prompts
from .models import GeneratedQuiz, Roadmap, SkillSuggestions

logger = get_logger(__name__)

Sleep = Callable[[float], Awaitable[None]]


def create_mistral_model(config: MistralConfig) -> Optional[Model]:
    """Build the Mistral model for ``config``, or None when no API key is set."""
    if not config.configured:
        return None
    logger.debug(f"Creating Mistral model: {config.model_name} with Pydantic AI")
    return MistralModel(config.model_name, provider=MistralProvider(api_key=config.api_key))


class SkillAIService:
    """Generate quizzes, roadmaps, suggestions and free-form answers.

    Args:
        model: Pydantic AI model to run. Defaults to a Mistral model built
            from ``config``; tests pass ``TestModel`` or ``FunctionModel``.
        config: Mistral settings (model name, retry budget).
        sleep: Awaitable sleep used between retries.
    """

    def __init__(
        self,
        model: Optional[Model] = None,
        config: Optional[MistralConfig] = None,
        *,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.config = config or settings.mistral
        self.model = model if model is not None else create_mistral_model(self.config)
        self.max_retries = self.config.max_retries
        self.retry_delay = self.config.retry_delay
        self._sleep = sleep

        if self.model is not None:
            self._chat_agent: Optional[Agent[None, str]] = Agent(self.model, system_prompt=prompts.CHAT_SYSTEM_PROMPT)
            self._quiz_agent: Optional[Agent[None, GeneratedQuiz]] = Agent(
                self.model, output_type=GeneratedQuiz, system_prompt=prompts.QUIZ_SYSTEM_PROMPT, retries=2
            )
            self._roadmap_agent: Optional[Agent[None, Roadmap]] = Agent(
                self.model, output_type=Roadmap, system_prompt=prompts.ROADMAP_SYSTEM_PROMPT
            )
            self._suggest_agent: Optional[Agent[None, SkillSuggestions]] = Agent(
                self.model, output_type=SkillSuggestions, system_prompt=prompts.SUGGEST_SYSTEM_PROMPT
            )
        else:
            self._chat_agent = self._quiz_agent = self._roadmap_agent = self._suggest_agent = None

    @property
    def configured(self) -> bool:
        return self.model is not None

    @property
    def model_name(self) -> str:
        if self.model is None:
            return self.config.model_name
        return self.model.model_name

    async def chat(self, prompt: str) -> str:
        """Answer a free-form prompt."""
        return await self._run("chat", self._chat_agent, prompt)

    async def generate_quiz(self, skill: str, difficulty: str, num_questions: int = 5) -> GeneratedQuiz:
        prompt = prompts.QUIZ_PROMPT.format(skill=skill, difficulty=difficulty, num_questions=num_questions)
        return await self._run("quiz", self._quiz_agent, prompt)

    async def generate_roadmap(self, skill: str) -> Roadmap:
        return await self._run("roadmap", self._roadmap_agent, prompts.ROADMAP_PROMPT.format(skill=skill))

    async def suggest_skills(self, current_skills: Sequence[str], current_goals: Sequence[str]) -> SkillSuggestions:
        prompt = prompts.SUGGEST_PROMPT.format(
            skills=", ".join(current_skills) or "none",
            goals=", ".join(current_goals) or "none",
        )
        return await self._run("suggestions", self._suggest_agent, prompt)

    async def _run(self, operation: str, agent: Optional[Agent[None, Any]], prompt: str) -> Any:
        if agent is None:
            raise AIServiceError(operation, "MISTRAL_API_KEY is not configured", attempts=0)

        last_error: Optional[Exception] = None
        for attempt in range(1, self.max_retries + 1):
            try:
                result = await agent.run(prompt)
            except (AgentRunError, httpx.HTTPError) as e:
                last_error = e
                logger.warning(f"AI {operation} attempt {attempt}/{self.max_retries} failed: {e}")
                if attempt < self.max_retries:
                    await self._sleep(self.retry_delay * attempt)
                continue

            usage = result.usage()
            log_llm_call(
                self.model_name,
                operation,
                getattr(usage, "input_tokens", None),
                getattr(usage, "output_tokens", None),
            )
            logger.info(f"AI {operation} succeeded on attempt {attempt}")
            return result.output

        logger.error(f"AI {operation} failed after {self.max_retries} attempts: {last_error}")
        raise AIServiceError(operation, str(last_error), attempts=self.max_retries) from last_error

