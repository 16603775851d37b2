"""
Live AI service backed by pydantic-ai.

Every operation runs a typed ``Agent`` and, on any provider failure
(network, auth, invalid output), logs the error and returns the
heuristic answer instead.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Optional, Sequence, TypeVar

from pydantic import BaseModel, Field
from pydantic_ai import Agent
from pydantic_ai.settings import ModelSettings

from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.io.ai import (
    CategorizationResult,
    ContentMetadata,
    GeneratedContent,
    ProsCons,
    SentimentResult,
    ToolProfile,
    ToolSignals,
    TrendAnalysis,
    UserAIPreferences,
    UserHistory,
)
from juicebox_factory.core.monitoring import log_llm_call

from .base import CATEGORIES, DEFAULT_CATEGORY, AIService
from .heuristic import HeuristicAIService

logger = get_logger(__name__)

OutputT = TypeVar("OutputT")

SYSTEM_PROMPT = (
    "You are an expert on developer tools. "
    "Answer precisely, stay realistic and avoid marketing language."
)


class _WrittenText(BaseModel):
    content: str
    tone: str = "professional"
    keywords: List[str] = Field(default_factory=list)


def _to_content(text: _WrittenText) -> GeneratedContent:
    return GeneratedContent(
        content=text.content,
        metadata=ContentMetadata(tone=text.tone, length=len(text.content), keywords=text.keywords),
    )


class PydanticAIService(AIService):
    """LLM-backed implementation with a per-call heuristic fallback."""

    def __init__(
        self,
        model: Any,
        model_name: str = "gpt-4o-mini",
        timeout: Optional[float] = None,
        fallback: Optional[AIService] = None,
    ) -> None:
        """
        Args:
            model: pydantic-ai model instance or model identifier
            model_name: Name reported in logs and traces
            timeout: Per-request timeout in seconds
            fallback: Service answering when the provider fails
        """
        self.model = model
        self.model_name = model_name
        self.timeout = timeout
        self.fallback = fallback or HeuristicAIService()

    async def _run(
        self,
        operation: str,
        output_type: Any,
        prompt: str,
        temperature: float,
        on_failure: Callable[[], Awaitable[OutputT]],
        convert: Optional[Callable[[Any], OutputT]] = None,
    ) -> OutputT:
        settings = ModelSettings(temperature=temperature)
        if self.timeout is not None:
            settings["timeout"] = self.timeout
        try:
            agent = Agent(self.model, output_type=output_type, system_prompt=SYSTEM_PROMPT)
            result = await agent.run(prompt, model_settings=settings)
        except Exception as e:
            logger.warning(f"AI {operation} failed, using heuristic fallback: {e}", exc_info=True)
            log_llm_call(self.model_name, operation, succeeded=False)
            return await on_failure()
        log_llm_call(self.model_name, operation, succeeded=True)
        return convert(result.output) if convert else result.output

    async def categorize_tool(
        self,
        tool_name: str,
        description: str,
        website_url: Optional[str] = None,
        github_url: Optional[str] = None,
    ) -> CategorizationResult:
        prompt = (
            "Categorize this developer tool into exactly one of these categories:\n"
            + "\n".join(f"- {category}" for category in CATEGORIES)
            + f"\n\nName: {tool_name}\nDescription: {description}\n"
            f"Website: {website_url or 'Not provided'}\nGitHub: {github_url or 'Not provided'}\n"
        )
        result = await self._run(
            "categorize",
            CategorizationResult,
            prompt,
            0.3,
            lambda: self.fallback.categorize_tool(tool_name, description, website_url, github_url),
        )
        if result.category not in CATEGORIES:
            logger.debug(f"Model suggested unknown category {result.category!r}; using {DEFAULT_CATEGORY}")
            result = result.model_copy(update={"category": DEFAULT_CATEGORY})
        return result.model_copy(update={"category_id": None})

    async def generate_tool_description(
        self,
        tool_name: str,
        description: str,
        category: str = DEFAULT_CATEGORY,
        features: Optional[Sequence[str]] = None,
    ) -> GeneratedContent:
        prompt = (
            "Enhance this developer tool description in 2-3 sentences. Highlight key benefits "
            "for developers and mention specific use cases.\n\n"
            f"Tool: {tool_name}\nCategory: {category}\nCurrent Description: {description}\n"
            f"Key Features: {', '.join(features) if features else 'Not specified'}\n"
        )
        return await self._run(
            "describe",
            _WrittenText,
            prompt,
            0.7,
            lambda: self.fallback.generate_tool_description(tool_name, description, category, features),
            convert=_to_content,
        )

    async def analyze_sentiment(self, text: str) -> SentimentResult:
        prompt = (
            "Analyze the sentiment of this review. The score ranges from -1 (very negative) "
            f'to 1 (very positive).\n\nText: "{text}"\n'
        )
        return await self._run("sentiment", SentimentResult, prompt, 0.3, lambda: self.fallback.analyze_sentiment(text))

    async def generate_personalized_recommendations(
        self,
        preferences: UserAIPreferences,
        history: UserHistory,
    ) -> List[str]:
        liked = [rated.tool_name for rated in history.rated_tools if rated.rating >= 4]
        prompt = (
            "Recommend 5-10 developer tools by name for this user.\n\n"
            f"Categories: {', '.join(preferences.categories)}\n"
            f"Experience Level: {preferences.experience_level}\n"
            f"Project Types: {', '.join(preferences.project_types)}\n"
            f"Budget: {preferences.budget_preference.value}\n"
            f"Viewed Tools: {', '.join(history.viewed_tools)}\n"
            f"Highly Rated Tools: {', '.join(liked)}\n"
        )
        return await self._run(
            "recommendations",
            List[str],
            prompt,
            0.6,
            lambda: self.fallback.generate_personalized_recommendations(preferences, history),
        )

    async def generate_tool_comparison(self, tools: Sequence[ToolProfile]) -> GeneratedContent:
        listing = "\n".join(
            f"{index}. {tool.name} ({tool.category})\n   Description: {tool.description}"
            for index, tool in enumerate(tools, start=1)
        )
        prompt = (
            "Compare these developer tools: key differences, strengths and weaknesses, "
            f"and which fits which scenario.\n\n{listing}\n"
        )
        return await self._run(
            "comparison",
            _WrittenText,
            prompt,
            0.6,
            lambda: self.fallback.generate_tool_comparison(tools),
            convert=_to_content,
        )

    async def generate_pros_cons(self, tool_name: str, description: str, category: str = DEFAULT_CATEGORY) -> ProsCons:
        prompt = (
            "List 3-5 realistic pros and 3-5 cons of this developer tool with a brief balanced summary.\n\n"
            f"Tool: {tool_name}\nCategory: {category}\nDescription: {description}\n"
        )
        return await self._run(
            "pros_cons",
            ProsCons,
            prompt,
            0.5,
            lambda: self.fallback.generate_pros_cons(tool_name, description, category),
        )

    async def analyze_trends(self, tools: Sequence[ToolSignals]) -> List[TrendAnalysis]:
        listing = "\n".join(
            f"- {tool.name} ({tool.category}) GitHub Stars: {tool.github_stars or 'N/A'}, "
            f"NPM Downloads: {tool.npm_downloads or 'N/A'}, Recent Mentions: {tool.recent_mentions}, "
            f"Sentiment: {tool.sentiment_score}"
            for tool in tools
        )
        prompt = (
            "For each tool give the trend direction (rising/stable/declining), trend strength (0-1), "
            f"key factors and a brief prediction.\n\n{listing}\n"
        )
        return await self._run(
            "trends",
            List[TrendAnalysis],
            prompt,
            0.4,
            lambda: self.fallback.analyze_trends(tools),
        )
