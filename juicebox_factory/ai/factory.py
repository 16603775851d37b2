"""Selects the AI service implementation from settings."""

from __future__ import annotations

from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.server.core.config import Settings

from .base import AIService
from .heuristic import HeuristicAIService
from .pydantic_ai_service import PydanticAIService

logger = get_logger(__name__)


def build_ai_service(settings: Settings) -> AIService:
    """
    Build the AI service once at startup.

    The live pydantic-ai service is used when an OpenAI API key is
    configured; otherwise every call is answered by the heuristics.
    """
    if not settings.ai_enabled:
        logger.info("No LLM API key configured; using heuristic AI service")
        return HeuristicAIService()

    from pydantic_ai.models.openai import OpenAIChatModel
    from pydantic_ai.providers.openai import OpenAIProvider

    api_key = settings.openai_api_key.get_secret_value()
    model = OpenAIChatModel(settings.ai.model, provider=OpenAIProvider(api_key=api_key))
    logger.info(f"Using pydantic-ai service with model {settings.ai.model}")
    return PydanticAIService(model, model_name=settings.ai.model, timeout=settings.ai.timeout)
