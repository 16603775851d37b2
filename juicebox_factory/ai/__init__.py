"""
AI service.

``AIService`` is the strategy interface. ``HeuristicAIService`` answers
deterministically without any provider; ``PydanticAIService`` calls an LLM
through pydantic-ai and falls back to the heuristic answer on any provider
failure. ``build_ai_service`` picks one at construction time.
"""

from .base import CATEGORIES, AIService
from .factory import build_ai_service
from .heuristic import HeuristicAIService
from .pydantic_ai_service import PydanticAIService

__all__ = [
    "CATEGORIES",
    "AIService",
    "HeuristicAIService",
    "PydanticAIService",
    "build_ai_service",
]
