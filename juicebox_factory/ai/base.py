"""AI service strategy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from juicebox_factory.core.models.io.ai import (
    CategorizationResult,
    GeneratedContent,
    ProsCons,
    SentimentResult,
    ToolProfile,
    ToolSignals,
    TrendAnalysis,
    UserAIPreferences,
    UserHistory,
)

CATEGORIES = (
    "Animation & Graphics",
    "AI & Machine Learning",
    "No-Code/Low-Code",
    "Web Development",
    "Mobile Development",
    "DevOps & Infrastructure",
    "Database & Storage",
    "Testing & QA",
    "Design & Prototyping",
    "Analytics & Monitoring",
)

DEFAULT_CATEGORY = "Web Development"


class AIService(ABC):
    """Text generation and classification for the tool catalog."""

    @abstractmethod
    async def categorize_tool(
        self,
        tool_name: str,
        description: str,
        website_url: Optional[str] = None,
        github_url: Optional[str] = None,
    ) -> CategorizationResult:
        """Pick one of ``CATEGORIES`` for a tool."""

    @abstractmethod
    async def generate_tool_description(
        self,
        tool_name: str,
        description: str,
        category: str = DEFAULT_CATEGORY,
        features: Optional[Sequence[str]] = None,
    ) -> GeneratedContent:
        """Rewrite a basic description into a richer one."""

    @abstractmethod
    async def analyze_sentiment(self, text: str) -> SentimentResult:
        """Classify the sentiment of review text."""

    @abstractmethod
    async def generate_personalized_recommendations(
        self,
        preferences: UserAIPreferences,
        history: UserHistory,
    ) -> List[str]:
        """Suggest tool names for a user profile."""

    @abstractmethod
    async def generate_tool_comparison(self, tools: Sequence[ToolProfile]) -> GeneratedContent:
        """Write a comparison of several tools."""

    @abstractmethod
    async def generate_pros_cons(self, tool_name: str, description: str, category: str = DEFAULT_CATEGORY) -> ProsCons:
        """List balanced pros and cons of a tool."""

    @abstractmethod
    async def analyze_trends(self, tools: Sequence[ToolSignals]) -> List[TrendAnalysis]:
        """Give a trend verdict per tool."""
