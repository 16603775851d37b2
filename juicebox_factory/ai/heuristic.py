"""
Heuristic AI service.

Deterministic answers used when no LLM provider is configured and as the
fallback of the live service.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from juicebox_factory.core.models.domain.enums import TrendVerdict
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

from .base import DEFAULT_CATEGORY, AIService

POSITIVE_WORDS = frozenset({"good", "great", "excellent", "amazing", "love", "perfect", "awesome"})
NEGATIVE_WORDS = frozenset({"bad", "terrible", "awful", "hate", "worst", "horrible", "useless"})
SENTIMENT_STEP = 0.3

# Ordered: first matching rule wins
CATEGORY_KEYWORDS = (
    (("react", "vue", "frontend"), "Web Development"),
    (("test", "automation"), "Testing & QA"),
    (("design", "ui"), "Design & Prototyping"),
)

RECOMMENDED_TOOLS = (
    "React",
    "Vue.js",
    "Next.js",
    "TypeScript",
    "Tailwind CSS",
    "Vite",
    "Prisma",
    "Supabase",
    "Vercel",
    "Figma",
)
MAX_RECOMMENDATIONS = 5


class HeuristicAIService(AIService):
    """Keyword and word-count heuristics with canned text."""

    async def categorize_tool(
        self,
        tool_name: str,
        description: str,
        website_url: Optional[str] = None,
        github_url: Optional[str] = None,
    ) -> CategorizationResult:
        text = description.lower()
        for keywords, category in CATEGORY_KEYWORDS:
            if any(keyword in text for keyword in keywords):
                return CategorizationResult(
                    category=category, confidence=0.7, reasoning="Keyword-based categorization"
                )
        return CategorizationResult(category=DEFAULT_CATEGORY, confidence=0.5, reasoning="Default categorization")

    async def generate_tool_description(
        self,
        tool_name: str,
        description: str,
        category: str = DEFAULT_CATEGORY,
        features: Optional[Sequence[str]] = None,
    ) -> GeneratedContent:
        return GeneratedContent(
            content=description,
            metadata=ContentMetadata(tone="professional", length=len(description), keywords=[]),
        )

    async def analyze_sentiment(self, text: str) -> SentimentResult:
        words = text.lower().split()
        positive = sum(1 for word in words if word in POSITIVE_WORDS)
        negative = sum(1 for word in words if word in NEGATIVE_WORDS)

        if positive > negative:
            sentiment, score, emotions = "positive", min(positive * SENTIMENT_STEP, 1.0), ["satisfied"]
        elif negative > positive:
            sentiment, score, emotions = "negative", max(negative * -SENTIMENT_STEP, -1.0), ["disappointed"]
        else:
            sentiment, score, emotions = "neutral", 0.0, ["neutral"]

        return SentimentResult(
            sentiment=sentiment,
            score=score,
            emotions=emotions,
            summary=f"{sentiment} sentiment detected",
        )

    async def generate_personalized_recommendations(
        self,
        preferences: UserAIPreferences,
        history: UserHistory,
    ) -> List[str]:
        return list(RECOMMENDED_TOOLS[:MAX_RECOMMENDATIONS])

    async def generate_tool_comparison(self, tools: Sequence[ToolProfile]) -> GeneratedContent:
        if not tools:
            return GeneratedContent(content="Comparison not available", metadata=ContentMetadata(tone="analytical"))
        names = " vs ".join(tool.name for tool in tools)
        content = (
            f"Comparison between {names}: Both tools serve similar purposes in the {tools[0].category} category. "
            "Each has its own strengths and is suitable for different use cases. "
            "Consider your specific requirements when choosing between them."
        )
        return GeneratedContent(
            content=content,
            metadata=ContentMetadata(
                tone="analytical", length=len(content), keywords=["comparison", "tools", "evaluation"]
            ),
        )

    async def generate_pros_cons(self, tool_name: str, description: str, category: str = DEFAULT_CATEGORY) -> ProsCons:
        return ProsCons(
            pros=[
                "Easy to get started",
                "Good community support",
                "Regular updates",
                "Well documented",
            ],
            cons=[
                "Learning curve for beginners",
                "May have limitations for complex use cases",
                "Requires time investment to master",
            ],
            summary=f"{tool_name} is a solid tool with both advantages and trade-offs to consider.",
        )

    async def analyze_trends(self, tools: Sequence[ToolSignals]) -> List[TrendAnalysis]:
        return [
            TrendAnalysis(
                tool_name=tool.name,
                trend_direction=TrendVerdict.stable,
                trend_strength=0.5,
                key_factors=["Community engagement", "Regular updates"],
                prediction="Expected to maintain current trajectory",
            )
            for tool in tools
        ]
