"""
AI I/O models.

The result models double as the typed outputs of the live LLM agents, so
their field descriptions are part of the prompt contract.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from juicebox_factory.core.models.domain.enums import PricingPreference, TrendVerdict

from .tools import ToolRead


class CategorizationResult(BaseModel):
    category: str = Field(description="Exact category name from the allowed list")
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str = Field(description="Brief explanation of why this category fits")
    category_id: Optional[int] = Field(default=None, description="Matching catalog category, if any")


class ContentMetadata(BaseModel):
    tone: str = "professional"
    length: int = 0
    keywords: List[str] = Field(default_factory=list)


class GeneratedContent(BaseModel):
    """Generated text with light metadata."""

    content: str
    metadata: ContentMetadata = Field(default_factory=ContentMetadata)


class SentimentResult(BaseModel):
    sentiment: Literal["positive", "negative", "neutral"]
    score: float = Field(ge=-1.0, le=1.0, description="-1 very negative .. 1 very positive")
    emotions: List[str] = Field(default_factory=list)
    summary: str


class ProsCons(BaseModel):
    pros: List[str]
    cons: List[str]
    summary: str


class TrendAnalysis(BaseModel):
    tool_name: str
    trend_direction: TrendVerdict
    trend_strength: float = Field(ge=0.0, le=1.0)
    key_factors: List[str] = Field(default_factory=list)
    prediction: str


class ToolProfile(BaseModel):
    """Minimal tool description handed to the AI service."""

    name: str
    description: str = ""
    category: str = "Web Development"


class ToolSignals(BaseModel):
    """Popularity signals for trend analysis."""

    name: str
    category: str = "Web Development"
    github_stars: Optional[int] = None
    npm_downloads: Optional[int] = None
    recent_mentions: int = 0
    sentiment_score: float = 0.0


class UserAIPreferences(BaseModel):
    categories: List[str] = Field(default_factory=list)
    experience_level: Literal["beginner", "intermediate", "expert"] = "intermediate"
    project_types: List[str] = Field(default_factory=list)
    budget_preference: PricingPreference = PricingPreference.any


class RatedTool(BaseModel):
    tool_name: str
    rating: int = Field(ge=1, le=5)


class UserHistory(BaseModel):
    viewed_tools: List[str] = Field(default_factory=list)
    rated_tools: List[RatedTool] = Field(default_factory=list)


# Request bodies


class CategorizeRequest(BaseModel):
    tool_name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    website_url: Optional[str] = None
    github_url: Optional[str] = None


class DescriptionRequest(BaseModel):
    tool_name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: str = "Web Development"
    features: List[str] = Field(default_factory=list)
    tool_id: Optional[int] = Field(default=None, description="When set, the tool's description is updated")


class SentimentRequest(BaseModel):
    text: Optional[str] = Field(default=None, description="Free text to analyze")
    tool_id: Optional[int] = Field(default=None, description="Analyze all review texts of this tool")


class AIComparisonRequest(BaseModel):
    tools: List[ToolProfile] = Field(default_factory=list)
    tool_ids: List[int] = Field(default_factory=list)


class AIRecommendationRequest(BaseModel):
    user_id: Optional[str] = None
    preferences: UserAIPreferences = Field(default_factory=UserAIPreferences)
    history: UserHistory = Field(default_factory=UserHistory)
    limit: int = Field(default=10, ge=1, le=50)


class AIRecommendationResponse(BaseModel):
    suggested_names: List[str]
    tools: List[ToolRead] = Field(default_factory=list)


class TrendsRequest(BaseModel):
    tools: List[ToolSignals] = Field(default_factory=list)
    tool_ids: List[int] = Field(default_factory=list)
