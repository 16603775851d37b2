"""Comparison, similarity and recommendation I/O models."""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from juicebox_factory.core.models.domain.enums import FeaturePriority, PricingPreference

from .tools import ToolRead


class CompareRequest(BaseModel):
    """Tools to put side by side."""

    tool_ids: List[int] = Field(description="2 to 5 distinct tool ids, in display order")


class FeatureRow(BaseModel):
    """One feature of the comparison matrix with a value per tool id."""

    feature: str
    values: Dict[int, Union[str, float]]


class ComparisonRecommendations(BaseModel):
    """Tool ids of the four best-of picks."""

    best_overall: int
    best_value: int
    most_innovative: int
    most_accessible: int


class ComparisonMatrix(BaseModel):
    """Feature-by-tool table with derived picks."""

    tools: List[ToolRead]
    features: List[FeatureRow]
    recommendations: ComparisonRecommendations


class SimilarTool(ToolRead):
    """A tool with its similarity to the reference tool."""

    similarity_score: float = Field(ge=0.0, le=1.0)


class RecommendationPreferences(BaseModel):
    """User preferences driving personalized recommendations."""

    categories: List[int] = Field(default_factory=list, description="Preferred category ids")
    pricing_preference: PricingPreference = PricingPreference.any
    feature_priorities: List[FeaturePriority] = Field(
        default_factory=list, description="Sub-scores in order of importance"
    )


class PersonalizedRecommendationRequest(BaseModel):
    """Request body for personalized recommendations."""

    user_id: Optional[str] = None
    preferences: RecommendationPreferences = Field(default_factory=RecommendationPreferences)
    limit: int = Field(default=10, ge=1, le=100)
