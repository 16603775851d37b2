"""Search I/O models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from juicebox_factory.core.models.domain.enums import PricingModel

from .tools import ToolRead


class SearchFilters(BaseModel):
    """Filters applied to the candidate set before ranking."""

    categories: List[str] = Field(default_factory=list, description="Category ids or names")
    pricing_models: List[PricingModel] = Field(default_factory=list)
    free_tier: Optional[bool] = None
    min_score: Optional[float] = Field(default=None, ge=0.0, le=5.0, description="Minimum overall score")
    has_github: Optional[bool] = None
    languages: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


class BoostFactors(BaseModel):
    """Per-field weights of the relevance score."""

    name_match: float = 3.0
    description_match: float = 1.5
    category_match: float = 2.0
    tag_match: float = 2.5
    popularity: float = 1.0


class SemanticSearchRequest(BaseModel):
    """Request body for semantic search."""

    query: str = Field(min_length=1)
    filters: SearchFilters = Field(default_factory=SearchFilters)
    boost_factors: BoostFactors = Field(default_factory=BoostFactors)
    limit: int = Field(default=20, ge=1, le=100)


class SearchResult(ToolRead):
    """A ranked tool with its relevance and the reasons it matched."""

    relevance_score: float
    match_reasons: List[str] = Field(default_factory=list)


class SearchResponse(BaseModel):
    query: str
    results: List[SearchResult]
    total: int


class AutocompleteResponse(BaseModel):
    """Search results together with suggestions and trending searches."""

    results: List[SearchResult]
    suggestions: List[str]
    trending: List[str]
