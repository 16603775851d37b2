"""Discovery I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from juicebox_factory.core.models.domain.enums import PricingModel, Timeframe


class GitHubLicense(BaseModel):
    key: Optional[str] = None
    name: Optional[str] = None


class GitHubRepository(BaseModel):
    """Subset of the GitHub repository payload used for discovery."""

    id: int
    name: str
    full_name: str
    description: Optional[str] = None
    html_url: str
    homepage: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    language: Optional[str] = None
    topics: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    pushed_at: Optional[datetime] = None
    license: Optional[GitHubLicense] = None


class GitHubSearchResult(BaseModel):
    total_count: int = 0
    incomplete_results: bool = False
    items: List[GitHubRepository] = Field(default_factory=list)


class NpmPackage(BaseModel):
    """Subset of an NPM package document used for discovery."""

    name: str
    description: Optional[str] = None
    homepage: Optional[str] = None
    repository_url: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    weekly_downloads: int = 0


class DiscoveredTool(BaseModel):
    """A tool candidate produced by a discovery source."""

    name: str
    description: str = ""
    website_url: Optional[str] = None
    github_url: Optional[str] = None
    category: str = "Web Development"
    tags: List[str] = Field(default_factory=list)
    pricing_model: PricingModel = PricingModel.open_source
    language: Optional[str] = None
    source: Literal["github", "npm", "manual"]
    confidence_score: float = Field(ge=0.0, le=1.0)
    stars: Optional[int] = None
    downloads: Optional[int] = None
    trending_score: float = Field(default=0.0, ge=0.0, le=100.0)


class DiscoveryRunResult(BaseModel):
    discovered: List[DiscoveredTool]
    total: int


class AutoSubmitRequest(BaseModel):
    min_confidence: float = Field(default=0.7, ge=0.0, le=1.0)
    tools: Optional[List[DiscoveredTool]] = Field(
        default=None, description="Candidates to submit; runs the pipeline when omitted"
    )
    submitted_by: Optional[str] = None


class GitHubSearchQuery(BaseModel):
    query: str = Field(min_length=1)
    sort: Literal["stars", "forks", "updated"] = "stars"
    per_page: int = Field(default=30, ge=1, le=100)


class GitHubTrendingQuery(BaseModel):
    topics: List[str] = Field(default_factory=lambda: ["javascript", "typescript", "react", "vue", "angular", "nodejs"])
    timeframe: Timeframe = Timeframe.weekly
