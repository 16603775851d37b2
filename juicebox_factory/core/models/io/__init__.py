"""
I/O models for API requests and responses.

These Pydantic schemas define the contract between API endpoints and
clients. They are separate from database entities so the API contract can
evolve independently.

Modules:
- categories, tools, scores, reviews: catalog CRUD
- comparison: comparison matrix, similar tools, personalized recommendations
- search: search filters, boosts and ranked results
- ai: AI service inputs and typed outputs
- discovery: discovery candidates and source payloads
- notifications: notifications and preferences
- system: health and version payloads
"""

from .ai import (
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
from .categories import CatalogSeedSummary, CategoryCreate, CategoryRead
from .comparison import (
    CompareRequest,
    ComparisonMatrix,
    ComparisonRecommendations,
    FeatureRow,
    PersonalizedRecommendationRequest,
    RecommendationPreferences,
    SimilarTool,
)
from .discovery import DiscoveredTool, GitHubRepository, NpmPackage
from .notifications import (
    NotificationCreate,
    NotificationPreferencesRead,
    NotificationPreferencesUpdate,
    NotificationRead,
)
from .reviews import ReviewCreate, ReviewRead
from .scores import ScoreRead, ScoreRecomputeSummary
from .search import BoostFactors, SearchFilters, SearchResult
from .system import HealthStatus, VersionInfo
from .tools import ToolCreate, ToolRead, ToolUpdate

__all__ = [
    "BoostFactors",
    "CatalogSeedSummary",
    "CategorizationResult",
    "CategoryCreate",
    "CategoryRead",
    "CompareRequest",
    "ComparisonMatrix",
    "ComparisonRecommendations",
    "DiscoveredTool",
    "FeatureRow",
    "GeneratedContent",
    "GitHubRepository",
    "HealthStatus",
    "NotificationCreate",
    "NotificationPreferencesRead",
    "NotificationPreferencesUpdate",
    "NotificationRead",
    "NpmPackage",
    "PersonalizedRecommendationRequest",
    "ProsCons",
    "RecommendationPreferences",
    "ReviewCreate",
    "ReviewRead",
    "ScoreRead",
    "ScoreRecomputeSummary",
    "SearchFilters",
    "SearchResult",
    "SentimentResult",
    "SimilarTool",
    "ToolCreate",
    "ToolProfile",
    "ToolRead",
    "ToolSignals",
    "ToolUpdate",
    "TrendAnalysis",
    "UserAIPreferences",
    "UserHistory",
    "VersionInfo",
]
