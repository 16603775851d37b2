"""
Tool discovery.

- github: async GitHub REST client
- signals: confidence, category and trending heuristics
- sources: live GitHub/NPM sources and the static sample source
- pipeline: gather, dedupe, rank and auto-submit discovered tools
"""

from .github import GitHubClient, build_trending_query
from .pipeline import DiscoveryPipeline, dedupe_tools
from .signals import (
    calculate_github_confidence,
    calculate_npm_confidence,
    categorize_from_topics,
    normalize_repository_url,
    trending_score,
)
from .sources import (
    DiscoverySource,
    GitHubDiscoverySource,
    NpmDiscoverySource,
    StaticDiscoverySource,
    build_discovery_sources,
)

__all__ = [
    "DiscoveryPipeline",
    "DiscoverySource",
    "GitHubClient",
    "GitHubDiscoverySource",
    "NpmDiscoverySource",
    "StaticDiscoverySource",
    "build_discovery_sources",
    "build_trending_query",
    "calculate_github_confidence",
    "calculate_npm_confidence",
    "categorize_from_topics",
    "dedupe_tools",
    "normalize_repository_url",
    "trending_score",
]
