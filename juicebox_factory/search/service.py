"""
Search service.

Loads the catalog, filters it and ranks it for a query. Also serves the
static suggestion and trending-search lists.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

from juicebox_factory.core.catalog import load_tool_views
from juicebox_factory.core.database.repositories import SqlRepoBundle
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.io.search import (
    AutocompleteResponse,
    BoostFactors,
    SearchFilters,
    SearchResult,
)

from .filters import apply_filters
from .ranker import rank_tools

logger = get_logger(__name__)

SUGGESTIONS = (
    "React development tools",
    "Vue.js frameworks",
    "TypeScript utilities",
    "AI machine learning",
    "Database management",
    "API development",
    "Frontend frameworks",
    "Backend services",
    "Mobile app development",
    "Design systems",
    "Testing frameworks",
    "DevOps automation",
    "Analytics tracking",
    "Productivity tools",
)
MAX_SUGGESTIONS = 8

TRENDING_SEARCHES = (
    "AI tools",
    "React components",
    "TypeScript",
    "API testing",
    "Design systems",
    "Mobile development",
    "Database tools",
    "DevOps automation",
)


class SearchService:
    """Keyword/semantic search over the tool catalog."""

    def __init__(self, repos: SqlRepoBundle, default_limit: int = 20) -> None:
        self.repos = repos
        self.default_limit = default_limit

    async def search(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        boosts: Optional[BoostFactors] = None,
        limit: Optional[int] = None,
    ) -> List[SearchResult]:
        tools = await self.repos.tools.list()
        candidates = apply_filters(await load_tool_views(self.repos, tools), filters)
        results = rank_tools(candidates, query, boosts, limit or self.default_limit)
        logger.debug(f"Search {query!r}: {len(candidates)} candidates, {len(results)} results")
        return results

    async def get_suggestions(self, partial_query: str) -> List[str]:
        """Suggestions containing ``partial_query`` (case-insensitive), at most eight."""
        needle = partial_query.lower()
        return [suggestion for suggestion in SUGGESTIONS if needle in suggestion.lower()][:MAX_SUGGESTIONS]

    async def get_trending_searches(self) -> List[str]:
        return list(TRENDING_SEARCHES)

    async def search_with_autocomplete(self, query: str, limit: int = 5) -> AutocompleteResponse:
        results, suggestions, trending = await asyncio.gather(
            self.search(query, limit=limit),
            self.get_suggestions(query),
            self.get_trending_searches(),
        )
        return AutocompleteResponse(results=results, suggestions=suggestions, trending=trending)
