"""
Comparison engine.

Catalog-facing service for similar tools, comparison matrices and
personalized recommendations.
"""

from __future__ import annotations

from typing import List, Sequence

from juicebox_factory.core.catalog import load_tool_views
from juicebox_factory.core.database.repositories import SqlRepoBundle
from juicebox_factory.core.errors import NotFoundError, ValidationFailedError
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.domain.enums import PricingPreference
from juicebox_factory.core.models.io.comparison import (
    ComparisonMatrix,
    RecommendationPreferences,
    SimilarTool,
)
from juicebox_factory.core.models.io.tools import ToolRead

from .matrix import build_comparison_matrix
from .similarity import rank_similar_tools

logger = get_logger(__name__)

MIN_COMPARE = 2
MAX_COMPARE = 5


def validate_comparison_ids(tool_ids: Sequence[int]) -> None:
    """
    Check the size and distinctness of a comparison request.

    Raises:
        ValidationFailedError: fewer than 2, more than 5 or repeated ids
    """
    if len(tool_ids) < MIN_COMPARE:
        raise ValidationFailedError("At least 2 tool IDs are required for comparison")
    if len(tool_ids) > MAX_COMPARE:
        raise ValidationFailedError("Maximum 5 tools can be compared at once")
    if len(set(tool_ids)) != len(tool_ids):
        raise ValidationFailedError("Tool IDs must be distinct")


def preference_weight(tool: ToolRead, priorities: Sequence[str]) -> float:
    """Sum of prioritized sub-scores, the i-th priority weighted 1/(i+1)."""
    if tool.score is None:
        return 0.0
    return sum(getattr(tool.score, f"{priority}_score") / (index + 1) for index, priority in enumerate(priorities))


class ComparisonEngine:
    """Similar-tool lookup, comparison matrices and personalized recommendations."""

    def __init__(self, repos: SqlRepoBundle) -> None:
        self.repos = repos

    async def find_similar_tools(self, tool_id: int, limit: int = 5) -> List[SimilarTool]:
        """
        Rank every other tool in the reference tool's category and keep the top ``limit``.

        Raises:
            NotFoundError: The reference tool does not exist
        """
        reference_tool = await self.repos.tools.get_by_id(tool_id)
        if reference_tool is None:
            raise NotFoundError("Tool", tool_id)
        if reference_tool.category_id is None:
            return []

        candidates = await self.repos.tools.list_in_category(reference_tool.category_id, exclude_id=tool_id)
        names = await self.repos.categories.names_by_id()
        reference, *others = await load_tool_views(self.repos, [reference_tool, *candidates], names)

        ranked = rank_similar_tools(reference, others)[:limit]
        logger.debug(f"Similar tools for {tool_id}: {[(tool.id, round(sim, 3)) for tool, sim in ranked]}")
        return [SimilarTool(**tool.model_dump(), similarity_score=min(sim, 1.0)) for tool, sim in ranked]

    async def compare_tools(self, tool_ids: Sequence[int]) -> ComparisonMatrix:
        """
        Build the comparison matrix for ``tool_ids`` in request order.

        Raises:
            ValidationFailedError: Invalid number of ids or duplicates
            NotFoundError: Any of the ids does not exist
        """
        validate_comparison_ids(tool_ids)
        found = {tool.id: tool for tool in await self.repos.tools.get_by_ids(tool_ids)}
        missing = [tool_id for tool_id in tool_ids if tool_id not in found]
        if missing:
            raise NotFoundError("Tool", ", ".join(str(tool_id) for tool_id in missing))

        views = await load_tool_views(self.repos, [found[tool_id] for tool_id in tool_ids])
        return build_comparison_matrix(views)

    async def get_personalized_recommendations(
        self,
        preferences: RecommendationPreferences,
        limit: int = 10,
    ) -> List[ToolRead]:
        """
        Tools matching the user's categories and pricing preference, ordered by
        prioritized sub-scores (or overall score when no priorities are given).
        """
        tools = await self.repos.tools.list_candidates(
            category_ids=preferences.categories,
            free_only=preferences.pricing_preference == PricingPreference.free,
            paid_only=preferences.pricing_preference == PricingPreference.paid,
            limit=limit * 2,
        )
        views = await load_tool_views(self.repos, tools)

        priorities = [priority.value for priority in preferences.feature_priorities]
        if priorities:
            ordered = sorted(views, key=lambda tool: preference_weight(tool, priorities), reverse=True)
        else:
            ordered = sorted(views, key=lambda tool: tool.score.overall_score if tool.score else 0.0, reverse=True)
        return ordered[:limit]
