"""
Discovery pipeline.

Gathers candidates from every source concurrently, keeps the first
occurrence of each name, ranks them and optionally submits the confident
ones to the catalog.
"""

from __future__ import annotations

import asyncio
from typing import Iterable, List, Optional, Sequence

from juicebox_factory.core.database.entities.tool_scores import ToolScore
from juicebox_factory.core.database.entities.tools import Tool
from juicebox_factory.core.database.repositories.bundle import SqlRepoBundle
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.domain.enums import PricingModel
from juicebox_factory.core.models.io.discovery import DiscoveredTool
from juicebox_factory.core.monitoring import log_event

from .sources import DiscoverySource

logger = get_logger(__name__)


def dedupe_tools(tools: Iterable[DiscoveredTool]) -> List[DiscoveredTool]:
    """Drop candidates whose lowercased name was already seen."""
    seen = set()
    unique = []
    for tool in tools:
        key = tool.name.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(tool)
    return unique


def discovery_rank(tool: DiscoveredTool) -> float:
    return tool.confidence_score + tool.trending_score / 100


class DiscoveryPipeline:
    """Runs discovery sources and feeds their candidates into the catalog."""

    def __init__(self, sources: Sequence[DiscoverySource]) -> None:
        self.sources = list(sources)

    async def run_discovery_pipeline(self, limit: Optional[int] = None) -> List[DiscoveredTool]:
        """
        Collect, dedupe and rank candidates from all sources.

        Args:
            limit: Maximum number of candidates to return

        Returns:
            Candidates sorted by confidence plus scaled trending score, best first
        """
        batches = await asyncio.gather(*(source.discover() for source in self.sources))
        candidates = [tool for batch in batches for tool in batch]

        ranked = sorted(dedupe_tools(candidates), key=discovery_rank, reverse=True)
        if limit is not None:
            ranked = ranked[:limit]

        logger.info(f"Discovery found {len(candidates)} candidates, {len(ranked)} after dedupe")
        log_event("discovery.run", candidates=len(candidates), returned=len(ranked))
        return ranked

    async def auto_submit_discovered_tools(
        self,
        repos: SqlRepoBundle,
        tools: Optional[List[DiscoveredTool]] = None,
        min_confidence: float = 0.7,
        submitted_by: Optional[str] = None,
    ) -> List[Tool]:
        """
        Insert confident candidates into the catalog.

        Candidates below ``min_confidence``, whose name already exists, or whose
        category is not in the catalog are skipped. Each inserted tool gets a
        neutral score record.

        Args:
            repos: Repository bundle bound to the request session
            tools: Candidates; the pipeline runs when omitted
            min_confidence: Lowest confidence accepted
            submitted_by: User id recorded as submitter

        Returns:
            The created tools
        """
        if tools is None:
            tools = await self.run_discovery_pipeline()

        existing = await repos.tools.existing_names()
        created: List[Tool] = []
        for candidate in tools:
            if candidate.confidence_score < min_confidence:
                continue
            if candidate.name.lower() in existing:
                logger.debug(f"Skipping {candidate.name}: already in catalog")
                continue
            category = await repos.categories.get_by_name(candidate.category)
            if category is None:
                logger.warning(f"Skipping {candidate.name}: unknown category {candidate.category!r}")
                continue

            tool = await repos.tools.create(
                Tool(
                    name=candidate.name,
                    description=candidate.description,
                    category_id=category.id,
                    website_url=candidate.website_url,
                    github_url=candidate.github_url,
                    pricing_model=PricingModel.freemium.value,
                    free_tier=True,
                    language=candidate.language,
                    submitted_by=submitted_by,
                    tags=list(candidate.tags),
                )
            )
            await repos.scores.create(ToolScore(tool_id=tool.id))
            existing.add(candidate.name.lower())
            created.append(tool)

        logger.info(f"Auto-submitted {len(created)} discovered tools")
        log_event("discovery.auto_submit", submitted=len(created))
        return created
