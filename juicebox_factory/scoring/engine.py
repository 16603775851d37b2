"""
Score aggregator.

``ToolScoringEngine`` runs the metric calculators for a tool, combines them
into the overall score and upserts the result. ``score_all_tools`` walks the
catalog sequentially with a fixed pause between tools.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Callable, Optional

from juicebox_factory.core.database.entities.tool_scores import ToolScore
from juicebox_factory.core.database.repositories import SqlRepoBundle
from juicebox_factory.core.errors import NotFoundError
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.io.scores import ScoreRecomputeSummary
from juicebox_factory.core.monitoring import log_event

from .metrics import (
    calculate_accessibility_score,
    calculate_enterprise_score,
    calculate_innovation_score,
    calculate_overall_score,
    calculate_performance_score,
    round_half_up,
)

logger = get_logger(__name__)


class ToolScoringEngine:
    """Computes and persists tool scores."""

    def __init__(
        self,
        repos: SqlRepoBundle,
        batch_delay: float = 0.1,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Args:
            repos: Repository bundle sharing one session
            batch_delay: Seconds to pause between tools in ``score_all_tools``
            clock: Returns "now" for tool age; defaults to the wall clock
        """
        self.repos = repos
        self.batch_delay = batch_delay
        self.clock = clock

    async def score_tool(self, tool_id: int) -> ToolScore:
        """
        Compute, persist and return the score of one tool.

        Raises:
            NotFoundError: The tool does not exist
            UpstreamError: The score row could not be written
        """
        tool = await self.repos.tools.get_by_id(tool_id)
        if tool is None:
            raise NotFoundError("Tool", tool_id)

        ratings = await self.repos.reviews.ratings_for_tool(tool_id)
        average_rating = sum(ratings) / len(ratings) if ratings else None
        now = self.clock() if self.clock else None

        accessibility = calculate_accessibility_score(tool)
        performance = calculate_performance_score(tool, average_rating, now)
        innovation = calculate_innovation_score(tool, now)
        enterprise = calculate_enterprise_score(tool)
        overall = calculate_overall_score(accessibility, performance, innovation, enterprise)

        values = {
            "accessibility_score": round_half_up(accessibility),
            "performance_score": round_half_up(performance),
            "innovation_score": round_half_up(innovation),
            "enterprise_score": round_half_up(enterprise),
            "overall_score": round_half_up(overall),
        }
        score = await self.repos.scores.upsert(tool_id, values)
        logger.debug(f"Scored tool {tool_id}: {values}")
        log_event("Tool scored", tool_id=tool_id, overall_score=values["overall_score"])
        return score

    async def score_all_tools(self, delay: Optional[float] = None) -> ScoreRecomputeSummary:
        """
        Rescore every tool one at a time.

        A failure on one tool is logged and recorded; the batch continues.

        Args:
            delay: Pause between tools in seconds; defaults to ``batch_delay``

        Returns:
            Summary with total, scored count and the ids that failed
        """
        pause = self.batch_delay if delay is None else delay
        tool_ids = await self.repos.tools.list_ids()
        logger.info(f"Rescoring {len(tool_ids)} tools")

        scored = 0
        failed: list[int] = []
        for index, tool_id in enumerate(tool_ids):
            if index > 0 and pause > 0:
                await asyncio.sleep(pause)
            try:
                await self.score_tool(tool_id)
                scored += 1
            except Exception as e:
                logger.error(f"Failed to score tool {tool_id}: {e}", exc_info=True)
                failed.append(tool_id)

        logger.info(f"Rescoring finished: {scored} scored, {len(failed)} failed")
        return ScoreRecomputeSummary(total=len(tool_ids), scored=scored, failed=failed)
