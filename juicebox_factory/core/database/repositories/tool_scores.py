"""
Tool score repository.

Score rows are keyed by tool id and written with upsert semantics.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now_naive
from ..entities.tool_scores import ToolScore
from .base import BaseRepository, QueryBuilder

SCORE_FIELDS = (
    "accessibility_score",
    "performance_score",
    "innovation_score",
    "enterprise_score",
    "overall_score",
)


class ToolScoreRepository(BaseRepository[ToolScore]):
    """Repository for tool score data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ToolScore)

    async def create(self, score: ToolScore) -> ToolScore:
        return await self._save(score)

    async def get_by_id(self, tool_id: str | int) -> Optional[ToolScore]:
        stmt = select(ToolScore).where(ToolScore.tool_id == tool_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_many(self, tool_ids: Iterable[int]) -> Dict[int, ToolScore]:
        """Score rows for the given tools keyed by tool id; tools without a row are absent."""
        ids = list(tool_ids)
        if not ids:
            return {}
        stmt = select(ToolScore).where(ToolScore.tool_id.in_(ids))
        result = await self.session.execute(stmt)
        return {score.tool_id: score for score in result.scalars().all()}

    async def upsert(self, tool_id: int, values: Dict[str, float]) -> ToolScore:
        """Insert or overwrite the score row of ``tool_id``.

        Args:
            tool_id: Tool id
            values: Mapping of score field name to value

        Returns:
            The persisted ToolScore
        """
        score = await self.get_by_id(tool_id)
        if score is None:
            score = ToolScore(tool_id=tool_id)
        for field in SCORE_FIELDS:
            if field in values:
                setattr(score, field, values[field])
        score.updated_at = utc_now_naive()
        return await self._save(score)

    async def update(self, score: ToolScore) -> ToolScore:
        score.updated_at = utc_now_naive()
        return await self._save(score)

    async def delete(self, tool_id: str | int) -> bool:
        score = await self.get_by_id(tool_id)
        if score is None:
            return False
        await self.session.delete(score)
        await self._commit()
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[ToolScore]:
        stmt = select(ToolScore).order_by(ToolScore.overall_score.desc())
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, ToolScore, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
