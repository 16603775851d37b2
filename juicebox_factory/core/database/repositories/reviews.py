"""
Review repository.

Data access for tool reviews, including the per-(tool, user) lookup used to
reject duplicate reviews and rating aggregation for the score aggregator.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.reviews import Review
from ..entities.tools import Tool
from .base import BaseRepository, QueryBuilder


class ReviewRepository(BaseRepository[Review]):
    """Repository for review data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Review)

    async def create(self, review: Review) -> Review:
        return await self._save(review)

    async def get_by_id(self, review_id: str | int) -> Optional[Review]:
        stmt = select(Review).where(Review.id == review_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_tool_and_user(self, tool_id: int, user_id: str) -> Optional[Review]:
        """Get the review ``user_id`` wrote for ``tool_id``, if any."""
        stmt = select(Review).where(Review.tool_id == tool_id, Review.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, review: Review) -> Review:
        return await self._save(review)

    async def delete(self, review_id: str | int) -> bool:
        review = await self.get_by_id(review_id)
        if review is None:
            return False
        await self.session.delete(review)
        await self._commit()
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Review]:
        """List reviews newest first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (tool_id, user_id)

        Returns:
            List of Review instances
        """
        stmt = select(Review).order_by(Review.created_at.desc(), Review.id.desc())
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Review, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def ratings_for_tool(self, tool_id: int) -> List[int]:
        """All ratings given to ``tool_id``."""
        result = await self.session.execute(select(Review.rating).where(Review.tool_id == tool_id))
        return [row[0] for row in result.all()]

    async def reviewer_ids_in_category(self, category_id: int) -> List[str]:
        """Distinct ids of users who reviewed any tool of ``category_id``, sorted."""
        stmt = (
            select(Review.user_id)
            .join(Tool, Tool.id == Review.tool_id)
            .where(Tool.category_id == category_id)
            .distinct()
            .order_by(Review.user_id)
        )
        result = await self.session.execute(stmt)
        return [row[0] for row in result.all()]
