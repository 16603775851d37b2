"""
Tool repository.

Data access for catalog tools. Deleting a tool removes its score record and
reviews in the same transaction.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete as sa_delete
from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now_naive
from ..entities.reviews import Review
from ..entities.tool_scores import ToolScore
from ..entities.tools import Tool
from .base import BaseRepository, QueryBuilder


class ToolRepository(BaseRepository[Tool]):
    """Repository for tool data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Tool)

    async def create(self, tool: Tool) -> Tool:
        """Create a new tool.

        Args:
            tool: Tool SQLModel instance

        Returns:
            Persisted Tool with generated id
        """
        return await self._save(tool)

    async def get_by_id(self, tool_id: str | int) -> Optional[Tool]:
        stmt = select(Tool).where(Tool.id == tool_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_ids(self, tool_ids: Iterable[int]) -> List[Tool]:
        """Get tools by id. Order of the result is unspecified.

        Args:
            tool_ids: Tool ids

        Returns:
            Tools that exist; missing ids are simply absent
        """
        ids = list(tool_ids)
        if not ids:
            return []
        stmt = select(Tool).where(Tool.id.in_(ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_name(self, name: str) -> Optional[Tool]:
        """Get tool by name, case-insensitively."""
        stmt = select(Tool).where(func.lower(Tool.name) == name.lower())
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def existing_names(self) -> set[str]:
        """Lowercased names of every tool in the catalog."""
        result = await self.session.execute(select(Tool.name))
        return {row[0].lower() for row in result.all()}

    async def update(self, tool: Tool) -> Tool:
        tool.updated_at = utc_now_naive()
        return await self._save(tool)

    async def delete(self, tool_id: str | int) -> bool:
        """Delete a tool together with its score and reviews.

        Args:
            tool_id: Tool id to delete

        Returns:
            True if deleted, False if not found
        """
        tool = await self.get_by_id(tool_id)
        if tool is None:
            return False
        await self.session.execute(sa_delete(ToolScore).where(ToolScore.tool_id == tool_id))
        await self.session.execute(sa_delete(Review).where(Review.tool_id == tool_id))
        await self.session.delete(tool)
        await self._commit()
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Tool]:
        """List tools in creation order with optional equality filters.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (category_id, pricing_model, free_tier)

        Returns:
            List of Tool instances
        """
        stmt = select(Tool).order_by(Tool.created_at, Tool.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Tool, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def browse(
        self,
        category_id: Optional[int] = None,
        pricing: Optional[str] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Tool]:
        """List tools newest first for catalog browsing.

        Args:
            category_id: Restrict to one category
            pricing: A pricing model value, or ``free_tier`` for tools with a free tier
            search: Case-insensitive substring of name or description
            limit: Maximum records to return
            offset: Records to skip

        Returns:
            List of Tool instances
        """
        stmt = select(Tool).order_by(Tool.created_at.desc(), Tool.id.desc())
        if category_id is not None:
            stmt = stmt.where(Tool.category_id == category_id)
        if pricing == "free_tier":
            stmt = stmt.where(Tool.free_tier.is_(True))
        elif pricing:
            stmt = stmt.where(Tool.pricing_model == pricing)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(or_(func.lower(Tool.name).like(pattern), func.lower(Tool.description).like(pattern)))
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_in_category(self, category_id: int, exclude_id: Optional[int] = None) -> List[Tool]:
        """Tools of one category in creation order, optionally excluding one tool."""
        stmt = select(Tool).where(Tool.category_id == category_id).order_by(Tool.created_at, Tool.id)
        if exclude_id is not None:
            stmt = stmt.where(Tool.id != exclude_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_ids(self) -> List[int]:
        """Every tool id in creation order."""
        result = await self.session.execute(select(Tool.id).order_by(Tool.created_at, Tool.id))
        return [row[0] for row in result.all()]

    async def list_candidates(
        self,
        category_ids: Optional[Iterable[int]] = None,
        free_only: bool = False,
        paid_only: bool = False,
        limit: Optional[int] = None,
    ) -> List[Tool]:
        """Tools in creation order matching recommendation preferences.

        Args:
            category_ids: Restrict to these categories when non-empty
            free_only: Keep tools with a free tier or a free/open_source pricing model
            paid_only: Keep tools priced paid or freemium
            limit: Maximum records to return

        Returns:
            List of Tool instances
        """
        stmt = select(Tool).order_by(Tool.created_at, Tool.id)
        ids = list(category_ids or [])
        if ids:
            stmt = stmt.where(Tool.category_id.in_(ids))
        if free_only:
            stmt = stmt.where(or_(Tool.free_tier.is_(True), Tool.pricing_model.in_(["free", "open_source"])))
        elif paid_only:
            stmt = stmt.where(Tool.pricing_model.in_(["paid", "freemium"]))
        stmt = QueryBuilder.apply_pagination(stmt, limit, None)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
