"""
Category repository.

Data access for tool categories, including lookups by unique name.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.categories import Category
from .base import BaseRepository, QueryBuilder


class CategoryRepository(BaseRepository[Category]):
    """Repository for category data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Category)

    async def create(self, category: Category) -> Category:
        return await self._save(category)

    async def get_by_id(self, category_id: str | int) -> Optional[Category]:
        stmt = select(Category).where(Category.id == category_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Category]:
        """Get category by name, case-insensitively.

        Args:
            name: Category name

        Returns:
            Category instance or None
        """
        stmt = select(Category).where(func.lower(Category.name) == name.lower())
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def update(self, category: Category) -> Category:
        return await self._save(category)

    async def delete(self, category_id: str | int) -> bool:
        category = await self.get_by_id(category_id)
        if category is None:
            return False
        await self.session.delete(category)
        await self._commit()
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Category]:
        """List categories ordered by name.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters

        Returns:
            List of Category instances
        """
        stmt = select(Category).order_by(Category.name)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Category, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def names_by_id(self) -> Dict[int, str]:
        """Map every category id to its name."""
        result = await self.session.execute(select(Category.id, Category.name))
        return {row[0]: row[1] for row in result.all()}
