"""
Category entity models.

Categories group tools by purpose (Web Development, Testing & QA, ...).
Category names are unique.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now_naive


class CategoryBase(Base):
    """Base fields for category."""

    name: str = Field(max_length=128, unique=True, index=True, description="Category name")
    description: Optional[str] = Field(default=None, description="Category description")
    color_theme: Optional[str] = Field(default=None, max_length=32, description="Display color")


class Category(CategoryBase, table=True):
    """Tool category.

    Table: categories
    """

    __tablename__ = "categories"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now_naive)

    def __repr__(self) -> str:
        return f"Category(id={self.id}, name={self.name})"
