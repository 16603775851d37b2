"""Category I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryRead(BaseModel):
    """Schema for reading a category from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    color_theme: Optional[str] = None
    created_at: datetime


class CategoryCreate(BaseModel):
    """Schema for creating a category via the API."""

    name: str = Field(min_length=1, max_length=128, description="Unique category name")
    description: Optional[str] = Field(default=None, description="Category description")
    color_theme: Optional[str] = Field(default=None, max_length=32, description="Display color")


class CatalogSeedSummary(BaseModel):
    """Outcome of seeding a category and its tools."""

    category: CategoryRead
    category_created: bool = Field(description="False when the category already existed")
    created: List[str] = Field(default_factory=list, description="Names of the tools added")
    skipped: List[str] = Field(default_factory=list, description="Names of the tools already in the catalog")
