"""
Tool entity models.

A tool is one catalog entry: a developer tool with its links, pricing
information and free-form tags.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlmodel import JSON, Field

from ..base import Base, utc_now_naive


class ToolBase(Base):
    """Base fields for tool."""

    name: str = Field(max_length=255, index=True, description="Tool name")
    description: Optional[str] = Field(default=None, description="Tool description")
    category_id: Optional[int] = Field(default=None, foreign_key="categories.id", index=True)
    website_url: Optional[str] = Field(default=None, description="Tool website")
    github_url: Optional[str] = Field(default=None, description="Source repository URL")
    logo_url: Optional[str] = Field(default=None, description="Logo image URL")
    pricing_model: str = Field(default="unknown", max_length=32, description="Pricing model value")
    free_tier: bool = Field(default=False, description="Whether a free tier exists")
    language: Optional[str] = Field(default=None, max_length=64, description="Primary language")
    submitted_by: Optional[str] = Field(default=None, max_length=128, description="Submitting user id")


class Tool(ToolBase, table=True):
    """Catalog tool.

    Table: tools
    """

    __tablename__ = "tools"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    tags: List[str] = Field(default_factory=list, sa_type=JSON)

    # Timestamps
    created_at: Optional[datetime] = Field(default_factory=utc_now_naive, index=True)
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive})

    @property
    def has_github(self) -> bool:
        return bool(self.github_url)

    def __repr__(self) -> str:
        return f"Tool(id={self.id}, name={self.name}, pricing={self.pricing_model})"
