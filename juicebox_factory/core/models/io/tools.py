"""
Tool I/O models for API requests and responses.

``ToolRead`` optionally embeds the category name and score record so list
and detail endpoints can return a tool in one object.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from juicebox_factory.core.models.domain.enums import PricingModel

from .scores import ScoreRead


class ToolRead(BaseModel):
    """Schema for reading a tool from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    website_url: Optional[str] = None
    github_url: Optional[str] = None
    logo_url: Optional[str] = None
    pricing_model: PricingModel = PricingModel.unknown
    free_tier: bool = False
    language: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    submitted_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    score: Optional[ScoreRead] = None

    @classmethod
    def from_entity(cls, tool: Any, score: Any = None, category_name: Optional[str] = None) -> "ToolRead":
        """Build from a Tool entity plus its optional score row and category name."""
        read = cls.model_validate(tool)
        updates: dict[str, Any] = {}
        if score is not None:
            updates["score"] = ScoreRead.model_validate(score)
        if category_name is not None:
            updates["category_name"] = category_name
        return read.model_copy(update=updates) if updates else read


class ToolCreate(BaseModel):
    """Schema for creating a tool via the API."""

    name: str = Field(min_length=1, max_length=255, description="Tool name")
    description: Optional[str] = Field(default=None, description="Tool description")
    category_id: Optional[int] = Field(default=None, description="Category id")
    website_url: Optional[str] = Field(default=None, description="Tool website")
    github_url: Optional[str] = Field(default=None, description="Source repository URL")
    logo_url: Optional[str] = Field(default=None, description="Logo image URL")
    pricing_model: PricingModel = Field(default=PricingModel.unknown, description="Pricing model")
    free_tier: bool = Field(default=False, description="Whether a free tier exists")
    language: Optional[str] = Field(default=None, description="Primary language")
    tags: List[str] = Field(default_factory=list, description="Free-form tags")
    submitted_by: Optional[str] = Field(default=None, description="Submitting user id")


class ToolUpdate(BaseModel):
    """Schema for partially updating a tool via the API."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    category_id: Optional[int] = None
    website_url: Optional[str] = None
    github_url: Optional[str] = None
    logo_url: Optional[str] = None
    pricing_model: Optional[PricingModel] = None
    free_tier: Optional[bool] = None
    language: Optional[str] = None
    tags: Optional[List[str]] = None

    @field_validator("name", "pricing_model", "free_tier", "tags")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # Omit a field to keep it; these columns cannot be cleared
        if value is None:
            raise ValueError("may be omitted but not set to null")
        return value
