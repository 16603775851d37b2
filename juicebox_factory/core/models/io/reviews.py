"""Review I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReviewRead(BaseModel):
    """Schema for reading a review from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    tool_id: int
    user_id: str
    rating: int
    review_text: Optional[str] = None
    pros: Optional[str] = None
    cons: Optional[str] = None
    created_at: datetime


class ReviewCreate(BaseModel):
    """Schema for creating a review via the API."""

    tool_id: int = Field(description="Reviewed tool id")
    user_id: str = Field(min_length=1, max_length=128, description="Reviewing user id")
    rating: int = Field(ge=1, le=5, description="Star rating 1..5")
    review_text: Optional[str] = Field(default=None, description="Free-text review")
    pros: Optional[str] = None
    cons: Optional[str] = None
