"""
Review entity models.

A user may review a given tool at most once.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, utc_now_naive


class ReviewBase(Base):
    """Base fields for review."""

    tool_id: int = Field(foreign_key="tools.id", index=True)
    user_id: str = Field(max_length=128, index=True, description="Reviewing user id")
    rating: int = Field(ge=1, le=5, description="Star rating 1..5")
    review_text: Optional[str] = Field(default=None, description="Free-text review")
    pros: Optional[str] = Field(default=None, description="What the reviewer liked")
    cons: Optional[str] = Field(default=None, description="What the reviewer disliked")


class Review(ReviewBase, table=True):
    """User review of a tool.

    Table: reviews
    """

    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("tool_id", "user_id", name="uq_reviews_tool_user"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now_naive, index=True)

    def __repr__(self) -> str:
        return f"Review(id={self.id}, tool_id={self.tool_id}, rating={self.rating})"
