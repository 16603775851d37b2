"""
Tool score entity.

One row per tool holding the four sub-scores and the derived overall score.
Rows are overwritten on every recomputation; no history is kept.
"""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Field

from ..base import Base, utc_now_naive


class ToolScore(Base, table=True):
    """Derived score record keyed by tool.

    Table: tool_scores
    """

    __tablename__ = "tool_scores"
    __table_args__ = ({"extend_existing": True},)

    tool_id: int = Field(foreign_key="tools.id", primary_key=True)

    accessibility_score: float = Field(default=3.0, ge=0.0, le=5.0)
    performance_score: float = Field(default=3.0, ge=0.0, le=5.0)
    innovation_score: float = Field(default=3.0, ge=0.0, le=5.0)
    enterprise_score: float = Field(default=3.0, ge=0.0, le=5.0)
    overall_score: float = Field(default=3.0, ge=0.0, le=5.0)

    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive})

    def __repr__(self) -> str:
        return f"ToolScore(tool_id={self.tool_id}, overall={self.overall_score})"
