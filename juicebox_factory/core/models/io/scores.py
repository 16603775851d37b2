"""Score I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScoreRead(BaseModel):
    """Schema for reading a tool's score record."""

    model_config = ConfigDict(from_attributes=True)

    tool_id: int
    accessibility_score: float = Field(ge=0.0, le=5.0)
    performance_score: float = Field(ge=0.0, le=5.0)
    innovation_score: float = Field(ge=0.0, le=5.0)
    enterprise_score: float = Field(ge=0.0, le=5.0)
    overall_score: float = Field(ge=0.0, le=5.0)
    updated_at: Optional[datetime] = None


class ScoreRecomputeSummary(BaseModel):
    """Outcome of rescoring the whole catalog."""

    total: int = Field(description="Tools considered")
    scored: int = Field(description="Tools scored successfully")
    failed: List[int] = Field(default_factory=list, description="Ids of tools that failed to score")
