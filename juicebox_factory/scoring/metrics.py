"""
Metric calculators.

Pure functions mapping a tool record (and optionally its average review
rating) to the four sub-scores. Every calculator starts from a base value,
adds fixed bonuses for observable facts about the tool and caps the result
at ``MAX_SCORE``. None of them touch I/O or raise.

A "tool" here is any object exposing ``pricing_model``, ``free_tier``,
``github_url``, ``website_url`` and ``created_at``; ORM entities and I/O
models both qualify.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Optional

MAX_SCORE = 5.0
OVERALL_WEIGHT = 0.25
DAYS_PER_YEAR = 365


def _pricing(tool: Any) -> str:
    value = getattr(tool, "pricing_model", None)
    return getattr(value, "value", value) or "unknown"


def _naive_utc(moment: datetime) -> datetime:
    if moment.tzinfo is not None:
        return moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def round_half_up(value: float, places: int = 2) -> float:
    """Round half away from zero on the decimal scale, e.g. 3.125 -> 3.13."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def tool_age_years(tool: Any, now: Optional[datetime] = None) -> Optional[float]:
    """Age of ``tool`` in 365-day years, or None when it has no creation timestamp."""
    created_at = getattr(tool, "created_at", None)
    if created_at is None:
        return None
    current = _naive_utc(now) if now is not None else datetime.now(timezone.utc).replace(tzinfo=None)
    return (current - _naive_utc(created_at)).total_seconds() / (DAYS_PER_YEAR * 24 * 3600)


def calculate_accessibility_score(tool: Any) -> float:
    """How easy the tool is to start using."""
    pricing = _pricing(tool)
    score = 2.0
    if getattr(tool, "free_tier", False) or pricing in ("free", "open_source"):
        score += 1.5
    if getattr(tool, "github_url", None):
        score += 1.0
    if pricing == "freemium":
        score += 0.5
    return min(score, MAX_SCORE)


def calculate_performance_score(
    tool: Any,
    average_rating: Optional[float] = None,
    now: Optional[datetime] = None,
) -> float:
    """Perceived quality; blended with the average review rating when one exists."""
    score = 3.0
    if getattr(tool, "github_url", None):
        score += 0.5
    age = tool_age_years(tool, now)
    if age is not None and age < 1:
        score += 0.3
    if average_rating is not None:
        score = (score + average_rating) / 2
    return min(score, MAX_SCORE)


def calculate_innovation_score(tool: Any, now: Optional[datetime] = None) -> float:
    """Openness and freshness of the tool."""
    score = 2.5
    if _pricing(tool) == "open_source":
        score += 1.0
    if getattr(tool, "github_url", None):
        score += 0.8
    age = tool_age_years(tool, now)
    if age is not None and age < 2:
        score += 0.7
    return min(score, MAX_SCORE)


def calculate_enterprise_score(tool: Any) -> float:
    """Commercial backing and presence."""
    score = 2.0
    if _pricing(tool) in ("paid", "freemium"):
        score += 1.5
    if getattr(tool, "website_url", None):
        score += 0.8
    if getattr(tool, "github_url", None):
        score += 0.7
    return min(score, MAX_SCORE)


def calculate_overall_score(accessibility: float, performance: float, innovation: float, enterprise: float) -> float:
    """Equal-weight combination of the four sub-scores."""
    return (accessibility + performance + innovation + enterprise) * OVERALL_WEIGHT
