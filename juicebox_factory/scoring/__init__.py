"""
Heuristic tool scoring.

- metrics: the four pure sub-score calculators
- engine: ``ToolScoringEngine`` aggregating sub-scores and persisting them
"""

from .engine import ToolScoringEngine
from .metrics import (
    MAX_SCORE,
    OVERALL_WEIGHT,
    calculate_accessibility_score,
    calculate_enterprise_score,
    calculate_innovation_score,
    calculate_overall_score,
    calculate_performance_score,
    round_half_up,
    tool_age_years,
)

__all__ = [
    "MAX_SCORE",
    "OVERALL_WEIGHT",
    "ToolScoringEngine",
    "calculate_accessibility_score",
    "calculate_enterprise_score",
    "calculate_innovation_score",
    "calculate_overall_score",
    "calculate_performance_score",
    "round_half_up",
    "tool_age_years",
]
