"""
Comparison matrix builder.

Turns an ordered list of tools into feature rows (one value per tool) and
four best-of picks. Picks are a first-wins fold in input order: a later tool
replaces the current best only when strictly greater.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Union

from juicebox_factory.core.models.domain.enums import PricingModel
from juicebox_factory.core.models.io.comparison import (
    ComparisonMatrix,
    ComparisonRecommendations,
    FeatureRow,
)
from juicebox_factory.core.models.io.tools import ToolRead

FeatureValue = Union[str, float]


def _score(field: str) -> Callable[[ToolRead], float]:
    def read(tool: ToolRead) -> float:
        return getattr(tool.score, field) if tool.score is not None else 0.0

    return read


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


FEATURES: List[tuple[str, Callable[[ToolRead], FeatureValue]]] = [
    ("Pricing Model", lambda tool: "Unknown" if tool.pricing_model == PricingModel.unknown else tool.pricing_model.value),
    ("Free Tier", lambda tool: _yes_no(tool.free_tier)),
    ("GitHub Available", lambda tool: _yes_no(bool(tool.github_url))),
    ("Overall Score", _score("overall_score")),
    ("Accessibility Score", _score("accessibility_score")),
    ("Performance Score", _score("performance_score")),
    ("Innovation Score", _score("innovation_score")),
    ("Enterprise Score", _score("enterprise_score")),
]


def _best(tools: Sequence[ToolRead], key: Callable[[ToolRead], float]) -> ToolRead:
    best = tools[0]
    for tool in tools[1:]:
        if key(tool) > key(best):
            best = tool
    return best


def _is_value_pick(tool: ToolRead) -> bool:
    return tool.free_tier or tool.pricing_model.value == "free"


def build_comparison_matrix(tools: Sequence[ToolRead]) -> ComparisonMatrix:
    """
    Build the comparison matrix for ``tools`` in the given order.

    ``best_value`` considers only tools with a free tier or free pricing and
    falls back to the first tool when none qualify.

    Raises:
        ValueError: ``tools`` is empty
    """
    if not tools:
        raise ValueError("At least one tool is required to build a comparison matrix")

    features = [
        FeatureRow(feature=name, values={tool.id: extract(tool) for tool in tools}) for name, extract in FEATURES
    ]

    overall = _score("overall_score")
    value_candidates = [tool for tool in tools if _is_value_pick(tool)]
    recommendations = ComparisonRecommendations(
        best_overall=_best(tools, overall).id,
        best_value=_best(value_candidates, overall).id if value_candidates else tools[0].id,
        most_innovative=_best(tools, _score("innovation_score")).id,
        most_accessible=_best(tools, _score("accessibility_score")).id,
    )
    return ComparisonMatrix(tools=list(tools), features=features, recommendations=recommendations)
