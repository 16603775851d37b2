"""Fixtures for comparison tests."""

from typing import Optional

import pytest

from juicebox_factory.core.models.io.scores import ScoreRead
from juicebox_factory.core.models.io.tools import ToolRead


def _tool_view(
    tool_id: int,
    overall: Optional[float] = None,
    accessibility: float = 3.0,
    innovation: float = 3.0,
    **fields,
) -> ToolRead:
    score = None
    if overall is not None:
        score = ScoreRead(
            tool_id=tool_id,
            accessibility_score=accessibility,
            performance_score=3.0,
            innovation_score=innovation,
            enterprise_score=3.0,
            overall_score=overall,
        )
    return ToolRead(id=tool_id, name=fields.pop("name", f"tool-{tool_id}"), score=score, **fields)


@pytest.fixture
def tool_view():
    """Builder for in-memory ``ToolRead`` objects with an optional score."""
    return _tool_view
