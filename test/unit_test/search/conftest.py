"""Fixtures for search tests."""

from typing import Optional

import pytest

from juicebox_factory.core.models.io.scores import ScoreRead
from juicebox_factory.core.models.io.tools import ToolRead


def _tool_view(tool_id: int, name: str, overall: Optional[float] = None, **fields) -> ToolRead:
    score = None
    if overall is not None:
        score = ScoreRead(
            tool_id=tool_id,
            accessibility_score=3.0,
            performance_score=3.0,
            innovation_score=3.0,
            enterprise_score=3.0,
            overall_score=overall,
        )
    return ToolRead(id=tool_id, name=name, score=score, **fields)


@pytest.fixture
def tool_view():
    """Builder for in-memory ``ToolRead`` objects with an optional overall score."""
    return _tool_view
