"""
Catalog views.

Joins tool rows with their score records and category names into
``ToolRead`` objects, the in-memory shape the ranking engines work on.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from juicebox_factory.core.database.entities.tools import Tool
from juicebox_factory.core.database.repositories import SqlRepoBundle
from juicebox_factory.core.models.io.tools import ToolRead


async def load_tool_views(
    repos: SqlRepoBundle,
    tools: Sequence[Tool],
    category_names: Optional[Dict[int, str]] = None,
) -> List[ToolRead]:
    """Hydrate ``tools`` with score and category name, preserving order."""
    if not tools:
        return []
    scores = await repos.scores.get_many(tool.id for tool in tools)
    names = category_names if category_names is not None else await repos.categories.names_by_id()
    return [
        ToolRead.from_entity(tool, scores.get(tool.id), names.get(tool.category_id) if tool.category_id else None)
        for tool in tools
    ]
