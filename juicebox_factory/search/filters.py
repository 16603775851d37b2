"""Candidate filtering applied before ranking."""

from __future__ import annotations

from typing import List, Sequence

from juicebox_factory.core.models.io.search import SearchFilters
from juicebox_factory.core.models.io.tools import ToolRead


def _matches_category(tool: ToolRead, wanted: Sequence[str]) -> bool:
    keys = {str(tool.category_id)} if tool.category_id is not None else set()
    if tool.category_name:
        keys.add(tool.category_name.lower())
    return any(value.lower() in keys for value in wanted)


def _passes(tool: ToolRead, filters: SearchFilters) -> bool:
    if filters.categories and not _matches_category(tool, filters.categories):
        return False
    if filters.pricing_models and tool.pricing_model not in filters.pricing_models:
        return False
    if filters.free_tier is not None and tool.free_tier != filters.free_tier:
        return False
    if filters.min_score is not None:
        overall = tool.score.overall_score if tool.score else 0.0
        if overall < filters.min_score:
            return False
    if filters.has_github is not None and bool(tool.github_url) != filters.has_github:
        return False
    if filters.languages:
        languages = {language.lower() for language in filters.languages}
        if not tool.language or tool.language.lower() not in languages:
            return False
    if filters.tags:
        tool_tags = {tag.lower() for tag in tool.tags}
        if not any(tag.lower() in tool_tags for tag in filters.tags):
            return False
    return True


def apply_filters(tools: Sequence[ToolRead], filters: SearchFilters | None) -> List[ToolRead]:
    """Keep the tools passing every set filter, in input order.

    Categories match by id or case-insensitive name; tags match when any
    requested tag is present.
    """
    if filters is None:
        return list(tools)
    return [tool for tool in tools if _passes(tool, filters)]
