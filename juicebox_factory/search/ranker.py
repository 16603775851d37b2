"""
Relevance scoring.

A tool's relevance is the sum of field boosts for every direct query term
found in one of its searchable fields, 0.7 times the field boost for every
related term, and its overall score times the popularity boost.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from juicebox_factory.core.models.io.search import BoostFactors, SearchResult
from juicebox_factory.core.models.io.tools import ToolRead

from .tokenizer import expand_query_semantics, tokenize_query

SEMANTIC_FACTOR = 0.7
DEFAULT_BOOSTS = BoostFactors()

# (field, boost attribute, reason template)
_FIELDS = (
    ("name", "name_match", 'Name contains "{term}"'),
    ("description", "description_match", 'Description mentions "{term}"'),
    ("category", "category_match", 'Category matches "{term}"'),
    ("tags", "tag_match", 'Tagged with "{term}"'),
)


def searchable_text(tool: ToolRead) -> Dict[str, str]:
    """Lowercased text of each searchable field."""
    return {
        "name": tool.name.lower(),
        "description": (tool.description or "").lower(),
        "category": (tool.category_name or "").lower(),
        "tags": " ".join(tool.tags).lower(),
    }


def relevance_score(
    tool: ToolRead,
    terms: Sequence[str],
    semantic_terms: Dict[str, List[str]],
    boosts: BoostFactors = DEFAULT_BOOSTS,
) -> float:
    text = searchable_text(tool)
    score = 0.0
    for term in terms:
        for field, boost, _ in _FIELDS:
            if term in text[field]:
                score += getattr(boosts, boost)
    for related in semantic_terms.values():
        for related_term in related:
            for field, boost, _ in _FIELDS:
                if related_term in text[field]:
                    score += getattr(boosts, boost) * SEMANTIC_FACTOR
    if tool.score is not None:
        score += tool.score.overall_score * boosts.popularity
    return score


def match_reasons(tool: ToolRead, terms: Sequence[str], semantic_terms: Dict[str, List[str]]) -> List[str]:
    """Human-readable reasons a tool matched, de-duplicated in first-seen order."""
    text = searchable_text(tool)
    reasons: List[str] = []
    for term in terms:
        for field, _, template in _FIELDS:
            if term in text[field]:
                reasons.append(template.format(term=term))
    for term, related in semantic_terms.items():
        for related_term in related:
            # Any field the score counts, including category and tags
            if any(related_term in text[field] for field, _, _ in _FIELDS):
                reasons.append(f'Related to "{term}" ({related_term})')
    return list(dict.fromkeys(reasons))


def rank_tools(
    tools: Sequence[ToolRead],
    query: str,
    boosts: Optional[BoostFactors] = None,
    limit: int = 20,
) -> List[SearchResult]:
    """Score ``tools`` against ``query`` and return the top ``limit``, most relevant first.

    Ties keep the input order. An empty candidate list yields an empty result.
    """
    terms = tokenize_query(query)
    semantic_terms = expand_query_semantics(terms)
    factors = boosts or DEFAULT_BOOSTS

    results = [
        SearchResult(
            **tool.model_dump(),
            relevance_score=relevance_score(tool, terms, semantic_terms, factors),
            match_reasons=match_reasons(tool, terms, semantic_terms),
        )
        for tool in tools
    ]
    results.sort(key=lambda result: result.relevance_score, reverse=True)
    return results[:limit]
