"""
Similarity ranker.

Similarity between two tools is the sum of:

- 0.3 when the pricing models are equal
- 0.2 when the free-tier flags are equal
- 0.1 when both or neither have a source repository link
- up to 0.4 for close overall scores, only when both tools carry a score

The result lies in [0, 1].
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from juicebox_factory.core.models.io.tools import ToolRead

PRICING_WEIGHT = 0.3
FREE_TIER_WEIGHT = 0.2
GITHUB_WEIGHT = 0.1
SCORE_WEIGHT = 0.4
SCORE_RANGE = 5.0


def similarity_score(a: ToolRead, b: ToolRead) -> float:
    score = 0.0
    if a.pricing_model == b.pricing_model:
        score += PRICING_WEIGHT
    if a.free_tier == b.free_tier:
        score += FREE_TIER_WEIGHT
    if bool(a.github_url) == bool(b.github_url):
        score += GITHUB_WEIGHT
    if a.score is not None and b.score is not None:
        diff = abs(a.score.overall_score - b.score.overall_score)
        score += max(0.0, SCORE_WEIGHT - diff / SCORE_RANGE * SCORE_WEIGHT)
    return score


def rank_similar_tools(reference: ToolRead, candidates: Sequence[ToolRead]) -> List[Tuple[ToolRead, float]]:
    """Pair each candidate with its similarity to ``reference``, most similar first.

    Ties keep the input order.
    """
    scored = [(candidate, similarity_score(reference, candidate)) for candidate in candidates]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)
