"""
Tool comparison.

- similarity: pairwise similarity and ranking of same-category candidates
- matrix: feature-by-tool comparison table with best-of picks
- engine: ``ComparisonEngine`` wiring both to the catalog, plus
  personalized recommendations
"""

from .engine import MAX_COMPARE, MIN_COMPARE, ComparisonEngine
from .matrix import build_comparison_matrix
from .similarity import rank_similar_tools, similarity_score

__all__ = [
    "MAX_COMPARE",
    "MIN_COMPARE",
    "ComparisonEngine",
    "build_comparison_matrix",
    "rank_similar_tools",
    "similarity_score",
]
