"""
Keyword/semantic search over the tool catalog.

- tokenizer: query tokenization and synonym expansion
- filters: candidate filtering before ranking
- ranker: relevance scoring and match reasons
- service: ``SearchService`` tying the above to the catalog
"""

from .filters import apply_filters
from .ranker import DEFAULT_BOOSTS, SEMANTIC_FACTOR, match_reasons, rank_tools, relevance_score
from .service import SUGGESTIONS, TRENDING_SEARCHES, SearchService
from .tokenizer import STOP_WORDS, SYNONYMS, expand_query_semantics, tokenize_query

__all__ = [
    "DEFAULT_BOOSTS",
    "SEMANTIC_FACTOR",
    "STOP_WORDS",
    "SUGGESTIONS",
    "SYNONYMS",
    "TRENDING_SEARCHES",
    "SearchService",
    "apply_filters",
    "expand_query_semantics",
    "match_reasons",
    "rank_tools",
    "relevance_score",
    "tokenize_query",
]
