"""Query tokenization and synonym expansion."""

from __future__ import annotations

import re
from typing import Dict, List, Sequence

STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "is", "are", "was", "were", "be", "been", "being",
    }
)

SYNONYMS: Dict[str, List[str]] = {
    "javascript": ["js", "node", "nodejs", "react", "vue", "angular"],
    "typescript": ["ts", "javascript", "js"],
    "react": ["reactjs", "jsx", "javascript", "frontend"],
    "vue": ["vuejs", "javascript", "frontend"],
    "angular": ["angularjs", "typescript", "frontend"],
    "python": ["py", "django", "flask", "fastapi"],
    "ai": ["artificial intelligence", "machine learning", "ml", "deep learning"],
    "ml": ["machine learning", "ai", "artificial intelligence"],
    "database": ["db", "sql", "nosql", "mongodb", "postgresql"],
    "api": ["rest", "graphql", "endpoint", "service"],
    "frontend": ["ui", "ux", "client", "browser"],
    "backend": ["server", "api", "service"],
    "mobile": ["ios", "android", "app", "smartphone"],
    "design": ["ui", "ux", "graphics", "visual"],
    "testing": ["test", "qa", "quality", "automation"],
    "devops": ["deployment", "ci", "cd", "docker", "kubernetes"],
    "analytics": ["data", "metrics", "tracking", "insights"],
    "productivity": ["efficiency", "workflow", "automation", "tools"],
}

MIN_TOKEN_LENGTH = 3

_NON_WORD = re.compile(r"[^\w\s-]", re.ASCII)


def tokenize_query(query: str) -> List[str]:
    """
    Split a free-text query into search terms.

    Lowercases, replaces punctuation with spaces, splits on whitespace and
    drops short tokens and stop words. Duplicates are kept.
    """
    cleaned = _NON_WORD.sub(" ", query.lower())
    return [term for term in cleaned.split() if len(term) >= MIN_TOKEN_LENGTH and term not in STOP_WORDS]


def expand_query_semantics(terms: Sequence[str]) -> Dict[str, List[str]]:
    """Map each distinct term, in first-seen order, to its related terms."""
    return {term: list(SYNONYMS.get(term, [])) for term in dict.fromkeys(terms)}
