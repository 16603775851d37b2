"""
Discovery heuristics.

Confidence scores estimate how likely a discovered project is a real,
maintained developer tool. Trending scores map raw popularity onto 0..100
on a log scale.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional, Tuple

from juicebox_factory.core.models.io.discovery import GitHubRepository, NpmPackage

DEFAULT_CATEGORY = "Web Development"

CATEGORY_TOPICS: Dict[str, Tuple[str, ...]] = {
    "Web Development": ("react", "vue", "angular", "frontend", "backend", "fullstack", "web"),
    "Testing & QA": ("testing", "test", "e2e", "unit", "integration", "automation"),
    "DevOps & Infrastructure": ("docker", "kubernetes", "ci", "cd", "deployment", "infrastructure"),
    "Database & Storage": ("database", "sql", "nosql", "orm", "prisma", "mongodb"),
    "Design & Prototyping": ("design", "ui", "ux", "components", "tailwind", "css"),
    "AI & Machine Learning": ("ai", "ml", "machine-learning", "tensorflow", "pytorch"),
    "Mobile Development": ("mobile", "ios", "android", "react-native", "flutter"),
}

# Popularity at which the trending score saturates at 100
STAR_SATURATION = 100_000
DOWNLOAD_SATURATION = 100_000_000


def categorize_from_topics(topics: Iterable[str]) -> str:
    """First category (in map order) sharing a topic with ``topics``."""
    lowered = {topic.lower() for topic in topics}
    for category, keywords in CATEGORY_TOPICS.items():
        if lowered.intersection(keywords):
            return category
    return DEFAULT_CATEGORY


def _days_since(moment: Optional[datetime], now: datetime) -> Optional[float]:
    if moment is None:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now - moment).total_seconds() / 86400


def calculate_github_confidence(repo: GitHubRepository, now: Optional[datetime] = None) -> float:
    current = now or datetime.now(timezone.utc)
    score = min(repo.stargazers_count / 10_000, 0.4)

    days = _days_since(repo.updated_at, current)
    if days is not None and days < 30:
        score += 0.3
    elif days is not None and days < 90:
        score += 0.2
    else:
        score += 0.1

    if repo.description:
        score += 0.2
    if repo.topics:
        score += 0.1
    return min(score, 1.0)


def calculate_npm_confidence(package: NpmPackage) -> float:
    score = min(package.weekly_downloads / 1_000_000, 0.4)
    if package.homepage:
        score += 0.2
    if package.repository_url:
        score += 0.2
    if package.keywords:
        score += 0.1
    if package.description:
        score += 0.1
    return min(score, 1.0)


def trending_score(popularity: Optional[int], saturation: int) -> float:
    """Log-scaled popularity in [0, 100]."""
    if not popularity or popularity <= 0:
        return 0.0
    return min(100.0, 100.0 * math.log10(1 + popularity) / math.log10(1 + saturation))


def normalize_repository_url(url: Optional[str]) -> Optional[str]:
    """Strip the ``git+`` prefix and ``.git`` suffix NPM uses for repository URLs."""
    if not url:
        return None
    if url.startswith("git+"):
        url = url[len("git+"):]
    if url.endswith(".git"):
        url = url[: -len(".git")]
    return url
