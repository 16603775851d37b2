"""
Database repositories.

One repository per table, all built on ``BaseRepository`` and sharing a
session through ``SqlRepoBundle``.
"""

from .base import BaseRepository, QueryBuilder
from .bundle import SqlRepoBundle, build_sql_repos
from .categories import CategoryRepository
from .notifications import NotificationPreferencesRepository, NotificationRepository
from .reviews import ReviewRepository
from .tool_scores import SCORE_FIELDS, ToolScoreRepository
from .tools import ToolRepository

__all__ = [
    "SCORE_FIELDS",
    "BaseRepository",
    "CategoryRepository",
    "NotificationPreferencesRepository",
    "NotificationRepository",
    "QueryBuilder",
    "ReviewRepository",
    "SqlRepoBundle",
    "ToolRepository",
    "ToolScoreRepository",
    "build_sql_repos",
]
