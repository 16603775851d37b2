"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, for services and API endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .categories import CategoryRepository
from .notifications import NotificationPreferencesRepository, NotificationRepository
from .reviews import ReviewRepository
from .tool_scores import ToolScoreRepository
from .tools import ToolRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    categories: CategoryRepository
    tools: ToolRepository
    scores: ToolScoreRepository
    reviews: ReviewRepository
    notifications: NotificationRepository
    preferences: NotificationPreferencesRepository


def build_sql_repos(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        categories=CategoryRepository(session),
        tools=ToolRepository(session),
        scores=ToolScoreRepository(session),
        reviews=ReviewRepository(session),
        notifications=NotificationRepository(session),
        preferences=NotificationPreferencesRepository(session),
    )
