"""
Notification repositories.

Persisted notifications per user and the per-user preference row.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..base import utc_now_naive
from ..entities.notifications import Notification, NotificationPreferences
from .base import BaseRepository, QueryBuilder


class NotificationRepository(BaseRepository[Notification]):
    """Repository for notification data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Notification)

    async def create(self, notification: Notification) -> Notification:
        return await self._save(notification)

    async def create_many(self, notifications: List[Notification]) -> List[Notification]:
        """Persist several notifications in a single commit."""
        self.session.add_all(notifications)
        await self._commit()
        return notifications

    async def get_by_id(self, notification_id: str | int) -> Optional[Notification]:
        stmt = select(Notification).where(Notification.id == notification_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, notification: Notification) -> Notification:
        return await self._save(notification)

    async def delete(self, notification_id: str | int) -> bool:
        notification = await self.get_by_id(notification_id)
        if notification is None:
            return False
        await self.session.delete(notification)
        await self._commit()
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Notification]:
        """List notifications newest first.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (user_id, type, read)

        Returns:
            List of Notification instances
        """
        stmt = select(Notification).order_by(Notification.created_at.desc())
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Notification, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_unread(self, user_id: str) -> int:
        stmt = select(func.count()).select_from(Notification).where(
            Notification.user_id == user_id, Notification.read.is_(False)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def mark_all_read(self, user_id: str) -> int:
        """Mark every unread notification of ``user_id`` as read.

        Returns:
            Number of notifications updated
        """
        stmt = (
            update(Notification)
            .where(Notification.user_id == user_id, Notification.read.is_(False))
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self._commit()
        return result.rowcount or 0


class NotificationPreferencesRepository(BaseRepository[NotificationPreferences]):
    """Repository for per-user notification preferences."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, NotificationPreferences)

    async def create(self, preferences: NotificationPreferences) -> NotificationPreferences:
        return await self._save(preferences)

    async def get_by_id(self, user_id: str | int) -> Optional[NotificationPreferences]:
        stmt = select(NotificationPreferences).where(NotificationPreferences.user_id == str(user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, preferences: NotificationPreferences) -> NotificationPreferences:
        preferences.updated_at = utc_now_naive()
        return await self._save(preferences)

    async def upsert(self, user_id: str, values: Dict[str, bool]) -> NotificationPreferences:
        """Create or update the preference row of ``user_id``."""
        preferences = await self.get_by_id(user_id)
        if preferences is None:
            preferences = NotificationPreferences(user_id=user_id)
        for key, value in values.items():
            if value is not None and hasattr(preferences, key) and key not in ("user_id", "updated_at"):
                setattr(preferences, key, value)
        return await self.update(preferences)

    async def delete(self, user_id: str | int) -> bool:
        preferences = await self.get_by_id(user_id)
        if preferences is None:
            return False
        await self.session.delete(preferences)
        await self._commit()
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[NotificationPreferences]:
        stmt = select(NotificationPreferences).order_by(NotificationPreferences.user_id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, NotificationPreferences, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
