"""
Notification service.

Persists notifications, pushes them to live subscribers and turns tool
lifecycle events into notifications for the users concerned.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from juicebox_factory.core.database.entities.notifications import Notification, NotificationPreferences
from juicebox_factory.core.database.repositories.bundle import SqlRepoBundle
from juicebox_factory.core.errors import NotFoundError
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.domain.enums import NotificationType, ToolEvent
from juicebox_factory.core.models.io.notifications import (
    BulkNotificationCreate,
    NotificationCreate,
    NotificationPreferencesUpdate,
    NotificationRead,
)
from juicebox_factory.core.monitoring import log_event

from .broker import NotificationBroker, user_topic

logger = get_logger(__name__)

DEFAULT_LIST_LIMIT = 50


class NotificationService:
    """Notification operations for one request scope."""

    def __init__(self, repos: SqlRepoBundle, broker: NotificationBroker) -> None:
        self.repos = repos
        self.broker = broker

    async def _publish(self, notification: Notification) -> None:
        payload = NotificationRead.model_validate(notification).model_dump(mode="json")
        delivered = await self.broker.publish(user_topic(notification.user_id), payload)
        logger.debug(f"Notification {notification.id} delivered to {delivered} live subscribers")

    async def send_notification(self, request: NotificationCreate) -> Notification:
        """Persist a notification, then push it to the user's live subscribers."""
        notification = await self.repos.notifications.create(
            Notification(
                user_id=request.user_id,
                type=request.type.value,
                title=request.title,
                message=request.message,
                data=dict(request.data),
                expires_at=request.expires_at,
            )
        )
        await self._publish(notification)
        log_event("notification.sent", type=notification.type)
        return notification

    async def send_bulk_notifications(self, request: BulkNotificationCreate) -> List[Notification]:
        """Send the same notification to every user in ``request.user_ids``."""
        notifications = await self.repos.notifications.create_many(
            [
                Notification(
                    user_id=user_id,
                    type=request.type.value,
                    title=request.title,
                    message=request.message,
                    data=dict(request.data),
                )
                for user_id in request.user_ids
            ]
        )
        for notification in notifications:
            await self._publish(notification)
        log_event("notification.bulk_sent", type=request.type.value, recipients=len(notifications))
        return notifications

    async def get_notifications(
        self,
        user_id: str,
        limit: int = DEFAULT_LIST_LIMIT,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
    ) -> List[Notification]:
        filters: Dict[str, Any] = {"user_id": user_id}
        if unread_only:
            filters["read"] = False
        if type is not None:
            filters["type"] = type.value
        return await self.repos.notifications.list(limit=limit, filters=filters)

    async def get_unread_count(self, user_id: str) -> int:
        return await self.repos.notifications.count_unread(user_id)

    async def _owned(self, notification_id: str, user_id: str) -> Notification:
        notification = await self.repos.notifications.get_by_id(notification_id)
        if notification is None or notification.user_id != user_id:
            raise NotFoundError("Notification", notification_id)
        return notification

    async def mark_as_read(self, notification_id: str, user_id: str) -> Notification:
        notification = await self._owned(notification_id, user_id)
        if not notification.read:
            notification.read = True
            notification = await self.repos.notifications.update(notification)
        return notification

    async def mark_all_as_read(self, user_id: str) -> int:
        return await self.repos.notifications.mark_all_read(user_id)

    async def delete_notification(self, notification_id: str, user_id: str) -> None:
        await self._owned(notification_id, user_id)
        await self.repos.notifications.delete(notification_id)

    async def get_preferences(self, user_id: str) -> NotificationPreferences:
        """Stored preferences, or the defaults when the user never saved any."""
        preferences = await self.repos.preferences.get_by_id(user_id)
        return preferences or NotificationPreferences(user_id=user_id)

    async def update_preferences(self, user_id: str, update: NotificationPreferencesUpdate) -> NotificationPreferences:
        return await self.repos.preferences.upsert(user_id, update.model_dump(exclude_none=True))

    async def notify_tool_event(
        self,
        tool_id: int,
        event: ToolEvent,
        data: Optional[Dict[str, Any]] = None,
    ) -> List[Notification]:
        """
        Notify the users concerned by a tool lifecycle event.

        - approved / rejected: the submitter
        - new_review: the submitter, unless ``data["reviewer_id"]`` is the submitter
        - trending: every user who reviewed a tool in the same category

        Args:
            tool_id: Tool the event is about
            event: Lifecycle event
            data: Extra event attributes (``reviewer_id`` for new_review)

        Returns:
            Notifications sent; empty when nobody is concerned
        """
        tool = await self.repos.tools.get_by_id(tool_id)
        if tool is None:
            raise NotFoundError("Tool", tool_id)
        extra = data or {}
        payload = {"tool_id": tool.id, "tool_name": tool.name}
        submitter = tool.submitted_by

        if event == ToolEvent.approved and submitter:
            request = NotificationCreate(
                user_id=submitter,
                type=NotificationType.tool_approved,
                title="Tool Approved!",
                message=f'Your submitted tool "{tool.name}" has been approved and is now live.',
                data=payload,
            )
            return [await self.send_notification(request)]

        if event == ToolEvent.rejected and submitter:
            request = NotificationCreate(
                user_id=submitter,
                type=NotificationType.tool_rejected,
                title="Tool Needs Updates",
                message=f'Your submitted tool "{tool.name}" needs some updates before approval.',
                data=payload,
            )
            return [await self.send_notification(request)]

        if event == ToolEvent.new_review and submitter and extra.get("reviewer_id") != submitter:
            request = NotificationCreate(
                user_id=submitter,
                type=NotificationType.review_reply,
                title="New Review on Your Tool",
                message=f'Someone reviewed your tool "{tool.name}".',
                data=payload,
            )
            return [await self.send_notification(request)]

        if event == ToolEvent.trending and tool.category_id is not None:
            category = await self.repos.categories.get_by_id(tool.category_id)
            recipients = await self.repos.reviews.reviewer_ids_in_category(tool.category_id)
            if category is None or not recipients:
                return []
            bulk = BulkNotificationCreate(
                user_ids=recipients,
                type=NotificationType.trending_tool,
                title="Trending Tool Alert",
                message=f"{tool.name} is trending in {category.name}!",
                data={"tool_id": tool.id, "category": category.name},
            )
            return await self.send_bulk_notifications(bulk)

        logger.debug(f"No recipients for {event.value} event on tool {tool_id}")
        return []
