"""
Notification Endpoints.

Per-user notification inbox, preferences, tool event fan-out and a
Server-Sent Events stream for live delivery.
"""

import json
from typing import List, Optional

from fastapi import APIRouter, Query, Request, Response
from sse_starlette.sse import EventSourceResponse

from juicebox_factory.core.database.entities.notifications import Notification, NotificationPreferences
from juicebox_factory.core.logging_config import get_logger
from juicebox_factory.core.models.domain.enums import NotificationType
from juicebox_factory.core.models.io.notifications import (
    BulkNotificationCreate,
    NotificationCreate,
    NotificationList,
    NotificationPreferencesRead,
    NotificationPreferencesUpdate,
    NotificationRead,
    ToolEventRequest,
    UnreadCount,
)
from juicebox_factory.notifications import user_topic
from juicebox_factory.server.services.deps import BrokerDep, NotificationServiceDep

logger = get_logger(__name__)
router = APIRouter()

KEEP_ALIVE_SECONDS = 15.0


@router.get(
    "",
    response_model=NotificationList,
    summary="List Notifications",
    description="List a user's notifications newest first.",
    response_description="Notifications and the user's unread count.",
)
async def list_notifications(
    service: NotificationServiceDep,
    user_id: str = Query(min_length=1),
    limit: int = Query(default=50, ge=1, le=200),
    unread_only: bool = Query(default=False),
    type: Optional[NotificationType] = Query(default=None),
) -> NotificationList:
    notifications = await service.get_notifications(user_id, limit=limit, unread_only=unread_only, type=type)
    unread = await service.get_unread_count(user_id)
    return NotificationList(
        notifications=[NotificationRead.model_validate(notification) for notification in notifications],
        unread_count=unread,
    )


@router.post(
    "",
    response_model=NotificationRead,
    status_code=201,
    summary="Send Notification",
    description="Persist a notification and push it to the user's live subscribers.",
)
async def send_notification(notification_in: NotificationCreate, service: NotificationServiceDep) -> Notification:
    return await service.send_notification(notification_in)


@router.post(
    "/bulk",
    response_model=List[NotificationRead],
    status_code=201,
    summary="Send Bulk Notifications",
    description="Send the same notification to several users.",
)
async def send_bulk_notifications(
    bulk_in: BulkNotificationCreate,
    service: NotificationServiceDep,
) -> List[Notification]:
    return await service.send_bulk_notifications(bulk_in)


@router.get(
    "/unread-count",
    response_model=UnreadCount,
    summary="Unread Count",
    description="Number of unread notifications of a user.",
)
async def unread_count(service: NotificationServiceDep, user_id: str = Query(min_length=1)) -> UnreadCount:
    return UnreadCount(user_id=user_id, unread_count=await service.get_unread_count(user_id))


@router.post(
    "/read-all",
    summary="Mark All Read",
    description="Mark every unread notification of a user as read.",
    response_description="Number of notifications updated.",
)
async def mark_all_read(service: NotificationServiceDep, user_id: str = Query(min_length=1)):
    return {"updated": await service.mark_all_as_read(user_id)}


@router.post(
    "/tool-events",
    response_model=List[NotificationRead],
    summary="Tool Event",
    description="Notify the users concerned by a tool lifecycle event (approved, rejected, trending, new_review).",
    response_description="Notifications that were sent.",
    responses={404: {"description": "Tool not found"}},
)
async def tool_event(event_in: ToolEventRequest, service: NotificationServiceDep) -> List[Notification]:
    return await service.notify_tool_event(event_in.tool_id, event_in.event, event_in.data)


@router.get(
    "/preferences/{user_id}",
    response_model=NotificationPreferencesRead,
    summary="Get Preferences",
    description="A user's notification preferences; defaults when never saved.",
)
async def get_preferences(user_id: str, service: NotificationServiceDep) -> NotificationPreferences:
    return await service.get_preferences(user_id)


@router.put(
    "/preferences/{user_id}",
    response_model=NotificationPreferencesRead,
    summary="Update Preferences",
    description="Update the provided preference switches; the others keep their value.",
)
async def update_preferences(
    user_id: str,
    preferences_in: NotificationPreferencesUpdate,
    service: NotificationServiceDep,
) -> NotificationPreferences:
    return await service.update_preferences(user_id, preferences_in)


@router.get(
    "/stream",
    summary="Stream Notifications",
    description="Live notifications of a user via Server-Sent Events.",
    response_description="Stream of notification events.",
    responses={
        200: {
            "description": "SSE stream established",
            "content": {"text/event-stream": {"example": 'event: notification\ndata: {"id": "notif_..."}\n\n'}},
        }
    },
)
async def stream_notifications(request: Request, broker: BrokerDep, user_id: str = Query(min_length=1)):
    """
    Stream notifications.

    Each notification sent to the user while the connection is open is
    emitted as a ``notification`` event carrying the ``NotificationRead``
    payload. A ``ping`` comment keeps idle connections alive. The user is
    subscribed once the stream starts and unsubscribed when it ends.
    """

    async def event_generator():
        subscription = await broker.subscribe(user_topic(user_id))
        logger.info(f"Notification stream opened for user {user_id}")
        try:
            while True:
                if await request.is_disconnected():
                    logger.info(f"Client disconnected from notification stream: {user_id}")
                    break
                event = await subscription.get(timeout=KEEP_ALIVE_SECONDS)
                if event is None:
                    continue
                yield {"event": "notification", "data": json.dumps(event)}
        finally:
            await broker.unsubscribe(subscription)

    return EventSourceResponse(event_generator(), ping=int(KEEP_ALIVE_SECONDS))


@router.post(
    "/{notification_id}/read",
    response_model=NotificationRead,
    summary="Mark Read",
    description="Mark one notification of a user as read.",
    responses={404: {"description": "Notification not found"}},
)
async def mark_read(
    notification_id: str,
    service: NotificationServiceDep,
    user_id: str = Query(min_length=1),
) -> Notification:
    return await service.mark_as_read(notification_id, user_id)


@router.delete(
    "/{notification_id}",
    status_code=204,
    summary="Delete Notification",
    description="Delete one notification of a user.",
    responses={404: {"description": "Notification not found"}},
)
async def delete_notification(
    notification_id: str,
    service: NotificationServiceDep,
    user_id: str = Query(min_length=1),
) -> Response:
    await service.delete_notification(notification_id, user_id)
    return Response(status_code=204)
