"""Notification I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from juicebox_factory.core.models.domain.enums import NotificationType, ToolEvent


class NotificationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    type: NotificationType
    title: str
    message: str
    data: Dict[str, Any] = Field(default_factory=dict)
    read: bool
    created_at: datetime
    expires_at: Optional[datetime] = None


class NotificationCreate(BaseModel):
    user_id: str = Field(min_length=1)
    type: NotificationType
    title: str = Field(min_length=1, max_length=255)
    message: str
    data: Dict[str, Any] = Field(default_factory=dict)
    expires_at: Optional[datetime] = None


class BulkNotificationCreate(BaseModel):
    user_ids: List[str] = Field(min_length=1)
    type: NotificationType
    title: str = Field(min_length=1, max_length=255)
    message: str
    data: Dict[str, Any] = Field(default_factory=dict)


class NotificationList(BaseModel):
    notifications: List[NotificationRead]
    unread_count: int


class UnreadCount(BaseModel):
    user_id: str
    unread_count: int


class NotificationPreferencesRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    email_notifications: bool = True
    push_notifications: bool = True
    tool_approvals: bool = True
    review_replies: bool = True
    category_updates: bool = True
    trending_alerts: bool = False
    system_updates: bool = True


class NotificationPreferencesUpdate(BaseModel):
    email_notifications: Optional[bool] = None
    push_notifications: Optional[bool] = None
    tool_approvals: Optional[bool] = None
    review_replies: Optional[bool] = None
    category_updates: Optional[bool] = None
    trending_alerts: Optional[bool] = None
    system_updates: Optional[bool] = None


class ToolEventRequest(BaseModel):
    tool_id: int
    event: ToolEvent
    data: Dict[str, Any] = Field(default_factory=dict)
