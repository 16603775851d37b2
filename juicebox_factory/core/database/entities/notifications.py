"""
Notification entity models.

Notifications are persisted per user; preferences hold one row per user
and fall back to defaults when absent.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from sqlmodel import JSON, Field

from ..base import Base, utc_now_naive


def new_notification_id() -> str:
    return f"notif_{uuid.uuid4().hex}"


class Notification(Base, table=True):
    """User notification.

    Table: notifications
    """

    __tablename__ = "notifications"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_notification_id, primary_key=True, max_length=64)
    user_id: str = Field(max_length=128, index=True)
    type: str = Field(max_length=32, index=True)
    title: str = Field(max_length=255)
    message: str
    data: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    read: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=utc_now_naive, index=True)
    expires_at: Optional[datetime] = Field(default=None)

    def __repr__(self) -> str:
        return f"Notification(id={self.id}, user_id={self.user_id}, type={self.type})"


class NotificationPreferences(Base, table=True):
    """Per-user notification switches.

    Table: notification_preferences
    """

    __tablename__ = "notification_preferences"
    __table_args__ = ({"extend_existing": True},)

    user_id: str = Field(primary_key=True, max_length=128)
    email_notifications: bool = True
    push_notifications: bool = True
    tool_approvals: bool = True
    review_replies: bool = True
    category_updates: bool = True
    trending_alerts: bool = False
    system_updates: bool = True
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive})

    def __repr__(self) -> str:
        return f"NotificationPreferences(user_id={self.user_id})"
