"""
User notifications.

- broker: in-process publish/subscribe for live delivery
- service: persistence, preferences and tool-event fan-out
"""

from .broker import NotificationBroker, Subscription, user_topic
from .service import NotificationService

__all__ = ["NotificationBroker", "NotificationService", "Subscription", "user_topic"]
