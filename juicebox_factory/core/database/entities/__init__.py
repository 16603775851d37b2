"""
Database entity models.

Each module holds a single table:

- categories: Tool categories
- tools: Catalog entries
- tool_scores: One derived score row per tool
- reviews: User reviews, one per (tool, user)
- notifications: Per-user notifications and notification preferences
"""

from . import categories, notifications, reviews, tool_scores, tools
from .categories import Category
from .notifications import Notification, NotificationPreferences
from .reviews import Review
from .tool_scores import ToolScore
from .tools import Tool

__all__ = [
    "Category",
    "Notification",
    "NotificationPreferences",
    "Review",
    "Tool",
    "ToolScore",
    "categories",
    "notifications",
    "reviews",
    "tool_scores",
    "tools",
]
