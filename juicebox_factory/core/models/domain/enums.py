"""Domain enums for the tool catalog."""

from __future__ import annotations

from enum import Enum


class PricingModel(str, Enum):
    """How a tool is priced."""

    free = "free"
    freemium = "freemium"
    paid = "paid"
    open_source = "open_source"
    unknown = "unknown"


class PricingPreference(str, Enum):
    """Pricing preference used by personalized recommendations."""

    free = "free"
    paid = "paid"
    any = "any"


class FeaturePriority(str, Enum):
    """Sub-score a user can prioritize. Values are score field prefixes."""

    accessibility = "accessibility"
    performance = "performance"
    innovation = "innovation"
    enterprise = "enterprise"


class NotificationType(str, Enum):
    """Kind of notification delivered to a user."""

    tool_approved = "tool_approved"
    tool_rejected = "tool_rejected"
    review_reply = "review_reply"
    new_tool_in_category = "new_tool_in_category"
    trending_tool = "trending_tool"
    system_update = "system_update"


class ToolEvent(str, Enum):
    """Tool lifecycle events that fan out into notifications."""

    approved = "approved"
    rejected = "rejected"
    trending = "trending"
    new_review = "new_review"


class TrendVerdict(str, Enum):
    """Direction of a tool's popularity trend."""

    rising = "rising"
    stable = "stable"
    declining = "declining"


class Timeframe(str, Enum):
    """Look-back window for trending repository discovery."""

    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"
