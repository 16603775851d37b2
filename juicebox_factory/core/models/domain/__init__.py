"""Domain-level enums and value types shared across packages."""

from .enums import (
    FeaturePriority,
    NotificationType,
    PricingModel,
    PricingPreference,
    ToolEvent,
    TrendVerdict,
    Timeframe,
)

__all__ = [
    "FeaturePriority",
    "NotificationType",
    "PricingModel",
    "PricingPreference",
    "Timeframe",
    "ToolEvent",
    "TrendVerdict",
]
