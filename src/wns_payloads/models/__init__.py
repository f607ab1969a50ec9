# -*- coding: utf-8 -*-
"""Domain models."""

from wns_payloads.models.envelope import DeliveryEnvelope
from wns_payloads.models.enums import (
    BadgeGlyph,
    CachePolicy,
    NotificationKind,
    TileTemplate,
    ToastDuration,
    ToastTemplate,
)
from wns_payloads.models.notifications import (
    PLATFORM,
    BadgeNotification,
    RawNotification,
    TileNotification,
    ToastNotification,
    WindowsNotification,
)

__all__ = [
    "PLATFORM",
    "BadgeGlyph",
    "BadgeNotification",
    "CachePolicy",
    "DeliveryEnvelope",
    "NotificationKind",
    "RawNotification",
    "TileNotification",
    "TileTemplate",
    "ToastDuration",
    "ToastNotification",
    "ToastTemplate",
    "WindowsNotification",
]
