"""WNS payloads: tile, toast, badge and raw notification bodies for Windows push."""

from wns_payloads.config import get_settings
from wns_payloads.DI import Container
from wns_payloads.exceptions import (
    InvalidNotificationStateError,
    UnsupportedNotificationError,
    WnsPayloadError,
)
from wns_payloads.models import (
    BadgeGlyph,
    BadgeNotification,
    CachePolicy,
    DeliveryEnvelope,
    NotificationKind,
    RawNotification,
    TileNotification,
    TileTemplate,
    ToastDuration,
    ToastNotification,
    ToastTemplate,
    WindowsNotification,
)
from wns_payloads.payloads import assemble_visual, escape_markup, produce_payload
from wns_payloads.services import (
    DeliveryEnvelopeService,
    NotificationFactory,
    PayloadBuilderService,
)

__version__ = "0.0.1"
__all__ = [
    "BadgeGlyph",
    "BadgeNotification",
    "CachePolicy",
    "Container",
    "DeliveryEnvelope",
    "DeliveryEnvelopeService",
    "InvalidNotificationStateError",
    "NotificationFactory",
    "NotificationKind",
    "PayloadBuilderService",
    "RawNotification",
    "TileNotification",
    "TileTemplate",
    "ToastDuration",
    "ToastNotification",
    "ToastTemplate",
    "UnsupportedNotificationError",
    "WindowsNotification",
    "WnsPayloadError",
    "assemble_visual",
    "escape_markup",
    "get_settings",
    "produce_payload",
]
