"""Exceptions subpackage."""

from wns_payloads.exceptions.exceptions import (
    InvalidNotificationStateError,
    UnsupportedNotificationError,
    WnsPayloadError,
)

__all__ = [
    "InvalidNotificationStateError",
    "UnsupportedNotificationError",
    "WnsPayloadError",
]
