"""Custom exceptions for WNS payload building."""

from __future__ import annotations


class WnsPayloadError(Exception):
    """Base exception for payload-building errors."""

    pass


class InvalidNotificationStateError(WnsPayloadError):
    """Raised when a notification lacks the data needed to build its payload.

    Caller misuse; retrying without changing the notification fails again.
    """

    def __init__(self, message: str, *, kind: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class UnsupportedNotificationError(WnsPayloadError):
    """Raised when an object that is not a known notification variant is serialized."""

    def __init__(self, message: str, *, type_name: str | None = None) -> None:
        super().__init__(message)
        self.type_name = type_name
