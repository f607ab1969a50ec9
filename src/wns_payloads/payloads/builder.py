# -*- coding: utf-8 -*-
"""produce_payload: single entry point dispatching on notification kind."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from wns_payloads.exceptions import UnsupportedNotificationError
from wns_payloads.models.enums import NotificationKind
from wns_payloads.models.notifications import (
    BadgeNotification,
    RawNotification,
    TileNotification,
    ToastNotification,
    WindowsNotification,
)
from wns_payloads.payloads.badge import build_badge_payload
from wns_payloads.payloads.raw import build_raw_payload
from wns_payloads.payloads.tile import build_tile_payload
from wns_payloads.payloads.toast import build_toast_payload

_VARIANTS: dict[NotificationKind, type] = {
    NotificationKind.TILE: TileNotification,
    NotificationKind.TOAST: ToastNotification,
    NotificationKind.BADGE: BadgeNotification,
    NotificationKind.RAW: RawNotification,
}

_PRODUCERS: dict[NotificationKind, Callable[[Any], str]] = {
    NotificationKind.TILE: build_tile_payload,
    NotificationKind.TOAST: build_toast_payload,
    NotificationKind.BADGE: build_badge_payload,
    NotificationKind.RAW: build_raw_payload,
}


def produce_payload(notification: WindowsNotification) -> str:
    """Return the markup body for ``notification``.

    Pure and repeatable: the same field values always give the same string.

    Raises:
        UnsupportedNotificationError: ``notification`` is not one of the four variants.
        InvalidNotificationStateError: A badge has neither numeric nor glyph set.
    """
    kind = getattr(notification, "kind", None)
    variant = _VARIANTS.get(kind) if isinstance(kind, NotificationKind) else None
    if variant is None or not isinstance(notification, variant):
        type_name = type(notification).__name__
        raise UnsupportedNotificationError(
            f"Cannot build a payload for {type_name}",
            type_name=type_name,
        )
    return _PRODUCERS[kind](notification)
