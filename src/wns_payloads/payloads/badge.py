# -*- coding: utf-8 -*-
"""Badge payload: a single ``<badge value="...">`` element.

Values are either decimal digits or a token from GLYPH_VALUES, so no
escaping is applied.
"""

from __future__ import annotations

from wns_payloads.exceptions import InvalidNotificationStateError
from wns_payloads.models.enums import BadgeGlyph, NotificationKind
from wns_payloads.models.notifications import BadgeNotification

GLYPH_VALUES: dict[BadgeGlyph, str] = {
    BadgeGlyph.NONE: "none",
    BadgeGlyph.ACTIVITY: "activity",
    BadgeGlyph.ALERT: "alert",
    BadgeGlyph.AVAILABLE: "available",
    BadgeGlyph.AWAY: "away",
    BadgeGlyph.BUSY: "busy",
    BadgeGlyph.NEW_MESSAGE: "newMessage",
    BadgeGlyph.PAUSED: "paused",
    BadgeGlyph.PLAYING: "playing",
    BadgeGlyph.UNAVAILABLE: "unavailable",
    BadgeGlyph.ERROR: "error",
    BadgeGlyph.ATTENTION: "attention",
}


def badge_value(notification: BadgeNotification) -> str:
    """Return the badge ``value`` token.

    The numeric value takes precedence over the glyph when both are set.

    Raises:
        InvalidNotificationStateError: Neither value is set, or the glyph is
            not in GLYPH_VALUES.
    """
    if notification.numeric is not None:
        return str(int(notification.numeric))
    if notification.glyph is None:
        raise InvalidNotificationStateError(
            "Either a numeric or glyph value is required.",
            kind=NotificationKind.BADGE.value,
        )
    try:
        glyph = BadgeGlyph(notification.glyph)
    except ValueError:
        raise InvalidNotificationStateError(
            f"Unknown badge glyph: {notification.glyph!r}",
            kind=NotificationKind.BADGE.value,
        ) from None
    return GLYPH_VALUES[glyph]


def build_badge_payload(notification: BadgeNotification) -> str:
    """Return ``<badge value="VALUE">``."""
    return f'<badge value="{badge_value(notification)}">'
