# -*- coding: utf-8 -*-
"""Notification variants: one value object per WNS notification kind.

Variants are plain mutable dataclasses. Callers fill them in, then hand them
to payloads.builder.produce_payload(), which dispatches on ``kind``. The
common delivery fields (channel_uri, time_to_live, request_for_status) are
never written into the payload body; the transport reads them directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

from wns_payloads.models.enums import (
    BadgeGlyph,
    CachePolicy,
    NotificationKind,
    TileTemplate,
    ToastDuration,
    ToastTemplate,
)

PLATFORM = "Windows"


@dataclass(slots=True, kw_only=True)
class TileNotification:
    """Live tile update."""

    kind: ClassVar[NotificationKind] = NotificationKind.TILE
    platform: ClassVar[str] = PLATFORM

    channel_uri: str = ""
    time_to_live: Optional[int] = None
    """Seconds; forwarded to the transport as X-WNS-TTL."""
    request_for_status: Optional[bool] = None

    images: dict[str, str] = field(default_factory=dict)
    """Image src -> alt text. Insertion order defines image ids."""
    texts: list[str] = field(default_factory=list)
    template: TileTemplate = TileTemplate.TILE_SQUARE_BLOCK
    cache_policy: Optional[CachePolicy] = None
    tag: Optional[str] = None


@dataclass(slots=True, kw_only=True)
class ToastNotification:
    """Toast popup."""

    kind: ClassVar[NotificationKind] = NotificationKind.TOAST
    platform: ClassVar[str] = PLATFORM

    channel_uri: str = ""
    time_to_live: Optional[int] = None
    request_for_status: Optional[bool] = None

    images: dict[str, str] = field(default_factory=dict)
    texts: list[str] = field(default_factory=list)
    template: ToastTemplate = ToastTemplate.TOAST_IMAGE_AND_TEXT_01
    duration: ToastDuration = ToastDuration.SHORT
    launch: Optional[str] = None
    """Argument handed to the app when the user activates the toast."""


@dataclass(slots=True, kw_only=True)
class BadgeNotification:
    """Badge update: either a number or a glyph (number wins when both are set)."""

    kind: ClassVar[NotificationKind] = NotificationKind.BADGE
    platform: ClassVar[str] = PLATFORM

    channel_uri: str = ""
    time_to_live: Optional[int] = None
    request_for_status: Optional[bool] = None

    numeric: Optional[int] = None
    glyph: Optional[BadgeGlyph] = None
    cache_policy: Optional[CachePolicy] = None


@dataclass(slots=True, kw_only=True)
class RawNotification:
    """Arbitrary app-defined body, sent verbatim."""

    kind: ClassVar[NotificationKind] = NotificationKind.RAW
    platform: ClassVar[str] = PLATFORM

    channel_uri: str = ""
    time_to_live: Optional[int] = None
    request_for_status: Optional[bool] = None

    raw_xml: str = ""


WindowsNotification = Union[
    TileNotification,
    ToastNotification,
    BadgeNotification,
    RawNotification,
]
"""Tagged union of every notification variant."""
