# -*- coding: utf-8 -*-
"""NotificationFactory: build notification variants with configured defaults."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Optional

from wns_payloads.models.enums import (
    BadgeGlyph,
    CachePolicy,
    TileTemplate,
    ToastDuration,
    ToastTemplate,
)
from wns_payloads.models.notifications import (
    BadgeNotification,
    RawNotification,
    TileNotification,
    ToastNotification,
)

if TYPE_CHECKING:  # pragma: no cover
    from wns_payloads.config.config import Settings


class NotificationFactory:
    """Creates notifications, filling unset fields from PAYLOAD__* and DELIVERY__* settings.

    Images and texts are copied so later mutation of the caller's containers
    does not change the notification.
    """

    def __init__(self, settings: "Settings") -> None:
        self.settings = settings

    def _delivery(
        self,
        time_to_live: Optional[int],
        request_for_status: Optional[bool],
    ) -> dict[str, Any]:
        cfg = self.settings.delivery
        return {
            "time_to_live": cfg.default_time_to_live if time_to_live is None else time_to_live,
            "request_for_status": (
                cfg.request_for_status if request_for_status is None else request_for_status
            ),
        }

    def tile(
        self,
        channel_uri: str,
        *,
        texts: Sequence[str] = (),
        images: Mapping[str, str] | None = None,
        template: TileTemplate | None = None,
        cache_policy: CachePolicy | None = None,
        tag: str | None = None,
        time_to_live: int | None = None,
        request_for_status: bool | None = None,
    ) -> TileNotification:
        """Create a TileNotification; template defaults to PAYLOAD__DEFAULT_TILE_TEMPLATE."""
        return TileNotification(
            channel_uri=channel_uri,
            images=dict(images or {}),
            texts=list(texts),
            template=template or self.settings.payload.default_tile_template,
            cache_policy=cache_policy,
            tag=tag,
            **self._delivery(time_to_live, request_for_status),
        )

    def toast(
        self,
        channel_uri: str,
        *,
        texts: Sequence[str] = (),
        images: Mapping[str, str] | None = None,
        template: ToastTemplate | None = None,
        duration: ToastDuration | None = None,
        launch: str | None = None,
        time_to_live: int | None = None,
        request_for_status: bool | None = None,
    ) -> ToastNotification:
        """Create a ToastNotification; template and duration default from PAYLOAD__*."""
        payload_cfg = self.settings.payload
        return ToastNotification(
            channel_uri=channel_uri,
            images=dict(images or {}),
            texts=list(texts),
            template=template or payload_cfg.default_toast_template,
            duration=duration or payload_cfg.default_toast_duration,
            launch=launch,
            **self._delivery(time_to_live, request_for_status),
        )

    def badge(
        self,
        channel_uri: str,
        *,
        numeric: int | None = None,
        glyph: BadgeGlyph | None = None,
        cache_policy: CachePolicy | None = None,
        time_to_live: int | None = None,
        request_for_status: bool | None = None,
    ) -> BadgeNotification:
        """Create a BadgeNotification. Missing value/glyph is reported at payload time."""
        return BadgeNotification(
            channel_uri=channel_uri,
            numeric=numeric,
            glyph=glyph,
            cache_policy=cache_policy,
            **self._delivery(time_to_live, request_for_status),
        )

    def raw(
        self,
        channel_uri: str,
        raw_xml: str,
        *,
        time_to_live: int | None = None,
        request_for_status: bool | None = None,
    ) -> RawNotification:
        """Create a RawNotification carrying ``raw_xml`` verbatim."""
        return RawNotification(
            channel_uri=channel_uri,
            raw_xml=raw_xml,
            **self._delivery(time_to_live, request_for_status),
        )
