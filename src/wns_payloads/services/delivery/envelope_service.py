# -*- coding: utf-8 -*-
"""DeliveryEnvelopeService: map a notification onto the WNS request shape.

Only builds the envelope; sending it (connection, auth, retry) belongs to the
transport.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from wns_payloads.models.envelope import DeliveryEnvelope
from wns_payloads.models.enums import CachePolicy, NotificationKind
from wns_payloads.models.notifications import (
    BadgeNotification,
    TileNotification,
    WindowsNotification,
)
from wns_payloads.services.payload_builder import PayloadBuilderService
from wns_payloads.utils.validation import is_channel_uri, mask_channel_uri

XML_CONTENT_TYPE = "text/xml"
RAW_CONTENT_TYPE = "application/octet-stream"

WNS_TYPES: dict[NotificationKind, str] = {
    NotificationKind.TILE: "wns/tile",
    NotificationKind.TOAST: "wns/toast",
    NotificationKind.BADGE: "wns/badge",
    NotificationKind.RAW: "wns/raw",
}

CACHE_POLICY_VALUES: dict[CachePolicy, str] = {
    CachePolicy.CACHE: "cache",
    CachePolicy.NO_CACHE: "no-cache",
}


def wns_headers(notification: WindowsNotification) -> dict[str, str]:
    """Return the X-WNS-* headers for ``notification``; unset metadata is omitted."""
    headers: dict[str, str] = {"X-WNS-Type": WNS_TYPES[notification.kind]}

    if isinstance(notification, (TileNotification, BadgeNotification)):
        if notification.cache_policy is not None:
            headers["X-WNS-Cache-Policy"] = CACHE_POLICY_VALUES[CachePolicy(notification.cache_policy)]

    if notification.request_for_status is not None:
        headers["X-WNS-RequestForStatus"] = "true" if notification.request_for_status else "false"

    if isinstance(notification, TileNotification) and notification.tag:
        headers["X-WNS-Tag"] = notification.tag

    if notification.time_to_live is not None:
        headers["X-WNS-TTL"] = str(notification.time_to_live)

    return headers


class DeliveryEnvelopeService:
    """Combines the payload body with channel URI and WNS headers."""

    def __init__(
        self,
        payload_builder: PayloadBuilderService,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._payload_builder = payload_builder
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def build(self, notification: WindowsNotification) -> DeliveryEnvelope:
        """Return the envelope for one send of ``notification``.

        Raises:
            InvalidNotificationStateError: Propagated from payload building.
            UnsupportedNotificationError: Propagated from payload building.
        """
        body = self._payload_builder.build(notification)
        kind = notification.kind
        if not is_channel_uri(notification.channel_uri):
            self._logger.warning(
                "delivery_envelope_channel_uri_suspicious",
                notification_kind=kind.value,
                channel_uri=mask_channel_uri(notification.channel_uri),
            )
        envelope = DeliveryEnvelope(
            kind=kind,
            channel_uri=notification.channel_uri,
            content_type=RAW_CONTENT_TYPE if kind == NotificationKind.RAW else XML_CONTENT_TYPE,
            body=body,
            headers=wns_headers(notification),
        )
        self._logger.debug(
            "delivery_envelope_built",
            notification_kind=kind.value,
            channel_uri=mask_channel_uri(notification.channel_uri),
            wns_type=envelope.headers["X-WNS-Type"],
            header_count=len(envelope.headers),
        )
        return envelope
