# -*- coding: utf-8 -*-
"""DeliveryEnvelope: what the transport needs to POST one notification."""

from __future__ import annotations

from dataclasses import dataclass, field

from wns_payloads.models.enums import NotificationKind


@dataclass(frozen=True, slots=True)
class DeliveryEnvelope:
    """Channel URI, WNS headers and body for a single send.

    Built without any I/O; the transport owns connections, auth and retries.
    """

    kind: NotificationKind
    channel_uri: str
    content_type: str
    """text/xml for tile/toast/badge, application/octet-stream for raw."""
    body: str
    headers: dict[str, str] = field(default_factory=dict)
    """X-WNS-* headers, in the order they were added."""
