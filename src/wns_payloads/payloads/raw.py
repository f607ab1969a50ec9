"""Raw payload: the caller's markup, untouched."""

from __future__ import annotations

from wns_payloads.models.notifications import RawNotification


def build_raw_payload(notification: RawNotification) -> str:
    """Return ``raw_xml`` verbatim; no validation, no escaping."""
    return notification.raw_xml
