# -*- coding: utf-8 -*-
"""Toast payload."""

from __future__ import annotations

from wns_payloads.models.enums import ToastDuration
from wns_payloads.models.notifications import ToastNotification
from wns_payloads.payloads._names import wire_name
from wns_payloads.payloads.visual import assemble_visual


def build_toast_payload(notification: ToastNotification) -> str:
    """Return ``<toast ...><visual>...</visual></toast>`` for the notification.

    ``launch`` is written only when non-empty. ``duration="long"`` is written
    only for long toasts; short is the platform default and is never written.
    """
    root_attributes: dict[str, str] = {}
    if notification.launch:
        root_attributes["launch"] = notification.launch
    if notification.duration == ToastDuration.LONG:
        root_attributes["duration"] = "long"

    return assemble_visual(
        "toast",
        root_attributes,
        wire_name(notification.template),
        notification.images,
        notification.texts,
    )
