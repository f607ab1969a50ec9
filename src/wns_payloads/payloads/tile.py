# -*- coding: utf-8 -*-
"""Tile payload."""

from __future__ import annotations

from wns_payloads.models.notifications import TileNotification
from wns_payloads.payloads._names import wire_name
from wns_payloads.payloads.visual import assemble_visual


def build_tile_payload(notification: TileNotification) -> str:
    """Return ``<tile><visual>...</visual></tile>`` for the notification."""
    return assemble_visual(
        "tile",
        {},
        wire_name(notification.template),
        notification.images,
        notification.texts,
    )
