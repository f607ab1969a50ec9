"""Payload building: markup for tile, toast, badge and raw notifications."""

from wns_payloads.payloads.badge import GLYPH_VALUES, badge_value, build_badge_payload
from wns_payloads.payloads.builder import produce_payload
from wns_payloads.payloads.markup import escape_markup, render_element
from wns_payloads.payloads.raw import build_raw_payload
from wns_payloads.payloads.tile import build_tile_payload
from wns_payloads.payloads.toast import build_toast_payload
from wns_payloads.payloads.visual import assemble_visual

__all__ = [
    "GLYPH_VALUES",
    "assemble_visual",
    "badge_value",
    "build_badge_payload",
    "build_raw_payload",
    "build_tile_payload",
    "build_toast_payload",
    "escape_markup",
    "produce_payload",
    "render_element",
]
