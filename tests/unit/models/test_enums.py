# -*- coding: utf-8 -*-
"""Unit tests for enum wire names."""

from __future__ import annotations

from wns_payloads.models.enums import BadgeGlyph, TileTemplate, ToastTemplate


def test_tile_template_values_are_literal_template_names() -> None:
    assert TileTemplate.TILE_SQUARE_BLOCK.value == "TileSquareBlock"
    assert TileTemplate("TileWideSmallImageAndText05") is TileTemplate.TILE_WIDE_SMALL_IMAGE_AND_TEXT_05
    assert all(t.value.startswith("Tile") for t in TileTemplate)


def test_toast_template_catalog() -> None:
    assert [t.value for t in ToastTemplate] == [
        "ToastText01",
        "ToastText02",
        "ToastText03",
        "ToastText04",
        "ToastImageAndText01",
        "ToastImageAndText02",
        "ToastImageAndText03",
        "ToastImageAndText04",
    ]


def test_badge_glyph_count() -> None:
    assert len(BadgeGlyph) == 12
