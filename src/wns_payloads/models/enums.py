# -*- coding: utf-8 -*-
"""Enumerations for WNS notifications.

Each member's value is the exact token written to the wire (template name,
header value, glyph name), so renaming a Python identifier never changes a
payload.
"""

from __future__ import annotations

from enum import Enum


class NotificationKind(str, Enum):
    """Discriminator for the four notification variants."""

    TILE = "Tile"
    TOAST = "Toast"
    BADGE = "Badge"
    RAW = "Raw"


class CachePolicy(str, Enum):
    """Whether WNS should cache a tile/badge while the device is offline."""

    CACHE = "Cache"
    NO_CACHE = "NoCache"


class ToastDuration(str, Enum):
    """How long a toast stays on screen."""

    SHORT = "Short"
    LONG = "Long"


class ToastTemplate(str, Enum):
    """Toast template catalog."""

    TOAST_TEXT_01 = "ToastText01"
    TOAST_TEXT_02 = "ToastText02"
    TOAST_TEXT_03 = "ToastText03"
    TOAST_TEXT_04 = "ToastText04"
    TOAST_IMAGE_AND_TEXT_01 = "ToastImageAndText01"
    TOAST_IMAGE_AND_TEXT_02 = "ToastImageAndText02"
    TOAST_IMAGE_AND_TEXT_03 = "ToastImageAndText03"
    TOAST_IMAGE_AND_TEXT_04 = "ToastImageAndText04"


class TileTemplate(str, Enum):
    """Tile template catalog (square and wide tiles)."""

    # Square
    TILE_SQUARE_BLOCK = "TileSquareBlock"
    TILE_SQUARE_TEXT_01 = "TileSquareText01"
    TILE_SQUARE_TEXT_02 = "TileSquareText02"
    TILE_SQUARE_TEXT_03 = "TileSquareText03"
    TILE_SQUARE_TEXT_04 = "TileSquareText04"
    TILE_SQUARE_IMAGE = "TileSquareImage"
    TILE_SQUARE_PEEK_IMAGE_AND_TEXT_01 = "TileSquarePeekImageAndText01"
    TILE_SQUARE_PEEK_IMAGE_AND_TEXT_02 = "TileSquarePeekImageAndText02"
    TILE_SQUARE_PEEK_IMAGE_AND_TEXT_03 = "TileSquarePeekImageAndText03"
    TILE_SQUARE_PEEK_IMAGE_AND_TEXT_04 = "TileSquarePeekImageAndText04"

    # Wide
    TILE_WIDE_TEXT_01 = "TileWideText01"
    TILE_WIDE_TEXT_02 = "TileWideText02"
    TILE_WIDE_TEXT_03 = "TileWideText03"
    TILE_WIDE_TEXT_04 = "TileWideText04"
    TILE_WIDE_TEXT_05 = "TileWideText05"
    TILE_WIDE_TEXT_06 = "TileWideText06"
    TILE_WIDE_TEXT_07 = "TileWideText07"
    TILE_WIDE_TEXT_08 = "TileWideText08"
    TILE_WIDE_TEXT_09 = "TileWideText09"
    TILE_WIDE_TEXT_10 = "TileWideText10"
    TILE_WIDE_TEXT_11 = "TileWideText11"
    TILE_WIDE_IMAGE = "TileWideImage"
    TILE_WIDE_IMAGE_COLLECTION = "TileWideImageCollection"
    TILE_WIDE_IMAGE_AND_TEXT_01 = "TileWideImageAndText01"
    TILE_WIDE_IMAGE_AND_TEXT_02 = "TileWideImageAndText02"
    TILE_WIDE_BLOCK_AND_TEXT_01 = "TileWideBlockAndText01"
    TILE_WIDE_BLOCK_AND_TEXT_02 = "TileWideBlockAndText02"
    TILE_WIDE_SMALL_IMAGE_AND_TEXT_01 = "TileWideSmallImageAndText01"
    TILE_WIDE_SMALL_IMAGE_AND_TEXT_02 = "TileWideSmallImageAndText02"
    TILE_WIDE_SMALL_IMAGE_AND_TEXT_03 = "TileWideSmallImageAndText03"
    TILE_WIDE_SMALL_IMAGE_AND_TEXT_04 = "TileWideSmallImageAndText04"
    TILE_WIDE_SMALL_IMAGE_AND_TEXT_05 = "TileWideSmallImageAndText05"
    TILE_WIDE_PEEK_IMAGE_COLLECTION_01 = "TileWidePeekImageCollection01"
    TILE_WIDE_PEEK_IMAGE_COLLECTION_02 = "TileWidePeekImageCollection02"
    TILE_WIDE_PEEK_IMAGE_COLLECTION_03 = "TileWidePeekImageCollection03"
    TILE_WIDE_PEEK_IMAGE_COLLECTION_04 = "TileWidePeekImageCollection04"
    TILE_WIDE_PEEK_IMAGE_COLLECTION_05 = "TileWidePeekImageCollection05"
    TILE_WIDE_PEEK_IMAGE_COLLECTION_06 = "TileWidePeekImageCollection06"
    TILE_WIDE_PEEK_IMAGE_AND_TEXT_01 = "TileWidePeekImageAndText01"
    TILE_WIDE_PEEK_IMAGE_AND_TEXT_02 = "TileWidePeekImageAndText02"
    TILE_WIDE_PEEK_IMAGE_01 = "TileWidePeekImage01"
    TILE_WIDE_PEEK_IMAGE_02 = "TileWidePeekImage02"
    TILE_WIDE_PEEK_IMAGE_03 = "TileWidePeekImage03"
    TILE_WIDE_PEEK_IMAGE_04 = "TileWidePeekImage04"
    TILE_WIDE_PEEK_IMAGE_05 = "TileWidePeekImage05"
    TILE_WIDE_PEEK_IMAGE_06 = "TileWidePeekImage06"


class BadgeGlyph(str, Enum):
    """Named badge glyphs. Wire tokens live in payloads.badge.GLYPH_VALUES."""

    NONE = "None"
    ACTIVITY = "Activity"
    ALERT = "Alert"
    AVAILABLE = "Available"
    AWAY = "Away"
    BUSY = "Busy"
    NEW_MESSAGE = "NewMessage"
    PAUSED = "Paused"
    PLAYING = "Playing"
    UNAVAILABLE = "Unavailable"
    ERROR = "Error"
    ATTENTION = "Attention"
