# -*- coding: utf-8 -*-
"""Unit tests for Settings."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from pydantic import ValidationError

from wns_payloads.config.config import Settings
from wns_payloads.models.enums import TileTemplate, ToastDuration, ToastTemplate


def test_defaults(settings_factory: Callable[..., Settings]) -> None:
    settings = settings_factory()

    assert settings.app.app_name == "wns-payloads"
    assert settings.payload.default_tile_template == TileTemplate.TILE_SQUARE_BLOCK
    assert settings.payload.default_toast_template == ToastTemplate.TOAST_IMAGE_AND_TEXT_01
    assert settings.payload.default_toast_duration == ToastDuration.SHORT
    assert settings.delivery.default_time_to_live is None
    assert settings.delivery.request_for_status is None


def test_nested_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAYLOAD__DEFAULT_TILE_TEMPLATE", "TileSquareImage")
    monkeypatch.setenv("DELIVERY__DEFAULT_TIME_TO_LIVE", "120")

    settings = Settings.from_env(_env_file=None)

    assert settings.payload.default_tile_template == TileTemplate.TILE_SQUARE_IMAGE
    assert settings.delivery.default_time_to_live == 120


def test_rejects_unknown_template(settings_factory: Callable[..., Settings]) -> None:
    with pytest.raises(ValidationError):
        settings_factory(payload={"default_tile_template": "TileHologram01"})


def test_rejects_negative_time_to_live(settings_factory: Callable[..., Settings]) -> None:
    with pytest.raises(ValidationError):
        settings_factory(delivery={"default_time_to_live": -1})


def test_settings_are_frozen(settings_factory: Callable[..., Settings]) -> None:
    settings = settings_factory()

    with pytest.raises(ValidationError):
        settings.app = settings.app  # type: ignore[misc]
