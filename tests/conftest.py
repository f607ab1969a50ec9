# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from wns_payloads.config.config import Settings
from wns_payloads.models.enums import TileTemplate, ToastTemplate
from wns_payloads.models.notifications import (
    BadgeNotification,
    RawNotification,
    TileNotification,
    ToastNotification,
)


class RecordingLogger:
    """Stand-in for a structlog logger that keeps (level, event, fields) tuples."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kw: Any) -> None:
        self.events.append((level, event, kw))

    def debug(self, event: str, **kw: Any) -> None:
        self._record("debug", event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._record("info", event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._record("warning", event, **kw)

    def event_names(self) -> list[str]:
        return [event for _, event, _ in self.events]


@pytest.fixture
def channel_uri() -> str:
    """Default channel URI used by tests."""
    return "https://db5.notify.windows.com/?token=AwYAAAB1xQ9z2kLmNoPqRsTuVwXyZ0123456789%3d"


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Fresh recording logger per test."""
    return RecordingLogger("test")


@pytest.fixture
def get_logger(recording_logger: RecordingLogger) -> Callable[[str], RecordingLogger]:
    """Logger factory returning the shared recording logger."""
    return lambda name: recording_logger


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings with nested section overrides, e.g. settings_factory(delivery={...})."""

    def _build(**overrides: Any) -> Settings:
        return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]

    return _build


@pytest.fixture
def tile_factory(channel_uri: str) -> Callable[..., TileNotification]:
    """Build TileNotification with sensible defaults and easy overrides."""

    def _build(**overrides: Any) -> TileNotification:
        return TileNotification(
            channel_uri=overrides.pop("channel_uri", channel_uri),
            images=overrides.pop("images", {}),
            texts=overrides.pop("texts", ["Hello"]),
            template=overrides.pop("template", TileTemplate.TILE_SQUARE_BLOCK),
            **overrides,
        )

    return _build


@pytest.fixture
def toast_factory(channel_uri: str) -> Callable[..., ToastNotification]:
    """Build ToastNotification with sensible defaults and easy overrides."""

    def _build(**overrides: Any) -> ToastNotification:
        return ToastNotification(
            channel_uri=overrides.pop("channel_uri", channel_uri),
            images=overrides.pop("images", {}),
            texts=overrides.pop("texts", ["Hello"]),
            template=overrides.pop("template", ToastTemplate.TOAST_TEXT_01),
            **overrides,
        )

    return _build


@pytest.fixture
def badge_factory(channel_uri: str) -> Callable[..., BadgeNotification]:
    """Build BadgeNotification (no value set unless overridden)."""

    def _build(**overrides: Any) -> BadgeNotification:
        return BadgeNotification(
            channel_uri=overrides.pop("channel_uri", channel_uri),
            **overrides,
        )

    return _build


@pytest.fixture
def raw_factory(channel_uri: str) -> Callable[..., RawNotification]:
    """Build RawNotification."""

    def _build(**overrides: Any) -> RawNotification:
        return RawNotification(
            channel_uri=overrides.pop("channel_uri", channel_uri),
            raw_xml=overrides.pop("raw_xml", "<data>1</data>"),
            **overrides,
        )

    return _build
