# -*- coding: utf-8 -*-
"""Unit tests for DeliveryEnvelopeService and WNS header mapping."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from wns_payloads.exceptions import InvalidNotificationStateError
from wns_payloads.models.enums import BadgeGlyph, CachePolicy, NotificationKind
from wns_payloads.models.notifications import (
    BadgeNotification,
    RawNotification,
    TileNotification,
    ToastNotification,
)
from wns_payloads.services.delivery import DeliveryEnvelopeService, wns_headers
from wns_payloads.services.payload_builder import PayloadBuilderService


@pytest.fixture
def envelope_service(get_logger: Callable[[str], Any]) -> DeliveryEnvelopeService:
    return DeliveryEnvelopeService(
        PayloadBuilderService(get_logger=get_logger),
        get_logger=get_logger,
    )


def test_minimal_headers_contain_only_wns_type(
    toast_factory: Callable[..., ToastNotification],
) -> None:
    assert wns_headers(toast_factory()) == {"X-WNS-Type": "wns/toast"}


def test_tile_headers_map_all_metadata_in_order(
    tile_factory: Callable[..., TileNotification],
) -> None:
    tile = tile_factory(
        cache_policy=CachePolicy.NO_CACHE,
        request_for_status=True,
        tag="scores",
        time_to_live=600,
    )

    headers = wns_headers(tile)

    assert list(headers.items()) == [
        ("X-WNS-Type", "wns/tile"),
        ("X-WNS-Cache-Policy", "no-cache"),
        ("X-WNS-RequestForStatus", "true"),
        ("X-WNS-Tag", "scores"),
        ("X-WNS-TTL", "600"),
    ]


def test_badge_cache_policy_and_false_status_request(
    badge_factory: Callable[..., BadgeNotification],
) -> None:
    badge = badge_factory(numeric=1, cache_policy=CachePolicy.CACHE, request_for_status=False)

    assert wns_headers(badge) == {
        "X-WNS-Type": "wns/badge",
        "X-WNS-Cache-Policy": "cache",
        "X-WNS-RequestForStatus": "false",
    }


def test_zero_time_to_live_is_still_sent(
    raw_factory: Callable[..., RawNotification],
) -> None:
    assert wns_headers(raw_factory(time_to_live=0))["X-WNS-TTL"] == "0"


def test_empty_tile_tag_is_omitted(
    tile_factory: Callable[..., TileNotification],
) -> None:
    assert "X-WNS-Tag" not in wns_headers(tile_factory(tag=""))


def test_build_xml_envelope(
    envelope_service: DeliveryEnvelopeService,
    badge_factory: Callable[..., BadgeNotification],
    channel_uri: str,
) -> None:
    envelope = envelope_service.build(badge_factory(glyph=BadgeGlyph.ATTENTION))

    assert envelope.kind == NotificationKind.BADGE
    assert envelope.channel_uri == channel_uri
    assert envelope.content_type == "text/xml"
    assert envelope.body == '<badge value="attention">'
    assert envelope.headers["X-WNS-Type"] == "wns/badge"


def test_build_raw_envelope_uses_octet_stream(
    envelope_service: DeliveryEnvelopeService,
    raw_factory: Callable[..., RawNotification],
) -> None:
    envelope = envelope_service.build(raw_factory(raw_xml="payload-bytes"))

    assert envelope.content_type == "application/octet-stream"
    assert envelope.body == "payload-bytes"
    assert envelope.headers == {"X-WNS-Type": "wns/raw"}


def test_build_logs_envelope_event(
    envelope_service: DeliveryEnvelopeService,
    tile_factory: Callable[..., TileNotification],
    recording_logger: Any,
) -> None:
    envelope_service.build(tile_factory(tag="t"))

    assert recording_logger.event_names() == ["payload_built", "delivery_envelope_built"]
    fields = recording_logger.events[-1][2]
    assert fields["wns_type"] == "wns/tile"
    assert fields["header_count"] == 2


def test_build_propagates_invalid_badge(
    envelope_service: DeliveryEnvelopeService,
    badge_factory: Callable[..., BadgeNotification],
    recording_logger: Any,
) -> None:
    with pytest.raises(InvalidNotificationStateError):
        envelope_service.build(badge_factory())

    assert "delivery_envelope_built" not in recording_logger.event_names()


def test_build_warns_on_non_https_channel_but_still_builds(
    envelope_service: DeliveryEnvelopeService,
    raw_factory: Callable[..., RawNotification],
    recording_logger: Any,
) -> None:
    envelope = envelope_service.build(raw_factory(channel_uri="http://example.invalid/channel"))

    assert envelope.channel_uri == "http://example.invalid/channel"
    assert "delivery_envelope_channel_uri_suspicious" in recording_logger.event_names()


def test_cache_policy_given_as_wire_name_string_is_accepted(
    tile_factory: Callable[..., TileNotification],
) -> None:
    tile = tile_factory(cache_policy="NoCache")

    assert wns_headers(tile)["X-WNS-Cache-Policy"] == "no-cache"
