"""Delivery envelope service."""

from wns_payloads.services.delivery.envelope_service import (
    DeliveryEnvelopeService,
    wns_headers,
)

__all__ = ["DeliveryEnvelopeService", "wns_headers"]
