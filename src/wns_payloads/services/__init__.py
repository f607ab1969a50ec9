"""Application services."""

from wns_payloads.services.delivery import DeliveryEnvelopeService
from wns_payloads.services.factory import NotificationFactory
from wns_payloads.services.payload_builder import PayloadBuilderService

__all__ = [
    "DeliveryEnvelopeService",
    "NotificationFactory",
    "PayloadBuilderService",
]
