# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from wns_payloads.config import get_settings
from wns_payloads.services.delivery import DeliveryEnvelopeService
from wns_payloads.services.factory import NotificationFactory
from wns_payloads.services.payload_builder import PayloadBuilderService


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, notification factory, payload and envelope services."""

    config = providers.Callable(get_settings)

    notification_factory = providers.Singleton(
        NotificationFactory,
        settings=config,
    )

    payload_builder_service = providers.Singleton(PayloadBuilderService)

    delivery_envelope_service = providers.Singleton(
        DeliveryEnvelopeService,
        payload_builder=payload_builder_service,
    )
