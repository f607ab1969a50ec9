"""Payload builder service."""

from wns_payloads.services.payload_builder.payload_builder_service import (
    PayloadBuilderService,
)

__all__ = ["PayloadBuilderService"]
