"""Dependency injection."""

from wns_payloads.DI.container import Container

__all__ = ["Container"]
