"""Notification factory."""

from wns_payloads.services.factory.notification_factory import NotificationFactory

__all__ = ["NotificationFactory"]
