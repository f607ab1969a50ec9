"""Configuration subpackage."""

from wns_payloads.config.config import (
    AppSettings,
    DeliverySettings,
    LoggingSettings,
    PayloadSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "DeliverySettings",
    "LoggingSettings",
    "PayloadSettings",
    "Settings",
    "get_settings",
]
