# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL,
PAYLOAD__DEFAULT_TILE_TEMPLATE.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wns_payloads.models.enums import TileTemplate, ToastDuration, ToastTemplate


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "wns-payloads"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/wns_payloads.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class PayloadSettings(BaseSettings):
    """Defaults applied by NotificationFactory when building notifications (PAYLOAD__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    default_tile_template: TileTemplate = Field(
        default=TileTemplate.TILE_SQUARE_BLOCK,
        description="Tile template used when the caller does not pick one.",
    )
    default_toast_template: ToastTemplate = Field(
        default=ToastTemplate.TOAST_IMAGE_AND_TEXT_01,
        description="Toast template used when the caller does not pick one.",
    )
    default_toast_duration: ToastDuration = Field(
        default=ToastDuration.SHORT,
        description="Toast duration used when the caller does not pick one.",
    )


class DeliverySettings(BaseSettings):
    """Delivery metadata defaults forwarded to the transport (DELIVERY__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    default_time_to_live: Optional[int] = Field(
        default=None,
        ge=0,
        description="X-WNS-TTL in seconds; None leaves it to WNS.",
    )
    request_for_status: Optional[bool] = Field(
        default=None,
        description="X-WNS-RequestForStatus; None omits the header.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, DELIVERY__DEFAULT_TIME_TO_LIVE.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    payload: PayloadSettings = Field(default_factory=PayloadSettings)
    delivery: DeliverySettings = Field(default_factory=DeliverySettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(delivery={"default_time_to_live": 600})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from wns_payloads.config import get_settings

        settings = get_settings()
        ttl = settings.delivery.default_time_to_live
    """
    return Settings()
