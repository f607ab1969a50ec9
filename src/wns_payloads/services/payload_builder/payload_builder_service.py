# -*- coding: utf-8 -*-
"""PayloadBuilderService: produce_payload() with structured logging around it."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from wns_payloads.exceptions import WnsPayloadError
from wns_payloads.models.notifications import WindowsNotification
from wns_payloads.payloads.builder import produce_payload
from wns_payloads.utils.validation import mask_channel_uri


class PayloadBuilderService:
    """Builds payload bodies for the transport and logs each build.

    Holds no per-notification state; one instance can serve any number of
    callers. Failures are logged and re-raised unchanged.
    """

    def __init__(
        self,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            get_logger: Logger factory (injected).
            logger_name: Optional logger name (defaults to class name).
        """
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def build(self, notification: WindowsNotification) -> str:
        """Return the payload body for ``notification``.

        Raises:
            InvalidNotificationStateError: Badge with neither numeric nor glyph.
            UnsupportedNotificationError: Not a notification variant.
        """
        kind = getattr(notification, "kind", None)
        channel = mask_channel_uri(getattr(notification, "channel_uri", None))
        try:
            payload = produce_payload(notification)
        except WnsPayloadError as exc:
            self._logger.warning(
                "payload_build_failed",
                notification_kind=getattr(kind, "value", None),
                channel_uri=channel,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise
        self._logger.debug(
            "payload_built",
            notification_kind=kind.value,
            channel_uri=channel,
            payload_length=len(payload),
        )
        return payload
