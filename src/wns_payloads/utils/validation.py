"""Helpers for logging channel URIs without leaking their tokens."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit


def is_channel_uri(uri: Any) -> bool:
    """Return True if uri looks like an https channel URI (scheme + host)."""
    if not isinstance(uri, str):
        return False
    parts = urlsplit(uri.strip())
    return parts.scheme == "https" and bool(parts.netloc)


def mask_channel_uri(uri: str | None) -> str:
    """Return a masked channel URI for logging (e.g. https://host/?token=AwYA...9xQ=).

    The host is kept so logs still show which notification cluster was targeted.
    """
    if not uri:
        return "***"
    parts = urlsplit(uri)
    secret = parts.query or parts.path.lstrip("/")
    if not parts.netloc:
        secret = uri
    masked = f"{secret[:4]}...{secret[-4:]}" if len(secret) >= 10 else "***"
    if not parts.netloc:
        return masked
    return f"{parts.scheme}://{parts.netloc}/?{masked}"
