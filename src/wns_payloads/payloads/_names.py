"""Wire-name resolution for enum-or-string template fields."""

from __future__ import annotations

from enum import Enum


def wire_name(value: Enum | str) -> str:
    """Return the serialized token for a template member or a caller-supplied string."""
    if isinstance(value, Enum):
        return str(value.value)
    return value
