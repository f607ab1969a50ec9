# -*- coding: utf-8 -*-
"""Markup escaping and element serialization.

WNS silently drops notifications whose body is not well-formed XML, so every
caller-supplied string goes through escape_markup() before it reaches the
output. Attributes are written in the order given, never sorted.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from xml.sax.saxutils import escape

_QUOTE_ENTITIES: dict[str, str] = {'"': "&quot;", "'": "&apos;"}

# Attribute-value normalization turns raw whitespace controls into spaces.
_ATTRIBUTE_ENTITIES: dict[str, str] = {
    **_QUOTE_ENTITIES,
    "\t": "&#9;",
    "\n": "&#10;",
    "\r": "&#13;",
}

# Line-end normalization turns a raw \r into \n inside element content.
_TEXT_ENTITIES: dict[str, str] = {**_QUOTE_ENTITIES, "\r": "&#13;"}

# Characters outside the XML 1.0 Char production: C0 controls, surrogates, U+FFFE, U+FFFF.
_FORBIDDEN_CONTROLS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def escape_markup(text: str, *, attribute: bool = False) -> str:
    """Return ``text`` safe to embed in an element body or attribute value.

    Converts ``& < > " '`` to entities. Characters XML 1.0 forbids (C0
    controls, lone surrogates, U+FFFE, U+FFFF) are removed since no escaped
    form of them exists.

    Args:
        text: Caller-supplied text.
        attribute: If True, also encode tab/newline/carriage return so they
            survive attribute-value normalization.
    """
    cleaned = _FORBIDDEN_CONTROLS.sub("", text)
    return escape(cleaned, _ATTRIBUTE_ENTITIES if attribute else _TEXT_ENTITIES)


def render_attributes(attributes: Mapping[str, str]) -> str:
    """Render ``name="value"`` pairs in declared order, each preceded by a space."""
    return "".join(
        f' {name}="{escape_markup(value, attribute=True)}"'
        for name, value in attributes.items()
    )


def render_element(
    tag: str,
    attributes: Mapping[str, str] | None = None,
    *,
    children: Iterable[str] = (),
    text: str | None = None,
) -> str:
    """Serialize one element.

    ``children`` are already-serialized child elements; ``text`` is escaped
    body text placed before them. An element with neither is self-closed.
    """
    attrs = render_attributes(attributes or {})
    body = "" if text is None else escape_markup(text)
    inner = body + "".join(children)
    if text is None and not inner:
        return f"<{tag}{attrs}/>"
    return f"<{tag}{attrs}>{inner}</{tag}>"
