# -*- coding: utf-8 -*-
"""Visual markup assembler shared by tile and toast payloads."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from wns_payloads.payloads.markup import render_element


def assemble_visual(
    root_tag: str,
    root_attributes: Mapping[str, str],
    template_name: str,
    images: Mapping[str, str],
    texts: Sequence[str],
) -> str:
    """Build ``<root><visual><binding template=...>...</binding></visual></root>``.

    Images and texts are numbered independently, each starting at id 1, in
    the order the caller supplied them. ``alt`` is written only when
    non-empty. No check is made against what the template can display.

    Args:
        root_tag: ``tile`` or ``toast``.
        root_attributes: Root attributes in output order (e.g. launch, duration).
        template_name: Value of the binding ``template`` attribute.
        images: Image src -> alt text, insertion ordered.
        texts: Text lines, in order.

    Returns:
        The serialized payload.
    """
    parts: list[str] = []

    for image_id, (src, alt) in enumerate(images.items(), start=1):
        attributes = {"id": str(image_id), "src": src}
        if alt:
            attributes["alt"] = alt
        parts.append(render_element("image", attributes))

    for text_id, line in enumerate(texts, start=1):
        parts.append(render_element("text", {"id": str(text_id)}, text=line))

    binding = render_element("binding", {"template": template_name}, children=parts)
    visual = render_element("visual", children=[binding])
    return render_element(root_tag, root_attributes, children=[visual])
