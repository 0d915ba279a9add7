"""removeUselessStrokeAndFill — drop stroke/fill attributes that can't paint anything."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.collections import SHAPE_ELEMENTS
from iconopt.svg.document import find_by_name, parent_map
from iconopt.svg.references import has_scripts_or_styles


def _computed(
    el: ET.Element,
    name: str,
    parents: dict[ET.Element, ET.Element],
) -> str | None:
    """Attribute value on ``el`` or the nearest ancestor that sets it."""
    node: ET.Element | None = el
    while node is not None:
        value = node.get(name)
        if value is not None and value != "inherit":
            return value
        node = parents.get(node)
    return None


def _drop(el: ET.Element, prefix: str) -> None:
    for name in list(el.attrib):
        if name == prefix or name.startswith(prefix + "-"):
            del el.attrib[name]


@plugin(
    name="removeUselessStrokeAndFill",
    stage=Stage.STYLES,
    tags={"static"},
    description="Remove stroke and fill attributes that have no visible effect",
)
def remove_useless_stroke_and_fill(ctx: OptimizeContext) -> None:
    if has_scripts_or_styles(ctx.root):
        return
    parents = parent_map(ctx.root)

    for el in find_by_name(ctx.root, *SHAPE_ELEMENTS):
        if el.get("style") is not None:
            continue

        stroke = _computed(el, "stroke", parents)
        if (
            stroke is None
            or stroke == "none"
            or _computed(el, "stroke-opacity", parents) == "0"
            or _computed(el, "stroke-width", parents) == "0"
        ):
            parent = parents.get(el)
            inherited = _computed(parent, "stroke", parents) if parent is not None else None
            _drop(el, "stroke")
            # Still needed to cancel a stroke set on an ancestor
            if inherited is not None and inherited != "none":
                el.set("stroke", "none")

        fill = _computed(el, "fill", parents)
        if fill == "none" or _computed(el, "fill-opacity", parents) == "0":
            for name in list(el.attrib):
                if name.startswith("fill-"):
                    del el.attrib[name]
            if fill != "none":
                el.set("fill", "none")
