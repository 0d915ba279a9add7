"""moveGroupAttrsToElems — push a group's transform down onto its paths.

    <g transform="scale(2)"><path d="…"/><path transform="rotate(45)" d="…"/></g>
      ->  <g><path transform="scale(2)" d="…"/><path transform="scale(2) rotate(45)" d="…"/></g>

The emptied group is then unwrapped by collapseGroups.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.collections import REFERENCE_ATTRS
from iconopt.svg.document import find_by_name, is_element
from iconopt.svg.namespaces import local_name

# Elements whose own transform composes with the group's
_TRANSFORMABLE = {"g", "glyph", "missing-glyph", "path", "text"}


def _can_move(group: ET.Element) -> bool:
    children = list(group)
    if not children:
        return False
    # url(#…) targets are resolved in the group's coordinate system
    if any(name in REFERENCE_ATTRS and "url(" in value for name, value in group.attrib.items()):
        return False
    return all(
        is_element(child)
        and local_name(child.tag) in _TRANSFORMABLE
        and child.get("id") is None
        for child in children
    )


@plugin(
    name="moveGroupAttrsToElems",
    stage=Stage.STRUCTURE,
    description="Move a group's transform onto its children",
)
def move_group_attrs_to_elems(ctx: OptimizeContext) -> None:
    for group in find_by_name(ctx.root, "g"):
        transform = group.get("transform")
        if transform is None or not _can_move(group):
            continue
        for child in group:
            current = child.get("transform")
            child.set("transform", f"{transform} {current}" if current else transform)
        del group.attrib["transform"]
        ctx.count("transforms_moved")
