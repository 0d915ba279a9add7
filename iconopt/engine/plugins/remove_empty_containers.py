"""removeEmptyContainers — drop <g>, <defs>, <mask>… that hold nothing."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.collections import CONTAINER_ELEMENTS
from iconopt.svg.document import is_element, remove_element
from iconopt.svg.namespaces import local_name


def _is_removable(node: ET.Element, parent: ET.Element) -> bool:
    name = local_name(node.tag)
    if name == "svg" or name not in CONTAINER_ELEMENTS or len(node) != 0:
        return False
    if name == "pattern" and node.attrib:
        return False
    if name == "mask" and node.get("id") is not None:
        return False
    if local_name(parent.tag) == "switch":
        return False
    # An empty group with a filter can still paint
    if name == "g" and node.get("filter") is not None:
        return False
    return True


def _sweep(parent: ET.Element) -> int:
    removed = 0
    for child in list(parent):
        if not is_element(child):
            continue
        removed += _sweep(child)
        if _is_removable(child, parent):
            remove_element(parent, child)
            removed += 1
    return removed


@plugin(
    name="removeEmptyContainers",
    stage=Stage.STRUCTURE,
    description="Remove empty container elements",
)
def remove_empty_containers(ctx: OptimizeContext) -> None:
    ctx.count("containers_removed", _sweep(ctx.root))
