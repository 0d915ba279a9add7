"""collapseGroups — unwrap groups that carry no attributes, push single-child group attributes down.

    <g><g fill="red"><path d="…"/></g></g>  ->  <path fill="red" d="…"/>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.collections import ANIMATION_ELEMENTS, INHERITABLE_ATTRS
from iconopt.svg.document import is_element
from iconopt.svg.namespaces import local_name


def _has_animated_attr(el: ET.Element, name: str) -> bool:
    for child in el.iter():
        if (
            is_element(child)
            and local_name(child.tag) in ANIMATION_ELEMENTS
            and child.get("attributeName") == name
        ):
            return True
    return False


def _push_down(group: ET.Element, child: ET.Element) -> None:
    """Move the group's attributes onto its only child where that keeps rendering unchanged."""
    if child.get("id") is not None or group.get("filter") is not None:
        return
    if group.get("class") is not None and child.get("class") is not None:
        return
    clipped = group.get("clip-path") is not None or group.get("mask") is not None
    if clipped and not (
        local_name(child.tag) == "g"
        and group.get("transform") is None
        and child.get("transform") is None
    ):
        return

    for name, value in list(group.attrib.items()):
        if _has_animated_attr(child, name):
            return
        current = child.get(name)
        if current is None or current == "inherit":
            child.set(name, value)
        elif name == "transform":
            child.set(name, f"{value} {current}")
        elif name not in INHERITABLE_ATTRS and current != value:
            return
        del group.attrib[name]


def _collapse(parent: ET.Element) -> None:
    for group in list(parent):
        if not is_element(group):
            continue
        _collapse(group)
        if local_name(group.tag) != "g" or len(group) == 0 or local_name(parent.tag) == "switch":
            continue

        children = list(group)
        if group.attrib and len(children) == 1 and is_element(children[0]):
            _push_down(group, children[0])

        if group.attrib:
            continue
        if any(is_element(c) and local_name(c.tag) in ANIMATION_ELEMENTS for c in children):
            continue

        index = list(parent).index(group)
        if children and group.tail:
            children[-1].tail = (children[-1].tail or "") + group.tail
        parent.remove(group)
        for offset, child in enumerate(children):
            parent.insert(index + offset, child)


@plugin(
    name="collapseGroups",
    stage=Stage.STRUCTURE,
    description="Collapse useless groups",
)
def collapse_groups(ctx: OptimizeContext) -> None:
    _collapse(ctx.root)
