"""moveElemsAttrsToGroup — hoist inheritable attributes every child of a group shares.

    <g><path fill="red" d="…"/><path fill="red" d="…"/></g>
      ->  <g fill="red"><path d="…"/><path d="…"/></g>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.collections import INHERITABLE_ATTRS
from iconopt.svg.document import find_by_name, is_element
from iconopt.svg.references import has_scripts_or_styles


def _common_attrs(children: list[ET.Element]) -> dict[str, str]:
    common = {k: v for k, v in children[0].attrib.items() if k in INHERITABLE_ATTRS}
    for child in children[1:]:
        common = {k: v for k, v in common.items() if child.get(k) == v}
        if not common:
            break
    return common


@plugin(
    name="moveElemsAttrsToGroup",
    stage=Stage.STRUCTURE,
    description="Move attributes shared by all children onto their group",
)
def move_elems_attrs_to_group(ctx: OptimizeContext) -> None:
    # Selectors may target the children individually
    if has_scripts_or_styles(ctx.root):
        return

    # Deepest groups first, so attributes can bubble up through nesting
    for group in reversed(find_by_name(ctx.root, "g")):
        children = [c for c in group if is_element(c)]
        if len(children) < 2:
            continue
        common = _common_attrs(children)
        for name, value in common.items():
            group.set(name, value)
            for child in children:
                del child.attrib[name]
        ctx.count("attrs_moved", len(common))
