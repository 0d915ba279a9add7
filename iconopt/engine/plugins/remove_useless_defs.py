"""removeUselessDefs — keep only definitions something can reference."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.document import find_by_name, is_element
from iconopt.svg.namespaces import local_name


def _useful(element: ET.Element) -> list[ET.Element]:
    """Children worth keeping: those with an id, <style>, or the useful content of the rest."""
    kept: list[ET.Element] = []
    for child in element:
        if not is_element(child):
            continue
        if child.get("id") is not None or local_name(child.tag) == "style":
            kept.append(child)
        else:
            kept.extend(_useful(child))
    return kept


@plugin(
    name="removeUselessDefs",
    stage=Stage.CLEANUP,
    description="Remove <defs> content without an id",
)
def remove_useless_defs(ctx: OptimizeContext) -> None:
    for defs in find_by_name(ctx.root, "defs"):
        kept = _useful(defs)
        removed = sum(1 for c in defs if is_element(c)) - len(kept)
        for child in list(defs):
            defs.remove(child)
        for child in kept:
            child.tail = None
            defs.append(child)
        ctx.count("defs_removed", max(removed, 0))
