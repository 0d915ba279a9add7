"""removeComments — drop XML comments, keeping legal ones (``<!--! ... -->``)."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.document import parent_map, remove_element


@plugin(
    name="removeComments",
    stage=Stage.CLEANUP,
    description="Remove comments",
)
def remove_comments(ctx: OptimizeContext) -> None:
    parents = parent_map(ctx.root)
    removed = 0
    for node, parent in parents.items():
        if node.tag is ET.Comment and not (node.text or "").startswith("!"):
            remove_element(parent, node)
            removed += 1
    ctx.count("comments_removed", removed)
