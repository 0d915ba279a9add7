"""cleanupIds — remove ids nothing refers to."""

from __future__ import annotations

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.document import iter_elements
from iconopt.svg.references import has_scripts_or_styles, referenced_ids


@plugin(
    name="cleanupIds",
    stage=Stage.IDS,
    description="Remove unused ids",
)
def cleanup_ids(ctx: OptimizeContext) -> None:
    # CSS selectors or scripts may use any id
    if has_scripts_or_styles(ctx.root):
        return
    referenced = referenced_ids(ctx.root)
    removed = 0
    for el in iter_elements(ctx.root):
        element_id = el.get("id")
        if element_id is not None and element_id not in referenced:
            del el.attrib["id"]
            removed += 1
    ctx.count("ids_removed", removed)
