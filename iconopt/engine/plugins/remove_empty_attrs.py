"""removeEmptyAttrs."""

from __future__ import annotations

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.collections import CONDITIONAL_PROCESSING_ATTRS
from iconopt.svg.document import iter_elements


@plugin(
    name="removeEmptyAttrs",
    stage=Stage.CLEANUP,
    description="Remove attributes with empty values",
)
def remove_empty_attrs(ctx: OptimizeContext) -> None:
    for el in iter_elements(ctx.root):
        for name, value in list(el.attrib.items()):
            # An empty conditional attribute disables the element
            if value == "" and name not in CONDITIONAL_PROCESSING_ATTRS:
                del el.attrib[name]
