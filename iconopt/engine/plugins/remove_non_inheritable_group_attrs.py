"""removeNonInheritableGroupAttrs — drop presentation attributes a <g> can't pass down.

A group only forwards inheritable properties to its children, plus the few
that apply to the group as a whole (opacity, transform, clip-path…).
"""

from __future__ import annotations

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.collections import GROUP_ONLY_ATTRS, INHERITABLE_ATTRS, PRESENTATION_ATTRS
from iconopt.svg.document import find_by_name


@plugin(
    name="removeNonInheritableGroupAttrs",
    stage=Stage.STYLES,
    description="Remove non-inheritable presentation attributes from groups",
)
def remove_non_inheritable_group_attrs(ctx: OptimizeContext) -> None:
    removed = 0
    for group in find_by_name(ctx.root, "g"):
        for name in list(group.attrib):
            if (
                name in PRESENTATION_ATTRS
                and name not in INHERITABLE_ATTRS
                and name not in GROUP_ONLY_ATTRS
            ):
                del group.attrib[name]
                removed += 1
    ctx.count("group_attrs_removed", removed)
