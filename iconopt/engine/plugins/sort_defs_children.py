"""sortDefsChildren — group identical definitions together so the markup compresses better.

Children are ordered by how often their element name occurs, then by longer
names first, then by name (descending).
"""

from __future__ import annotations

from collections import Counter

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.document import find_by_name, is_element
from iconopt.svg.namespaces import local_name


@plugin(
    name="sortDefsChildren",
    stage=Stage.STRUCTURE,
    description="Sort <defs> children by element name",
)
def sort_defs_children(ctx: OptimizeContext) -> None:
    for defs in find_by_name(ctx.root, "defs"):
        children = list(defs)
        # Comments have no name to sort by
        if len(children) < 2 or not all(is_element(c) for c in children):
            continue
        frequency = Counter(local_name(c.tag) for c in children)
        ordered = sorted(children, key=lambda c: local_name(c.tag), reverse=True)
        ordered.sort(key=lambda c: (-frequency[local_name(c.tag)], -len(local_name(c.tag))))
        defs[:] = ordered
