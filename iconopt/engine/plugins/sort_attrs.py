"""sortAttrs — deterministic attribute order, which also compresses better."""

from __future__ import annotations

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.collections import ATTR_ORDER
from iconopt.svg.document import iter_elements
from iconopt.svg.namespaces import local_name, namespace_of

_PRIORITY = {name: i for i, name in enumerate(ATTR_ORDER)}


def _sort_key(name: str) -> tuple[int, int, str]:
    local = local_name(name)
    # fill-opacity sorts with fill, stroke-width with stroke
    group = local.split("-", 1)[0]
    priority = _PRIORITY.get(local, _PRIORITY.get(group, len(ATTR_ORDER)))
    namespaced = 1 if namespace_of(name) else 0
    return (namespaced, priority, local)


@plugin(
    name="sortAttrs",
    stage=Stage.STRUCTURE,
    description="Sort element attributes",
)
def sort_attrs(ctx: OptimizeContext) -> None:
    for el in iter_elements(ctx.root):
        if len(el.attrib) < 2:
            continue
        ordered = sorted(el.attrib.items(), key=lambda item: _sort_key(item[0]))
        el.attrib.clear()
        el.attrib.update(ordered)
