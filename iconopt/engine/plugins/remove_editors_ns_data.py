"""removeEditorsNSData — drop elements and attributes in drawing-application namespaces."""

from __future__ import annotations

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.document import is_element, iter_elements, parent_map, remove_element
from iconopt.svg.namespaces import EDITOR_NAMESPACES, namespace_of

_EDITOR_URIS = set(EDITOR_NAMESPACES.values())


@plugin(
    name="removeEditorsNSData",
    stage=Stage.CLEANUP,
    description="Remove Inkscape, Sodipodi, Illustrator and Sketch metadata",
)
def remove_editors_ns_data(ctx: OptimizeContext) -> None:
    parents = parent_map(ctx.root)
    for node, parent in parents.items():
        if is_element(node) and namespace_of(node.tag) in _EDITOR_URIS:
            remove_element(parent, node)

    for el in iter_elements(ctx.root):
        for name in list(el.attrib):
            if namespace_of(name) in _EDITOR_URIS:
                del el.attrib[name]
