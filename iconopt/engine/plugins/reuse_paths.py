"""reusePaths — define repeated paths once and draw them with <use>.

Paths sharing the same ``d``, ``fill`` and ``stroke`` move into ``<defs>`` as
``<path id="reuse-N">``; every occurrence becomes
``<use xlink:href="#reuse-N">`` keeping its remaining attributes. The
optimizer rewrites ``xlink:href`` to ``href`` afterwards.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.document import find_by_name, parent_map, rename
from iconopt.svg.namespaces import XLINK_NS, local_name, qualified
from iconopt.svg.references import has_scripts_or_styles

logger = logging.getLogger(__name__)

_SHARED_ATTRS = ("d", "fill", "stroke")

# Paths inside these are already definitions
_DEFINITION_CONTAINERS = {"clipPath", "defs", "marker", "mask", "pattern", "symbol"}


def _drawn_paths(root: ET.Element) -> list[ET.Element]:
    parents = parent_map(root)
    paths = []
    for path in find_by_name(root, "path"):
        if path.get("d") is None or len(path):
            continue
        node = parents.get(path)
        while node is not None and local_name(node.tag) not in _DEFINITION_CONTAINERS:
            node = parents.get(node)
        if node is None:
            paths.append(path)
    return paths


def _defs_for(root: ET.Element) -> ET.Element:
    for child in root:
        if isinstance(child.tag, str) and local_name(child.tag) == "defs":
            return child
    defs = ET.Element(qualified("defs"))
    root.insert(0, defs)
    return defs


@plugin(
    name="reusePaths",
    stage=Stage.SHAPES,
    tags={"shapes"},
    description="Replace repeated paths with <use> of one definition",
)
def reuse_paths(ctx: OptimizeContext) -> None:
    if has_scripts_or_styles(ctx.root):
        return

    groups: dict[tuple[str | None, ...], list[ET.Element]] = {}
    for path in _drawn_paths(ctx.root):
        key = tuple(path.get(name) for name in _SHARED_ATTRS)
        groups.setdefault(key, []).append(path)

    repeated = [paths for paths in groups.values() if len(paths) > 1]
    if not repeated:
        return

    taken = {el.get("id") for el in ctx.root.iter() if isinstance(el.tag, str)}
    defs = _defs_for(ctx.root)
    index = 0
    for paths in repeated:
        while f"reuse-{index}" in taken:
            index += 1
        reuse_id = f"reuse-{index}"
        index += 1

        definition = ET.SubElement(defs, qualified("path"), id=reuse_id)
        for name in _SHARED_ATTRS:
            value = paths[0].get(name)
            if value is not None:
                definition.set(name, value)

        for path in paths:
            for name in _SHARED_ATTRS:
                path.attrib.pop(name, None)
            path.set(qualified("href", XLINK_NS), "#" + reuse_id)
            rename(path, "use")
        ctx.count("paths_reused", len(paths))
    logger.debug("Reused %d repeated path(s)", len(repeated))
