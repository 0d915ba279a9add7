"""removeHiddenElems — drop elements that can never render."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.path.parser import parse_path_data
from iconopt.svg.document import is_element, iter_elements, parent_map, remove_element
from iconopt.svg.namespaces import local_name
from iconopt.svg.references import referenced_ids

# Elements that only render through a reference, so opacity/display rules differ
_NON_RENDERING = {"clipPath", "defs", "linearGradient", "marker", "mask", "pattern",
                  "radialGradient", "symbol"}


def _number(el: ET.Element, name: str, default: float | None = None) -> float | None:
    value = el.get(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return None


def _is_zero(el: ET.Element, name: str) -> bool:
    return _number(el, name) == 0


def _has_markers(el: ET.Element) -> bool:
    return any(el.get(m) is not None for m in ("marker-start", "marker-mid", "marker-end"))


def _inside_non_rendering(el: ET.Element, parents: dict[ET.Element, ET.Element]) -> bool:
    node = parents.get(el)
    while node is not None:
        if local_name(node.tag) in _NON_RENDERING:
            return True
        node = parents.get(node)
    return False


def is_hidden(el: ET.Element, parents: dict[ET.Element, ET.Element]) -> bool:
    name = local_name(el.tag)

    if el.get("display") == "none" and name != "marker":
        return True
    if el.get("opacity") == "0" and not _inside_non_rendering(el, parents):
        return True

    if name == "circle":
        return len(el) == 0 and _is_zero(el, "r")
    if name == "ellipse":
        return len(el) == 0 and (_is_zero(el, "rx") or _is_zero(el, "ry"))
    if name in ("rect", "image", "pattern"):
        return len(el) == 0 and (_is_zero(el, "width") or _is_zero(el, "height"))
    if name == "path":
        d = el.get("d")
        if d is None:
            return True
        commands = parse_path_data(d)
        # A lone moveto draws nothing unless a marker sits on it
        return len(commands) == 0 or (len(commands) == 1 and not _has_markers(el))
    if name in ("polyline", "polygon"):
        return el.get("points") is None
    return False


@plugin(
    name="removeHiddenElems",
    stage=Stage.SHAPES,
    tags={"shapes"},
    description="Remove hidden and zero-size elements",
)
def remove_hidden_elems(ctx: OptimizeContext) -> None:
    parents = parent_map(ctx.root)
    referenced = referenced_ids(ctx.root)
    removed = 0
    for el, parent in parents.items():
        if not is_element(el):
            continue
        # Hidden definitions used through <use> or url(#…) must stay
        if any(node.get("id") in referenced for node in iter_elements(el)):
            continue
        if is_hidden(el, parents):
            remove_element(parent, el)
            removed += 1
    ctx.count("hidden_removed", removed)
