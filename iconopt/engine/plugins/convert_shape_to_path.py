"""convertShapeToPath — rewrite rect, line, polyline and polygon as <path>.

Paths compress better and let later passes (fixZ, mergers) treat every shape
the same way. Rounded rects, circles and ellipses stay as they are.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.path.commands import CLOSEPATH, PathCommand
from iconopt.path.stringify import stringify_path_data
from iconopt.svg.document import find_by_name, parent_map, remove_element, rename
from iconopt.svg.namespaces import local_name

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[-+]?(?:\d*\.\d+|\d+\.?)(?:[eE][-+]?\d+)?")
_PLAIN_NUMBER_RE = re.compile(r"^\s*[-+]?(?:\d*\.\d+|\d+\.?)(?:[eE][-+]?\d+)?\s*$")


def _plain_number(el: ET.Element, name: str, default: str | None = None) -> float | None:
    """Unit-less numeric attribute; None for percentages, units or missing values."""
    value = el.get(name, default)
    if value is None or not _PLAIN_NUMBER_RE.match(value):
        return None
    return float(value)


def _rect_commands(el: ET.Element) -> list[PathCommand] | None:
    if el.get("rx") is not None or el.get("ry") is not None:
        return None
    x = _plain_number(el, "x", "0")
    y = _plain_number(el, "y", "0")
    width = _plain_number(el, "width")
    height = _plain_number(el, "height")
    if None in (x, y, width, height):
        return None
    return [
        PathCommand("M", (x, y)),
        PathCommand("H", (x + width,)),
        PathCommand("V", (y + height,)),
        PathCommand("H", (x,)),
        CLOSEPATH,
    ]


def _line_commands(el: ET.Element) -> list[PathCommand] | None:
    coords = [_plain_number(el, name, "0") for name in ("x1", "y1", "x2", "y2")]
    if None in coords:
        return None
    x1, y1, x2, y2 = coords
    return [PathCommand("M", (x1, y1)), PathCommand("L", (x2, y2))]


def _poly_commands(el: ET.Element, closed: bool) -> list[PathCommand] | None:
    numbers = [float(n) for n in _NUMBER_RE.findall(el.get("points", ""))]
    if len(numbers) < 4:
        return []
    pairs = [(numbers[i], numbers[i + 1]) for i in range(0, len(numbers) - 1, 2)]
    commands = [PathCommand("M", pairs[0])]
    commands.extend(PathCommand("L", p) for p in pairs[1:])
    if closed:
        commands.append(CLOSEPATH)
    return commands


_GEOMETRY_ATTRS = {
    "rect": ("x", "y", "width", "height"),
    "line": ("x1", "y1", "x2", "y2"),
    "polyline": ("points",),
    "polygon": ("points",),
}


@plugin(
    name="convertShapeToPath",
    stage=Stage.SHAPES,
    tags={"shapes"},
    description="Convert basic shapes to paths",
)
def convert_shape_to_path(ctx: OptimizeContext) -> None:
    parents = parent_map(ctx.root)
    converted = 0
    for el in find_by_name(ctx.root, *_GEOMETRY_ATTRS):
        name = local_name(el.tag)
        if name == "rect":
            commands = _rect_commands(el)
        elif name == "line":
            commands = _line_commands(el)
        else:
            commands = _poly_commands(el, closed=name == "polygon")

        if commands is None:
            continue
        if not commands:
            # Fewer than two points renders nothing
            logger.debug("Removing degenerate <%s>", name)
            remove_element(parents[el], el)
            continue

        d = stringify_path_data(
            commands,
            precision=ctx.config.precision,
            disable_space_after_flags=ctx.config.no_space_after_flags,
        )
        for attr in _GEOMETRY_ATTRS[name]:
            el.attrib.pop(attr, None)
        el.set("d", d)
        rename(el, "path")
        converted += 1
    ctx.count("shapes_converted", converted)
