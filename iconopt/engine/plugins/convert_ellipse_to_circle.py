"""convertEllipseToCircle."""

from __future__ import annotations

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.document import find_by_name, rename


@plugin(
    name="convertEllipseToCircle",
    stage=Stage.SHAPES,
    tags={"shapes"},
    description="Convert ellipses with equal radii to circles",
)
def convert_ellipse_to_circle(ctx: OptimizeContext) -> None:
    for el in find_by_name(ctx.root, "ellipse"):
        rx = el.get("rx", "0")
        ry = el.get("ry", "0")
        if rx != ry and rx != "auto" and ry != "auto":
            continue
        radius = ry if rx == "auto" else rx
        el.attrib.pop("rx", None)
        el.attrib.pop("ry", None)
        el.set("r", radius)
        rename(el, "circle")
