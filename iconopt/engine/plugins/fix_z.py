"""fixZ — close sub-paths that end with a straight segment back to their start.

Runs the path cursor normalizer on every ``<path d>`` and writes the result
back in compact form:

    <path d="M2 2h20v20H2V2"/>  ->  <path d="M2 2h20v20H2z"/>
"""

from __future__ import annotations

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.path.normalizer import count_closed, normalize_path
from iconopt.path.parser import parse_path_data
from iconopt.path.stringify import stringify_path_data
from iconopt.svg.document import find_by_name


def fix_path_data(
    d: str,
    precision: int | None = None,
    disable_space_after_flags: bool = False,
) -> tuple[str, int]:
    """Normalize one ``d`` value. Returns (new d, number of segments closed)."""
    commands = parse_path_data(d)
    if not commands:
        return d, 0
    before = list(commands)
    normalize_path(commands)
    closed = count_closed(before, commands)
    return stringify_path_data(commands, precision, disable_space_after_flags), closed


@plugin(
    name="fixZ",
    stage=Stage.SHAPES,
    tags={"shapes"},
    description="Replace straight segments returning to the sub-path start with z",
)
def fix_z(ctx: OptimizeContext) -> None:
    for el in find_by_name(ctx.root, "path"):
        d = el.get("d")
        if not d:
            continue
        fixed, closed = fix_path_data(
            d,
            precision=ctx.config.precision,
            disable_space_after_flags=ctx.config.no_space_after_flags,
        )
        el.set("d", fixed)
        ctx.count("paths_closed", closed)
