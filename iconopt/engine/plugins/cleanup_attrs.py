"""cleanupAttrs — collapse newlines and runs of spaces in attribute values."""

from __future__ import annotations

import re

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.document import iter_elements

_NEWLINE_RE = re.compile(r"(\S)\r?\n(\S)")
_STRAY_NEWLINE_RE = re.compile(r"\r?\n")
_SPACES_RE = re.compile(r"\s{2,}")


@plugin(
    name="cleanupAttrs",
    stage=Stage.CLEANUP,
    description="Collapse whitespace in attribute values",
)
def cleanup_attrs(ctx: OptimizeContext) -> None:
    for el in iter_elements(ctx.root):
        for name, value in list(el.attrib.items()):
            cleaned = _NEWLINE_RE.sub(r"\1 \2", value)
            cleaned = _STRAY_NEWLINE_RE.sub("", cleaned)
            cleaned = _SPACES_RE.sub(" ", cleaned).strip()
            if cleaned != value:
                el.set(name, cleaned)
