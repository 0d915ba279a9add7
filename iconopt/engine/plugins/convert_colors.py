"""convertColors — write every color in its shortest form.

``rgb(255, 0, 0)`` → ``#ff0000`` → ``#f00`` → ``red``; long names such as
``white`` become hex (``#fff``).
"""

from __future__ import annotations

import re

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.collections import COLOR_ATTRS, COLOR_SHORT_NAMES, NAMED_COLORS
from iconopt.svg.document import iter_elements

_RGB_RE = re.compile(
    r"^rgb\(\s*([+-]?[\d.]+%?)\s*[,\s]\s*([+-]?[\d.]+%?)\s*[,\s]\s*([+-]?[\d.]+%?)\s*\)$",
    re.IGNORECASE,
)
_HEX_RE = re.compile(r"^#[0-9a-fA-F]{3}$|^#[0-9a-fA-F]{6}$")
_SHORT_HEX_RE = re.compile(r"^#([0-9a-f])\1([0-9a-f])\2([0-9a-f])\3$")


def _channel(value: str) -> int:
    if value.endswith("%"):
        number = float(value[:-1]) * 2.55
    else:
        number = float(value)
    return max(0, min(255, round(number)))


def shorten_color(value: str) -> str:
    color = value.strip()
    lower = color.lower()

    if lower in NAMED_COLORS:
        color = NAMED_COLORS[lower]
    elif lower in COLOR_SHORT_NAMES.values():
        return lower

    m = _RGB_RE.match(color)
    if m:
        r, g, b = (_channel(part) for part in m.groups())
        color = f"#{r:02x}{g:02x}{b:02x}"

    if _HEX_RE.match(color):
        color = color.lower()
        color = _SHORT_HEX_RE.sub(r"#\1\2\3", color)
        color = COLOR_SHORT_NAMES.get(color, color)
    return color


@plugin(
    name="convertColors",
    stage=Stage.STYLES,
    description="Convert colors to their shortest form",
)
def convert_colors(ctx: OptimizeContext) -> None:
    for el in iter_elements(ctx.root):
        for name in COLOR_ATTRS:
            value = el.get(name)
            if value is None or "url(" in value:
                continue
            shortened = shorten_color(value)
            if shortened != value:
                el.set(name, shortened)
