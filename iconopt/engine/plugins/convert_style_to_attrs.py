"""convertStyleToAttrs — turn simple ``style`` declarations into presentation attributes.

    <path style="fill:#000;stroke-width:2"/>  ->  <path fill="#000" stroke-width="2"/>

Declarations that attributes can't express (``!important``, custom
properties, anything not a presentation attribute) stay in ``style``.
"""

from __future__ import annotations

import re

from iconopt.engine.context import OptimizeContext
from iconopt.engine.registry import Stage, plugin
from iconopt.svg.collections import PRESENTATION_ATTRS
from iconopt.svg.document import iter_elements

# Split on ';' outside of parentheses and quotes, e.g. url(data:...;base64,...)
_DECLARATION_RE = re.compile(r"""(?:[^;("']|\([^)]*\)|"[^"]*"|'[^']*')+""")


def parse_style(style: str) -> list[tuple[str, str]] | None:
    """Return (property, value) pairs, or None when the style is too complex to touch."""
    if "/*" in style:
        return None
    declarations: list[tuple[str, str]] = []
    for chunk in _DECLARATION_RE.findall(style):
        chunk = chunk.strip()
        if not chunk:
            continue
        prop, sep, value = chunk.partition(":")
        if not sep:
            return None
        declarations.append((prop.strip().lower(), value.strip()))
    return declarations


@plugin(
    name="convertStyleToAttrs",
    stage=Stage.STYLES,
    description="Move presentation properties from style to attributes",
)
def convert_style_to_attrs(ctx: OptimizeContext) -> None:
    for el in iter_elements(ctx.root):
        style = el.get("style")
        if style is None:
            continue
        declarations = parse_style(style)
        if declarations is None:
            continue

        remaining: list[str] = []
        for prop, value in declarations:
            if prop in PRESENTATION_ATTRS and "!important" not in value and value:
                el.set(prop, value)
            else:
                remaining.append(f"{prop}:{value}")

        if remaining:
            el.set("style", ";".join(remaining))
        else:
            del el.attrib["style"]
