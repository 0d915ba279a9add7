"""ID replacement — give every id in an icon a fresh, collision-free name.

Icons get inlined side by side in one HTML page, where ``id="a"`` from two
icons would clash. Ids are rewritten on the serialized markup together with
every reference to them: ``url(#a)``, ``href="#a"``, ``begin="a.end"`` and
``;``-separated animation lists.
"""

from __future__ import annotations

import re
import secrets
from collections.abc import Callable

_ID_RE = re.compile(r'\sid="(\S+)"')

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def find_ids(content: str) -> list[str]:
    return _ID_RE.findall(content)


def replace_ids(content: str, prefix: str | Callable[[str], str]) -> str:
    """Rename every id in ``content``.

    ``prefix`` is either a callable mapping the old id to the new one, or a
    string used with :func:`counter_prefix`.
    """
    ids = find_ids(content)
    if not ids:
        return content
    new_name = counter_prefix(prefix) if isinstance(prefix, str) else prefix

    # Marks already-replaced ids so a new id is never matched again
    suffix = "suffix" + secrets.token_hex(4)
    for old_id in ids:
        new_id = new_name(old_id)
        pattern = re.compile(r'([#;"])(' + re.escape(old_id) + r')([")]|\.[a-z])')
        content = pattern.sub(lambda m: m.group(1) + new_id + suffix + m.group(3), content)
    return content.replace(suffix, "")


def counter_prefix(prefix: str) -> Callable[[str], str]:
    """``prefix`` followed by a base-36 counter: svgID0, svgID1, … svgIDa."""
    counter = 0

    def next_id(_old_id: str) -> str:
        nonlocal counter
        new_id = prefix + to_base36(counter)
        counter += 1
        return new_id

    return next_id
