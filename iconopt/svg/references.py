"""Find which ids an icon actually references."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from iconopt.svg.document import find_by_name, iter_elements
from iconopt.svg.namespaces import local_name

_URL_RE = re.compile(r"""url\(\s*['"]?#([^'")\s]+)""")
_ANIMATION_REF_RE = re.compile(r"^\s*([^\s;.]+)\.")


def referenced_ids(root: ET.Element) -> set[str]:
    """Ids used through url(#…), href="#…" or animation timing (``a.end``)."""
    ids: set[str] = set()
    for el in iter_elements(root):
        for name, value in el.attrib.items():
            attr = local_name(name)
            ids.update(_URL_RE.findall(value))
            if attr == "href" and value.startswith("#"):
                ids.add(value[1:])
            elif attr in ("begin", "end"):
                for part in value.split(";"):
                    m = _ANIMATION_REF_RE.match(part)
                    if m:
                        ids.add(m.group(1))
        if local_name(el.tag) == "style" and el.text:
            ids.update(_URL_RE.findall(el.text))
    return ids


def has_scripts_or_styles(root: ET.Element) -> bool:
    """Ids and computed styles can't be reasoned about when CSS or JS may use them."""
    return bool(find_by_name(root, "style", "script"))
