"""SVGDocument — one icon held as an ElementTree, with the helpers plugins share."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from iconopt.svg.namespaces import local_name, namespace_of, qualified

logger = logging.getLogger(__name__)

# Elements whose whitespace is content
TEXT_ELEMENTS = {"text", "tspan", "textPath", "title", "desc", "style", "script", "pre"}


class SVGDocument:
    """Parsed SVG icon. ``load()`` replaces the content in place."""

    def __init__(self, content: str) -> None:
        self._root: ET.Element = ET.Element(qualified("svg"))
        self.load(content)

    @property
    def root(self) -> ET.Element:
        return self._root

    def load(self, content: str) -> None:
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        try:
            root = ET.fromstring(content, parser=parser)
        except ET.ParseError as e:
            raise ValueError(f"Invalid SVG: {e}") from e
        if local_name(root.tag) != "svg":
            raise ValueError(f"Root element must be <svg>, got <{local_name(root.tag)}>")
        _strip_whitespace(root, preserve=False)
        self._root = root
        logger.debug("Loaded SVG: %d elements", sum(1 for _ in iter_elements(root)))

    def to_string(self) -> str:
        text = ET.tostring(self._root, encoding="unicode")
        return text.replace(" />", "/>")

    def __str__(self) -> str:
        return self.to_string()


def _strip_whitespace(element: ET.Element, preserve: bool) -> None:
    if is_element(element) and local_name(element.tag) in TEXT_ELEMENTS:
        preserve = True
    if not preserve and element.text is not None and not element.text.strip():
        element.text = None
    for child in element:
        _strip_whitespace(child, preserve)
        if not preserve and child.tail is not None and not child.tail.strip():
            child.tail = None


def is_element(node: ET.Element) -> bool:
    """False for comments and processing instructions."""
    return isinstance(node.tag, str)


def iter_elements(root: ET.Element) -> Iterator[ET.Element]:
    for node in root.iter():
        if is_element(node):
            yield node


def find_by_name(root: ET.Element, *names: str) -> list[ET.Element]:
    wanted = set(names)
    return [el for el in iter_elements(root) if local_name(el.tag) in wanted]


def parent_map(root: ET.Element) -> dict[ET.Element, ET.Element]:
    return {child: parent for parent in root.iter() for child in parent}


def remove_element(parent: ET.Element, child: ET.Element) -> None:
    """Remove ``child`` keeping its tail text attached to the previous sibling."""
    if child.tail and child.tail.strip():
        index = list(parent).index(child)
        if index > 0:
            prev = parent[index - 1]
            prev.tail = (prev.tail or "") + child.tail
        else:
            parent.text = (parent.text or "") + child.tail
    parent.remove(child)


def rename(element: ET.Element, name: str) -> None:
    """Change an element's local name, keeping its namespace."""
    ns = namespace_of(element.tag)
    element.tag = qualified(name, ns) if ns else name
