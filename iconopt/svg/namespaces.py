"""XML namespaces seen in icon files, registered so ElementTree keeps their usual prefixes."""

from __future__ import annotations

import xml.etree.ElementTree as ET

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Namespaces written by drawing applications, never needed for rendering
EDITOR_NAMESPACES = {
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd",
    "sketch": "http://www.bohemiancoding.com/sketch/ns",
    "i": "http://ns.adobe.com/AdobeIllustrator/10.0/",
    "x": "http://ns.adobe.com/Extensibility/1.0/",
    "graph": "http://ns.adobe.com/Graphs/1.0/",
    "a": "http://ns.adobe.com/AdobeSVGViewerExtensions/3.0/",
    "serif": "http://www.serif.com/",
    "figma": "http://www.figma.com/figma/ns",
}


def register_namespaces() -> None:
    ET.register_namespace("", SVG_NS)
    ET.register_namespace("xlink", XLINK_NS)
    for prefix, uri in EDITOR_NAMESPACES.items():
        ET.register_namespace(prefix, uri)


def qualified(name: str, ns: str = SVG_NS) -> str:
    return f"{{{ns}}}{name}"


def namespace_of(name: str) -> str | None:
    if name[:1] == "{":
        return name[1:].split("}", 1)[0]
    return None


def local_name(name: str) -> str:
    """Tag or attribute name without its ``{namespace}`` part."""
    return name.split("}")[-1] if "}" in name else name


register_namespaces()
