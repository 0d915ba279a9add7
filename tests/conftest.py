"""Shared test fixtures."""

from __future__ import annotations

import pytest

from iconopt.engine.context import OptimizeContext
from iconopt.svg.document import SVGDocument
from iconopt.svg.namespaces import register_namespaces

SVG_NS = "http://www.w3.org/2000/svg"


# Icons as drawing applications export them

SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <path d="M2 2h20v20H2V2"/>
</svg>'''

FRAME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M2 2h20v20H2V2M6 6h12v12H6z" fill-rule="evenodd"/>
</svg>'''

SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <rect x="2" y="2" width="20" height="20"/>
  <polyline points="0,0 10,0 10,10 0,0"/>
  <polygon points="0,0 12,0 12,12"/>
  <line x1="0" y1="0" x2="24" y2="24"/>
</svg>'''

GRADIENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <defs>
    <linearGradient id="grad">
      <stop offset="0" stop-color="#FF0000"/>
      <stop offset="1" stop-color="rgb(0, 0, 255)"/>
    </linearGradient>
  </defs>
  <path id="unused" fill="url(#grad)" d="M0 0L24 0L24 24L0 0"/>
</svg>'''

ANIMATED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M0 0L10 0L10 10L0 0">
    <animate attributeName="opacity" values="0;1" dur="1s"/>
  </path>
</svg>'''

INKSCAPE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape"
     xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd"
     viewBox="0 0 24 24" inkscape:version="1.3">
  <!-- Created with Inkscape -->
  <sodipodi:namedview id="namedview1" pagecolor="#ffffff"/>
  <g inkscape:label="Layer 1" inkscape:groupmode="layer">
    <path style="fill:#000000;stroke:none" d="M 4,4 L 20,4 L 20,20 L 4,20 L 4,4 Z"/>
  </g>
</svg>'''

XLINK_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 24 24">
  <defs>
    <path id="dot" d="M11 11h2v2h-2z"/>
  </defs>
  <use xlink:href="#dot"/>
  <use xlink:href="#dot" x="4"/>
</svg>'''


def make_context(svg: str, **kwargs) -> OptimizeContext:
    return OptimizeContext(document=SVGDocument(svg), **kwargs)


def wrap(body: str) -> str:
    return f'<svg xmlns="{SVG_NS}" viewBox="0 0 24 24">{body}</svg>'


def q(name: str) -> str:
    """Qualified SVG tag name for ElementTree lookups."""
    return f"{{{SVG_NS}}}{name}"


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def shapes_svg() -> str:
    return SHAPES_SVG


@pytest.fixture
def gradient_svg() -> str:
    return GRADIENT_SVG


@pytest.fixture(autouse=True)
def _restore_namespace_prefixes():
    """svgpathtools (test-only) registers an ``svg`` prefix globally on import; undo that per test."""
    register_namespaces()
