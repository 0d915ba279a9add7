"""Tests for referenced-id discovery."""

from __future__ import annotations

from iconopt.svg.document import SVGDocument
from iconopt.svg.references import has_scripts_or_styles, referenced_ids
from tests.conftest import GRADIENT_SVG, XLINK_SVG, wrap


def test_url_reference():
    assert referenced_ids(SVGDocument(GRADIENT_SVG).root) == {"grad"}


def test_xlink_href():
    assert referenced_ids(SVGDocument(XLINK_SVG).root) == {"dot"}


def test_animation_timing():
    doc = SVGDocument(wrap('<set id="a" begin="b.end; c.click" to="1"/>'))
    assert referenced_ids(doc.root) == {"b", "c"}


def test_style_element():
    doc = SVGDocument(wrap("<style>.x { fill: url('#paint') }</style>"))
    assert referenced_ids(doc.root) == {"paint"}
    assert has_scripts_or_styles(doc.root)


def test_no_scripts_or_styles():
    assert not has_scripts_or_styles(SVGDocument(GRADIENT_SVG).root)
