"""Tests for SVGDocument loading and serialization."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from iconopt.svg.document import (
    SVGDocument,
    find_by_name,
    is_element,
    parent_map,
    remove_element,
    rename,
)
from tests.conftest import INKSCAPE_SVG, SQUARE_SVG, q, wrap


def test_load_and_serialize():
    doc = SVGDocument(SQUARE_SVG)
    out = doc.to_string()
    assert out.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
    assert '<path d="M2 2h20v20H2V2"/>' in out
    assert "ns0:" not in out
    assert "\n" not in out


def test_str_matches_to_string():
    doc = SVGDocument(SQUARE_SVG)
    assert str(doc) == doc.to_string()


def test_invalid_xml():
    with pytest.raises(ValueError, match="Invalid SVG"):
        SVGDocument("<svg><path></svg>")


def test_wrong_root():
    with pytest.raises(ValueError, match="Root element must be <svg>"):
        SVGDocument('<html xmlns="http://www.w3.org/1999/xhtml"/>')


def test_load_replaces_content():
    doc = SVGDocument(SQUARE_SVG)
    doc.load(wrap('<circle r="4"/>'))
    assert find_by_name(doc.root, "path") == []
    assert len(find_by_name(doc.root, "circle")) == 1


def test_comments_are_kept():
    doc = SVGDocument(INKSCAPE_SVG)
    comments = [n for n in doc.root.iter() if not is_element(n)]
    assert len(comments) == 1
    assert "Inkscape" in comments[0].text


def test_text_whitespace_preserved():
    doc = SVGDocument(wrap("<text>  two  spaces  </text>"))
    assert doc.root.find(q("text")).text == "  two  spaces  "


def test_editor_prefixes_survive():
    out = SVGDocument(INKSCAPE_SVG).to_string()
    assert "inkscape:label" in out
    assert "sodipodi:namedview" in out


def test_remove_element_keeps_tail():
    doc = SVGDocument(wrap("<text>a<tspan>b</tspan>c<tspan>d</tspan>e</text>"))
    text = doc.root.find(q("text"))
    first, second = list(text)
    remove_element(text, first)
    assert text.text == "ac"
    remove_element(text, second)
    assert text.text == "ace"


def test_rename_keeps_namespace():
    doc = SVGDocument(wrap('<ellipse rx="2" ry="2"/>'))
    el = doc.root.find(q("ellipse"))
    rename(el, "circle")
    assert el.tag == q("circle")


def test_parent_map():
    doc = SVGDocument(wrap('<g><path d="M0 0h1"/></g>'))
    path = find_by_name(doc.root, "path")[0]
    parents = parent_map(doc.root)
    assert parents[path].tag == q("g")
    assert parents[parents[path]] is doc.root


def test_is_element():
    assert is_element(ET.Element("g"))
    assert not is_element(ET.Comment("x"))


def test_unused_namespace_declarations_dropped():
    doc = SVGDocument(
        '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink"'
        ' xmlns:foo="http://example.com/foo"><path d="M0 0h1"/></svg>'
    )
    out = doc.to_string()
    assert "xmlns:xlink" not in out
    assert "xmlns:foo" not in out
