"""Tests for id replacement."""

from __future__ import annotations

from iconopt.svg.ids import counter_prefix, find_ids, replace_ids, to_base36

CONTENT = (
    '<svg><defs><linearGradient id="a"/><path id="ab" d="M0 0h1"/></defs>'
    '<path fill="url(#a)" d="M0 0h2"/><use href="#ab"/>'
    '<animate id="fade" begin="ab.end;a.begin"/></svg>'
)


def test_to_base36():
    assert to_base36(0) == "0"
    assert to_base36(9) == "9"
    assert to_base36(10) == "a"
    assert to_base36(35) == "z"
    assert to_base36(36) == "10"


def test_find_ids():
    assert find_ids(CONTENT) == ["a", "ab", "fade"]


def test_replace_ids_with_string_prefix():
    out = replace_ids(CONTENT, "icon")
    assert find_ids(out) == ["icon0", "icon1", "icon2"]
    assert 'fill="url(#icon0)"' in out
    assert 'href="#icon1"' in out
    assert 'begin="icon1.end;icon0.begin"' in out


def test_replace_ids_does_not_touch_prefixes_of_other_ids():
    out = replace_ids(CONTENT, "x")
    # "a" is a prefix of "ab"; only exact matches change
    assert 'href="#x1"' in out
    assert "suffix" not in out


def test_replace_ids_with_callable():
    out = replace_ids(CONTENT, lambda old: "icon-" + old)
    assert find_ids(out) == ["icon-a", "icon-ab", "icon-fade"]
    assert 'url(#icon-a)' in out


def test_replace_ids_without_ids():
    content = '<svg><path d="M0 0h1"/></svg>'
    assert replace_ids(content, "x") == content


def test_counter_prefix():
    next_id = counter_prefix("svgID")
    names = [next_id(str(i)) for i in range(12)]
    assert names[0] == "svgID0"
    assert names[10] == "svgIDa"
    assert names[11] == "svgIDb"


def test_string_prefix_counts_in_base36():
    content = "".join(f'<path id="p{i}"/>' for i in range(12))
    out = replace_ids(content, "svgID")
    assert find_ids(out)[10:] == ["svgIDa", "svgIDb"]
