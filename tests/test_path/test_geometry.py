"""Normalized paths must draw exactly what the input drew."""

from __future__ import annotations

import pytest
from svgpathtools import parse_path

from iconopt.engine.plugins.fix_z import fix_path_data


def _endpoints(d: str) -> list[tuple[complex, complex]]:
    return [(seg.start, seg.end) for seg in parse_path(d)]


@pytest.mark.parametrize(
    "d",
    [
        "M2 2h20v20H2V2",
        "M0 0L10 0L10 10L0 0",
        "m0 0l10 0l0 10l-10-10",
        "M0 0C5 -5 10 5 10 0L0 0",
        "M4 4L20 4L20 20L4 20L4 4M8 8h8v8H8V8",
    ],
)
def test_same_segments(d):
    fixed, closed = fix_path_data(d)
    assert closed >= 1
    assert fixed != d
    assert _endpoints(fixed) == _endpoints(d)
    assert parse_path(fixed).length() == pytest.approx(parse_path(d).length())


def test_closed_subpath_is_closed():
    fixed, _ = fix_path_data("M2 2h20v20H2V2")
    path = parse_path(fixed)
    assert path.isclosed()
    assert fixed.endswith("z")


def test_curve_back_to_start_untouched():
    d = "M0 0L10 10C1 1 2 2 0 0"
    fixed, closed = fix_path_data(d)
    assert closed == 0
    assert _endpoints(fixed) == _endpoints(d)
    assert "z" not in fixed
