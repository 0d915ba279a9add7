"""Tests for the path command model."""

from __future__ import annotations

import pytest

from iconopt.path.commands import COMMAND_ARITY, CommandKind, PathCommand, command


def test_every_kind_has_a_letter_and_arity():
    letters = {kind.letter for kind in CommandKind}
    assert letters == set("mlhvcsqtaz")
    assert len(COMMAND_ARITY) == 20


@pytest.mark.parametrize(
    "letter,arity",
    [("M", 2), ("l", 2), ("H", 1), ("v", 1), ("C", 6), ("s", 4), ("Q", 4), ("t", 2), ("A", 7), ("z", 0)],
)
def test_arity(letter, arity):
    assert COMMAND_ARITY[letter] == arity
    assert CommandKind.from_letter(letter).arity == arity


def test_terminal_indices_fit_arity():
    for kind in CommandKind:
        for index in (kind.x_index, kind.y_index):
            assert index is None or index < kind.arity


def test_only_lineto_family_is_straight():
    straight = {kind for kind in CommandKind if kind.straight}
    assert straight == {CommandKind.LINETO, CommandKind.HORIZONTAL_LINETO, CommandKind.VERTICAL_LINETO}


def test_case_selects_relative():
    assert command("l", 1, 2).relative
    assert not command("L", 1, 2).relative
    assert command("Z").kind is command("z").kind is CommandKind.CLOSEPATH


def test_unknown_letter():
    with pytest.raises(ValueError):
        PathCommand("X").kind


def test_command_is_frozen():
    cmd = command("M", 0, 0)
    with pytest.raises(AttributeError):
        cmd.command = "L"


def test_str():
    assert str(command("M", 1.5, 2)) == "M 1.5 2"
    assert str(command("z")) == "z"
