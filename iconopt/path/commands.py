"""Path command model — one tagged value per SVG path drawing instruction.

A ``PathCommand`` is the letter as written in the ``d`` attribute plus its
numeric arguments. ``CommandKind`` is the case-folded tag: it knows how many
arguments the command takes, where its terminal point lives in that argument
list, and whether it draws a straight segment.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CommandKind(enum.Enum):
    """The ten SVG path commands, independent of absolute/relative case."""

    # letter, arity, terminal x index, terminal y index, straight segment
    MOVETO = ("m", 2, 0, 1, False)
    LINETO = ("l", 2, 0, 1, True)
    HORIZONTAL_LINETO = ("h", 1, 0, None, True)
    VERTICAL_LINETO = ("v", 1, None, 0, True)
    CURVETO = ("c", 6, 4, 5, False)
    SMOOTH_CURVETO = ("s", 4, 2, 3, False)
    QUADRATIC_CURVETO = ("q", 4, 2, 3, False)
    SMOOTH_QUADRATIC_CURVETO = ("t", 2, 0, 1, False)
    ARC = ("a", 7, 5, 6, False)
    CLOSEPATH = ("z", 0, None, None, False)

    def __init__(
        self,
        letter: str,
        arity: int,
        x_index: int | None,
        y_index: int | None,
        straight: bool,
    ) -> None:
        self.letter = letter
        self.arity = arity
        self.x_index = x_index
        self.y_index = y_index
        # Only straight segments may be collapsed into a closepath
        self.straight = straight

    @classmethod
    def from_letter(cls, letter: str) -> CommandKind:
        try:
            return _KIND_BY_LETTER[letter.lower()]
        except KeyError:
            raise ValueError(f"Invalid path command {letter!r}") from None


_KIND_BY_LETTER = {kind.letter: kind for kind in CommandKind}

# All 20 letters, absolute and relative
COMMAND_ARITY: dict[str, int] = {}
for _kind in CommandKind:
    COMMAND_ARITY[_kind.letter] = _kind.arity
    COMMAND_ARITY[_kind.letter.upper()] = _kind.arity


@dataclass(frozen=True)
class PathCommand:
    command: str
    args: tuple[float, ...] = ()

    @property
    def kind(self) -> CommandKind:
        return CommandKind.from_letter(self.command)

    @property
    def relative(self) -> bool:
        return self.command.islower()

    def __str__(self) -> str:
        if not self.args:
            return self.command
        return self.command + " " + " ".join(f"{a:g}" for a in self.args)


CLOSEPATH = PathCommand("z")


def command(letter: str, *args: float) -> PathCommand:
    """Build a PathCommand from a letter and loose arguments.

    >>> command("L", 10, 0)
    PathCommand(command='L', args=(10.0, 0.0))
    """
    return PathCommand(letter, tuple(float(a) for a in args))
