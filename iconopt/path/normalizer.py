"""Closepath normalization — collapse straight segments that return to the sub-path start.

Generated icons often end a sub-path with an explicit ``L``/``H``/``V`` back to
the moveto point instead of ``z``. A single forward pass tracks the pen and
rewrites those segments in place:

    M0 0 L10 0 L10 10 L0 0   ->   M0 0 L10 0 L10 10 z

Curves and arcs that land on the start point are left alone: closing with a
straight line would drop their curvature.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from iconopt.path.commands import CLOSEPATH, CommandKind, PathCommand

logger = logging.getLogger(__name__)


@dataclass
class CursorState:
    """Pen position and the position of the most recent moveto."""

    start: list[float] = field(default_factory=lambda: [0.0, 0.0])
    cursor: list[float] = field(default_factory=lambda: [0.0, 0.0])

    def advance(self, cmd: PathCommand) -> CommandKind:
        kind = cmd.kind
        if kind is CommandKind.CLOSEPATH:
            self.cursor[0], self.cursor[1] = self.start
            return kind

        args = cmd.args
        if cmd.relative:
            if kind.x_index is not None:
                self.cursor[0] += args[kind.x_index]
            if kind.y_index is not None:
                self.cursor[1] += args[kind.y_index]
        else:
            if kind.x_index is not None:
                self.cursor[0] = args[kind.x_index]
            if kind.y_index is not None:
                self.cursor[1] = args[kind.y_index]

        if kind is CommandKind.MOVETO:
            self.start[0], self.start[1] = self.cursor
        return kind

    @property
    def at_start(self) -> bool:
        return self.cursor[0] == self.start[0] and self.cursor[1] == self.start[1]


class PathCursorNormalizer:
    """Rewrites straight segments ending on their sub-path start into ``z``."""

    def normalize(self, commands: list[PathCommand]) -> list[PathCommand]:
        """Normalize ``commands`` in place and return the same list.

        The list length never changes; only ``L``/``H``/``V`` entries (either
        case) may be replaced by a zero-argument closepath.
        """
        state = CursorState()
        closed = 0
        for i, cmd in enumerate(commands):
            kind = state.advance(cmd)
            if kind.straight and state.at_start:
                commands[i] = CLOSEPATH
                closed += 1
        if closed:
            logger.debug("Closed %d sub-path(s) out of %d commands", closed, len(commands))
        return commands


def count_closed(before: list[PathCommand], after: list[PathCommand]) -> int:
    """Number of entries the normalizer turned into a closepath."""
    return sum(
        1
        for old, new in zip(before, after)
        if new is CLOSEPATH and old.kind is not CommandKind.CLOSEPATH
    )


_normalizer = PathCursorNormalizer()


def normalize_path(commands: list[PathCommand]) -> list[PathCommand]:
    return _normalizer.normalize(commands)
