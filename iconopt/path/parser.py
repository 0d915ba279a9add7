"""Path data parser — SVG ``d`` attribute text → list of PathCommand.

Follows the SVG 1.1 path grammar the same way SVGO reads it: implicit command
repetition is expanded into one command per argument group, a moveto's extra
pairs become linetos, and arc flags may be packed without separators
(``a1 1 0 01 5 5``). Parsing stops at the first error and keeps whatever was
read before it, which is how browsers render broken path data.
"""

from __future__ import annotations

import logging
import re

from iconopt.path.commands import COMMAND_ARITY, PathCommand

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WSP = frozenset(" \t\r\n")
_IMPLICIT_NEXT = {"M": "L", "m": "l"}


def parse_path_data(d: str) -> list[PathCommand]:
    """Parse path data, returning the valid prefix on malformed input."""
    commands: list[PathCommand] = []
    letter: str | None = None
    args: list[float] = []
    arity = 0
    can_have_comma = False
    had_comma = False

    i = 0
    n = len(d)
    while i < n:
        c = d[i]
        if c in _WSP:
            i += 1
            continue

        if c == ",":
            if not can_have_comma or had_comma:
                return _stop(commands, d, i, "unexpected comma")
            had_comma = True
            i += 1
            continue

        if c in COMMAND_ARITY:
            if had_comma:
                return _stop(commands, d, i, "comma before command")
            if letter is None:
                if c not in ("M", "m"):
                    return _stop(commands, d, i, "path must start with a moveto")
            elif args:
                return _stop(commands, d, i, f"{letter} is missing arguments")
            letter = c
            args = []
            arity = COMMAND_ARITY[c]
            can_have_comma = False
            if arity == 0:
                commands.append(PathCommand(c))
            i += 1
            continue

        if letter is None:
            return _stop(commands, d, i, "arguments before first command")
        if arity == 0:
            return _stop(commands, d, i, f"{letter} takes no arguments")

        number, i = _read_argument(d, i, letter, len(args))
        if number is None:
            return _stop(commands, d, i, "invalid number")

        args.append(number)
        can_have_comma = True
        had_comma = False
        if len(args) == arity:
            commands.append(PathCommand(letter, tuple(args)))
            letter = _IMPLICIT_NEXT.get(letter, letter)
            args = []

    if args:
        logger.debug("Path data ends with incomplete %s command: %r", letter, d)
    return commands


def _read_argument(d: str, i: int, letter: str, position: int) -> tuple[float | None, int]:
    """Read one argument starting at ``i``; return (value, index after it)."""
    if letter in ("A", "a"):
        if position in (3, 4):
            # Flags are exactly one character
            if d[i] in ("0", "1"):
                return float(d[i]), i + 1
            return None, i
        if position in (0, 1) and d[i] in ("+", "-"):
            # Radii are unsigned
            return None, i

    m = _NUMBER_RE.match(d, i)
    if m is None:
        return None, i
    return float(m.group(0)), m.end()


def _stop(commands: list[PathCommand], d: str, i: int, reason: str) -> list[PathCommand]:
    logger.debug("Path data error at %d (%s): %r", i, reason, d)
    return commands
