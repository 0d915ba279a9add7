"""Path data serializer — list of PathCommand → compact ``d`` attribute text."""

from __future__ import annotations

import math

import numpy as np

from iconopt.path.commands import PathCommand


def stringify_number(value: float, precision: int | None = None) -> str:
    """Shortest positional form, without the leading zero of a fraction."""
    if precision is not None:
        ratio = 10**precision
        value = math.floor(value * ratio + 0.5) / ratio
    if value == 0:
        # Also folds -0.0
        return "0"
    text = np.format_float_positional(value, trim="-")
    if text.startswith("0."):
        return text[1:]
    if text.startswith("-0."):
        return "-" + text[2:]
    return text


def _stringify_args(
    letter: str,
    args: list[float],
    precision: int | None,
    disable_space_after_flags: bool,
) -> str:
    out = ""
    previous = ""
    is_arc = letter in ("A", "a")
    for i, arg in enumerate(args):
        text = stringify_number(arg, precision)
        if disable_space_after_flags and is_arc and i % 7 in (4, 5):
            out += text
        elif i == 0 or text.startswith("-"):
            out += text
        elif "." in previous and text.startswith("."):
            out += text
        else:
            out += " " + text
        previous = text
    return out


def stringify_path_data(
    commands: list[PathCommand],
    precision: int | None = None,
    disable_space_after_flags: bool = False,
) -> str:
    """Serialize commands, sharing one letter across runs of the same command.

    ``M`` and ``m`` are never merged with each other, but the linetos that follow
    a moveto are folded into it as implicit arguments (``M0 0L10 0`` →
    ``M0 0 10 0``).
    """
    if not commands:
        return ""

    def emit(letter: str, args: list[float]) -> str:
        return letter + _stringify_args(letter, args, precision, disable_space_after_flags)

    if len(commands) == 1:
        return emit(commands[0].command, list(commands[0].args))

    result = ""
    prev_letter = commands[0].command
    prev_args = list(commands[0].args)
    for cmd in commands[1:]:
        letter = cmd.command
        same_run = letter == prev_letter and letter not in ("M", "m")
        implicit_lineto = (prev_letter, letter) in (("M", "L"), ("m", "l"))
        if same_run or implicit_lineto:
            prev_args.extend(cmd.args)
        else:
            result += emit(prev_letter, prev_args)
            prev_letter = letter
            prev_args = list(cmd.args)
    return result + emit(prev_letter, prev_args)
