"""Path data model, parsing, closepath normalization and serialization."""

from iconopt.path.commands import COMMAND_ARITY, CommandKind, PathCommand, command
from iconopt.path.normalizer import CursorState, PathCursorNormalizer, normalize_path
from iconopt.path.parser import parse_path_data
from iconopt.path.stringify import stringify_number, stringify_path_data

__all__ = [
    "COMMAND_ARITY",
    "CommandKind",
    "PathCommand",
    "command",
    "CursorState",
    "PathCursorNormalizer",
    "normalize_path",
    "parse_path_data",
    "stringify_number",
    "stringify_path_data",
]
