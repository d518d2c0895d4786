"""SVG path-data parsing."""

from pathdata.svg.commands import Path, PathCommand, split_subpaths
from pathdata.svg.symbols import COMMAND_ARITY, arity
from pathdata.svg.errors import (
    ArityError,
    ErrorCode,
    LexError,
    PathDataError,
    PathSyntaxError,
    StartCommandError,
    UnknownCommandError,
)
from pathdata.svg.path import parse_path

__all__ = [
    "COMMAND_ARITY",
    "Path",
    "PathCommand",
    "arity",
    "parse_path",
    "split_subpaths",
    "ErrorCode",
    "PathDataError",
    "LexError",
    "PathSyntaxError",
    "UnknownCommandError",
    "ArityError",
    "StartCommandError",
]
