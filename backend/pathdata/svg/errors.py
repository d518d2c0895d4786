"""Path-data error taxonomy.

Messages are kept stable; callers match on their prefixes. ``code`` gives the
same information as a closed enumeration.
"""

from __future__ import annotations

import enum


class ErrorCode(str, enum.Enum):
    LEX = "lex"
    SYNTAX = "syntax"
    UNKNOWN_COMMAND = "unknown_command"
    ARITY = "arity"
    START_COMMAND = "start_command"


class PathDataError(ValueError):
    """Base class for every error raised while parsing path data."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LexError(PathDataError):
    code = ErrorCode.LEX

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Unrecognized symbol '{char}'")
        self.char = char
        self.position = position


class PathSyntaxError(PathDataError):
    """An operand token is not a valid floating-point literal."""

    code = ErrorCode.SYNTAX

    def __init__(self, value: str) -> None:
        super().__init__("Invalid parameter syntax")
        self.value = value


class UnknownCommandError(PathDataError):
    code = ErrorCode.UNKNOWN_COMMAND

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Invalid command '{symbol}'")
        self.symbol = symbol


class ArityError(PathDataError):
    code = ErrorCode.ARITY

    def __init__(self, symbol: str, operand_count: int, arity: int) -> None:
        super().__init__(f"Incorrect number of parameters for {symbol}")
        self.symbol = symbol
        self.operand_count = operand_count
        self.arity = arity


class StartCommandError(PathDataError):
    code = ErrorCode.START_COMMAND

    def __init__(self, raw: str) -> None:
        super().__init__(f"Path data does not start with a moveto command: {raw}")
        self.raw = raw
