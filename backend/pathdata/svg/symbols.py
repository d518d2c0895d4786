"""Operator symbols and the arity table."""

from __future__ import annotations

from types import MappingProxyType

MOVE = "m"
LINE = "l"
CLOSE = "z"

# Lower-case symbol -> number of parameters one instance of the command takes.
COMMAND_ARITY = MappingProxyType({
    "m": 2, "z": 0, "l": 2, "h": 1, "v": 1,
    "c": 6, "s": 4, "q": 4, "t": 2, "a": 7,
})


def arity(symbol: str) -> int | None:
    """Parameter count for ``symbol`` (either case), or None if it is not a command."""
    return COMMAND_ARITY.get(symbol.lower())
