"""Command assembler: tokens -> PathCommand list.

Tokens are consumed right-to-left. Operands pile up until the operator that owns them
is reached, at which point its arity says how many commands the pile holds. This
handles implicit command repetition ("L 1 2 3 4" == "L 1 2 L 3 4") without lookahead.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

from pathdata.svg.commands import PathCommand
from pathdata.svg.symbols import LINE, MOVE, arity
from pathdata.svg.errors import (
    ArityError,
    PathSyntaxError,
    StartCommandError,
    UnknownCommandError,
)
from pathdata.svg.tokenizer import Token

_NUMBER_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\Z")

# Extra coordinate pairs after a moveto are implicit linetos.
_IMPLICIT_REPEAT = {MOVE: LINE, MOVE.upper(): LINE.upper()}


def _parse_number(value: str) -> float:
    if not _NUMBER_RE.match(value):
        raise PathSyntaxError(value)
    number = float(value)
    # Out of double range, e.g. "1e400"
    if math.isinf(number):
        raise PathSyntaxError(value)
    return number


def assemble(tokens: Sequence[Token], raw: str = "") -> list[PathCommand]:
    """Build commands from ``tokens``. ``raw`` is only used in error messages."""
    if tokens and not (tokens[0].operator and tokens[0].value.lower() == MOVE):
        raise StartCommandError(raw)

    # Both lists are filled back-to-front and read reversed.
    operands: list[float] = []
    commands: list[PathCommand] = []

    for tok in reversed(tokens):
        if not tok.operator:
            operands.append(_parse_number(tok.value))
            continue

        symbol = tok.value
        param_count = arity(symbol)
        if param_count is None:
            raise UnknownCommandError(symbol)

        if param_count == 0 and not operands:
            commands.append(PathCommand(symbol))
            continue

        if param_count == 0 or not operands or len(operands) % param_count:
            raise ArityError(symbol, len(operands), param_count)

        # operands[-1] is the first operand after the operator in the text, so
        # group i (in text order) sits just below the top i groups of the pile.
        groups = len(operands) // param_count
        for i in reversed(range(groups)):
            start = len(operands) - (i + 1) * param_count
            params = reversed(operands[start : start + param_count])
            name = symbol if i == 0 else _IMPLICIT_REPEAT.get(symbol, symbol)
            commands.append(PathCommand(name, tuple(params)))
        operands.clear()

    assert not operands, "operands left without an operator"
    commands.reverse()
    return commands
