"""Path-data tokenizer.

Splits a ``d`` attribute into operator letters and operand strings. Separators are
optional in the grammar, so operand boundaries are also inferred from ``.`` and
``-``:

    "M10-20"  -> M, 10, -20
    "M .2.3"  -> M, 0.2, 0.3
    "1e-3"    -> 1e-3   (exponent sign stays in the operand)
"""

from __future__ import annotations

from dataclasses import dataclass

from pathdata.svg.errors import LexError

_DIGITS = frozenset("0123456789")
_SEPARATORS = frozenset(",")


@dataclass(frozen=True)
class Token:
    value: str
    operator: bool = False


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def tokenize(raw: str) -> list[Token]:
    """Scan ``raw`` into tokens in input order. Raises LexError on stray characters."""
    tokens: list[Token] = []
    operand: list[str] = []

    def flush() -> None:
        if operand:
            tokens.append(Token("".join(operand)))
            operand.clear()

    for pos, ch in enumerate(raw):
        if ch == ".":
            if not operand:
                operand.append("0")
            elif "." in operand:
                flush()
                operand.append("0")
            operand.append(ch)

        elif ch in _DIGITS or ch == "e":
            operand.append(ch)

        elif ch == "-":
            if operand and operand[-1] == "e":
                operand.append(ch)
                continue
            flush()
            operand.append(ch)

        elif _is_ascii_letter(ch):
            flush()
            tokens.append(Token(ch, operator=True))

        elif ch.isspace() or ch in _SEPARATORS:
            flush()

        else:
            raise LexError(ch, pos)

    flush()
    return tokens
