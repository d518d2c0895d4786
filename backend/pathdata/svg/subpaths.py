"""Sub-path splitting at moveto / closepath boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from pathdata.svg.symbols import CLOSE, MOVE

if TYPE_CHECKING:
    from pathdata.svg.commands import PathCommand


def split_commands(commands: Sequence[PathCommand]) -> list[list[PathCommand]]:
    """Partition ``commands`` into subpaths, each starting with a moveto.

    Close commands delimit subpaths and are not part of the output. A segment that
    continues after a close without its own moveto starts from a copy of the most
    recent moveto, e.g. "M 1 2 Z L 3 4" -> [M 1 2], [M 1 2, L 3 4].
    """
    subpaths: list[list[PathCommand]] = []
    current: list[PathCommand] = []
    last_move: PathCommand | None = None

    for command in commands:
        kind = command.kind
        if kind == MOVE:
            if current:
                subpaths.append(current)
            current = [command]
            last_move = command
        elif kind == CLOSE:
            # "Z Z" leaves nothing to emit for the second close
            if current:
                subpaths.append(current)
            current = []
        else:
            if not current and last_move is not None:
                current = [last_move.copy()]
            current.append(command)

    if current:
        subpaths.append(current)

    return subpaths
