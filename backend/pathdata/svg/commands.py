"""Path command model."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from pathdata.svg.subpaths import split_commands
from pathdata.svg.symbols import CLOSE, COMMAND_ARITY, LINE, MOVE, arity

__all__ = ["CLOSE", "COMMAND_ARITY", "LINE", "MOVE", "Path", "PathCommand", "arity", "split_subpaths"]


@dataclass(frozen=True)
class PathCommand:
    """One operator with its parameters, e.g. ``L 30 30``."""

    symbol: str
    params: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(float(p) for p in self.params))

    def is_absolute(self) -> bool:
        return self.symbol == self.symbol.upper()

    @property
    def kind(self) -> str:
        """Case-folded symbol: ``m`` for both ``M`` and ``m``."""
        return self.symbol.lower()

    def equal(self, other: PathCommand) -> bool:
        return self == other

    def copy(self) -> PathCommand:
        return replace(self)


@dataclass
class Path:
    """Ordered commands of one ``d`` attribute (or of one subpath)."""

    commands: list[PathCommand] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def equal(self, other: Path) -> bool:
        return self == other

    def subpaths(self) -> list[Path]:
        """Split into independent subpaths; close commands are dropped."""
        return [Path(commands) for commands in split_commands(self.commands)]


def split_subpaths(path: Path) -> list[Path]:
    return path.subpaths()
