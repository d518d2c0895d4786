"""Parsed SVG document model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathdata.svg.commands import Path, PathCommand


class CommandModel(BaseModel):
    symbol: str
    params: list[float] = Field(default_factory=list)
    absolute: bool = True

    @classmethod
    def from_command(cls, command: PathCommand) -> CommandModel:
        return cls(
            symbol=command.symbol,
            params=list(command.params),
            absolute=command.is_absolute(),
        )

    def to_command(self) -> PathCommand:
        return PathCommand(self.symbol, tuple(self.params))


def commands_to_models(path: Path) -> list[CommandModel]:
    return [CommandModel.from_command(c) for c in path.commands]


class SvgPathElement(BaseModel):
    id: str
    attributes: dict[str, str] = Field(default_factory=dict)
    commands: list[CommandModel] = Field(default_factory=list)
    subpath_count: int = 0

    def to_path(self) -> Path:
        return Path([c.to_command() for c in self.commands])


class SvgDocument(BaseModel):
    """Every <path> of an SVG file, with its data parsed."""

    viewbox: tuple[float, float, float, float] | None = None
    paths: list[SvgPathElement] = Field(default_factory=list)
    # Element id -> parse error message for paths that failed
    errors: dict[str, str] = Field(default_factory=dict)
