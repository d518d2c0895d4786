"""Write path data and SVG markup back out."""

from __future__ import annotations

from collections.abc import Iterable

from pathdata.svg.commands import Path, PathCommand
from pathdata.svg.element import Element, serialize_element


def format_number(value: float) -> str:
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    # The path grammar has no "+" sign
    return repr(value).replace("e+", "e")


def format_command(command: PathCommand) -> str:
    return " ".join([command.symbol, *(format_number(p) for p in command.params)])


def format_path(path: Path) -> str:
    """Canonical path data: every command spelled out, single-space separated."""
    return " ".join(format_command(c) for c in path.commands)


def serialize_svg(
    paths: Iterable[Path],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    title: str = "",
) -> str:
    """Generate an SVG document with one <path> per Path."""
    root = Element(
        name="svg",
        attributes={
            "viewBox": f"0 0 {format_number(float(canvas_w))} {format_number(float(canvas_h))}",
            "xmlns": "http://www.w3.org/2000/svg",
        },
    )
    if title:
        root.children.append(Element(name="title", content=title))

    for path in paths:
        root.children.append(Element(name="path", attributes={"d": format_path(path)}))

    return serialize_element(root)
