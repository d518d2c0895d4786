"""Tests for path-data parsing (tokenizer + assembler)."""

from __future__ import annotations

import re

import pytest

from pathdata.svg.assembler import assemble
from pathdata.svg.commands import COMMAND_ARITY, Path, PathCommand, arity
from pathdata.svg.errors import (
    ArityError,
    ErrorCode,
    PathDataError,
    PathSyntaxError,
    StartCommandError,
    UnknownCommandError,
)
from pathdata.svg.path import parse_path
from pathdata.svg.tokenizer import Token
from tests.conftest import HOME_SVG


def _cmds(*specs) -> list[PathCommand]:
    return [PathCommand(symbol, tuple(params)) for symbol, *params in specs]


@pytest.mark.parametrize(
    "raw, expected",
    [
        (
            "M 10,20 L 30,30 Z",
            _cmds(("M", 10, 20), ("L", 30, 30), ("Z",)),
        ),
        (
            "M .2.3 L 30,30 Z",
            _cmds(("M", 0.2, 0.3), ("L", 30, 30), ("Z",)),
        ),
        (
            "M 0.2 1.3 L 30,30 Z",
            _cmds(("M", 0.2, 1.3), ("L", 30, 30), ("Z",)),
        ),
        (
            "M10-20 L30,30Z",
            _cmds(("M", 10, -20), ("L", 30, 30), ("Z",)),
        ),
        (
            "M 10-20 L 30,30 L 40,40 Z",
            _cmds(("M", 10, -20), ("L", 30, 30), ("L", 40, 40), ("Z",)),
        ),
        (
            "M10,20 L20,30 L10,20",
            _cmds(("M", 10, 20), ("L", 20, 30), ("L", 10, 20)),
        ),
        (
            " M 10,20 30,40 Z l 10,20 Z",
            _cmds(("M", 10, 20), ("L", 30, 40), ("Z",), ("l", 10, 20), ("Z",)),
        ),
        (
            " M 10,200e-2",
            _cmds(("M", 10, 2)),
        ),
    ],
)
def test_parse_path(raw, expected):
    assert parse_path(raw).commands == expected


def test_implicit_lineto_after_moveto():
    path = parse_path("M 10,20 30,40 Z m 10,20 30,40 Z")
    assert path.commands == _cmds(
        ("M", 10, 20),
        ("L", 30, 40),
        ("Z",),
        ("m", 10, 20),
        ("l", 30, 40),
        ("Z",),
    )


def test_repeated_command_expands():
    path = parse_path("M0 0c 50,0 50,100 100,100 50,0 50,-100 100,-100")
    assert path.commands == _cmds(
        ("M", 0, 0),
        ("c", 50, 0, 50, 100, 100, 100),
        ("c", 50, 0, 50, -100, 100, -100),
    )
    assert path == parse_path("M0 0c 50,0 50,100 100,100 c 50,0 50,-100 100,-100")


def test_long_moveto_run_keeps_only_first_move():
    path = parse_path("m 12.5,52 39,0 0,-40 -39,0 z")
    assert [c.symbol for c in path] == ["m", "l", "l", "l", "z"]
    assert path.commands[3].params == (-39.0, 0.0)


def test_single_parameter_commands():
    path = parse_path("M0 0H10 20V5")
    assert path.commands == _cmds(("M", 0, 0), ("H", 10), ("H", 20), ("V", 5))


def test_arc_command():
    path = parse_path("M3 10a2 2 0 0 1 .709-1.528")
    assert path.commands[1] == PathCommand("a", (2, 2, 0, 0, 1, 0.709, -1.528))


def test_empty_path():
    assert parse_path("") == Path()
    assert parse_path("   ").commands == []


@pytest.mark.parametrize(
    "raw, error, message",
    [
        ("M 10 20 x", UnknownCommandError, "Invalid command 'x'"),
        ("10,20", StartCommandError, "Path data does not start with a moveto command: 10,20"),
        ("L 10 20", StartCommandError, "Path data does not start with a moveto command: L 10 20"),
        ("M 10 20 30 Z", ArityError, "Incorrect number of parameters for M"),
        ("M 10 20 L Z", ArityError, "Incorrect number of parameters for L"),
        ("M", ArityError, "Incorrect number of parameters for M"),
        ("M 1 2 Z 3", ArityError, "Incorrect number of parameters for Z"),
        ("M 10--1 Z", PathSyntaxError, "Invalid parameter syntax"),
        ("M 1e 2", PathSyntaxError, "Invalid parameter syntax"),
        ("M 1e400 0", PathSyntaxError, "Invalid parameter syntax"),
        ("M 0 -1e400", PathSyntaxError, "Invalid parameter syntax"),
    ],
)
def test_parse_errors(raw, error, message):
    with pytest.raises(error) as exc_info:
        parse_path(raw)
    assert str(exc_info.value) == message
    assert isinstance(exc_info.value, PathDataError)
    assert isinstance(exc_info.value, ValueError)


def test_error_codes():
    with pytest.raises(PathDataError) as exc_info:
        parse_path("M 10 20 30 Z")
    assert exc_info.value.code is ErrorCode.ARITY
    assert exc_info.value.symbol == "M"
    assert exc_info.value.operand_count == 3
    assert exc_info.value.arity == 2


def test_lex_error_comes_first():
    with pytest.raises(PathDataError, match="Unrecognized symbol '%'"):
        parse_path("M 10 7%4 Z")


def test_assemble_rejects_malformed_operand_tokens():
    tokens = [Token("M", operator=True), Token("nan"), Token("1")]
    with pytest.raises(PathSyntaxError):
        assemble(tokens)


def test_assemble_empty():
    assert assemble([]) == []


def test_arity_table():
    assert COMMAND_ARITY["a"] == 7
    assert arity("C") == 6
    assert arity("Z") == 0
    assert arity("x") is None


def test_parsed_commands_respect_arity_and_start_with_move():
    for d in re.findall(r'd="([^"]+)"', HOME_SVG):
        path = parse_path(d)
        assert path.commands[0].kind == "m"
        for command in path:
            assert len(command.params) == arity(command.symbol)


def test_out_of_range_operand_is_rejected_not_infinite():
    with pytest.raises(PathSyntaxError) as exc_info:
        parse_path("M 1 2 L 1e309 0")
    assert exc_info.value.value == "1e309"
    assert parse_path("M 1e308 1e-400").commands == _cmds(("M", 1e308, 0.0))
