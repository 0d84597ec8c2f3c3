from __future__ import annotations

import pytest

from cubedesu.core.moves import ALL_MOVES, Face, Move, Turn
from cubedesu.core.notation import format_moves, parse_move, parse_moves


@pytest.mark.parametrize(
    "token, expected",
    [
        ("U", Move(Face.U, Turn.CLOCKWISE)),
        ("R'", Move(Face.R, Turn.COUNTER_CLOCKWISE)),
        ("F2", Move(Face.F, Turn.DOUBLE)),
        ("B2'", Move(Face.B, Turn.DOUBLE)),
        ("L’", Move(Face.L, Turn.COUNTER_CLOCKWISE)),
        ("  D ", Move(Face.D, Turn.CLOCKWISE)),
    ],
)
def test_parse_move(token: str, expected: Move):
    assert parse_move(token) == expected


@pytest.mark.parametrize("token", ["", "  ", "X", "u", "R3", "R''", "M", "Rw", "x2"])
def test_parse_move_rejects(token: str):
    with pytest.raises(ValueError):
        parse_move(token)


@pytest.mark.parametrize("move", ALL_MOVES)
def test_str_parses_back(move: Move):
    assert parse_move(str(move)) == move


def test_parse_and_format_sequence():
    text = "R U R' U'\n  F2 B"
    moves = parse_moves(text)
    assert len(moves) == 6
    assert format_moves(moves) == "R U R' U' F2 B"
    assert parse_moves("") == []
    with pytest.raises(ValueError):
        parse_moves("R U Q")
