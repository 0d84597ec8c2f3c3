"""Move notation at the driver boundary.

Tokens are a face letter optionally followed by ``'`` (counter-clockwise) or
``2`` (double). Anything else is rejected here so that only valid ``Move``
values reach the cube models.
"""

from __future__ import annotations

from collections.abc import Iterable

from .moves import Face, Move, Turn

_SUFFIXES = {
    "": Turn.CLOCKWISE,
    "'": Turn.COUNTER_CLOCKWISE,
    "2": Turn.DOUBLE,
    "2'": Turn.DOUBLE,
}


def parse_move(token: str) -> Move:
    tok = token.strip().replace("’", "'")
    if not tok:
        raise ValueError("empty move token")
    try:
        face = Face(tok[0])
    except ValueError as e:
        raise ValueError(f"unknown face in move token {token!r}") from e
    try:
        turn = _SUFFIXES[tok[1:]]
    except KeyError as e:
        raise ValueError(f"unknown turn in move token {token!r}") from e
    return Move(face, turn)


def parse_moves(text: str) -> list[Move]:
    return [parse_move(tok) for tok in text.split()]


def format_moves(moves: Iterable[Move]) -> str:
    return " ".join(str(m) for m in moves)
