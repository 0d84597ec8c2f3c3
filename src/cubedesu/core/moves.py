from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .vec3 import Vec3


class Axis(Enum):
    X = "x"
    Y = "y"
    Z = "z"

    def basis(self) -> Vec3:
        return _AXIS_BASIS[self]


_AXIS_BASIS = {
    Axis.X: Vec3(1, 0, 0),
    Axis.Y: Vec3(0, 1, 0),
    Axis.Z: Vec3(0, 0, 1),
}


class Face(Enum):
    """Cube faces, in facelet section order."""

    U = "U"
    R = "R"
    F = "F"
    D = "D"
    L = "L"
    B = "B"

    @property
    def axis(self) -> Axis:
        return _FACE_AXIS[self][0]

    @property
    def sign(self) -> int:
        return _FACE_AXIS[self][1]

    def axis_normal(self) -> Vec3:
        return self.axis.basis() * self.sign

    def opposite(self) -> Face:
        return _OPPOSITES[self]


_FACE_AXIS: dict[Face, tuple[Axis, int]] = {
    Face.U: (Axis.Y, 1),
    Face.D: (Axis.Y, -1),
    Face.R: (Axis.X, 1),
    Face.L: (Axis.X, -1),
    Face.F: (Axis.Z, 1),
    Face.B: (Axis.Z, -1),
}

_OPPOSITES: dict[Face, Face] = {
    Face.U: Face.D,
    Face.D: Face.U,
    Face.R: Face.L,
    Face.L: Face.R,
    Face.F: Face.B,
    Face.B: Face.F,
}


class Turn(Enum):
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1
    DOUBLE = 2

    @property
    def quarter_turns(self) -> int:
        return self.value

    @property
    def suffix(self) -> str:
        return _TURN_SUFFIX[self]

    def inverse(self) -> Turn:
        if self is Turn.CLOCKWISE:
            return Turn.COUNTER_CLOCKWISE
        if self is Turn.COUNTER_CLOCKWISE:
            return Turn.CLOCKWISE
        if self is Turn.DOUBLE:
            return Turn.DOUBLE
        raise AssertionError(f"unhandled turn: {self!r}")


_TURN_SUFFIX = {
    Turn.CLOCKWISE: "",
    Turn.COUNTER_CLOCKWISE: "'",
    Turn.DOUBLE: "2",
}

FACES: tuple[Face, ...] = tuple(Face)
TURNS: tuple[Turn, ...] = (Turn.CLOCKWISE, Turn.COUNTER_CLOCKWISE, Turn.DOUBLE)


@dataclass(frozen=True, slots=True)
class Move:
    face: Face
    turn: Turn

    def inverse(self) -> Move:
        return Move(self.face, self.turn.inverse())

    @property
    def index(self) -> int:
        return FACES.index(self.face) * len(TURNS) + TURNS.index(self.turn)

    @classmethod
    def from_index(cls, index: int) -> Move:
        if not (0 <= index < len(ALL_MOVES)):
            raise ValueError(f"move index must be in [0..{len(ALL_MOVES) - 1}]")
        return ALL_MOVES[index]

    def __str__(self) -> str:
        return f"{self.face.value}{self.turn.suffix}"


ALL_MOVES: tuple[Move, ...] = tuple(Move(f, t) for f in FACES for t in TURNS)

if len(ALL_MOVES) != 18:
    raise AssertionError("moves must be exactly 18")


def invert_moves(moves: Iterable[Move]) -> list[Move]:
    """Return the sequence that undoes ``moves``."""
    return [m.inverse() for m in reversed(list(moves))]


def random_moves(count: int, seed: int | None = None) -> list[Move]:
    if count < 0:
        raise ValueError("count must be >= 0")
    rng = random.Random(seed)
    return [rng.choice(ALL_MOVES) for _ in range(count)]
