from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .moves import Face, Turn

Matrix3 = tuple[tuple[int, int, int], tuple[int, int, int], tuple[int, int, int]]

IDENTITY: Matrix3 = ((1, 0, 0), (0, 1, 0), (0, 0, 1))

# Positive (right-handed) quarter turns about +X, +Y, +Z.
QUARTER_TURNS: dict[str, Matrix3] = {
    "x": ((1, 0, 0), (0, 0, -1), (0, 1, 0)),
    "y": ((0, 0, 1), (0, 1, 0), (-1, 0, 0)),
    "z": ((0, -1, 0), (1, 0, 0), (0, 0, 1)),
}


def det3(m: Matrix3) -> int:
    (a, b, c), (d, e, f), (g, h, i) = m
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def mat_mul(a: Matrix3, b: Matrix3) -> Matrix3:
    # integer 3x3 multiply
    out = []
    for r in range(3):
        row = []
        for c in range(3):
            s = 0
            for k in range(3):
                s += a[r][k] * b[k][c]
            row.append(s)
        out.append(tuple(row))
    return (out[0], out[1], out[2])  # type: ignore[return-value]


def mat_vec(m: Matrix3, v: tuple[int, int, int]) -> tuple[int, int, int]:
    x, y, z = v
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


def transpose(m: Matrix3) -> Matrix3:
    return (
        (m[0][0], m[1][0], m[2][0]),
        (m[0][1], m[1][1], m[2][1]),
        (m[0][2], m[1][2], m[2][2]),
    )


def mat_pow(m: Matrix3, k: int) -> Matrix3:
    out = IDENTITY
    for _ in range(k % 4):
        out = mat_mul(m, out)
    return out


def axis_quarter_turns(axis: str, k: int) -> Matrix3:
    """Rotation by ``k`` positive quarter turns about a coordinate axis."""
    try:
        base = QUARTER_TURNS[axis]
    except KeyError as e:
        raise AssertionError(f"unsupported rotation axis: {axis!r}") from e
    return mat_pow(base, k)


def build_face_turn_matrices() -> dict[tuple[Face, Turn], Matrix3]:
    """Precompute the 18 face-turn rotations.

    A clockwise turn, seen from outside the face, is a negative quarter turn
    about the face's outward normal. For a face whose normal points along the
    negative axis that is a positive quarter turn about the axis itself.
    """
    from .moves import FACES, TURNS

    table: dict[tuple[Face, Turn], Matrix3] = {}
    for face in FACES:
        for turn in TURNS:
            k = -face.sign * turn.quarter_turns
            m = axis_quarter_turns(face.axis.value, k)
            if det3(m) != 1:
                raise AssertionError(f"face turn {face.value}{turn.suffix} is not a proper rotation")
            if mat_mul(m, transpose(m)) != IDENTITY:
                raise AssertionError(f"face turn {face.value}{turn.suffix} is not orthogonal")
            normal = face.axis_normal().as_tuple()
            if mat_vec(m, normal) != normal:
                raise AssertionError(f"face turn {face.value}{turn.suffix} moves its own axis")
            table[(face, turn)] = m
    if len(table) != 18:
        raise AssertionError("face turns must be exactly 18")
    return table


_FACE_TURNS: dict[tuple[Face, Turn], Matrix3] | None = None


def face_turn_matrix(face: Face, turn: Turn) -> Matrix3:
    global _FACE_TURNS
    if _FACE_TURNS is None:
        _FACE_TURNS = build_face_turn_matrices()
    try:
        return _FACE_TURNS[(face, turn)]
    except KeyError as e:
        raise AssertionError(f"no rotation for axis {face!r} and turn {turn!r}") from e
