from __future__ import annotations

from dataclasses import dataclass

from .moves import FACES, Face
from .vec3 import Vec3

# Cubies are 2 units wide with the cube centred on the origin, so sticker
# centres sit at +/-3 along their face axis and in {-2, 0, 2} elsewhere.
FACE_DISTANCE = 3
LAYER_DEPTH = 2
STICKERS_PER_FACE = 9
TOTAL_STICKERS = STICKERS_PER_FACE * len(FACES)

_STEPS = (-2, 0, 2)


def _section_point(face: Face, row: int, col: int) -> Vec3:
    """Lattice point of facelet (row, col), reading the face from outside."""
    d = FACE_DISTANCE
    down = _STEPS[2 - row]  # row 0 is the top of the face
    right = _STEPS[col]
    if face is Face.U:
        return Vec3(right, d, _STEPS[row])
    if face is Face.D:
        return Vec3(right, -d, -_STEPS[row])
    if face is Face.F:
        return Vec3(right, down, d)
    if face is Face.B:
        return Vec3(-right, down, -d)
    if face is Face.R:
        return Vec3(d, down, -right)
    if face is Face.L:
        return Vec3(-d, down, right)
    raise AssertionError(f"unhandled face: {face!r}")


@dataclass(frozen=True, slots=True)
class Coords:
    index_to_point: list[Vec3]
    point_to_index: dict[Vec3, int]


def build_coords() -> Coords:
    index_to_point = [
        _section_point(face, row, col)
        for face in FACES
        for row in range(3)
        for col in range(3)
    ]
    point_to_index = {p: i for i, p in enumerate(index_to_point)}
    if len(point_to_index) != TOTAL_STICKERS:
        raise AssertionError("facelet indexing mismatch")
    for i, p in enumerate(index_to_point):
        face = FACES[i // STICKERS_PER_FACE]
        if p.dot(face.axis_normal()) != FACE_DISTANCE:
            raise AssertionError(f"facelet {i} is not on face {face.value}")
    return Coords(index_to_point=index_to_point, point_to_index=point_to_index)


COORDS: Coords = build_coords()


def face_of_point(p: Vec3) -> Face:
    """Face a sticker at ``p`` currently lies on."""
    for face in FACES:
        if p.dot(face.axis_normal()) == FACE_DISTANCE:
            return face
    raise AssertionError(f"point is not on the cube surface: {p}")
