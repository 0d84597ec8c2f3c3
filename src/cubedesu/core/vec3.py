from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .rotations import face_turn_matrix, mat_vec

if TYPE_CHECKING:
    from .moves import Face, Turn


@dataclass(frozen=True, slots=True)
class Vec3:
    """Exact integer 3-vector.

    Sticker coordinates are integers (cubies are 2 units wide), so every
    90-degree rotation is a signed permutation of components and equality
    stays exact no matter how many moves are applied.
    """

    x: int
    y: int
    z: int

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0, 0, 0)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def __getitem__(self, index: int) -> int:
        return self.as_tuple()[index]

    def __iter__(self):
        return iter(self.as_tuple())

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return self + -other

    def __mul__(self, other: Vec3 | int) -> Vec3:
        if isinstance(other, Vec3):
            # component-wise
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: int) -> Vec3:
        return self * other

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.z}"

    def dot(self, other: Vec3) -> int:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> int:
        return self.dot(self)

    def rotate(self, axis: Face, turn: Turn) -> Vec3:
        """Rotate clockwise (seen from outside ``axis``) by ``turn``."""
        return Vec3(*mat_vec(face_turn_matrix(axis, turn), self.as_tuple()))
