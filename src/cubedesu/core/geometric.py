from __future__ import annotations

import hashlib
import struct
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from .coords import COORDS, LAYER_DEPTH, STICKERS_PER_FACE, TOTAL_STICKERS, face_of_point
from .moves import FACES, Face, Move
from .vec3 import Vec3

_FACE_CODE = {f: i for i, f in enumerate(FACES)}


@dataclass(slots=True)
class Sticker:
    position: Vec3
    color: Face

    def in_layer(self, face: Face) -> bool:
        return self.position.dot(face.axis_normal()) >= LAYER_DEPTH

    def turned(self, move: Move) -> Sticker:
        if not self.in_layer(move.face):
            return self
        return Sticker(self.position.rotate(move.face, move.turn), self.color)


class GeometricCube:
    """The cube as 54 stickers at exact lattice points.

    A move rotates every sticker in the outer slab of the moved face (the 9
    face stickers and the 12 side stickers of its 9 cubies). Colours travel
    with the stickers; positions are the truth used for projection.
    """

    __slots__ = ("_stickers", "last_move")

    def __init__(self, stickers: Iterable[Sticker]):
        self._stickers = [Sticker(s.position, s.color) for s in stickers]
        self.last_move: Move | None = None
        self._check_lattice()

    @classmethod
    def new_solved(cls) -> GeometricCube:
        return cls(Sticker(p, face_of_point(p)) for p in COORDS.index_to_point)

    def stickers(self) -> tuple[tuple[Vec3, Face], ...]:
        return tuple((s.position, s.color) for s in self._stickers)

    def sticker_at(self, position: Vec3) -> Sticker:
        for s in self._stickers:
            if s.position == position:
                return Sticker(s.position, s.color)
        raise KeyError(position)

    def layer(self, face: Face) -> list[Sticker]:
        return [Sticker(s.position, s.color) for s in self._stickers if s.in_layer(face)]

    def apply(self, move: Move) -> None:
        self._stickers = [s.turned(move) for s in self._stickers]
        self.last_move = move

    def apply_moves(self, moves: Iterable[Move]) -> None:
        for move in moves:
            self.apply(move)

    def color_map(self) -> dict[Vec3, Face]:
        return {s.position: s.color for s in self._stickers}

    def is_solved(self) -> bool:
        return all(face_of_point(s.position) is s.color for s in self._stickers)

    def copy(self) -> GeometricCube:
        c = GeometricCube(self._stickers)
        c.last_move = self.last_move
        return c

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeometricCube):
            return NotImplemented
        return self.color_map() == other.color_map()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"GeometricCube(<{len(self._stickers)} stickers>)"

    def _canonical_bytes(self) -> bytes:
        # little-endian int8 records (x, y, z, colour), sorted by position
        records = sorted(
            (s.position.as_tuple(), _FACE_CODE[s.color]) for s in self._stickers
        )
        flat = [v for (p, c) in records for v in (*p, c)]
        return struct.pack("<" + "b" * len(flat), *flat)

    def hash(self) -> str:
        return hashlib.sha256(self._canonical_bytes()).hexdigest()

    def _check_lattice(self) -> None:
        if len(self._stickers) != TOTAL_STICKERS:
            raise AssertionError(f"expected {TOTAL_STICKERS} stickers, got {len(self._stickers)}")
        positions = {s.position for s in self._stickers}
        if len(positions) != TOTAL_STICKERS:
            raise AssertionError("two stickers share a position")
        if positions != set(COORDS.point_to_index):
            raise AssertionError("sticker position off the lattice")
        counts = Counter(s.color for s in self._stickers)
        if any(counts[f] != STICKERS_PER_FACE for f in FACES):
            raise AssertionError("each colour must appear on exactly 9 stickers")

    def audit(self) -> None:
        # NON-MUTATING: must restore exactly.
        before = list(self._stickers)
        before_last = self.last_move
        before_hash = self.hash()
        snap = self._canonical_bytes()

        try:
            self._check_lattice()
            if self.last_move is not None:
                self.apply(self.last_move)
                self.apply(self.last_move.inverse())
                if self._canonical_bytes() != snap:
                    raise AssertionError("apply(move); apply(inverse) did not restore state")
        finally:
            self._stickers = before
            self.last_move = before_last
            if self.hash() != before_hash:
                raise AssertionError("audit() mutated cube state (hash mismatch)")
