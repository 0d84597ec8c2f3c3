from __future__ import annotations

import hashlib
import logging
from collections import Counter
from collections.abc import Iterable, Sequence

from .coords import STICKERS_PER_FACE, TOTAL_STICKERS
from .moves import ALL_MOVES, FACES, Face, Move, Turn

logger = logging.getLogger(__name__)

IndexMap = list[int]

# Section-local cycles of a face's own block under a clockwise turn.
_OWN_CYCLES = ((0, 2, 8, 6), (1, 5, 7, 3))

# Adjacent rows/columns carried by each clockwise turn: a -> b -> c -> d -> a.
ADJACENT_CYCLES: dict[Face, tuple[tuple[int, int, int, int], ...]] = {
    Face.U: ((18, 36, 45, 9), (19, 37, 46, 10), (20, 38, 47, 11)),
    Face.R: ((20, 2, 51, 29), (23, 5, 48, 32), (26, 8, 45, 35)),
    Face.F: ((6, 9, 29, 44), (7, 12, 28, 41), (8, 15, 27, 38)),
    Face.D: ((24, 15, 51, 42), (25, 16, 52, 43), (26, 17, 53, 44)),
    Face.L: ((0, 18, 27, 53), (3, 21, 30, 50), (6, 24, 33, 47)),
    Face.B: ((0, 42, 35, 11), (1, 39, 34, 14), (2, 36, 33, 17)),
}


def clockwise_cycles(face: Face) -> list[tuple[int, int, int, int]]:
    offset = FACES.index(face) * STICKERS_PER_FACE
    own = [tuple(offset + i for i in c) for c in _OWN_CYCLES]
    return own + list(ADJACENT_CYCLES[face])  # type: ignore[arg-type]


def _cycles_to_map(cycles: Iterable[Sequence[int]]) -> IndexMap:
    mp = list(range(TOTAL_STICKERS))
    for cycle in cycles:
        for i, src in enumerate(cycle):
            mp[src] = cycle[(i + 1) % len(cycle)]
    return mp


def _invert_map(mp: IndexMap) -> IndexMap:
    inv = [0] * len(mp)
    for old_i, new_i in enumerate(mp):
        inv[new_i] = old_i
    return inv


def compose_maps(first: IndexMap, second: IndexMap) -> IndexMap:
    """Index map of ``first`` followed by ``second``."""
    return [second[first[i]] for i in range(len(first))]


def _audit_map(move: Move, mp: IndexMap) -> None:
    if len(mp) != TOTAL_STICKERS:
        raise AssertionError(f"index map for {move} has wrong length")
    if any((j < 0 or j >= TOTAL_STICKERS) for j in mp):
        raise AssertionError(f"index map for {move} out of range")
    if len(set(mp)) != TOTAL_STICKERS:
        raise AssertionError(f"index map for {move} is not a bijection")
    moved = sum(1 for i, j in enumerate(mp) if i != j)
    if moved != 20:
        raise AssertionError(f"index map for {move} moves {moved} facelets, expected 20")


def build_move_maps() -> dict[Move, IndexMap]:
    maps: dict[Move, IndexMap] = {}
    for face in FACES:
        cycles = clockwise_cycles(face)
        touched = [i for c in cycles for i in c]
        if len(set(touched)) != len(touched):
            raise AssertionError(f"cycles for {face.value} overlap")
        cw = _cycles_to_map(cycles)
        maps[Move(face, Turn.CLOCKWISE)] = cw
        maps[Move(face, Turn.COUNTER_CLOCKWISE)] = _invert_map(cw)
        maps[Move(face, Turn.DOUBLE)] = compose_maps(cw, cw)
    for move in ALL_MOVES:
        try:
            _audit_map(move, maps[move])
        except KeyError as e:
            raise AssertionError(f"no index map for {move}") from e
    logger.debug("built %d facelet index maps", len(maps))
    return maps


MOVE_MAPS: dict[Move, IndexMap] = build_move_maps()


def move_permutation(move: Move) -> tuple[int, ...]:
    """Where each facelet index goes under ``move`` (``mp[old] == new``)."""
    return tuple(MOVE_MAPS[move])


SOLVED: tuple[Face, ...] = tuple(f for f in FACES for _ in range(STICKERS_PER_FACE))


class FaceletCube:
    """The cube as 54 face labels in URFDLB section order, row-major per face."""

    __slots__ = ("_facelets", "last_move")

    def __init__(self, facelets: Iterable[Face] | None = None):
        if facelets is None:
            self._facelets = list(SOLVED)
        else:
            self._facelets = list(facelets)
            self._check_labels(ValueError)
        self.last_move: Move | None = None

    @classmethod
    def new_solved(cls) -> FaceletCube:
        return cls()

    @classmethod
    def from_string(cls, s: str) -> FaceletCube:
        if len(s) != TOTAL_STICKERS:
            raise ValueError(f"facelet string must be exactly {TOTAL_STICKERS} characters, got {len(s)}")
        try:
            labels = [Face(c) for c in s.upper()]
        except ValueError as e:
            raise ValueError("facelet string may only contain U, R, F, D, L, B") from e
        return cls(labels)

    def facelets(self) -> tuple[Face, ...]:
        return tuple(self._facelets)

    def face(self, face: Face) -> tuple[Face, ...]:
        start = FACES.index(face) * STICKERS_PER_FACE
        return tuple(self._facelets[start : start + STICKERS_PER_FACE])

    def apply(self, move: Move) -> None:
        mp = MOVE_MAPS[move]
        old = self._facelets
        new = list(old)
        for old_i, label in enumerate(old):
            new[mp[old_i]] = label
        self._facelets = new
        self.last_move = move

    def apply_moves(self, moves: Iterable[Move]) -> None:
        for move in moves:
            self.apply(move)

    def is_solved(self) -> bool:
        # Moves never turn the centres, so solved means every section is uniform.
        return all(len(set(self.face(f))) == 1 for f in FACES)

    def copy(self) -> FaceletCube:
        c = FaceletCube(self._facelets)
        c.last_move = self.last_move
        return c

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FaceletCube):
            return NotImplemented
        return self._facelets == other._facelets

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(f.value for f in self._facelets)

    def __repr__(self) -> str:
        return f"FaceletCube({str(self)!r})"

    def _canonical_bytes(self) -> bytes:
        return str(self).encode("ascii")

    def hash(self) -> str:
        return hashlib.sha256(self._canonical_bytes()).hexdigest()

    def _check_labels(self, exc: type[Exception]) -> None:
        if len(self._facelets) != TOTAL_STICKERS:
            raise exc(f"expected {TOTAL_STICKERS} facelets, got {len(self._facelets)}")
        if any(not isinstance(f, Face) for f in self._facelets):
            raise exc("facelets must be Face labels")
        counts = Counter(self._facelets)
        bad = {f.value: counts[f] for f in FACES if counts[f] != STICKERS_PER_FACE}
        if bad:
            raise exc(f"each label must appear {STICKERS_PER_FACE} times, got {bad}")

    def audit(self) -> None:
        # NON-MUTATING: must restore exactly.
        before = list(self._facelets)
        before_last = self.last_move
        before_hash = self.hash()

        try:
            self._check_labels(AssertionError)
            if self.last_move is not None:
                self.apply(self.last_move)
                self.apply(self.last_move.inverse())
                if self._facelets != before:
                    raise AssertionError("apply(move); apply(inverse) did not restore state")
        finally:
            self._facelets = before
            self.last_move = before_last
            if self.hash() != before_hash:
                raise AssertionError("audit() mutated cube state (hash mismatch)")
