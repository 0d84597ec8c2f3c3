from __future__ import annotations

from dataclasses import dataclass

from cubedesu.core.coords import TOTAL_STICKERS
from cubedesu.core.facelet import MOVE_MAPS, IndexMap, compose_maps
from cubedesu.core.moves import ALL_MOVES, Move

IDENTITY_MAP: IndexMap = list(range(TOTAL_STICKERS))


def move_order(move: Move) -> int:
    mp = MOVE_MAPS[move]
    acc = mp
    for k in range(1, 5):
        if acc == IDENTITY_MAP:
            return k
        acc = compose_maps(acc, mp)
    raise AssertionError(f"{move} has no order <= 4")


@dataclass(frozen=True, slots=True)
class MoveGroup:
    commute_table: list[list[bool]]

    def commutes(self, a: Move, b: Move) -> bool:
        return self.commute_table[a.index][b.index]


def build_commute_table() -> MoveGroup:
    n = len(ALL_MOVES)
    table: list[list[bool]] = [[False] * n for _ in range(n)]
    for a in ALL_MOVES:
        for b in ALL_MOVES:
            ab = compose_maps(MOVE_MAPS[a], MOVE_MAPS[b])
            ba = compose_maps(MOVE_MAPS[b], MOVE_MAPS[a])
            table[a.index][b.index] = ab == ba
    for i in range(n):
        for j in range(n):
            if table[i][j] != table[j][i]:
                raise AssertionError("commutation table is not symmetric")
    return MoveGroup(commute_table=table)
