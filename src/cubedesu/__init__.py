"""cubedesu package."""

from .core.facelet import FaceletCube
from .core.geometric import GeometricCube, Sticker
from .core.moves import ALL_MOVES, FACES, TURNS, Face, Move, Turn
from .core.notation import format_moves, parse_move, parse_moves
from .core.vec3 import Vec3
from .explorer.random_walk import explore_random
from .invariants.equivalence import check_equivalence, project

__all__ = [
    "ALL_MOVES",
    "FACES",
    "TURNS",
    "Face",
    "FaceletCube",
    "GeometricCube",
    "Move",
    "Sticker",
    "Turn",
    "Vec3",
    "check_equivalence",
    "explore_random",
    "format_moves",
    "parse_move",
    "parse_moves",
    "project",
]
