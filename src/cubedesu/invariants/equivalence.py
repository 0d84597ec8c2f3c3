from __future__ import annotations

from collections.abc import Iterable

from cubedesu.core.coords import COORDS, TOTAL_STICKERS
from cubedesu.core.facelet import FaceletCube
from cubedesu.core.geometric import GeometricCube
from cubedesu.core.moves import Face, Move


def project(cube: GeometricCube) -> FaceletCube:
    """Flatten a geometric cube into facelet order by sticker position."""
    labels: list[Face | None] = [None] * TOTAL_STICKERS
    for position, color in cube.stickers():
        try:
            i = COORDS.point_to_index[position]
        except KeyError as e:
            raise AssertionError(f"sticker off the lattice: {position}") from e
        if labels[i] is not None:
            raise AssertionError(f"two stickers project to facelet {i}")
        labels[i] = color
    try:
        return FaceletCube(labels)  # type: ignore[arg-type]
    except ValueError as e:
        raise AssertionError(f"geometric cube does not project to a valid facelet cube: {e}") from e


def mismatched_indices(geo: GeometricCube, fac: FaceletCube) -> list[int]:
    projected = project(geo).facelets()
    return [i for i, (a, b) in enumerate(zip(projected, fac.facelets())) if a is not b]


def check_equivalence(geo: GeometricCube, fac: FaceletCube) -> None:
    bad = mismatched_indices(geo, fac)
    if bad:
        raise AssertionError(f"models disagree at facelets {bad}")


def verify_sequence(moves: Iterable[Move]) -> FaceletCube:
    """Run both models from solved over ``moves``, checking after every move."""
    geo = GeometricCube.new_solved()
    fac = FaceletCube.new_solved()
    check_equivalence(geo, fac)
    for step, move in enumerate(moves, start=1):
        geo.apply(move)
        fac.apply(move)
        try:
            check_equivalence(geo, fac)
        except AssertionError as e:
            raise AssertionError(f"after move {step} ({move}): {e}") from e
    return fac
