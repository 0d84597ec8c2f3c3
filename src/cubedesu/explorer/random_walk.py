from __future__ import annotations

import logging
import math
import random

from cubedesu.core.facelet import FaceletCube
from cubedesu.core.geometric import GeometricCube
from cubedesu.core.moves import ALL_MOVES, Move
from cubedesu.invariants.equivalence import check_equivalence

logger = logging.getLogger(__name__)


def _visit_entropy(visit_counts: dict[str, int]) -> float:
    """Shannon entropy (bits) of state visit distribution."""
    total = sum(visit_counts.values())
    if total == 0:
        return 0.0
    h = 0.0
    for c in visit_counts.values():
        p = c / total
        h -= p * math.log2(p)
    return h


def explore_random(steps: int, seed: int = 0, check_every: int = 1) -> dict:
    """Drive both cube models with the same random move stream.

    The geometric model is projected and compared against the facelet model
    every ``check_every`` moves and after the last one; any disagreement raises
    ``AssertionError``.
    """
    if steps < 0:
        raise ValueError("steps must be >= 0")
    if check_every < 1:
        raise ValueError("check_every must be >= 1")

    rng = random.Random(seed)
    geo = GeometricCube.new_solved()
    fac = FaceletCube.new_solved()

    first_seen_step: dict[str, int] = {}
    visit_counts: dict[str, int] = {}

    h0 = fac.hash()
    first_seen_step[h0] = 0
    visit_counts[h0] = 1

    first_repeat_step: int | None = None
    cycle_length: int | None = None
    solved_visits = 0

    for step in range(1, steps + 1):
        move = Move.from_index(rng.randrange(len(ALL_MOVES)))
        geo.apply(move)
        fac.apply(move)
        if step % check_every == 0 or step == steps:
            check_equivalence(geo, fac)

        h = fac.hash()
        visit_counts[h] = visit_counts.get(h, 0) + 1
        if first_repeat_step is None and h in first_seen_step:
            first_repeat_step = step
            cycle_length = step - first_seen_step[h]
            logger.debug("first repeat at step %d (cycle length %d)", step, cycle_length)
        else:
            first_seen_step.setdefault(h, step)
        if h == h0:
            solved_visits += 1

    logger.debug("random walk of %d steps visited %d states", steps, len(first_seen_step))
    return {
        "steps": steps,
        "seed": seed,
        "first_repeat_step": first_repeat_step,
        "estimated_cycle_length": cycle_length,
        "unique_state_count": len(first_seen_step),
        "entropy_bits": _visit_entropy(visit_counts),
        "solved_visits": solved_visits,
    }
