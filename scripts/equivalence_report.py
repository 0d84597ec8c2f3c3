from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Allow running as a standalone script from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from cubedesu.core.moves import ALL_MOVES, invert_moves, random_moves  # noqa: E402
from cubedesu.core.notation import format_moves, parse_moves  # noqa: E402
from cubedesu.explorer import explore_random  # noqa: E402
from cubedesu.invariants.equivalence import verify_sequence  # noqa: E402
from cubedesu.invariants.move_group import build_commute_table, move_order  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Cross-check the facelet and geometric cube models.")
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--steps", type=int, default=1_000)
    ap.add_argument("--check-every", type=int, default=1)
    ap.add_argument("--moves", type=str, default=None, help="explicit sequence, e.g. \"R U R' U'\"")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.moves is not None:
        moves = parse_moves(args.moves)
    else:
        moves = random_moves(args.steps, seed=0)
    final = verify_sequence(moves)
    undone = verify_sequence(moves + invert_moves(moves))

    group = build_commute_table()
    runs = [explore_random(args.steps, seed=seed, check_every=args.check_every) for seed in range(args.runs)]

    print(
        json.dumps(
            {
                "sequence": format_moves(moves) if args.moves is not None else f"{len(moves)} random moves",
                "final_facelets": str(final),
                "final_solved": final.is_solved(),
                "undone_solved": undone.is_solved(),
                "move_orders": {str(m): move_order(m) for m in ALL_MOVES},
                "commuting_pairs": sum(sum(row) for row in group.commute_table),
                "runs": runs,
                "min_unique": min(r["unique_state_count"] for r in runs) if runs else None,
                "max_unique": max(r["unique_state_count"] for r in runs) if runs else None,
                "avg_entropy_bits": sum(r["entropy_bits"] for r in runs) / len(runs) if runs else None,
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    main()
