from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from cubedesu import explore_random  # noqa: E402


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    print(explore_random(1_000, seed=0))
    print(explore_random(10_000, seed=1, check_every=10))


if __name__ == "__main__":
    main()
