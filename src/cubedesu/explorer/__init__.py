"""cubedesu.explorer"""

from .random_walk import explore_random

__all__ = [
    "explore_random",
]
