"""Process-wide uniform integer source.

Usage:
    rng = RandomSource()           # fresh, non-deterministic
    rng = RandomSource(seed=123)   # reproducible sequence
    n = rng.next_uniform(1, 101)   # 1..100
"""

from __future__ import annotations

import random
from typing import Optional

from ..domain.ports import RandomPort


class RandomSource(RandomPort):
    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed) if seed is not None else random.Random()

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next_uniform(self, low: int, high: int) -> int:
        """Return a uniform integer ``n`` with ``low <= n < high``."""
        if high <= low:
            raise ValueError(f"empty range [{low}, {high})")
        return self._rng.randrange(low, high)


__all__ = ["RandomSource"]
