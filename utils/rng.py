"""Per-worker pseudo-random source for jitter, delay, drop and tamper draws.

Each worker owns one RandomSource; nothing here is shared between threads.
Seeding: base_seed XOR (worker_index * salt). The base seed comes from
`secrets` unless a fixed one is supplied for a reproducible run.
"""

import random as _random
import secrets
from typing import Optional

from config import SEED_SALT


class RandomSource:
    """Seeded PRNG wrapper bound to a single worker."""

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = _random.Random(seed)

    @classmethod
    def for_worker(cls, worker_index: int, base_seed: Optional[int] = None,
                   salt: int = SEED_SALT) -> "RandomSource":
        if base_seed is None:
            base_seed = secrets.randbits(64)
        return cls(base_seed ^ (worker_index * salt))

    def randint(self, low: int, high: int) -> int:
        """Inclusive on both ends."""
        return self._rng.randint(low, high)

    def chance(self, percent: float) -> bool:
        """True with probability percent / 100."""
        return self._rng.random() < percent / 100.0
