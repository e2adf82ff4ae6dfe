"""Single seedable random stream shared by every draw of a fuzz run."""

from __future__ import annotations

import random


SEED_BITS = 32


class SeededStream:
    """Uniform integer draws that replay exactly from ``seed``.

    Dimension and value draws must come from the same instance, in the same
    order, for a logged seed to reproduce a trial.
    """

    def __init__(self, seed: int):
        if not 0 <= seed < 2**SEED_BITS:
            raise ValueError("seed must be an unsigned 32-bit integer")
        self.seed = seed
        self._rng = random.Random(seed)
        self.draws = 0

    @classmethod
    def from_entropy(cls) -> "SeededStream":
        return cls(random.SystemRandom().getrandbits(SEED_BITS))

    def draw(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError("empty draw range")
        self.draws += 1
        # built on random(), whose sequence per seed is stable across Python releases
        return low + int(self._rng.random() * (high - low + 1))

    def draw_matrix(self, rows: int, cols: int, low: int, high: int) -> list[list[int]]:
        return [[self.draw(low, high) for _ in range(cols)] for _ in range(rows)]
