"""Reproducible pseudo-random source used for initial blip placement."""

from __future__ import annotations

import math

DEFAULT_SEED = 42


class DeterministicSequence:
    """Sine-hash sequence; cheap and reproducible, not statistically uniform."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._initial_seed = seed
        self._counter = seed

    def reset(self) -> None:
        self._counter = self._initial_seed

    def next(self) -> float:
        x = math.sin(self._counter) * 10000.0
        self._counter += 1
        return x - math.floor(x)

    def between(self, lo: float, hi: float) -> float:
        return lo + self.next() * (hi - lo)

    def triangular_between(self, lo: float, hi: float) -> float:
        # mean of two draws peaks at the midpoint of the range
        return lo + (self.next() + self.next()) * 0.5 * (hi - lo)


__all__ = ["DEFAULT_SEED", "DeterministicSequence"]
