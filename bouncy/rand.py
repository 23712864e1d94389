"""Random number helpers for the simulation."""

from __future__ import annotations

import random


class RandomGenerator:
    """Uniform random integers, floats and booleans from one seeded source."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in the closed range [low, high]."""
        if low > high:
            raise ValueError(f"empty range: {low} > {high}")
        return self._random.randint(low, high)

    def uniform(self, low: float, high: float) -> float:
        """Uniform float in the half-open range [low, high)."""
        if low > high:
            raise ValueError(f"empty range: {low} > {high}")
        value = low + (high - low) * self._random.random()
        return low if value >= high and high > low else value

    def boolean(self) -> bool:
        """A fair coin flip."""
        return self.integer(0, 1) == 0