"""Random draws used for die rolls and wall shuffling."""

from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]``, both ends inclusive."""


class SeededRandomSource:
    """:class:`RandomSource` backed by :class:`random.Random`."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform_int(self, low: int, high: int) -> int:
        if high < low:
            raise ValueError(f"Empty range [{low}, {high}]")
        return self._rng.randint(low, high)
