"""
Random sources: anything with a ``random()`` method returning a float
in [0, 1) can drive the generator.
"""

from __future__ import annotations

import random
from itertools import cycle
from typing import Iterable, Optional, Protocol


class RandomSource(Protocol):
    def random(self) -> float:
        ...


class SystemRandomSource:
    """
    Uniform, non-cryptographic source backed by the Mersenne Twister.
    Pass a seed for reproducible output.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()


class SequenceRandomSource:
    """
    Replays a fixed list of values, cycling when exhausted.
    Mostly useful for tests.
    """

    def __init__(self, values: Iterable[float]) -> None:
        values = list(values)
        if not values:
            raise ValueError("SequenceRandomSource needs at least one value")
        for v in values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Random values must lie in [0, 1), got {v!r}")
        self._values = cycle(values)
        # Number of values handed out so far.
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return next(self._values)
