"""
Random sources for the sampler.

A random source is any zero-argument callable returning a float in [0, 1).
"""

import numpy as np
from typing import Callable, Iterable, Optional

RandomSource = Callable[[], float]


def default_random_source(seed: Optional[int] = None) -> RandomSource:
    """Uniform [0, 1) source backed by numpy's default generator."""
    generator = np.random.default_rng(seed)

    def draw() -> float:
        return float(generator.random())

    return draw


class SequenceRandom:
    """Deterministic source that cycles through a fixed sequence of values."""

    def __init__(self, values: Iterable[float]):
        self.values = np.asarray(list(values), dtype=float)
        if len(self.values) == 0:
            raise ValueError("SequenceRandom needs at least one value")
        if np.any((self.values < 0.0) | (self.values >= 1.0)):
            raise ValueError("SequenceRandom values must lie in [0, 1)")
        self._position = 0

    def __call__(self) -> float:
        value = self.values[self._position]
        self._position = (self._position + 1) % len(self.values)
        return float(value)

    def reset(self) -> None:
        """Rewind to the first value."""
        self._position = 0
