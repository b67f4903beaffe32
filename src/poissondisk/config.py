"""
Configuration and type definitions for Poisson-disk sampling.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple
from enum import Enum

# Type aliases
Bounds = Tuple[float, float, float, float]  # (x_min, x_max, y_min, y_max)
GridKey = Tuple[int, int]

MIN_DISTANCE_FLOOR = 1.0
MAX_TRIES_FLOOR = 2


class Point(NamedTuple):
    """An accepted sample in domain coordinates."""
    x: float
    y: float


class SamplerState(Enum):
    """Lifecycle of a sampler."""
    FRESH = "fresh"             # No point emitted yet
    SAMPLING = "sampling"       # Active points remain
    EXHAUSTED = "exhausted"     # Active queue drained


@dataclass
class SamplingConfig:
    """
    Configuration parameters for the sampler.

    Basic parameters:
        min_distance: No two points are closer than this (clamped to >= 1)
        max_tries: Candidates tried per seed before it is retired (clamped to >= 2)

    Randomness:
        seed: Seed for the default random source, ignored when a source is injected

    Output:
        verbose: Print progress while sampling
    """
    min_distance: float = 1.0
    max_tries: int = 30
    seed: Optional[int] = None
    verbose: bool = False

    def __post_init__(self) -> None:
        self.min_distance = max(float(self.min_distance), MIN_DISTANCE_FLOOR)
        self.max_tries = max(int(self.max_tries), MAX_TRIES_FLOOR)


@dataclass
class SamplingProgress:
    """Tracks the current state of the sampling run."""
    points_emitted: int = 0
    active_points: int = 0
    seeds_retired: int = 0
    candidates_tested: int = 0
    candidates_rejected: int = 0

    @property
    def acceptance_ratio(self) -> float:
        """Fraction of tested candidates that were accepted."""
        if self.candidates_tested == 0:
            return 0.0
        return (self.candidates_tested - self.candidates_rejected) / self.candidates_tested

    def __str__(self) -> str:
        return (f"Emitted: {self.points_emitted} | Active: {self.active_points} | "
                f"Retired: {self.seeds_retired} | Accepted: {self.acceptance_ratio:.0%}")
