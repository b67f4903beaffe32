"""
poissondisk - Blue-noise point sampling over rectangles.

Usage:
    from poissondisk import PoissonDiskSampler, SamplingConfig

    # Basic usage
    sampler = PoissonDiskSampler((0, 100, 0, 50))
    points = sampler.all()

    # With configuration
    config = SamplingConfig(min_distance=4.0, max_tries=30, seed=7, verbose=True)
    sampler = PoissonDiskSampler((0, 100, 0, 50), config)
    points = sampler.all()

    # One point at a time
    sampler.reset()
    point = sampler.next()
    while point is not None:
        place_tree(point.x, point.y)
        point = sampler.next()

    # Deterministic runs with an injected random source
    sampler = PoissonDiskSampler((0, 10, 0, 10), random_source=SequenceRandom([0.3, 0.7, 0.1]))

Sampling follows Bridson's algorithm: an acceleration grid with cells of
min_distance / sqrt(2), an active queue of seed points, and candidates drawn
from the annulus [min_distance, 2 * min_distance) around a random seed.
"""

from .config import (
    Bounds, GridKey, Point, SamplerState, SamplingConfig, SamplingProgress,
)
from .geometry import (
    ActiveQueue, Domain, InvalidDomainError, SampleGrid,
    annulus_candidate, max_point_count, pairwise_min_distance, points_to_array,
)
from .rng import RandomSource, SequenceRandom, default_random_source
from .sampler import PoissonDiskSampler, poisson_disk_sample

__all__ = [
    "PoissonDiskSampler",
    "poisson_disk_sample",
    "SamplingConfig",
    "SamplingProgress",
    "SamplerState",
    "Domain",
    "InvalidDomainError",
    "SampleGrid",
    "ActiveQueue",
    "annulus_candidate",
    "max_point_count",
    "pairwise_min_distance",
    "points_to_array",
    "RandomSource",
    "SequenceRandom",
    "default_random_source",
    "Point",
    "Bounds",
    "GridKey",
]

__version__ = "0.1.0"
