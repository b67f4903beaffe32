import numpy as np
from typing import Iterator, List, Optional, Sequence, Union

from .config import Bounds, Point, SamplerState, SamplingConfig, SamplingProgress
from .geometry import ActiveQueue, Domain, SampleGrid, annulus_candidate
from .rng import RandomSource, default_random_source

# Emit a progress line every this many points when verbose
PROGRESS_INTERVAL = 25


class PoissonDiskSampler:
    """Generates blue-noise points over a rectangle with a minimum spacing."""

    def __init__(
        self,
        bounds: Union[Domain, Bounds, Sequence[float]],
        config: Optional[SamplingConfig] = None,
        random_source: Optional[RandomSource] = None,
    ):
        self.config = config or SamplingConfig()
        self.domain = Domain.from_bounds(bounds)
        self.radius = self.config.min_distance
        self.max_tries = self.config.max_tries
        self.random = random_source or default_random_source(self.config.seed)

        self.grid = SampleGrid(self.domain, self.radius)
        self.active = ActiveQueue()
        self.state = SamplerState.FRESH
        self.progress = SamplingProgress()

    def reset(self) -> None:
        """Forget every emitted point and return to the fresh state."""
        self.grid.reset()
        self.active.clear()
        self.state = SamplerState.FRESH
        self.progress = SamplingProgress()

    def done(self) -> bool:
        return self.state is SamplerState.EXHAUSTED

    def _accept(self, point: Point) -> Point:
        self.grid.insert(point)
        self.active.push(point)
        self.progress.points_emitted += 1
        self.progress.active_points = len(self.active)

        if self.config.verbose and self.progress.points_emitted % PROGRESS_INTERVAL == 0:
            print(self.progress)

        return point

    def _retire(self, index: int) -> None:
        self.active.remove_at(index)
        self.progress.seeds_retired += 1
        self.progress.active_points = len(self.active)

    def next_point(self) -> Optional[Point]:
        """
        Emit one more point, or None once no further point fits.

        The first call places a uniformly random point. Later calls grow the
        set from random active points; a seed that fails max_tries candidates
        in a row is retired from the active queue but stays in the grid.
        """
        if self.state is SamplerState.FRESH:
            self.state = SamplerState.SAMPLING
            return self._accept(self.domain.random_point(self.random))

        if self.state is SamplerState.EXHAUSTED:
            return None

        while not self.active.is_empty():
            seed, index = self.active.pick_random(self.random)
            for _ in range(self.max_tries):
                candidate = annulus_candidate(seed, self.radius, self.random)
                self.progress.candidates_tested += 1
                if self.grid.is_valid(candidate.x, candidate.y):
                    return self._accept(candidate)
                self.progress.candidates_rejected += 1
            self._retire(index)

        self.state = SamplerState.EXHAUSTED
        if self.config.verbose:
            print(f"Done! {self.progress}")
        return None

    def next(self) -> Optional[Point]:
        """Alias of next_point()."""
        return self.next_point()

    def generate(self) -> Iterator[Point]:
        """
        Yield points from the current state until the domain is saturated.

        Unlike all(), this does not reset first, so it can resume a run that
        was started with next().
        """
        while True:
            point = self.next_point()
            if point is None:
                return
            yield point

    def __iter__(self) -> Iterator[Point]:
        return self.generate()

    def all(self) -> List[Point]:
        """Reset, then return every point of a full run in emission order."""
        self.reset()
        return list(self.generate())

    @property
    def points(self) -> np.ndarray:
        """Points accepted so far as an (n, 2) array."""
        return self.grid.points()


def poisson_disk_sample(
    bounds: Union[Domain, Bounds, Sequence[float]],
    min_distance: float = 1.0,
    max_tries: int = 30,
    random_source: Optional[RandomSource] = None,
    seed: Optional[int] = None,
) -> List[Point]:
    """Sample a full Poisson-disk point set in one call."""
    config = SamplingConfig(min_distance=min_distance, max_tries=max_tries, seed=seed)
    return PoissonDiskSampler(bounds, config, random_source).all()
