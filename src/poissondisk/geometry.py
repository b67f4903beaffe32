"""
Geometry utilities for Poisson-disk sampling.

Contains:
- Domain: the rectangular sampling region
- SampleGrid: acceleration grid holding at most one accepted point per cell
- ActiveQueue: accepted points still eligible to seed new candidates
- annulus_candidate: candidate generation around a seed point
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from .config import Bounds, GridKey, Point
from .rng import RandomSource

# Half-width of the neighbourhood scanned by SampleGrid.is_valid, in cells
NEIGHBOURHOOD_REACH = 2


class InvalidDomainError(ValueError):
    """Raised when domain bounds are inverted or not finite."""


@dataclass(frozen=True)
class Domain:
    """Axis-aligned rectangle [x_min, x_max] x [y_min, y_max]."""
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self) -> None:
        values = (self.x_min, self.x_max, self.y_min, self.y_max)
        if not all(math.isfinite(v) for v in values):
            raise InvalidDomainError(f"Domain bounds must be finite, got {values}")
        if self.x_max < self.x_min or self.y_max < self.y_min:
            raise InvalidDomainError(f"Domain bounds are inverted: {values}")

    @classmethod
    def from_bounds(cls, bounds: Union["Domain", Bounds, Sequence[float]]) -> "Domain":
        if isinstance(bounds, Domain):
            return bounds
        if len(bounds) != 4:
            raise InvalidDomainError(
                f"Expected (x_min, x_max, y_min, y_max), got {len(bounds)} values")
        return cls(*(float(v) for v in bounds))

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains(self, x: float, y: float) -> bool:
        """Inclusive bounds test."""
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def random_point(self, random: RandomSource) -> Point:
        """Uniform point over the whole domain, x drawn before y."""
        x = self.x_min + self.width * random()
        y = self.y_min + self.height * random()
        return Point(x, y)


class SampleGrid:
    """
    Uniform grid over the domain for minimum-distance queries.

    Cells are radius / sqrt(2) wide, so a cell can never hold two points that
    are more than `radius` apart. Dimensions are fixed at construction.
    """

    def __init__(self, domain: Domain, radius: float):
        self.domain = domain
        self.radius = radius
        self.radius_sq = radius * radius
        self.cell_size = radius * math.sqrt(0.5)
        self.width = max(1, math.ceil(domain.width / self.cell_size))
        self.height = max(1, math.ceil(domain.height / self.cell_size))

        self._coords = np.full((self.width, self.height, 2), np.nan)
        self._occupied = np.zeros((self.width, self.height), dtype=bool)

    def cell_of(self, x: float, y: float) -> GridKey:
        """Cell coordinates of an in-domain point; the max edges fall in the last cell."""
        col = int((x - self.domain.x_min) // self.cell_size)
        row = int((y - self.domain.y_min) // self.cell_size)
        return (min(max(col, 0), self.width - 1), min(max(row, 0), self.height - 1))

    def insert(self, point: Point) -> None:
        """Store an accepted point. The caller has already validated it."""
        col, row = self.cell_of(point.x, point.y)
        self._coords[col, row] = (point.x, point.y)
        self._occupied[col, row] = True

    def is_valid(self, x: float, y: float) -> bool:
        """True if (x, y) is inside the domain and farther than radius from every stored point."""
        if not self.domain.contains(x, y):
            return False

        col, row = self.cell_of(x, y)
        c0, c1 = max(col - NEIGHBOURHOOD_REACH, 0), min(col + NEIGHBOURHOOD_REACH + 1, self.width)
        r0, r1 = max(row - NEIGHBOURHOOD_REACH, 0), min(row + NEIGHBOURHOOD_REACH + 1, self.height)

        occupied = self._occupied[c0:c1, r0:r1]
        if not occupied.any():
            return True

        neighbours = self._coords[c0:c1, r0:r1][occupied]
        dist_sq = np.sum((neighbours - np.array([x, y])) ** 2, axis=1)
        return not bool(np.any(dist_sq <= self.radius_sq))

    def reset(self) -> None:
        """Empty every cell, keeping the grid dimensions."""
        self._coords.fill(np.nan)
        self._occupied.fill(False)

    @property
    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._occupied))

    def points(self) -> np.ndarray:
        """All stored points as an (n, 2) array, in cell order."""
        return self._coords[self._occupied].reshape(-1, 2)


class ActiveQueue:
    """Unordered collection of points that may still seed candidates."""

    def __init__(self):
        self._points: List[Point] = []

    def __len__(self) -> int:
        return len(self._points)

    def push(self, point: Point) -> None:
        self._points.append(point)

    def is_empty(self) -> bool:
        return not self._points

    def pick_random(self, random: RandomSource) -> Tuple[Point, int]:
        """Uniformly pick an active point, returning it with its index."""
        index = min(int(len(self._points) * random()), len(self._points) - 1)
        return self._points[index], index

    def remove_at(self, index: int) -> None:
        """Remove by swapping with the last element; order is not preserved."""
        last = self._points.pop()
        if index < len(self._points):
            self._points[index] = last

    def clear(self) -> None:
        self._points.clear()


def annulus_candidate(seed: Point, radius: float, random: RandomSource) -> Point:
    """Candidate at distance [radius, 2 * radius) and a uniform angle from seed."""
    distance = radius * (random() + 1.0)
    angle = 2.0 * math.pi * random()
    return Point(seed.x + distance * math.cos(angle), seed.y + distance * math.sin(angle))


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """Convert points to an (n, 2) float array."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.array(points, dtype=float)


def max_point_count(domain: Domain, radius: float) -> int:
    """
    Upper bound on how many points fit in the domain.

    Each point owns a disk of radius / 2 that no other disk overlaps, and those
    disks stay within the domain grown by radius / 2 on every side.
    """
    disk_area = math.pi * (radius / 2.0) ** 2
    grown_area = (domain.width + radius) * (domain.height + radius)
    return int(grown_area // disk_area) + 1


def pairwise_min_distance(points: Sequence[Point]) -> Optional[float]:
    """Smallest distance between any two points, or None for fewer than two."""
    arr = points_to_array(points)
    if len(arr) < 2:
        return None
    diffs = arr[:, np.newaxis, :] - arr[np.newaxis, :, :]
    dists = np.linalg.norm(diffs, axis=2)
    np.fill_diagonal(dists, np.inf)
    return float(np.min(dists))
