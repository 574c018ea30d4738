"""Point type, distance metrics and synthetic point generation."""
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np
from haversine import haversine


@dataclass(frozen=True)
class Point:
    """An immutable point with N coordinates."""
    coords: Tuple[float, ...]

    def __str__(self):
        return f"({', '.join(str(c) for c in self.coords)})"

    def __len__(self):
        return len(self.coords)


def euclidean_distance(a: Point, b: Point) -> float:
    """Straight-line distance between two points of equal dimension."""
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a.coords, b.coords)))


def haversine_distance(a: Point, b: Point) -> float:
    """Great-circle distance in km between two (latitude, longitude) points."""
    if len(a.coords) < 2 or len(b.coords) < 2:
        raise ValueError(
            f"haversine metric needs (latitude, longitude) points. "
            f"Got {len(a.coords)} and {len(b.coords)} coordinates"
        )
    return haversine(a.coords[:2], b.coords[:2])


METRICS: Dict[str, Callable[[Point, Point], float]] = {
    'euclidean': euclidean_distance,
    'haversine': haversine_distance,
}


def get_distance_function(metric: str) -> Callable[[Point, Point], float]:
    """Return the distance function registered under ``metric``."""
    try:
        return METRICS[metric]
    except KeyError:
        raise ValueError(
            f"Unknown distance metric: {metric}. Expected one of {', '.join(METRICS)}"
        ) from None


def points_from_array(values: np.ndarray) -> List[Point]:
    """Wrap the rows of a 2-D array as points."""
    return [Point(tuple(float(v) for v in row)) for row in np.atleast_2d(values)]


def create_random_points(
    count: int,
    dimensions: int,
    value_range: Sequence[float],
    rng: np.random.Generator
) -> List[Point]:
    """Generate ``count`` points with coordinates uniform in [low, high)."""
    low, high = value_range
    if count < 0 or dimensions < 1:
        raise ValueError(f"Invalid point shape: count={count}, dimensions={dimensions}")
    if not low < high:
        raise ValueError(f"Invalid value range: [{low}, {high})")
    return points_from_array(rng.uniform(low, high, size=(count, dimensions)))
