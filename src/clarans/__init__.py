"""
CLARANS – Clustering Large Applications based on Randomized Search

Randomized local search for k-medoid clustering over any item type with a
caller-supplied distance function:

1. **Sequential search** with `minima` restarts (`clarans.search`).
2. **Parallel search** spreading the restarts over worker threads (`clarans.parallel_search`).
3. **Utilities** for point I/O, metrics, logging and the command line.

Typical high-level workflow
--------------------------
>>> from clarans import search
>>> from clarans.utils.points import Point, euclidean_distance
>>> points = [Point((0.0, 0.0)), Point((0.0, 1.0)), Point((10.0, 0.0)), Point((10.0, 1.0))]
>>> result = search(points, num_clusters=2, minima=5, max_neighbors=50, distance=euclidean_distance, rng=0)
>>> result.cost
2.0
"""

from .clustering import (
    ConfigurationError,
    SearchResult,
    parallel_search,
    search,
)

__version__ = '0.1.0'

__all__ = [
    'search',
    'parallel_search',
    'ConfigurationError',
    'SearchResult',
]
