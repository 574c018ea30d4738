"""
clustering module

This module provides the CLARANS randomized k-medoid search: cost evaluation,
neighbor generation, the sequential multi-restart driver and its parallel variant.
"""

# Re-export public functions and classes from the search submodules
from .common import (
    ConfigurationError,
    DistanceFunc,
    SearchResult,
)

from .cost import (
    assign_points,
    closest_medoid,
    compute_total_cost,
)

from .neighbors import (
    get_neighbor,
    init_medoids,
)

from .search import (
    local_search,
    search,
)

from .parallel import (
    parallel_search,
    partition_restarts,
)

__all__ = [
    'search',
    'parallel_search',
    'local_search',
    'partition_restarts',
    'ConfigurationError',
    'DistanceFunc',
    'SearchResult',
    'assign_points',
    'closest_medoid',
    'compute_total_cost',
    'get_neighbor',
    'init_medoids',
]
