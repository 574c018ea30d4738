"""
Shared types and precondition checks for the medoid search.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Tuple

# Caller-supplied pairwise distance between two items.
DistanceFunc = Callable[[Any, Any], float]

MedoidSet = Tuple[int, ...]

ACCEPTANCE_POLICIES = ('reset', 'budget')


class ConfigurationError(ValueError):
    """Raised when search inputs violate a precondition."""


@dataclass(frozen=True)
class SearchResult:
    """Best medoid configuration observed by a search and its total cost."""
    medoids: MedoidSet
    cost: float

    @classmethod
    def empty(cls) -> 'SearchResult':
        """Sentinel result of a search that ran no restarts."""
        return cls(medoids=(), cost=math.inf)

    @property
    def is_empty(self) -> bool:
        return not self.medoids

    def improves_on(self, other: 'SearchResult') -> bool:
        """Strictly lower cost wins; ties keep ``other``."""
        return self.cost < other.cost

    def medoid_points(self, points: Sequence[Any]) -> List[Any]:
        """Resolve the medoid indices to items, in slot order."""
        return [points[i] for i in self.medoids]


def validate_search_inputs(
    points: Sequence[Any],
    num_clusters: int,
    minima: int,
    max_neighbors: int,
    acceptance: str = 'reset'
) -> None:
    """Check engine preconditions before any work is done."""
    if len(points) == 0:
        raise ConfigurationError("Point collection is empty")
    if num_clusters < 1 or num_clusters > len(points):
        raise ConfigurationError(
            f"num_clusters must be in [1, {len(points)}]. Got: {num_clusters}"
        )
    if minima < 1:
        raise ConfigurationError(f"minima must be at least 1. Got: {minima}")
    if max_neighbors < 0:
        raise ConfigurationError(
            f"max_neighbors must be non-negative. Got: {max_neighbors}"
        )
    if acceptance not in ACCEPTANCE_POLICIES:
        raise ConfigurationError(
            f"Unknown acceptance policy: {acceptance}. "
            f"Expected one of {', '.join(ACCEPTANCE_POLICIES)}"
        )
