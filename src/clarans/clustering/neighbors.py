"""Random medoid sets: initial samples and single-swap neighbors."""

import numpy as np

from .common import ConfigurationError, MedoidSet


def init_medoids(n_points: int, num_clusters: int, rng: np.random.Generator) -> MedoidSet:
    """Sample ``num_clusters`` distinct point indices uniformly without replacement."""
    if num_clusters < 1 or num_clusters > n_points:
        raise ConfigurationError(
            f"Cannot sample {num_clusters} medoids from {n_points} points"
        )
    return tuple(int(i) for i in rng.choice(n_points, size=num_clusters, replace=False))


def get_neighbor(medoids: MedoidSet, n_points: int, rng: np.random.Generator) -> MedoidSet:
    """
    Propose a medoid set that differs from ``medoids`` in exactly one slot.

    The replacement is drawn from all points, current medoids included, so a
    proposal can repeat an existing medoid. Such proposals never lower the
    cost and are simply rejected by the caller.
    """
    if not medoids:
        raise ConfigurationError("Cannot build a neighbor of an empty medoid set")
    if n_points < 1:
        raise ConfigurationError("Cannot build a neighbor from an empty point collection")

    slot = int(rng.integers(len(medoids)))
    neighbor = list(medoids)
    neighbor[slot] = int(rng.integers(n_points))
    return tuple(neighbor)
