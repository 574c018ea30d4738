"""
CLARANS randomized local search for k-medoids.

A restart samples a random medoid set and hill-climbs through single-swap
neighbors, adopting a neighbor only when its total cost is strictly lower.
The driver repeats this ``minima`` times and keeps the best configuration.
"""

import logging
from typing import Any, Sequence, Union

import numpy as np
from tqdm import tqdm

from .common import DistanceFunc, SearchResult, validate_search_inputs
from .cost import compute_total_cost
from .neighbors import get_neighbor, init_medoids

logger = logging.getLogger(__name__)

RandomState = Union[None, int, np.random.SeedSequence, np.random.Generator]


def local_search(
    points: Sequence[Any],
    num_clusters: int,
    max_neighbors: int,
    distance: DistanceFunc,
    rng: np.random.Generator,
    acceptance: str = 'reset'
) -> SearchResult:
    """
    Run a single CLARANS restart.

    Args:
        points: Point collection, never mutated
        num_clusters: Number of medoids
        max_neighbors: Neighbor trial budget, 0 keeps the initial sample
        distance: Pairwise distance between two items
        rng: Random generator for sampling and neighbor proposals
        acceptance: 'reset' counts consecutive failed trials and restarts the
            count after every accepted move; 'budget' stops after
            ``max_neighbors`` trials in total

    Returns:
        SearchResult with the local optimum reached by this restart
    """
    n_points = len(points)
    current = init_medoids(n_points, num_clusters, rng)
    current_cost = compute_total_cost(points, current, distance)

    trials = 0
    while trials < max_neighbors:
        trials += 1
        neighbor = get_neighbor(current, n_points, rng)
        neighbor_cost = compute_total_cost(points, neighbor, distance)
        if neighbor_cost < current_cost:
            current, current_cost = neighbor, neighbor_cost
            if acceptance == 'reset':
                trials = 0

    return SearchResult(medoids=current, cost=current_cost)


def run_restarts(
    points: Sequence[Any],
    num_clusters: int,
    restarts: int,
    max_neighbors: int,
    distance: DistanceFunc,
    rng: np.random.Generator,
    acceptance: str = 'reset',
    progress: bool = False
) -> SearchResult:
    """Run ``restarts`` independent restarts and keep the first-found best."""
    best = SearchResult.empty()
    for _ in tqdm(range(restarts), desc="Restarts", disable=not progress, leave=False):
        result = local_search(points, num_clusters, max_neighbors, distance, rng, acceptance)
        if result.improves_on(best):
            logger.debug(f"Improved cost from {best.cost} to {result.cost}")
            best = result
    return best


def search(
    points: Sequence[Any],
    num_clusters: int,
    minima: int,
    max_neighbors: int,
    distance: DistanceFunc,
    rng: RandomState = None,
    acceptance: str = 'reset',
    progress: bool = False
) -> SearchResult:
    """
    Find ``num_clusters`` medoids with ``minima`` sequential CLARANS restarts.

    Args:
        points: Non-empty point collection
        num_clusters: Number of medoids, in [1, len(points)]
        minima: Number of restarts, at least 1
        max_neighbors: Neighbor trial budget per restart
        distance: Pairwise distance between two items
        rng: Generator or seed; None draws fresh OS entropy
        acceptance: Trial budget policy, 'reset' or 'budget'
        progress: Show a restart progress bar

    Returns:
        SearchResult with the lowest-cost medoid set across all restarts

    Raises:
        ConfigurationError: If any input violates a precondition
    """
    validate_search_inputs(points, num_clusters, minima, max_neighbors, acceptance)
    rng = np.random.default_rng(rng)

    logger.info(
        f"Searching {num_clusters} medoids over {len(points)} points "
        f"({minima} restarts, {max_neighbors} neighbors, policy={acceptance})"
    )
    best = run_restarts(
        points, num_clusters, minima, max_neighbors, distance, rng,
        acceptance=acceptance, progress=progress
    )
    logger.info(f"Best cost after {minima} restarts: {best.cost:.4f}")
    return best
