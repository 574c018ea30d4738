"""
Parallel CLARANS: restarts partitioned across worker threads.
"""

import logging
from typing import Any, List, Optional, Sequence

import numpy as np
from joblib import Parallel, delayed

from .common import ConfigurationError, DistanceFunc, SearchResult, validate_search_inputs
from .search import run_restarts

logger = logging.getLogger(__name__)


def partition_restarts(minima: int, num_threads: int) -> List[int]:
    """
    Split ``minima`` restarts across ``num_threads`` workers.

    Every worker gets ``minima // num_threads`` restarts and the first
    ``minima % num_threads`` workers get one more.
    """
    if num_threads < 1:
        raise ConfigurationError(f"num_threads must be at least 1. Got: {num_threads}")
    if minima < 0:
        raise ConfigurationError(f"minima must be non-negative. Got: {minima}")
    base, extra = divmod(minima, num_threads)
    return [base + 1 if i < extra else base for i in range(num_threads)]


def reduce_results(results: Sequence[SearchResult]) -> SearchResult:
    """Pick the lowest-cost result; on exact ties the lower index wins."""
    best = SearchResult.empty()
    for result in results:
        if result.improves_on(best):
            best = result
    return best


def _run_worker(
    worker_index: int,
    restarts: int,
    seed_seq: np.random.SeedSequence,
    points: Sequence[Any],
    num_clusters: int,
    max_neighbors: int,
    distance: DistanceFunc,
    acceptance: str
) -> SearchResult:
    if restarts == 0:
        return SearchResult.empty()
    rng = np.random.default_rng(seed_seq)
    result = run_restarts(points, num_clusters, restarts, max_neighbors, distance, rng, acceptance)
    logger.debug(f"Worker {worker_index} finished {restarts} restarts, best cost {result.cost:.4f}")
    return result


def parallel_search(
    points: Sequence[Any],
    num_clusters: int,
    minima: int,
    max_neighbors: int,
    num_threads: int,
    distance: DistanceFunc,
    seed: Optional[int] = None,
    acceptance: str = 'reset'
) -> SearchResult:
    """
    Run CLARANS with restarts spread over ``num_threads`` worker threads.

    Each worker owns an independent random stream spawned from ``seed``
    (fresh OS entropy when None) and reads ``points`` without mutating it.
    An exception in any worker aborts the whole call.

    Args:
        points: Non-empty point collection
        num_clusters: Number of medoids, in [1, len(points)]
        minima: Total number of restarts, at least 1
        max_neighbors: Neighbor trial budget per restart
        num_threads: Number of worker threads, at least 1
        distance: Pairwise distance between two items
        seed: Root seed for the per-worker generators
        acceptance: Trial budget policy, 'reset' or 'budget'

    Returns:
        SearchResult with the global best across workers

    Raises:
        ConfigurationError: If any input violates a precondition
    """
    if num_threads < 1:
        raise ConfigurationError(f"num_threads must be at least 1. Got: {num_threads}")
    validate_search_inputs(points, num_clusters, minima, max_neighbors, acceptance)

    shares = partition_restarts(minima, num_threads)
    seeds = np.random.SeedSequence(seed).spawn(num_threads)
    logger.info(
        f"Searching {num_clusters} medoids over {len(points)} points "
        f"with {num_threads} workers (restart shares: {shares})"
    )

    worker_results = Parallel(n_jobs=num_threads, backend='threading')(
        delayed(_run_worker)(
            worker_index=i,
            restarts=shares[i],
            seed_seq=seeds[i],
            points=points,
            num_clusters=num_clusters,
            max_neighbors=max_neighbors,
            distance=distance,
            acceptance=acceptance
        )
        for i in range(num_threads)
    )

    best = reduce_results(worker_results)
    logger.info(f"Best cost across {num_threads} workers: {best.cost:.4f}")
    return best
