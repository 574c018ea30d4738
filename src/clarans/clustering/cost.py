"""Cost evaluation for medoid configurations."""

import math
from typing import Any, List, Sequence, Tuple

from .common import ConfigurationError, DistanceFunc, MedoidSet


def closest_medoid(
    item: Any,
    points: Sequence[Any],
    medoids: MedoidSet,
    distance: DistanceFunc
) -> Tuple[int, float]:
    """
    Find the medoid nearest to an item.

    Args:
        item: Item to look up
        points: Point collection the medoid indices refer to
        medoids: Indices of the current medoids
        distance: Pairwise distance between two items

    Returns:
        tuple: (index of the closest medoid in ``points``, its distance)
    """
    if not medoids:
        raise ConfigurationError("Cannot look up closest medoid in an empty medoid set")

    min_distance = math.inf
    min_medoid = medoids[0]
    for m in medoids:
        d = distance(item, points[m])
        # Strict comparison: ties keep the earlier medoid
        if d < min_distance:
            min_distance = d
            min_medoid = m
    return min_medoid, min_distance


def compute_total_cost(
    points: Sequence[Any],
    medoids: MedoidSet,
    distance: DistanceFunc
) -> float:
    """Sum over all items of the distance to their nearest medoid."""
    return sum(closest_medoid(p, points, medoids, distance)[1] for p in points)


def assign_points(
    points: Sequence[Any],
    medoids: MedoidSet,
    distance: DistanceFunc
) -> List[int]:
    """Label each item with the slot of its closest medoid."""
    slot_of = {}
    for slot, m in enumerate(medoids):
        slot_of.setdefault(m, slot)
    return [slot_of[closest_medoid(p, points, medoids, distance)[0]] for p in points]
