import numpy as np
import pytest

from clarans.clustering import ConfigurationError, get_neighbor, init_medoids


def test_init_medoids_distinct_and_in_range(rng):
    for _ in range(50):
        medoids = init_medoids(10, 4, rng)
        assert len(medoids) == 4
        assert len(set(medoids)) == 4
        assert all(0 <= m < 10 for m in medoids)


def test_init_medoids_all_points(rng):
    assert sorted(init_medoids(6, 6, rng)) == list(range(6))


@pytest.mark.parametrize("k, n", [(0, 5), (6, 5)])
def test_init_medoids_invalid_size(rng, k, n):
    with pytest.raises(ConfigurationError):
        init_medoids(n, k, rng)


def test_neighbor_differs_in_at_most_one_slot(rng):
    medoids = (0, 1, 2, 3)
    for _ in range(200):
        neighbor = get_neighbor(medoids, 20, rng)
        assert len(neighbor) == len(medoids)
        changed = [i for i, (a, b) in enumerate(zip(medoids, neighbor)) if a != b]
        assert len(changed) <= 1
        assert all(0 <= m < 20 for m in neighbor)


def test_neighbor_may_repeat_current_medoid():
    # Replacement is drawn with replacement from all points, so with two
    # points and two medoids every proposal repeats an existing medoid
    rng = np.random.default_rng(0)
    proposals = {get_neighbor((0, 1), 2, rng) for _ in range(100)}
    assert proposals <= {(0, 1), (1, 1), (0, 0)}
    assert proposals & {(1, 1), (0, 0)}


def test_neighbor_does_not_mutate_input(rng):
    medoids = (4, 5, 6)
    get_neighbor(medoids, 10, rng)
    assert medoids == (4, 5, 6)


def test_neighbor_rejects_empty_inputs(rng):
    with pytest.raises(ConfigurationError):
        get_neighbor((), 10, rng)
    with pytest.raises(ConfigurationError):
        get_neighbor((0,), 0, rng)
