import hypothesis.strategies as st
from hypothesis import given, settings
import pytest

from clarans.clustering import ConfigurationError, partition_restarts
from clarans.clustering.parallel import reduce_results
from clarans.clustering.common import SearchResult


@settings(max_examples=200)
@given(
    minima=st.integers(min_value=0, max_value=10_000),
    num_threads=st.integers(min_value=1, max_value=64)
)
def test_partition_covers_every_restart_once(minima, num_threads):
    shares = partition_restarts(minima, num_threads)
    assert len(shares) == num_threads
    assert sum(shares) == minima
    assert all(0 <= s <= minima // num_threads + 1 for s in shares)
    # Extra restarts go to the lowest worker indices
    assert shares == sorted(shares, reverse=True)
    assert max(shares) - min(shares) <= 1


def test_partition_example():
    assert partition_restarts(10, 4) == [3, 3, 2, 2]
    assert partition_restarts(2, 4) == [1, 1, 0, 0]


def test_partition_zero_threads_raises():
    with pytest.raises(ConfigurationError):
        partition_restarts(10, 0)


def test_reduce_prefers_lower_cost_then_lower_index():
    results = [
        SearchResult.empty(),
        SearchResult((1, 2), 5.0),
        SearchResult((3, 4), 3.0),
        SearchResult((5, 6), 3.0),
    ]
    best = reduce_results(results)
    assert best.medoids == (3, 4)
    assert best.cost == 3.0


def test_reduce_all_empty_is_empty():
    assert reduce_results([SearchResult.empty(), SearchResult.empty()]).is_empty
