from itertools import combinations

import pytest

from cpalgos.twopointer import (
    MonotoneDeque,
    closest_three_sum_difference,
    count_subarrays_at_most_k_distinct,
    count_subarrays_sum_at_most,
    count_subarrays_with_sum,
    next_greater_indices,
    window_minimums,
    window_minimums_deque,
)

SAMPLES = [
    [1, 2, 1, 3, 4, 2, 3],
    [5, 5, 5, 5],
    [3, 1, 4, 1, 5, 9, 2, 6],
    [7],
    [],
]


def _subarrays(values):
    n = len(values)
    return [values[i:j] for i in range(n) for j in range(i + 1, n + 1)]


@pytest.mark.parametrize("values", SAMPLES)
@pytest.mark.parametrize("k", [1, 2, 3])
def test_at_most_k_distinct_matches_enumeration(values, k):
    expected = sum(1 for sub in _subarrays(values) if len(set(sub)) <= k)
    assert count_subarrays_at_most_k_distinct(values, k) == expected


def test_at_most_zero_distinct_is_empty():
    assert count_subarrays_at_most_k_distinct([1, 2, 3], 0) == 0


@pytest.mark.parametrize("values", SAMPLES)
@pytest.mark.parametrize("k", [0, 3, 7, 12, 40])
def test_sum_at_most_matches_enumeration(values, k):
    expected = sum(1 for sub in _subarrays(values) if sum(sub) <= k)
    assert count_subarrays_sum_at_most(values, k) == expected


def test_sum_at_most_counts_everything_with_large_bound():
    values = [3, 1, 4, 1, 5]
    n = len(values)
    assert count_subarrays_sum_at_most(values, sum(values)) == n * (n + 1) // 2


@pytest.mark.parametrize("values", SAMPLES + [[1, -1, 1, -1, 2, -2]])
@pytest.mark.parametrize("x", [0, 1, 2, 5])
def test_with_sum_matches_enumeration(values, x):
    expected = sum(1 for sub in _subarrays(values) if sum(sub) == x)
    assert count_subarrays_with_sum(values, x) == expected


@pytest.mark.parametrize(
    "values", [[-1, 2, 1, -4], [0, 0, 0], [1, 1, 1, 0], [5, -3, 8, 2, -7, 4]]
)
@pytest.mark.parametrize("target", [-5, 0, 1, 3, 10])
def test_closest_three_sum_matches_enumeration(values, target):
    expected = min(abs(sum(c) - target) for c in combinations(values, 3))
    assert closest_three_sum_difference(values, target) == expected


def test_closest_three_sum_needs_three_values():
    with pytest.raises(ValueError):
        closest_three_sum_difference([1, 2], 0)


@pytest.mark.parametrize("values", SAMPLES)
@pytest.mark.parametrize("k", [1, 2, 3, 10])
def test_window_minimums_both_ways(values, k):
    expected = [min(values[i:i + k]) for i in range(len(values) - k + 1)]
    assert window_minimums(values, k) == expected
    assert window_minimums_deque(values, k) == expected


@pytest.mark.parametrize("func", [window_minimums, window_minimums_deque])
def test_window_size_must_be_positive(func):
    with pytest.raises(ValueError):
        func([1, 2, 3], 0)


def test_monotone_deque_tracks_minimum():
    mono = MonotoneDeque()
    mono.push(3)
    mono.push(1)
    mono.push(2)
    assert mono.minimum() == 1
    mono.discard(3)
    assert mono.minimum() == 1
    mono.discard(1)
    assert mono.minimum() == 2


def test_monotone_deque_empty_minimum_raises():
    with pytest.raises(IndexError):
        MonotoneDeque().minimum()


@pytest.mark.parametrize("values", SAMPLES)
def test_next_greater_indices_property(values):
    result = next_greater_indices(values)
    n = len(values)
    assert len(result) == n
    for i, nxt in enumerate(result):
        assert i < nxt <= n
        assert all(v <= values[i] for v in values[i + 1:nxt])
        if nxt < n:
            assert values[nxt] > values[i]