"""Answers found by binary search over a monotone feasibility test."""

from bisect import bisect_right

from cpalgos.twopointer import count_subarrays_sum_at_most


def _lowest_true(lo, hi, predicate):
    """Smallest value in ``[lo, hi]`` for which ``predicate`` holds, or None."""
    answer = None
    while lo <= hi:
        mid = (lo + hi) // 2
        if predicate(mid):
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def kth_smallest_pair_product(arr, k):
    """Smallest product bound reaching ``k`` ordered pairs, searched between the
    two smallest and the two largest products; 0 when none qualifies."""
    values = sorted(arr)
    if len(values) < 2:
        raise ValueError("at least two values are required")
    if values[0] <= 0:
        raise ValueError("values must be positive")

    def enough(x):
        return sum(bisect_right(values, x // a) for a in values) >= k

    answer = _lowest_true(values[0] * values[1], values[-1] * values[-2], enough)
    return 0 if answer is None else answer


def _refills_fit(values, capacity, limit):
    needed = 0
    left = 0
    for value in values:
        if left >= value:
            left -= value
        else:
            needed += 1
            left += capacity - value
        if needed > limit:
            return False
    return True


def min_capacity_for_refills(arr, k):
    """Smallest capacity that serves ``arr`` in order with at most ``k`` refills; 0 if none."""
    values = list(arr)
    answer = _lowest_true(
        max(values, default=0),
        sum(values),
        lambda capacity: _refills_fit(values, capacity, k),
    )
    return 0 if answer is None else answer


def median_of_subarray_sums(arr):
    """Lower median of the window sums of the sorted values."""
    values = sorted(arr)
    if not values:
        raise ValueError("cannot take the median of an empty array")
    n = len(values)
    total = n * (n + 1) // 2
    rank = total // 2 if total % 2 == 0 else total // 2 + 1
    answer = _lowest_true(
        values[0],
        sum(values),
        lambda x: count_subarrays_sum_at_most(values, x) >= rank,
    )
    if answer is None:
        raise ValueError("no median inside the searched range")
    return answer