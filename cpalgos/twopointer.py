"""Two-pointer and sliding-window counting over integer sequences."""

from collections import Counter, deque

from sortedcontainers import SortedList


class MonotoneDeque:
    """Deque of values kept non-decreasing from front to back, for window minimums."""

    def __init__(self):
        self._items = deque()

    def __len__(self):
        return len(self._items)

    def push(self, x):
        """Add ``x`` at the back, dropping every larger value before it."""
        while self._items and self._items[-1] > x:
            self._items.pop()
        self._items.append(x)

    def discard(self, x):
        """Remove ``x`` if it is the current front value."""
        if self._items and self._items[0] == x:
            self._items.popleft()

    def minimum(self):
        """Smallest value still held; IndexError when empty."""
        if not self._items:
            raise IndexError("minimum of an empty deque")
        return self._items[0]


def count_subarrays_at_most_k_distinct(arr, k):
    """Number of contiguous subarrays holding at most ``k`` distinct values."""
    values = list(arr)
    freq = Counter()
    left = 0
    total = 0
    for right, value in enumerate(values):
        freq[value] += 1
        while len(freq) > k:
            gone = values[left]
            freq[gone] -= 1
            if not freq[gone]:
                del freq[gone]
            left += 1
        total += right - left + 1
    return total


def count_subarrays_sum_at_most(arr, k):
    """Number of subarrays found by the greedy window whose sum stays at most ``k``."""
    values = list(arr)
    n = len(values)
    head = 0
    window = 0
    total = 0
    for tail in range(n):
        head = max(head, tail)
        while head < n and window + values[head] <= k:
            window += values[head]
            head += 1
        total += head - tail
        if head > tail:
            window -= values[tail]
    return total


def count_subarrays_with_sum(arr, x):
    """Number of contiguous subarrays whose sum equals ``x``."""
    seen = Counter({0: 1})
    prefix = 0
    total = 0
    for value in arr:
        prefix += value
        total += seen[prefix - x]
        seen[prefix] += 1
    return total


def closest_three_sum_difference(arr, target):
    """Smallest ``|a + b + c - target|`` over three distinct positions of ``arr``."""
    values = sorted(arr)
    n = len(values)
    if n < 3:
        raise ValueError("at least three values are required")
    best = sum(values[:3])
    for j in range(1, n - 1):
        i, k = 0, n - 1
        while i < j < k:
            total = values[i] + values[j] + values[k]
            if abs(total - target) < abs(best - target):
                best = total
            if total > target:
                k -= 1
            else:
                i += 1
    return abs(best - target)


def window_minimums(arr, k):
    """Minimum of every window of ``k`` consecutive values, using a sorted multiset."""
    if k < 1:
        raise ValueError("window size must be positive")
    values = list(arr)
    window = SortedList()
    result = []
    for i, value in enumerate(values):
        window.add(value)
        if len(window) > k:
            window.remove(values[i - k])
        if len(window) == k:
            result.append(window[0])
    return result


def window_minimums_deque(arr, k):
    """Minimum of every window of ``k`` consecutive values, using a monotone deque."""
    if k < 1:
        raise ValueError("window size must be positive")
    values = list(arr)
    mono = MonotoneDeque()
    result = []
    for i, value in enumerate(values):
        mono.push(value)
        if i >= k:
            mono.discard(values[i - k])
        if i >= k - 1:
            result.append(mono.minimum())
    return result


def next_greater_indices(arr):
    """Index of the next strictly greater value to the right, or ``len(arr)`` if none."""
    values = list(arr)
    result = [len(values)] * len(values)
    stack = []
    for i in reversed(range(len(values))):
        while stack and values[i] >= values[stack[-1]]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result