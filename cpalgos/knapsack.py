"""Fractional and 0/1 knapsack."""


def _check_items(items):
    pairs = [tuple(item) for item in items]
    if any(weight <= 0 for _, weight in pairs):
        raise ValueError("item weights must be positive")
    return pairs


def sort_by_ratio(items):
    """``(value, weight)`` items ordered by descending value-to-weight ratio."""
    return sorted(_check_items(items), key=lambda item: item[0] / item[1], reverse=True)


def fractional_knapsack(items, capacity):
    """Best total value when items may be split, for a knapsack of ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    total = 0.0
    for value, weight in sort_by_ratio(items):
        if weight <= capacity:
            total += value
            capacity -= weight
        else:
            total += value / weight * capacity
            break
    return total


def knapsack(weights, values, capacity):
    """Best total value of whole items whose weights fit within ``capacity``."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values differ in length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]