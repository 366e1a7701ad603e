"""Classic competitive-programming algorithms: two pointers, bits, combinatorics,
strings, statistics, knapsack, backtracking, trees, graphs and grid searches."""

__version__ = "0.1.0"