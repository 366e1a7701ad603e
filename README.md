# cpalgos

A library of classic competitive-programming algorithms, written as plain
Python functions and a few small classes. Every algorithm takes its input as
arguments and returns its result; errors are raised as exceptions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The only runtime dependency is `sortedcontainers`.

## Modules

| Module | Contents |
| --- | --- |
| `cpalgos.twopointer` | `count_subarrays_at_most_k_distinct`, `count_subarrays_sum_at_most`, `count_subarrays_with_sum`, `closest_three_sum_difference`, `window_minimums`, `window_minimums_deque`, `MonotoneDeque`, `next_greater_indices` |
| `cpalgos.searching` | Binary search on the answer: `kth_smallest_pair_product`, `min_capacity_for_refills`, `median_of_subarray_sums` |
| `cpalgos.bits` | `subset_masks`, `pairwise_xor_sum`, `pairwise_and_sum`, `subset_xor_sum`, `max_sum_of_squares`, `bits_string`, `count_ones_upto`, `number_with_kth_one`, `kth_one_position`, `total_bit_length`, `locate_kth_one`, `gray_code`, `max_and_subsequence`, `BitPrefixCounts` |
| `cpalgos.combinatorics` | `factorial_mod`, `power_mod`, `inverse`, `ncr_single`, `ncr_basic`, `ncr_table`, `modular_expression`, `FactorialTable` (all modulo 10^9 + 7 except `ncr_basic`) |
| `cpalgos.strings` | `longest_palindromic_substring` (Manacher), `prefix_function` (KMP borders), `is_balanced`, `count_balanced_substrings` |
| `cpalgos.stats` | `DataDashboard` (running mean, variance, mode, median with insert and remove), `PlayerStats`, `Dashboard` |
| `cpalgos.knapsack` | `sort_by_ratio`, `fractional_knapsack`, `knapsack` (0/1) |
| `cpalgos.backtracking` | `multiset_permutations`, `n_queens`, `count_n_queens`, `hanoi_moves`, `kth_hanoi_move`, `count_knight_placements`, `balanced_parentheses`, `kth_permutation`, `sudoku_solutions` (a generator) |
| `cpalgos.tree` | `tree_info` returning a `TreeInfo`, `tree_diameter`, `tree_center`, `tree_centroid`, `max_ancestor_difference` |
| `cpalgos.paths` | `bellman_ford`, `longest_path`, `dijkstra`, `zero_one_bfs`, `floyd_warshall`, `reconstruct_path`, `transitive_closure`, `shortest_cycle`, with `NegativeCycleError` and `PositiveCycleError` |
| `cpalgos.traversal` | `reachable`, `bfs_distances`, `bipartite_coloring`, `find_cycle`, `connected_components`, `min_bit_flips`, `topological_order_dfs`, `longest_path_dag`, `kahn_topological_order` |
| `cpalgos.grids` | Grid searches over lists of strings: `directed_grid_costs`, `shortest_grid_path`, `nearest_target_via_portal`, `escape_distance`, `wall_breaking_distances` |

## Node numbering

Graphs are given as a node count and a list of edges.

- `bellman_ford`, `floyd_warshall`, `transitive_closure` and `shortest_cycle`
  number nodes `0 .. n-1` and take directed weighted edges `(u, v, w)`.
- `longest_path` takes directed weighted edges on nodes `1 .. n`;
  `dijkstra` and `zero_one_bfs` take undirected weighted edges on `1 .. n`.
- Everything in `cpalgos.traversal` and `cpalgos.tree` uses nodes `1 .. n`
  with `(a, b)` edges.

Unreachable distances are reported as `None`.

## Examples

```python
from cpalgos.twopointer import count_subarrays_with_sum, window_minimums
from cpalgos.strings import longest_palindromic_substring, is_balanced
from cpalgos.combinatorics import FactorialTable, power_mod
from cpalgos.backtracking import count_n_queens, kth_permutation
from cpalgos.paths import dijkstra, bellman_ford, NegativeCycleError

count_subarrays_with_sum([1, 2, 3, 0, 3], 3)   # 4
window_minimums([4, 2, 5, 1, 3], 2)            # [2, 2, 1, 1]

longest_palindromic_substring("babad")         # "bab"
is_balanced("({[]})")                          # True

power_mod(2, 10)                               # 1024
FactorialTable(1000).ncr(10, 3)                # 120

count_n_queens(8)                              # 92
kth_permutation(3, 4)                          # [2, 3, 1]

dijkstra(3, [(1, 2, 4), (2, 3, 1)], 1)         # {1: 0, 2: 4, 3: 5}
try:
    bellman_ford(2, [(0, 1, -1), (1, 0, -1)], 0)
except NegativeCycleError:
    ...
```

## What this package does not do

It is a library only. There is no command-line program and nothing reads
problem input from standard input or prints answers; callers pass values in
and format the results themselves.