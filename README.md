# algobox

A compact collection of classic algorithms in plain Python, with no runtime
dependencies.

## Installation

```
pip install algobox
```

To run the test suite:

```
pip install "algobox[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `shell_sort`, `quick_sort`, `counting_sort`, `comb_sort` (with `next_comb_gap`), `heap_sort`, `dutch_flag_sort` |
| `algobox.numeric` | `fibonacci`, `fibonacci_recursive`, `fibonacci_memo`, `factorial`, `n_cr`, `is_leap_year`, `sieve`, `circle_area`, `circle_circumference` (both using `PI_APPROX = 3.142`), `quadratic_roots` (returning `QuadraticRoots` with a `RootKind`), `max_subarray_sum`, `add`, `multiply` |
| `algobox.scheduling` | `round_robin` and `shortest_remaining_time_first`, each returning a `Schedule` of `ProcessStats` with turnaround and waiting times and their averages |
| `algobox.graphs` | `Graph` with `add_edge`, `neighbours`, `bfs` and `strongly_connected_components` (Tarjan); `knight_reach_count` on a 10x10 board |
| `algobox.arrays` | `count_gcd_pairs`, `count_pairs_with_sum`, `first_unbalanced_pair`, `is_palindrome`, `full_name` |
| `algobox.sudoku` | `is_valid_placement`, `solve_sudoku` for 9x9 boards using `'.'` for blanks |
| `algobox.dp_knapsack` | `knapsack`, `count_coin_ways`, `min_coins`, `has_subset_sum`, `can_partition`, `min_subset_sum_difference`, `count_subsets_with_sum`, `count_subsets_with_difference`, `perfect_sum` (modulo `MODULUS`), `target_sum_ways`, `rod_cutting`, `super_egg_drop`, `matrix_chain_cost` |
| `algobox.dp_strings` | `longest_common_subsequence`, `lcs_string`, `longest_common_substring`, `longest_palindromic_subsequence`, `min_deletions_to_palindrome`, `min_insertions_to_palindrome`, `longest_repeating_subsequence`, `shortest_common_supersequence_length`, `shortest_common_supersequence`, `is_interleave`, `longest_increasing_subsequence`, `min_palindrome_partitions` |

## Examples

```python
from algobox.sorting import quick_sort
from algobox.dp_knapsack import knapsack, min_coins
from algobox.dp_strings import lcs_string
from algobox.graphs import Graph

quick_sort([3, 7, 9, 10, 12, 6, 5, 2, 11, 18])
# [2, 3, 5, 6, 7, 9, 10, 11, 12, 18]

knapsack(50, [10, 20, 30], [60, 100, 120])
# 220

min_coins([2], 3)
# None  (no combination reaches the amount)

lcs_string("ABCDEF", "ABXYDVEYF")
# 'ABDEF'

graph = Graph(5)
for source, target in [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)]:
    graph.add_edge(source, target)
graph.strongly_connected_components()
# [[4], [3], [1, 2, 0]]
```

The sorting functions return new sorted lists and leave their input as it was.
Invalid input, such as negative values for `counting_sort`, a zero leading
coefficient for `quadratic_roots` or an unsolvable Sudoku board, raises
`ValueError`; out-of-range vertices in `Graph` raise `IndexError`.

## What it does not do

algobox is a library only: it installs no command-line tool and reads no input
of its own. It offers no linked-list or binary-search-tree data structures.