# algokit

Solvers for well-known algorithmic problems. Each solver is a plain function
or a small class. It takes ordinary Python values and returns a result.
Problems that can have no answer return `None`. A few return `-1` instead,
as noted below. Input that is not valid raises `ValueError`, or
`IndexError` for positions out of range.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.arith`: `gcd`, `lcm`, `mod_exp`, `factorial`, `is_prime`,
  `trailing_zeros` (trailing zeros of `n!`), `coin_piles`, `digit_at`
  (k-th digit of 123456789101112...), `missing_number`, `spiral_value`,
  `kth_not_divisible`, `is_square`, `can_make_ap`
- `algokit.geometry`: `Point`, `on_segment`, `segments_intersect`,
  `count_circle_points`
- `algokit.greedy`: `apartments`, `concert_tickets` (price paid per customer,
  `-1` when nothing is affordable), `ferris_wheel`, `movie_festival`,
  `distinct_count`
- `algokit.arrays`: `collecting_rounds`, `increasing_array_moves`,
  `max_subarray_sum`, `nearest_smaller_values`, `max_sum_after_negations`
- `algokit.search`: `array_division`, `factory_time`, `max_min_mex`,
  `subset_sum_count`, `apple_division`, `longest_increasing_subsequence`
- `algokit.josephus`: `josephus_every_other`, `josephus_order`
- `algokit.bits`: `gray_code`, `min_hamming_distance`
- `algokit.dp`: `MOD` (10**9 + 7), `array_descriptions`, `book_shop`,
  `coin_combinations`, `dice_combinations`, `edit_distance`, `grid_paths`,
  `longest_common_subsequence`, `min_coins` (`-1` when unreachable),
  `money_sums`. The counting functions return their result modulo `MOD`.
- `algokit.graphs`: `DisjointSet` (with `find` and `union`), `new_roads`,
  `build_teams`, `count_rooms`, `labyrinth_path`, `message_route`
- `algokit.strings`: `borders`, `longest_palindrome`, `palindrome_reorder`
- `algokit.segtree`: `SegmentTree`, `ForestGrid`, `range_minimum_queries`,
  `range_sum_queries`, `forest_queries`
- `algokit.combinatorics`: `beautiful_permutation`, `distinct_permutations`

## Examples

```python
from algokit.dp import dice_combinations
from algokit.greedy import ferris_wheel
from algokit.josephus import josephus_every_other
from algokit.bits import gray_code

dice_combinations(3)                 # 4
ferris_wheel([7, 2, 3, 9], 10)       # 3
josephus_every_other(7)              # [2, 4, 6, 1, 5, 3, 7]
gray_code(2)                         # ['00', '01', '11', '10']
```

A segment tree takes any associative combining function. Positions are
0-based and query ranges include both ends:

```python
from algokit.segtree import SegmentTree, range_sum_queries

tree = SegmentTree([3, 2, 4, 5, 1, 1, 5, 3], min)
tree.query(1, 4)   # 1
tree.update(7, 0)

# Batch form: (1, k, u) sets position k to u, (2, a, b) asks about a..b, all 1-based.
range_sum_queries([1, 2, 3], [(2, 1, 3), (1, 2, 10), (2, 1, 3)])   # [6, 14]
```

Grid solvers take a list of strings, with `.` for floor and `#` for wall.
`labyrinth_path` also expects one `A` and one `B` cell:

```python
from algokit.graphs import count_rooms, labyrinth_path

count_rooms(["#..#", "####", "#..#"])   # 2
labyrinth_path(["A.#", "..B"])          # a shortest U/D/L/R route, or None
```

## What it does not do

algokit is a library only. It has no command-line program. Nothing reads
standard input or prints results. To solve a problem from a file or a
terminal, parse the input yourself and call the function.