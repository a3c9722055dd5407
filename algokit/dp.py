"""Dynamic-programming puzzles: counting, knapsack and sequence alignment."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

__all__ = [
    "MOD",
    "array_descriptions",
    "book_shop",
    "coin_combinations",
    "dice_combinations",
    "edit_distance",
    "grid_paths",
    "longest_common_subsequence",
    "min_coins",
    "money_sums",
]

MOD = 10**9 + 7

T = TypeVar("T")


def _positive_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    if any(c <= 0 for c in values):
        raise ValueError("coin values must be positive")
    return values


def array_descriptions(values: Sequence[int], m: int) -> int:
    """Ways to fill the zeros of ``values`` with 1..m so neighbours differ by at most 1.

    The count is taken modulo ``MOD``.
    """
    if not values:
        raise ValueError("values must not be empty")
    if m < 1:
        raise ValueError("m must be at least 1")
    if any(v < 0 or v > m for v in values):
        raise ValueError("values must lie in 0..m")

    # counts[v] = number of valid prefixes ending in value v; slots 0 and m+1 stay zero.
    counts = [0] * (m + 2)
    first = values[0]
    if first:
        counts[first] = 1
    else:
        counts[1 : m + 1] = [1] * m

    for value in values[1:]:
        nxt = [0] * (m + 2)
        targets = [value] if value else range(1, m + 1)
        for v in targets:
            nxt[v] = (counts[v - 1] + counts[v] + counts[v + 1]) % MOD
        counts = nxt

    return sum(counts) % MOD


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Most pages obtainable by buying each book at most once within ``budget``."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must not be negative")
    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        for spend in range(budget, max(price, 1) - 1, -1):
            candidate = count + best[spend - price]
            if candidate > best[spend]:
                best[spend] = candidate
    return best[budget]


def coin_combinations(coins: Iterable[int], target: int) -> int:
    """Ordered ways to reach ``target`` as a sum of coins, modulo ``MOD``."""
    values = _positive_coins(coins)
    if target < 0:
        return 0
    ways = [0] * (target + 1)
    ways[0] = 1
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - c] for c in values if c <= total) % MOD
    return ways[target]


def dice_combinations(n: int) -> int:
    """Ways to reach sum ``n`` by throwing a six-sided die one or more times, modulo ``MOD``."""
    return coin_combinations(range(1, 7), n)


def edit_distance(a: Sequence[T], b: Sequence[T]) -> int:
    """Levenshtein distance: fewest insertions, deletions and substitutions turning ``a`` into ``b``."""
    previous = list(range(len(b) + 1))
    for i, left in enumerate(a, start=1):
        current = [i]
        for j, right in enumerate(b, start=1):
            if left == right:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def grid_paths(grid: Sequence[str]) -> int:
    """Paths moving right or down across a square grid avoiding ``*`` cells, modulo ``MOD``."""
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    if n == 0:
        return 0
    row_ways = [0] * n
    row_ways[0] = 1
    for row in grid:
        left = 0
        for j, cell in enumerate(row):
            if cell == "*":
                row_ways[j] = 0
            else:
                row_ways[j] = (row_ways[j] + left) % MOD
            left = row_ways[j]
    return row_ways[-1]


def longest_common_subsequence(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """One longest common subsequence of ``a`` and ``b``."""
    n, m = len(a), len(b)
    # suffix[i][j] = LCS length of a[i:] and b[j:]
    suffix = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                suffix[i][j] = 1 + suffix[i + 1][j + 1]
            else:
                suffix[i][j] = max(suffix[i + 1][j], suffix[i][j + 1])

    result: list[T] = []
    i = j = 0
    while i < n and j < m:
        if a[i] == b[j]:
            result.append(a[i])
            i += 1
            j += 1
        elif suffix[i + 1][j] >= suffix[i][j + 1]:
            i += 1
        else:
            j += 1
    return result


def min_coins(coins: Iterable[int], target: int) -> int:
    """Fewest coins summing to ``target``, or -1 when it cannot be reached."""
    values = _positive_coins(coins)
    if target < 0:
        return -1
    unreachable = target + 1
    fewest = [0] + [unreachable] * target
    for total in range(1, target + 1):
        fewest[total] = min(
            (fewest[total - c] + 1 for c in values if c <= total),
            default=unreachable,
        )
    return -1 if fewest[target] > target else fewest[target]


def money_sums(coins: Iterable[int]) -> list[int]:
    """Sorted distinct non-zero sums obtainable from subsets of the coins."""
    sums = {0}
    for coin in coins:
        sums |= {s + coin for s in sums}
    sums.discard(0)
    return sorted(sums)