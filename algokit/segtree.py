"""Point-update range queries and two-dimensional prefix counts."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Generic, TypeVar

__all__ = [
    "SegmentTree",
    "ForestGrid",
    "range_minimum_queries",
    "range_sum_queries",
    "forest_queries",
]

T = TypeVar("T")

UPDATE = 1
QUERY = 2


class SegmentTree(Generic[T]):
    """Segment tree over a non-empty sequence with an associative combining function.

    Positions are 0-based and query ranges are inclusive at both ends.
    """

    def __init__(self, values: Iterable[T], combine: Callable[[T, T], T]) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must not be empty")
        self._n = len(items)
        self._combine = combine
        self._tree: list = [None] * self._n + items
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = combine(self._tree[2 * i], self._tree[2 * i + 1])

    def __len__(self) -> int:
        return self._n

    def _check(self, index: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} outside 0..{self._n - 1}")

    def update(self, index: int, value: T) -> None:
        """Set the value at ``index``."""
        self._check(index)
        i = index + self._n
        self._tree[i] = value
        i //= 2
        while i:
            self._tree[i] = self._combine(self._tree[2 * i], self._tree[2 * i + 1])
            i //= 2

    def query(self, lo: int, hi: int) -> T:
        """Combined value of positions ``lo`` through ``hi`` inclusive."""
        self._check(lo)
        self._check(hi)
        if lo > hi:
            raise ValueError("lo must not exceed hi")
        left = right = None
        l, r = lo + self._n, hi + self._n + 1
        while l < r:
            if l & 1:
                node = self._tree[l]
                left = node if left is None else self._combine(left, node)
                l += 1
            if r & 1:
                r -= 1
                node = self._tree[r]
                right = node if right is None else self._combine(node, right)
            l //= 2
            r //= 2
        if left is None:
            return right
        if right is None:
            return left
        return self._combine(left, right)


def _run_queries(
    tree: SegmentTree[int], queries: Iterable[tuple[int, int, int]]
) -> list[int]:
    answers: list[int] = []
    for kind, a, b in queries:
        if kind == UPDATE:
            tree.update(a - 1, b)
        elif kind == QUERY:
            answers.append(tree.query(a - 1, b - 1))
        else:
            raise ValueError(f"unknown query kind {kind}")
    return answers


def range_minimum_queries(
    values: Iterable[int], queries: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Answer ``(1, k, u)`` updates and ``(2, a, b)`` minimum queries, all 1-based."""
    return _run_queries(SegmentTree(values, min), queries)


def range_sum_queries(
    values: Iterable[int], queries: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Answer ``(1, k, u)`` updates and ``(2, a, b)`` sum queries, all 1-based."""
    return _run_queries(SegmentTree(values, lambda x, y: x + y), queries)


class ForestGrid:
    """Counts of ``*`` cells in rectangles of a grid, using 1-based coordinates."""

    def __init__(self, rows: Sequence[str]) -> None:
        self.height = len(rows)
        self.width = len(rows[0]) if rows else 0
        if any(len(row) != self.width for row in rows):
            raise ValueError("all rows must have the same length")
        self._prefix = [[0] * (self.width + 1) for _ in range(self.height + 1)]
        for i, row in enumerate(rows, start=1):
            above = self._prefix[i - 1]
            current = self._prefix[i]
            for j, cell in enumerate(row, start=1):
                current[j] = (
                    (cell == "*") + above[j] + current[j - 1] - above[j - 1]
                )

    def count(self, y1: int, x1: int, y2: int, x2: int) -> int:
        """Trees in rows ``y1``..``y2`` and columns ``x1``..``x2`` inclusive."""
        if not (1 <= y1 <= y2 <= self.height and 1 <= x1 <= x2 <= self.width):
            raise IndexError("rectangle lies outside the grid")
        p = self._prefix
        return p[y2][x2] - p[y1 - 1][x2] - p[y2][x1 - 1] + p[y1 - 1][x1 - 1]


def forest_queries(
    rows: Sequence[str], queries: Iterable[tuple[int, int, int, int]]
) -> list[int]:
    """Tree counts for each ``(y1, x1, y2, x2)`` rectangle."""
    grid = ForestGrid(rows)
    return [grid.count(*q) for q in queries]