"""Binary-search-on-the-answer and subset-enumeration puzzles."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Callable, Iterable, Sequence

__all__ = [
    "array_division",
    "factory_time",
    "max_min_mex",
    "subset_sum_count",
    "apple_division",
    "longest_increasing_subsequence",
]

_TIME_CAP = 10**18


def _smallest_true(lo: int, hi: int, predicate: Callable[[int], bool]) -> int:
    """Smallest value in ``[lo, hi]`` for which a monotone predicate holds, else ``hi``."""
    answer = hi
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if predicate(mid):
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def _subset_sums(values: Iterable[int]) -> list[int]:
    sums = [0]
    for value in values:
        sums += [s + value for s in sums]
    return sums


def array_division(values: Iterable[int], k: int) -> int:
    """Smallest possible maximum subarray sum when splitting into at most ``k`` parts."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    if k < 1:
        raise ValueError("k must be at least 1")

    def fits(limit: int) -> bool:
        parts = 1
        running = 0
        for value in items:
            running += value
            if running > limit:
                running = value
                parts += 1
        return parts <= k

    return _smallest_true(max(items), sum(items), fits)


def factory_time(machines: Iterable[int], target: int) -> int:
    """Shortest time for machines with the given per-product times to make ``target`` products."""
    times = list(machines)
    if not times:
        raise ValueError("machines must not be empty")
    if any(t <= 0 for t in times):
        raise ValueError("machine times must be positive")
    if target < 1:
        raise ValueError("target must be at least 1")

    slowest = max(times)
    hi = _TIME_CAP if slowest > _TIME_CAP // target else slowest * target

    def enough(limit: int) -> bool:
        made = 0
        for t in times:
            made += limit // t
            if made >= target:
                return True
        return False

    return _smallest_true(1, hi, enough)


def max_min_mex(values: Sequence[int], k: int) -> int:
    """Largest x such that ``values`` splits into ``k`` segments each with MEX at least x."""
    if k < 1:
        raise ValueError("k must be at least 1")

    def achievable(x: int) -> bool:
        if x == 0:
            return True
        seen: set[int] = set()
        segments = 0
        for value in values:
            if 0 <= value < x and value not in seen:
                seen.add(value)
                if len(seen) == x:
                    segments += 1
                    if segments >= k:
                        return True
                    seen.clear()
        return False

    lo, hi = 0, len(values)
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if achievable(mid):
            lo = mid
        else:
            hi = mid - 1
    return lo


def subset_sum_count(values: Sequence[int], target: int) -> int:
    """Number of subsets (by position) whose elements sum to ``target``."""
    half = len(values) // 2
    left = _subset_sums(values[:half])
    right = Counter(_subset_sums(values[half:]))
    return sum(right[target - s] for s in left)


def apple_division(weights: Sequence[int]) -> int:
    """Minimum difference between the weights of two groups splitting all items."""
    total = sum(weights)
    return min(abs(total - 2 * s) for s in _subset_sums(weights))


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)