"""Greedy matching and scheduling puzzles."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

from sortedcontainers import SortedList

__all__ = [
    "apartments",
    "concert_tickets",
    "ferris_wheel",
    "movie_festival",
    "distinct_count",
]


def apartments(applicants: Iterable[int], sizes: Iterable[int], k: int) -> int:
    """Most applicants that can get an apartment within ``k`` of their desired size."""
    wanted = sorted(applicants)
    offered = sorted(sizes)
    i = j = matched = 0
    while i < len(wanted) and j < len(offered):
        if abs(wanted[i] - offered[j]) <= k:
            matched += 1
            i += 1
            j += 1
        elif wanted[i] < offered[j]:
            i += 1
        else:
            j += 1
    return matched


def concert_tickets(prices: Iterable[int], budgets: Iterable[int]) -> list[int]:
    """Price paid by each customer in turn, or -1 when no ticket is affordable.

    Each customer takes the most expensive remaining ticket within budget.
    """
    tickets = SortedList(prices)
    paid: list[int] = []
    for budget in budgets:
        pos = tickets.bisect_right(budget)
        if pos == 0:
            paid.append(-1)
        else:
            paid.append(tickets.pop(pos - 1))
    return paid


def ferris_wheel(weights: Iterable[int], limit: int) -> int:
    """Fewest gondolas for children of the given weights, at most two per gondola."""
    ordered = sorted(weights)
    i, j = 0, len(ordered) - 1
    gondolas = 0
    while i <= j:
        if ordered[i] + ordered[j] <= limit:
            i += 1
        j -= 1
        gondolas += 1
    return gondolas


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Most whole movies one can watch, given (start, end) pairs."""
    ordered = sorted(movies)
    if not ordered:
        return 0
    watched = 1
    current_end = ordered[0][1]
    for start, end in ordered[1:]:
        if current_end <= start:
            watched += 1
            current_end = end
        else:
            current_end = min(current_end, end)
    return watched


def distinct_count(values: Iterable[Hashable]) -> int:
    """Number of distinct values."""
    return len(set(values))