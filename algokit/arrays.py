"""Single-pass array puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "collecting_rounds",
    "increasing_array_moves",
    "max_subarray_sum",
    "nearest_smaller_values",
    "max_sum_after_negations",
]


def collecting_rounds(permutation: Sequence[int]) -> int:
    """Rounds needed to collect 1..n in order scanning left to right each round."""
    n = len(permutation)
    if sorted(permutation) != list(range(1, n + 1)):
        raise ValueError("input must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(permutation)}
    return 1 + sum(
        1 for num in range(1, n) if position[num + 1] < position[num]
    )


def increasing_array_moves(values: Iterable[int]) -> int:
    """Total increments needed to make the sequence non-decreasing."""
    moves = 0
    highest = None
    for value in values:
        if highest is None or value > highest:
            highest = value
        else:
            moves += highest - value
    return moves


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    best = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("values must not be empty")
    return best


def nearest_smaller_values(values: Sequence[int]) -> list[int]:
    """For each position, the 1-based position of the nearest smaller value to its left, or 0."""
    stack: list[int] = []
    result: list[int] = []
    for index, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        result.append(stack[-1] + 1 if stack else 0)
        stack.append(index)
    return result


def max_sum_after_negations(values: Sequence[int]) -> int:
    """Largest sum reachable by repeatedly negating adjacent pairs."""
    total = sum(abs(v) for v in values)
    non_positive = sum(1 for v in values if v <= 0)
    if non_positive % 2 == 0:
        return total
    return total - 2 * min(abs(v) for v in values)