"""Elimination orders for children standing in a circle."""

from __future__ import annotations

from collections import deque

__all__ = ["josephus_every_other", "josephus_order"]


def josephus_every_other(n: int) -> list[int]:
    """Removal order of children 1..n when every second child is removed."""
    circle = deque(range(1, n + 1))
    order: list[int] = []
    while circle:
        circle.rotate(-1)
        order.append(circle.popleft())
    return order


def josephus_order(n: int, k: int) -> list[int]:
    """Removal order of children 1..n when ``k`` children are skipped before each removal."""
    if k < 0:
        raise ValueError("k must not be negative")
    circle = list(range(1, n + 1))
    order: list[int] = []
    pos = 0
    while circle:
        pos = (pos + k) % len(circle)
        order.append(circle.pop(pos))
    return order