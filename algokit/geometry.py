"""Integer plane geometry: segment intersection and lattice points in circles."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import NamedTuple

__all__ = ["Point", "on_segment", "segments_intersect", "count_circle_points"]


class Point(NamedTuple):
    x: int
    y: int


def _cross(o: Sequence[int], a: Sequence[int], b: Sequence[int]) -> int:
    return (a[0] - o[0]) * (b[1] - o[1]) - (b[0] - o[0]) * (a[1] - o[1])


def on_segment(a: Sequence[int], b: Sequence[int], p: Sequence[int]) -> bool:
    """Whether ``p`` lies in the bounding box of segment ``a``-``b``."""
    return (
        min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
        and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])
    )


def segments_intersect(
    p1: Sequence[int], p2: Sequence[int], p3: Sequence[int], p4: Sequence[int]
) -> bool:
    """Whether segment ``p1``-``p2`` meets segment ``p3``-``p4``."""
    a1 = _cross(p1, p2, p3)
    a2 = _cross(p1, p2, p4)
    a3 = _cross(p3, p4, p1)
    a4 = _cross(p3, p4, p2)

    if a1 * a2 < 0 and a3 * a4 < 0:
        return True
    return (
        (a1 == 0 and on_segment(p1, p2, p3))
        or (a2 == 0 and on_segment(p1, p2, p4))
        or (a3 == 0 and on_segment(p3, p4, p1))
        or (a4 == 0 and on_segment(p3, p4, p2))
    )


def count_circle_points(centers: Sequence[int], radii: Sequence[int]) -> int:
    """Lattice points covered by the union of circles centred on the x-axis."""
    if len(centers) != len(radii):
        raise ValueError("centers and radii must have the same length")
    highest: dict[int, int] = {}
    for cx, radius in zip(centers, radii):
        r_sq = radius * radius
        for x in range(cx - radius, cx + radius + 1):
            y_max = math.isqrt(r_sq - (x - cx) ** 2)
            if y_max > highest.get(x, -1):
                highest[x] = y_max
    return sum(2 * y + 1 for y in highest.values())