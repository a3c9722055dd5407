"""Bit-string puzzles: Gray codes and Hamming distances."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

__all__ = ["gray_code", "min_hamming_distance"]


def gray_code(n: int) -> list[str]:
    """The reflected binary Gray code of width ``n`` as bit strings."""
    if n < 0:
        raise ValueError("width must not be negative")
    if n == 0:
        return [""]
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(1 << n)]


def _as_int(bits: str) -> int:
    return sum(1 << j for j, ch in enumerate(reversed(bits)) if ch == "1")


def min_hamming_distance(strings: Iterable[str]) -> int:
    """Smallest Hamming distance between any two of the given bit strings."""
    numbers = [_as_int(s) for s in strings]
    if len(numbers) < 2:
        raise ValueError("at least two strings are required")
    return min((a ^ b).bit_count() if hasattr(int, "bit_count") else bin(a ^ b).count("1")
               for a, b in combinations(numbers, 2))