"""Permutation constructions and enumeration."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["beautiful_permutation", "distinct_permutations"]


def beautiful_permutation(n: int) -> list[int] | None:
    """A permutation of 1..n with no adjacent values differing by 1, or None if none exists."""
    if n in (2, 3):
        return None
    if n == 1:
        return [1]
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def _next_permutation(chars: list[str]) -> bool:
    """Advance ``chars`` to its next lexicographic arrangement; False when it was the last."""
    i = len(chars) - 2
    while i >= 0 and chars[i] >= chars[i + 1]:
        i -= 1
    if i < 0:
        return False
    j = len(chars) - 1
    while chars[j] <= chars[i]:
        j -= 1
    chars[i], chars[j] = chars[j], chars[i]
    chars[i + 1 :] = reversed(chars[i + 1 :])
    return True


def _arrangements(s: str) -> Iterator[str]:
    chars = sorted(s)
    yield "".join(chars)
    while _next_permutation(chars):
        yield "".join(chars)


def distinct_permutations(s: str) -> list[str]:
    """All distinct rearrangements of ``s`` in lexicographic order."""
    return list(_arrangements(s))