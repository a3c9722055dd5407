"""String puzzles: borders, palindromic substrings and rearrangements."""

from __future__ import annotations

from collections import Counter

__all__ = ["borders", "longest_palindrome", "palindrome_reorder"]

_BASE = 31
_MOD = 10**9 + 7


def borders(s: str) -> list[int]:
    """Lengths of the proper borders of ``s`` (prefixes that are also suffixes), ascending."""
    n = len(s)
    codes = [ord(ch) - ord("a") + 1 for ch in s]
    prefix_hash = suffix_hash = 0
    power = 1
    found: list[int] = []
    for i in range(n - 1):
        prefix_hash = (prefix_hash * _BASE + codes[i]) % _MOD
        suffix_hash = (suffix_hash + codes[n - 1 - i] * power) % _MOD
        power = power * _BASE % _MOD
        if prefix_hash == suffix_hash:
            found.append(i + 1)
    return found


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right - left - 1


def longest_palindrome(s: str) -> str:
    """The first longest palindromic substring of ``s``."""
    best_start, best_len = 0, 1
    for i in range(len(s)):
        for left, right in ((i, i), (i, i + 1)):
            start, length = _expand(s, left, right)
            if length > best_len:
                best_start, best_len = start, length
    return s[best_start : best_start + best_len]


def palindrome_reorder(s: str) -> str | None:
    """A palindrome using exactly the letters of ``s``, or None when none exists."""
    counts = Counter(s)
    odd = [ch for ch, count in counts.items() if count % 2]
    if len(odd) > 1:
        return None
    half = "".join(ch * (counts[ch] // 2) for ch in sorted(counts))
    middle = odd[0] if odd else ""
    return half + middle + half[::-1]