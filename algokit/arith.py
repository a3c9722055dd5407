"""Number-theoretic helpers and small closed-form arithmetic puzzles."""

from __future__ import annotations

import math
from collections.abc import Iterable

__all__ = [
    "gcd",
    "lcm",
    "mod_exp",
    "factorial",
    "is_prime",
    "trailing_zeros",
    "coin_piles",
    "digit_at",
    "missing_number",
    "spiral_value",
    "kth_not_divisible",
    "is_square",
    "can_make_ap",
]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of ``a`` and ``b``."""
    return a // gcd(a, b) * b


def mod_exp(base: int, exp: int, mod: int) -> int:
    """Return ``base ** exp % mod``; a non-positive exponent yields 1."""
    if exp <= 0:
        return 1
    return pow(base, exp, mod)


def factorial(n: int) -> int:
    """Return ``n!``; values below 2 yield 1."""
    return math.factorial(n) if n > 1 else 1


def is_prime(n: int) -> bool:
    """Primality test by trial division."""
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def trailing_zeros(n: int) -> int:
    """Number of trailing zeros in the decimal form of ``n!``."""
    total = 0
    power = 5
    while n // power >= 1:
        total += n // power
        power *= 5
    return total


def coin_piles(a: int, b: int) -> bool:
    """Whether two piles can be emptied by taking (1, 2) or (2, 1) coins at a time."""
    if (a + b) % 3:
        return False
    return not (a > 2 * b or b > 2 * a)


def digit_at(k: int) -> int:
    """The ``k``-th digit (1-based) of the sequence 123456789101112..."""
    if k < 1:
        raise ValueError("position must be at least 1")
    length, count, start = 1, 9, 1
    while k > length * count:
        k -= length * count
        length += 1
        count *= 10
        start *= 10
    number = start + (k - 1) // length
    return int(str(number)[(k - 1) % length])


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """The one value of 1..n absent from ``numbers``."""
    return n * (n + 1) // 2 - sum(numbers)


def spiral_value(y: int, x: int) -> int:
    """Value at row ``y``, column ``x`` (1-based) of the number spiral."""
    if y > x:
        if y % 2:
            return (y - 1) * (y - 1) + x
        return y * y - (x - 1)
    if x % 2:
        return x * x - (y - 1)
    return (x - 1) * (x - 1) + y


def kth_not_divisible(n: int, k: int) -> int:
    """The ``k``-th positive integer not divisible by ``n``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    return k + (k - 1) // (n - 1)


def is_square(a: int, b: int, c: int, d: int) -> bool:
    """Whether four side lengths are all equal."""
    return a == b == c == d


def can_make_ap(a: int, b: int, c: int) -> bool:
    """Whether multiplying one of a, b, c by a positive integer makes an arithmetic progression."""
    if min(a, b, c) <= 0:
        raise ValueError("all terms must be positive")
    new_a = 2 * b - c
    if new_a >= a and new_a % a == 0:
        return True
    if (c - a) % 2 == 0:
        new_b = a + (c - a) // 2
        if new_b >= b and new_b % b == 0:
            return True
    new_c = 2 * b - a
    return new_c >= c and new_c % c == 0