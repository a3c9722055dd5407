import math
import random

import pytest

from algokit.arith import (
    can_make_ap,
    coin_piles,
    digit_at,
    factorial,
    gcd,
    is_prime,
    is_square,
    kth_not_divisible,
    lcm,
    missing_number,
    mod_exp,
    spiral_value,
    trailing_zeros,
)

PAIRS = [(12, 18), (7, 13), (100, 75), (1, 1), (81, 27), (270, 192)]


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_divides_both_and_matches_math(a, b):
    g = gcd(a, b)
    assert a % g == 0 and b % g == 0
    assert g == math.gcd(a, b)


def test_gcd_with_zero_returns_other():
    assert gcd(42, 0) == 42
    assert gcd(0, 42) == 42


@pytest.mark.parametrize("a,b", PAIRS)
def test_lcm_gcd_product(a, b):
    assert lcm(a, b) * gcd(a, b) == a * b
    assert lcm(a, b) % a == 0 and lcm(a, b) % b == 0


@pytest.mark.parametrize("base,exp,mod", [(2, 10, 1000), (3, 200, 10**9 + 7), (5, 1, 7), (10, 18, 97)])
def test_mod_exp_matches_pow(base, exp, mod):
    assert mod_exp(base, exp, mod) == pow(base, exp, mod)


def test_mod_exp_zero_exponent():
    assert mod_exp(5, 0, 1) == 1


def test_factorial_recurrence():
    for n in range(1, 20):
        assert factorial(n) == n * factorial(n - 1)
    assert factorial(0) == factorial(1)
    assert factorial(-3) == factorial(1)
    assert factorial(15) == math.factorial(15)


def test_is_prime_rejects_products_and_small():
    for a in range(2, 15):
        for b in range(2, 15):
            assert not is_prime(a * b)
    for n in (-5, 0, 1):
        assert not is_prime(n)


def test_is_prime_large_mersenne():
    assert is_prime(2**31 - 1) is True


def test_is_prime_agrees_with_gcd_over_primorial_window():
    primes = [n for n in range(2, 200) if is_prime(n)]
    for i, p in enumerate(primes):
        assert all(gcd(p, q) == 1 for q in primes[:i])


@pytest.mark.parametrize("n", [0, 4, 5, 24, 25, 100, 125, 313])
def test_trailing_zeros_matches_factorial_text(n):
    text = str(math.factorial(n))
    assert trailing_zeros(n) == len(text) - len(text.rstrip("0"))


def test_coin_piles_reachable_combinations():
    for x in range(8):
        for y in range(8):
            assert coin_piles(x + 2 * y, 2 * x + y)


def test_coin_piles_wrong_total():
    for a in range(10):
        for b in range(10):
            if (a + b) % 3:
                assert not coin_piles(a, b)


def test_digit_at_matches_concatenation():
    sequence = "".join(str(i) for i in range(1, 2000))
    for k in range(1, 3000):
        assert digit_at(k) == int(sequence[k - 1])


def test_digit_at_rejects_zero():
    with pytest.raises(ValueError):
        digit_at(0)


def test_missing_number_finds_removed():
    rng = random.Random(7)
    for n in (1, 2, 10, 57):
        values = list(range(1, n + 1))
        removed = values.pop(rng.randrange(n))
        rng.shuffle(values)
        assert missing_number(n, values) == removed


@pytest.mark.parametrize("n", [1, 2, 3, 6, 9])
def test_spiral_block_holds_first_squares(n):
    values = {spiral_value(y, x) for y in range(1, n + 1) for x in range(1, n + 1)}
    assert values == set(range(1, n * n + 1))


@pytest.mark.parametrize("n,k", [(2, 1), (3, 7), (4, 12), (7, 97), (1000, 1000000)])
def test_kth_not_divisible(n, k):
    result = kth_not_divisible(n, k)
    assert result % n != 0
    assert result - result // n == k


def test_kth_not_divisible_rejects_one():
    with pytest.raises(ValueError):
        kth_not_divisible(1, 5)


def test_is_square():
    assert is_square(3, 3, 3, 3)
    assert not is_square(3, 3, 3, 4)
    assert not is_square(1, 2, 1, 2)


@pytest.mark.parametrize("a,d", [(1, 1), (5, 3), (2, 0), (10, 7)])
def test_can_make_ap_already_progression(a, d):
    assert can_make_ap(a, a + d, a + 2 * d)


def test_can_make_ap_pinned_cases():
    assert can_make_ap(10, 5, 30) is True
    assert can_make_ap(1, 1, 2) is False


def test_can_make_ap_rejects_non_positive():
    with pytest.raises(ValueError):
        can_make_ap(0, 1, 2)