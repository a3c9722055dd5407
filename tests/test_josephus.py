import pytest

from algokit.josephus import josephus_every_other, josephus_order


def test_every_other_example():
    assert josephus_every_other(7) == [2, 4, 6, 1, 5, 3, 7]


def test_order_example():
    assert josephus_order(5, 2) == [3, 1, 5, 2, 4]


@pytest.mark.parametrize("n", [1, 2, 5, 10, 33])
def test_every_other_is_permutation(n):
    assert sorted(josephus_every_other(n)) == list(range(1, n + 1))


@pytest.mark.parametrize("n", [1, 2, 6, 17])
def test_every_other_matches_skip_one(n):
    assert josephus_every_other(n) == josephus_order(n, 1)


@pytest.mark.parametrize("n,k", [(1, 5), (8, 3), (12, 100), (20, 7)])
def test_order_is_permutation(n, k):
    assert sorted(josephus_order(n, k)) == list(range(1, n + 1))


def test_order_without_skips_is_sequential():
    assert josephus_order(9, 0) == list(range(1, 10))


def test_empty_circle():
    assert josephus_order(0, 3) == josephus_every_other(0) == []


def test_order_rejects_negative_skip():
    with pytest.raises(ValueError):
        josephus_order(4, -1)