import pytest

from algokit.arrays import (
    collecting_rounds,
    increasing_array_moves,
    max_subarray_sum,
    max_sum_after_negations,
    nearest_smaller_values,
)


def test_collecting_rounds_worked_example():
    assert collecting_rounds([4, 2, 1, 5, 3]) == 3


def test_collecting_rounds_reversed_needs_n_rounds():
    n = 6
    assert collecting_rounds(list(range(n, 0, -1))) == n


def test_collecting_rounds_sorted_is_fewest():
    n = 5
    sorted_rounds = collecting_rounds(list(range(1, n + 1)))
    assert sorted_rounds <= collecting_rounds([2, 1, 3, 5, 4])
    assert sorted_rounds < collecting_rounds(list(range(n, 0, -1)))


@pytest.mark.parametrize("bad", [[1, 1, 2], [0, 1, 2], [2, 3, 4]])
def test_collecting_rounds_rejects_non_permutation(bad):
    with pytest.raises(ValueError):
        collecting_rounds(bad)


def test_increasing_array_worked_example():
    assert increasing_array_moves([3, 2, 5, 1, 7]) == 5


def test_increasing_array_single_descent():
    assert increasing_array_moves([10, 4]) == 10 - 4


def test_increasing_array_sorted_needs_nothing():
    values = [1, 1, 2, 9, 9, 12]
    assert increasing_array_moves(values) == increasing_array_moves([])
    assert increasing_array_moves(values) == increasing_array_moves(values[:1])


def test_increasing_array_large_values_no_overflow():
    big = 10**18
    assert increasing_array_moves([big, 0, 0]) == 2 * big


def test_max_subarray_sum_worked_example():
    assert max_subarray_sum([-1, 3, -2, 5, 3, -5, 2, 2]) == 9


def test_max_subarray_sum_all_negative():
    values = [-8, -3, -6, -2, -5]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_sum_all_positive():
    values = [2, 7, 1, 8]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_nearest_smaller_values_strictly_increasing():
    values = [3, 5, 9, 11, 20]
    assert nearest_smaller_values(values) == list(range(len(values)))


def test_nearest_smaller_values_non_increasing():
    values = [9, 9, 7, 4, 4, 1]
    assert nearest_smaller_values(values) == [0] * len(values)


def test_nearest_smaller_values_invariant():
    values = [2, 5, 1, 4, 8, 3, 2, 5]
    result = nearest_smaller_values(values)
    assert len(result) == len(values)
    for i, pos in enumerate(result):
        between = values[pos:i]
        assert all(v >= values[i] for v in between)
        if pos:
            assert values[pos - 1] < values[i]


def test_negations_non_negative_input_keeps_sum():
    values = [3, 1, 4, 1, 5]
    assert max_sum_after_negations(values) == sum(values)


def test_negations_even_negatives_all_flipped():
    values = [-3, 2, -7, 4]
    assert max_sum_after_negations(values) == sum(abs(v) for v in values)


def test_negations_odd_negatives_invariants():
    values = [-3, 2, -7, -4, 6]
    result = max_sum_after_negations(values)
    assert sum(values) <= result < sum(abs(v) for v in values)
    assert (result - sum(values)) % 2 == 0


def test_negations_empty():
    assert max_sum_after_negations([]) == sum([])