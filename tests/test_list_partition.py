import pytest

from dsalgo.list_partition import segregate_even_odd


def test_empty():
    assert segregate_even_odd([]) == []


def test_single_value():
    assert segregate_even_odd([7]) == [7]


def test_small_example():
    assert segregate_even_odd([1, 2, 3, 4]) == [4, 2, 1, 3]


def test_evens_reverse_odds_keep_order():
    assert segregate_even_odd([5, 2, 4, 6]) == [6, 4, 2, 5]
    assert segregate_even_odd([2, 1, 3, 5]) == [2, 1, 3, 5]


def test_accepts_iterator():
    assert segregate_even_odd(iter([3, 8])) == [8, 3]


@pytest.mark.parametrize("values", [[9, 4, 7, 2, 6, 1], [0, -1, -2, 3], [2, 4, 6]])
def test_invariants(values):
    result = segregate_even_odd(values)
    assert sorted(result) == sorted(values)
    later_evens = sum(1 for v in values[1:] if v % 2 == 0)
    assert result[later_evens] == values[0]
    assert all(v % 2 == 0 for v in result[:later_evens])
    assert all(v % 2 != 0 for v in result[later_evens + 1:])