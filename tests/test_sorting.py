import pytest

from algodrills.sorting import bubble_sort, counting_sort, value_counts


def test_bubble_sort_case_from_source():
    assert bubble_sort([8, 7, 9, 1, 3, 2, 5, 10, 4, 20]) == [1, 2, 3, 4, 5, 7, 8, 9, 10, 20]


def test_bubble_sort_leaves_input_untouched():
    data = [3, 1, 2]
    assert bubble_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


@pytest.mark.parametrize(
    "data",
    [[], [1], [2, 2, 1], [5, -3, 0, 5, -3], list(range(10, 0, -1))],
)
def test_bubble_sort_matches_sorted(data):
    assert bubble_sort(data) == sorted(data)


def test_value_counts_small():
    assert value_counts([1, 1, 3, 2, 1]) == [0, 3, 1, 1]


def test_counting_sort_small():
    assert counting_sort([1, 1, 3, 2, 1]) == [1, 1, 1, 2, 3]


def test_counting_sort_larger_input():
    data = [63, 54, 17, 78, 43, 70, 32, 97, 16, 94, 74, 18, 60, 61, 35, 83, 13, 0, 16, 64]
    assert counting_sort(data) == sorted(data)


def test_value_counts_total_matches_length():
    data = [4, 0, 4, 2, 9, 9, 9]
    counts = value_counts(data)
    assert sum(counts) == len(data)
    assert len(counts) == 10
    assert counts[9] == 3


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        counting_sort([])


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        value_counts([3, -1])