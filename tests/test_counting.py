import pytest

from algodrills.counting import MODULUS, length_after_transformations, top_k_frequent

ONES_THEN_TWO = [1] * 25 + [2]
ALL_TWOS = [2] * 26


@pytest.mark.parametrize(
    ("s", "t", "nums", "expected"),
    [
        ("abcyy", 2, ONES_THEN_TWO, 7),
        ("azbk", 1, ALL_TWOS, 8),
    ],
)
def test_length_after_transformations(s, t, nums, expected):
    assert length_after_transformations(s, t, nums) == expected


def test_zero_transformations_keeps_length():
    assert length_after_transformations("hello", 0, ALL_TWOS) == 5


def test_single_step_rules_keep_length_constant():
    assert length_after_transformations("abc", 1000, [1] * 26) == 3


def test_doubling_grows_as_powers_of_two():
    assert length_after_transformations("a", 10, ALL_TWOS) == 1024


def test_large_t_stays_below_modulus():
    result = length_after_transformations("z", 10**9, ALL_TWOS)
    assert 0 <= result < MODULUS
    assert result == pow(2, 10**9, MODULUS)


@pytest.mark.parametrize(
    ("s", "t", "nums"),
    [("abc", 1, [1] * 25), ("abc", -1, ALL_TWOS), ("aBc", 1, ALL_TWOS)],
)
def test_length_after_transformations_rejects_bad_input(s, t, nums):
    with pytest.raises(ValueError):
        length_after_transformations(s, t, nums)


@pytest.mark.parametrize(
    ("nums", "k", "expected"),
    [
        ([1, 1, 1, 2, 2, 3], 2, [1, 2]),
        ([1], 1, [1]),
        ([1, 1, 2, 2, 3, 3, 3, 4], 2, [2, 3]),
    ],
)
def test_top_k_frequent(nums, k, expected):
    assert top_k_frequent(nums, k) == expected


def test_top_k_frequent_k_larger_than_distinct():
    assert top_k_frequent([5, 5, 4], 10) == [4, 5]


def test_top_k_frequent_zero_k():
    assert top_k_frequent([1, 2, 3], 0) == []


def test_top_k_frequent_negative_k():
    with pytest.raises(ValueError):
        top_k_frequent([1, 2], -1)