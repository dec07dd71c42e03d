"""Counting exercises: string growth under letter rules and frequent values."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence

MODULUS = 10**9 + 7
_ALPHABET = 26

_Matrix = list[list[int]]


def _multiply(left: _Matrix, right: _Matrix) -> _Matrix:
    result = [[0] * _ALPHABET for _ in range(_ALPHABET)]
    for row, left_row in zip(result, left):
        for factor, right_row in zip(left_row, right):
            if factor:
                for column, value in enumerate(right_row):
                    row[column] += factor * value
        for column, value in enumerate(row):
            row[column] = value % MODULUS
    return result


def _power(matrix: _Matrix, exponent: int) -> _Matrix:
    result = [[int(i == j) for j in range(_ALPHABET)] for i in range(_ALPHABET)]
    while exponent:
        if exponent & 1:
            result = _multiply(result, matrix)
        matrix = _multiply(matrix, matrix)
        exponent >>= 1
    return result


def length_after_transformations(s: str, t: int, nums: Sequence[int]) -> int:
    """Return the length of ``s`` after ``t`` transformations, modulo 10**9 + 7.

    In one transformation each letter ``c`` is replaced by the ``nums[c]``
    letters that follow it in the alphabet, wrapping from 'z' to 'a'.
    """
    if len(nums) != _ALPHABET:
        raise ValueError("nums must hold one count per lowercase letter")
    if t < 0:
        raise ValueError("t must not be negative")
    if any(not "a" <= char <= "z" for char in s):
        raise ValueError("s must consist of lowercase letters")
    step = [[0] * _ALPHABET for _ in range(_ALPHABET)]
    for letter, produced in enumerate(nums):
        for offset in range(1, produced + 1):
            step[letter][(letter + offset) % _ALPHABET] += 1
    transform = _power(step, t)
    return sum(
        count * sum(transform[ord(char) - ord("a")]) for char, count in Counter(s).items()
    ) % MODULUS


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values in ascending order.

    Values with equal frequency are ranked larger value first.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    counts = Counter(nums)
    chosen = heapq.nlargest(k, counts, key=lambda value: (counts[value], value))
    return sorted(chosen)