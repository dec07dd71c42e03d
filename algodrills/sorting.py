"""Simple comparison and counting sorts over integer sequences."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by repeated adjacent swaps."""
    result = list(values)
    unsorted_end = len(result)
    swapped = True
    while swapped and unsorted_end > 1:
        swapped = False
        for position in range(1, unsorted_end):
            if result[position - 1] > result[position]:
                result[position - 1], result[position] = result[position], result[position - 1]
                swapped = True
        unsorted_end -= 1
    return result


def value_counts(values: Iterable[int]) -> list[int]:
    """Return a list whose item at index ``v`` is how often ``v`` occurs.

    The list runs from 0 up to the largest value. Values must be
    non-negative and there must be at least one.
    """
    items = list(values)
    if not items:
        raise ValueError("value_counts() needs at least one value")
    if min(items) < 0:
        raise ValueError("value_counts() accepts only non-negative values")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return counts


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative values in ascending order using a count table."""
    return [value for value, count in enumerate(value_counts(values)) for _ in range(count)]