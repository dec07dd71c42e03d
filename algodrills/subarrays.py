"""Contiguous subarray problems: largest sums and sums divisible by k."""

from __future__ import annotations

from collections.abc import Sequence


def max_subarray_sum_brute(nums: Sequence[int]) -> int:
    """Return the largest subarray sum by trying every start; never below 0."""
    best = 0
    for start in range(len(nums)):
        total = 0
        for value in nums[start:]:
            total += value
            best = max(best, total)
    return best


def max_subarray_sum_window(nums: Sequence[int]) -> int:
    """Return the largest subarray sum with a shrinking window; never below 0."""
    best = 0
    total = 0
    left = 0
    for value in nums:
        total += value
        best = max(best, total)
        while total < 0:
            total -= nums[left]
            left += 1
    return best


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty subarray (Kadane's algorithm)."""
    if not nums:
        raise ValueError("max_subarray_sum() needs at least one number")
    current = best = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_sum_subarray_window(nums: Sequence[int]) -> list[int]:
    """Return the subarray with the largest sum found by a shrinking window.

    When no sum exceeds 0 the first item alone is returned.
    """
    best = 0
    total = 0
    left = 0
    best_left = best_right = 0
    for right, value in enumerate(nums):
        total += value
        while total < 0:
            total -= nums[left]
            left += 1
        if total > best:
            best = total
            best_left, best_right = left, right
    return list(nums[best_left : best_right + 1])


def max_sum_subarray(nums: Sequence[int]) -> list[int]:
    """Return the non-empty subarray with the largest sum (Kadane's algorithm)."""
    if not nums:
        raise ValueError("max_sum_subarray() needs at least one number")
    current = best = nums[0]
    start = best_start = best_end = 0
    for index in range(1, len(nums)):
        value = nums[index]
        if value > current + value:
            current = value
            start = index
        else:
            current += value
        if current > best:
            best = current
            best_start, best_end = start, index
    return list(nums[best_start : best_end + 1])


def _truncated_remainder(total: int, k: int) -> int:
    remainder = abs(total) % k
    return -remainder if total < 0 else remainder


def has_subarray_sum_multiple(nums: Sequence[int], k: int) -> bool:
    """Tell whether a subarray of two or more items sums to a multiple of ``k``.

    For ``k`` of 0 or below the running sums themselves are compared, so the
    test becomes whether such a subarray sums to exactly 0.
    """
    first_seen = {0: -1}
    total = 0
    for index, value in enumerate(nums):
        total += value
        key = _truncated_remainder(total, k) if k > 0 else total
        if key in first_seen:
            if index - first_seen[key] >= 2:
                return True
        else:
            first_seen[key] = index
    return False