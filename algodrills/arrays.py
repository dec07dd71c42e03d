"""Array exercises: duplicates, missing values, merging, searching and pairs."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor


def remove_duplicates(nums: list[int]) -> int:
    """Compact the distinct values of a sorted list to its front.

    The list is changed in place; the number of distinct values is returned
    and the first that many items hold them in order.
    """
    if not nums:
        return 0
    write = 1
    last = nums[0]
    for value in nums[1:]:
        if value != last:
            nums[write] = value
            last = value
            write += 1
    return write


def remove_duplicates_naive(nums: list[int]) -> int:
    """Delete repeated neighbours from a sorted list in place and return its new length.

    Each deletion shifts the tail, so this takes quadratic time in the worst case.
    """
    position = 0
    while position < len(nums) - 1:
        if nums[position] == nums[position + 1]:
            del nums[position + 1]
        else:
            position += 1
    return len(nums)


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of 0..n absent from ``nums`` (n being its length)."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def missing_number_xor(nums: Sequence[int]) -> int:
    """Return the one number of 0..n absent from ``nums``, found by xor."""
    return reduce(xor, (index ^ value for index, value in enumerate(nums)), len(nums))


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> list[int]:
    """Merge the first ``n`` items of ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` sorted values followed by room for ``n`` more.
    The merged list is returned.
    """
    p1 = m - 1
    p2 = n - 1
    for target in range(m + n - 1, -1, -1):
        if p2 < 0:
            break
        if p1 >= 0 and nums1[p1] > nums2[p2]:
            nums1[target] = nums1[p1]
            p1 -= 1
        else:
            nums1[target] = nums2[p2]
            p2 -= 1
    return nums1


def sock_pairs(socks: Iterable[int]) -> int:
    """Return how many matching pairs can be formed from the sock colours."""
    return sum(count // 2 for count in Counter(socks).values())


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Tell whether two equal values sit no more than ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and abs(index - previous) <= k:
            return True
        last_seen[value] = index
    return False


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or (-1, -1)."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] > target:
        return (-1, -1)
    return (first, bisect_left(nums, target + 1) - 1)


def search_range_linear(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` by scanning from both ends."""
    first = last = -1
    forward = enumerate(nums)
    backward = reversed(list(enumerate(nums)))
    for (i, front), (j, back) in zip(forward, backward):
        if front == target and first == -1:
            first = i
        if back == target and last == -1:
            last = j
        if first > -1 and last > -1:
            break
    return (first, last)


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one later sell, or 0."""
    if not prices:
        raise ValueError("max_profit() needs at least one price")
    profit = 0
    lowest = prices[0]
    for price in prices[1:]:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return profit


def two_sum(nums: Iterable[int], target: int) -> tuple[int, int]:
    """Return the first pair of values adding up to ``target``, or (-1, -1)."""
    seen: set[int] = set()
    for value in nums:
        complement = target - value
        if complement in seen:
            return (complement, value)
        seen.add(value)
    return (-1, -1)


def two_sum_indices(nums: Iterable[int], target: int) -> tuple[int, int]:
    """Return the indices of the first pair adding up to ``target``, or (-1, -1)."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return (seen[complement], index)
        seen[value] = index
    return (-1, -1)