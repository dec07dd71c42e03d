# algodrills

Short solutions to well-known programming exercises. They cover sorting, array
scans, subarray sums, substring search and counting. Every function takes plain
Python values and returns plain Python values. The package uses only the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.sorting`

- `bubble_sort(values)`: returns a new ascending list, built with adjacent swaps.
- `value_counts(values)`: returns a list where the item at index `v` is the
  number of times `v` occurs. It raises `ValueError` for empty input or for
  negative values.
- `counting_sort(values)`: sorts non-negative values using `value_counts`.

### `algodrills.arrays`

- `remove_duplicates(nums)` and `remove_duplicates_naive(nums)` remove repeats
  from a sorted list in place and return the number of distinct values.
  `remove_duplicates` moves the distinct values to the front of the list.
  `remove_duplicates_naive` deletes the repeats from the list.
- `missing_number(nums)` and `missing_number_xor(nums)` return the one value of
  `0..n` that is absent from `nums`.
- `merge_sorted(nums1, m, nums2, n)` merges `nums2` into the spare room at the
  end of `nums1`, in place, and returns `nums1`.
- `sock_pairs(socks)` returns the number of matching pairs.
- `contains_nearby_duplicate(nums, k)` tells whether two equal values are at
  most `k` positions apart.
- `search_range(nums, target)` uses binary search and `search_range_linear(nums, target)`
  scans the list. Both return a `(first, last)` tuple of indices, or `(-1, -1)`.
- `max_profit(prices)` returns the best gain from one buy and one later sell.
- `two_sum(nums, target)` returns the first pair of values that add up to
  `target`. `two_sum_indices(nums, target)` returns the indices of that pair.
  Both return `(-1, -1)` when no pair exists.

### `algodrills.subarrays`

- `max_subarray_sum(nums)` uses Kadane's algorithm to return the largest sum
  of a non-empty subarray.
- `max_subarray_sum_brute(nums)` and `max_subarray_sum_window(nums)` return the
  same largest sum, but never less than 0.
- `max_sum_subarray(nums)` and `max_sum_subarray_window(nums)` return the
  subarray itself as a list.
- `has_subarray_sum_multiple(nums, k)` tells whether a subarray of two or more
  items sums to a multiple of `k`. When `k <= 0` it tells whether such a
  subarray sums to exactly 0.

### `algodrills.text`

- `parse_int(s)` reads a leading integer and clamps it to the 32-bit signed
  range. It returns 0 when the input is empty, longer than 200 characters,
  does not look numeric, or does not fit in 64 bits.
- `can_compose(magazine, note)` tells whether every space-separated word of
  `note` can be taken from `magazine`, using each word there at most once.
- `word_counts(text)` finds the words of `text`, where each word must end with
  a space or a full stop. It maps each word to `c * (c + 1) // 2`, where `c` is
  the number of times the word occurs.

### `algodrills.substrings`

- `count_palindromic_substrings(s)` counts the palindromic substrings of `s`
  by position.
- `find_substring(haystack, needle)` returns the first index of `needle`, or
  -1. An empty haystack never matches.
- `find_substring_scan(haystack, needle)` searches in one forward pass and
  never backtracks. Because of this it misses some occurrences.
- `count_valid_substrings(word1, word2)` uses a sliding window.
  `count_valid_substrings_brute(word1, word2)` checks each start position.
  Both count the substrings of `word1` that contain every letter of `word2` at
  least as many times as `word2` does.

### `algodrills.counting`

- `length_after_transformations(s, t, nums)` returns the length of `s` after
  `t` transformations, modulo `MODULUS` (10**9 + 7). In each transformation,
  letter `c` becomes the `nums[c]` letters that follow it, wrapping from `z`
  to `a`.
- `top_k_frequent(nums, k)` returns the `k` most frequent values in ascending
  order. When two values are equally frequent, the larger value ranks first.

## Example

```python
from algodrills.arrays import max_profit, search_range
from algodrills.subarrays import max_subarray_sum
from algodrills.substrings import find_substring

max_profit([7, 1, 5, 3, 6, 4])                     # 5
search_range([5, 7, 7, 8, 8, 10], 8)               # (3, 4)
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
find_substring("mississippi", "issip")             # 4
```

## What it does not do

This is a library only. It has no command-line program, it does not read
files, and it prints nothing.