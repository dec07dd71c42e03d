"""Substring exercises: palindromes, searching and covering windows."""

from __future__ import annotations

from collections import Counter


def count_palindromic_substrings(s: str) -> int:
    """Return how many substrings of ``s`` (by position) are palindromes."""
    n = len(s)
    count = 0

    def expand(left: int, right: int) -> int:
        found = 0
        while left >= 0 and right < n and s[left] == s[right]:
            found += 1
            left -= 1
            right += 1
        return found

    for centre in range(n):
        count += expand(centre, centre) + expand(centre, centre + 1)
    return count


def find_substring(haystack: str, needle: str) -> int:
    """Return the first index of ``needle`` in ``haystack``, or -1.

    An empty haystack never matches, not even an empty needle.
    """
    width = len(needle)
    for index in range(len(haystack)):
        if index > len(haystack) - width:
            return -1
        if haystack[index : index + width] == needle:
            return index
    return -1


def find_substring_scan(haystack: str, needle: str) -> int:
    """Look for ``needle`` with a single forward scan that never backtracks.

    A partial match that fails is simply dropped, and a match is only
    reported once a character follows it, so some occurrences are missed
    and -1 is returned for them.
    """
    start = 0
    matched = 0
    for index, char in enumerate(haystack):
        if matched == len(needle) or haystack == needle:
            return start
        if char == needle[matched]:
            if len(needle) == 1:
                return index
            if matched == 0:
                start = index
            matched += 1
        else:
            matched = 0
    return -1


def count_valid_substrings(word1: str, word2: str) -> int:
    """Count substrings of ``word1`` holding every letter of ``word2`` as often.

    Uses a sliding window over ``word1``.
    """
    if len(word1) < len(word2):
        return 0
    required = Counter(word2)
    missing = len(required)
    window: Counter[str] = Counter()
    left = 0
    total = 0
    for char in word1:
        window[char] += 1
        if window[char] == required[char]:
            missing -= 1
        while missing == 0:
            dropped = word1[left]
            if window[dropped] == required[dropped]:
                missing += 1
            window[dropped] -= 1
            left += 1
        total += left
    return total


def count_valid_substrings_brute(word1: str, word2: str) -> int:
    """Count the same substrings as :func:`count_valid_substrings`, start by start."""
    if len(word2) > len(word1):
        return 0
    required = Counter(word2)
    total = 0
    for start in range(len(word1)):
        window: Counter[str] = Counter()
        formed = 0
        for end in range(start, len(word1)):
            char = word1[end]
            window[char] += 1
            if required[char] > 0 and window[char] == required[char]:
                formed += 1
            if formed == len(required):
                total += len(word1) - end
                break
    return total