"""Text exercises: lenient integer parsing, ransom notes and word tallies."""

from __future__ import annotations

import re
from collections import Counter

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_MAX_INPUT_LENGTH = 200
_DIGITS = "0123456789"
_LEADING_INTEGER = re.compile(r"[+-]?[0-9]+")


def _looks_numeric(s: str) -> bool:
    if len(s) > 1:
        return s[1] in _DIGITS + " ."
    return s[0] in _DIGITS + "+- "


def _numeric_run(s: str) -> str:
    """Collect digits and signs, skipping leading spaces, up to the first other character."""
    collected: list[str] = []
    for char in s:
        if char in _DIGITS or char in "+-":
            collected.append(char)
        elif char == " " and not collected:
            continue
        else:
            break
    return "".join(collected)


def parse_int(s: str) -> int:
    """Read a leading integer from ``s`` and clamp it to the 32-bit signed range.

    Returns 0 for empty or over-long input (more than 200 characters), when
    the opening characters do not look numeric, when no integer can be read,
    and when the number does not even fit in 64 bits.
    """
    if not s or len(s) > _MAX_INPUT_LENGTH:
        return 0
    if not _looks_numeric(s):
        return 0
    match = _LEADING_INTEGER.match(_numeric_run(s))
    if match is None:
        return 0
    value = int(match.group())
    if not _INT64_MIN <= value <= _INT64_MAX:
        return 0
    return max(_INT32_MIN, min(_INT32_MAX, value))


def can_compose(magazine: str, note: str) -> bool:
    """Tell whether every word of ``note`` can be cut from ``magazine``.

    Words are separated by single spaces and each magazine word may be
    used only once.
    """
    available = Counter(magazine.split(" "))
    needed = Counter(note.split(" "))
    return all(available[word] >= count for word, count in needed.items())


def _words(text: str) -> list[str]:
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in " .":
            if current:
                words.append("".join(current))
            current = []
        else:
            current.append(char)
    return words


def word_counts(text: str) -> dict[str, int]:
    """Tally the words of ``text`` by pairs of occurrences.

    A word is a run of characters ended by a space or a full stop; a final
    run with no such ending is left out. Each word maps to the number of
    ordered pairs (i, j), i <= j, of its occurrences, so a word seen ``c``
    times scores ``c * (c + 1) / 2``.
    """
    return {word: count * (count + 1) // 2 for word, count in Counter(_words(text)).items()}