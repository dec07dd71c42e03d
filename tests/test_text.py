import pytest

from algodrills.text import can_compose, parse_int, word_counts


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("-42", -42),
        ("+1", 1),
        ("4193 with words", 4193),
        ("words and 987", 0),
        ("3.14", 3),
        ("   42", 42),
        ("12-3", 12),
        ("", 0),
        ("a1", 0),
        ("+-12", 0),
        (" -42", 0),
        ("0-1", 0),
        ("-", 0),
        ("7", 7),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_parse_int_clamps_to_32_bits():
    assert parse_int("2147483648") == 2147483647
    assert parse_int("-91283472332") == -2147483648
    assert parse_int("9223372036854775807") == 2147483647


def test_parse_int_beyond_64_bits_is_zero():
    assert parse_int("20000000000000000000") == 0
    assert parse_int("9223372036854775808") == 0


def test_parse_int_rejects_long_input():
    assert parse_int("1" * 201) == 0
    assert parse_int("1" * 9 + " " * 191) == 111111111


@pytest.mark.parametrize(
    ("magazine", "note", "expected"),
    [
        ("give me one grand today night", "give one grand today", True),
        ("two times three is not four", "two times two is four", False),
        ("ive got a lovely bunch of coconuts", "ive got some coconuts", False),
        (
            "apgo clm w lxkvg mwz elo bg elo lxkvg elo apgo apgo w elo bg",
            "elo lxkvg bg mwz clm w",
            True,
        ),
    ],
)
def test_can_compose(magazine, note, expected):
    assert can_compose(magazine, note) is expected


def test_word_counts_pairs_of_occurrences():
    assert word_counts("a b a.") == {"a": 3, "b": 1}


def test_word_counts_drops_unterminated_final_word():
    assert word_counts("go go go stop") == {"go": 6}


def test_word_counts_ignores_empty_runs():
    assert word_counts("hi.. hi  there.") == {"hi": 3, "there": 1}


def test_word_counts_empty():
    assert word_counts("") == {}