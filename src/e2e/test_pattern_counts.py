# src/e2e/test_pattern_counts.py

import pytest

from textindex.patterns import (
    compute_lps, count_kmp, count_boyer_moore, count_naive, count_exact, bad_character_table,
)


def _reference_non_overlapping(text: str, pattern: str) -> int:
    """Left-to-right scan; each match consumes its characters."""
    if not pattern:
        return 0
    i = n = 0
    while i + len(pattern) <= len(text):
        if text[i:i + len(pattern)] == pattern:
            n += 1
            i += len(pattern)
        else:
            i += 1
    return n


# patterns with no border (no proper prefix that is also a suffix)
NON_OVERLAPPING_CASES = [
    ("the cat sat on the mat", "the"),
    ("the cat sat on the mat", "at"),
    ("abcabcabc", "abc"),
    ("mississippi", "si"),
    ("iphone 14 iphone 15", "iphone"),
    ("nothing here", "xyz"),
    ("AbcABCabc", "abc"),                # case-sensitive
    ("ab", "ab"),
]


def test_lps_table():
    assert compute_lps("aabaaab") == [0, 1, 0, 1, 2, 2, 3]
    assert compute_lps("abcd") == [0, 0, 0, 0]
    assert compute_lps("aaaa") == [0, 1, 2, 3]


@pytest.mark.parametrize("text,pattern", NON_OVERLAPPING_CASES)
def test_kmp_agrees_with_reference_on_borderless_patterns(text, pattern):
    assert count_kmp(text, pattern) == _reference_non_overlapping(text, pattern)


@pytest.mark.parametrize("text,pattern", NON_OVERLAPPING_CASES)
def test_boyer_moore_agrees_with_reference_on_borderless_patterns(text, pattern):
    assert count_boyer_moore(text, pattern) == _reference_non_overlapping(text, pattern)


@pytest.mark.parametrize("text,pattern", NON_OVERLAPPING_CASES)
def test_naive_agrees_with_reference(text, pattern):
    assert count_naive(text, pattern) == _reference_non_overlapping(text, pattern)


def test_kmp_self_overlapping_follows_lps_reset():
    # after a match the cursor falls back to lps[m-1] = 1, keeping the border
    assert count_kmp("aaa", "aa") == 2
    assert count_kmp("aaaa", "aa") == 3
    assert count_kmp("ababa", "aba") == 2
    # the non-overlapping reference reports fewer
    assert _reference_non_overlapping("aaaa", "aa") == 2
    assert count_naive("aaaa", "aa") == 2


def test_boyer_moore_self_overlapping_exact_values():
    # match at 0: next char 'a' has last index 1 -> shift by 2 - 1 = 1
    assert count_boyer_moore("aaaa", "aa") == 3
    assert count_boyer_moore("aaa", "aa") == 2
    assert count_boyer_moore("ababa", "aba") == 2


def test_bad_character_table_keeps_last_index():
    t = bad_character_table("abca")
    assert t == {"a": 3, "b": 1, "c": 2}
    assert t.get("z", -1) == -1


def test_boyer_moore_handles_non_ascii_text():
    assert count_boyer_moore("café café", "café") == 2
    assert count_boyer_moore("日本語の日本", "日本") == 2


@pytest.mark.parametrize("counter", [count_kmp, count_boyer_moore, count_naive])
def test_degenerate_inputs_count_zero(counter):
    assert counter("abc", "") == 0
    assert counter("", "a") == 0
    assert counter("ab", "abc") == 0
    assert counter("", "") == 0


def test_count_exact_dispatch_and_unknown_algorithm():
    assert count_exact("banana", "an") == 2
    assert count_exact("banana", "an", "boyer-moore") == 2
    assert count_exact("banana", "ana", "naive") == 1
    assert count_exact("banana", "ana", "KMP") == 2
    with pytest.raises(ValueError):
        count_exact("banana", "an", "rabin-karp")
