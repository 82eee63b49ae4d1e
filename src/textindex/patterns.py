from __future__ import annotations
from typing import Callable, Dict, List
from .config import COUNT_ALGORITHMS, DEFAULT_COUNT_ALGORITHM

# Exact-substring counters. All of them are case-sensitive and fail soft:
# an empty pattern, or one longer than the text, counts 0.


def compute_lps(pattern: str) -> List[int]:
    """Longest proper prefix that is also a suffix, for every prefix of pattern."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length != 0:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def count_kmp(text: str, pattern: str) -> int:
    """
    /* ~~~ Knuth-Morris-Pratt count. After a full match the pattern cursor
       falls back to lps[m-1] instead of 0, so the scan never rewinds the
       text; a self-overlapping pattern keeps its matched border. ~~~ */
    """
    n, m = len(text), len(pattern)
    if m == 0 or m > n:
        return 0

    lps = compute_lps(pattern)
    i = j = count = 0
    while i < n:
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            count += 1
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1
    return count


def bad_character_table(pattern: str) -> Dict[str, int]:
    """Last index of every character of pattern. Absent characters read as -1 via .get()."""
    table: Dict[str, int] = {}
    for i, ch in enumerate(pattern):
        table[ch] = i
    return table


def count_boyer_moore(text: str, pattern: str) -> int:
    """
    Boyer-Moore count with the bad-character rule only (no good-suffix table).
    The window is compared right-to-left.
    """
    n, m = len(text), len(pattern)
    if m == 0 or m > n:
        return 0

    shift_of = bad_character_table(pattern)
    count = 0
    s = 0
    while s <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[s + j]:
            j -= 1

        if j < 0:
            count += 1
            # align the char after the window with its last occurrence in pattern
            s += m - shift_of.get(text[s + m], -1) if s + m < n else 1
        else:
            s += max(1, j - shift_of.get(text[s + j], -1))
    return count


def count_naive(text: str, pattern: str) -> int:
    """Non-overlapping left-to-right count (each match consumes its characters)."""
    if not pattern or len(pattern) > len(text):
        return 0
    return text.count(pattern)


_COUNTERS: Dict[str, Callable[[str, str], int]] = {
    "kmp": count_kmp,
    "boyer-moore": count_boyer_moore,
    "naive": count_naive,
}


def count_exact(text: str, pattern: str, algorithm: str = DEFAULT_COUNT_ALGORITHM) -> int:
    """Count pattern in text with the named algorithm (see config.COUNT_ALGORITHMS)."""
    key = (algorithm or DEFAULT_COUNT_ALGORITHM).lower()
    counter = _COUNTERS.get(key)
    if counter is None:
        raise ValueError(f"Unknown count algorithm {algorithm!r}; expected one of {COUNT_ALGORITHMS}")
    if text is None or pattern is None:
        return 0
    return counter(text, pattern)
