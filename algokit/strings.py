"""Pattern search in text and anagram comparison."""

from __future__ import annotations

from collections import Counter

__all__ = [
    "prefix_table",
    "kmp_search",
    "rabin_karp_search",
    "anagram_deletions",
]

_ALPHABET = 256
_DEFAULT_PRIME = 101


def prefix_table(pattern: str) -> list[int]:
    """Longest proper prefix that is also a suffix, for each prefix of ``pattern``."""
    table = [0] * len(pattern)
    length = 0
    position = 1
    while position < len(pattern):
        if pattern[position] == pattern[length]:
            length += 1
            table[position] = length
            position += 1
        elif length:
            length = table[length - 1]
        else:
            table[position] = 0
            position += 1
    return table


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return every index where ``pattern`` occurs in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = prefix_table(pattern)
    found = []
    matched = 0
    for index, char in enumerate(text):
        while matched and pattern[matched] != char:
            matched = table[matched - 1]
        if pattern[matched] == char:
            matched += 1
        if matched == len(pattern):
            found.append(index + 1 - matched)
            matched = table[matched - 1]
    return found


def rabin_karp_search(
    pattern: str, text: str, prime: int = _DEFAULT_PRIME
) -> list[int]:
    """Return every index where ``pattern`` occurs in ``text`` using a rolling hash."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    if prime < 1:
        raise ValueError("prime must be positive")
    width = len(pattern)
    if width > len(text):
        return []
    high = pow(_ALPHABET, width - 1, prime)
    pattern_hash = window_hash = 0
    for pattern_char, text_char in zip(pattern, text):
        pattern_hash = (_ALPHABET * pattern_hash + ord(pattern_char)) % prime
        window_hash = (_ALPHABET * window_hash + ord(text_char)) % prime
    found = []
    last = len(text) - width
    for start in range(last + 1):
        if pattern_hash == window_hash and text[start:start + width] == pattern:
            found.append(start)
        if start < last:
            window_hash = (
                _ALPHABET * (window_hash - ord(text[start]) * high)
                + ord(text[start + width])
            ) % prime
    return found


def anagram_deletions(first: str, second: str) -> int:
    """Number of characters to delete from both strings to make them anagrams.

    The marker characters ``*`` (when scanning ``first`` against ``second``)
    and ``^`` (when scanning back) are never counted as shared.
    """
    first_counts = Counter(first)
    second_counts = Counter(second)
    shared = first_counts & second_counts
    forward = sum(count for char, count in shared.items() if char != "*")
    backward = sum(count for char, count in shared.items() if char != "^")
    return len(first) + len(second) - forward - backward