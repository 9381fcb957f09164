"""Distribution sorts: radix, counting and bucket sorts.

These sorts place values by their digits, codes or ranges rather than by
comparing them, so each accepts only the kind of value it can place.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from algokit.sorting import insertion_sort

__all__ = [
    "radix_sort",
    "counting_sort_text",
    "fill_buckets",
    "bucket_sort",
    "bucket_sort_fractions",
]

_RADIX = 10
_CHAR_RANGE = 256
_DEFAULT_BUCKETS = 6
_DEFAULT_INTERVAL = 10


def radix_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers by their decimal digits, least significant first."""
    data = list(items)
    if not data:
        return data
    if any(value < 0 for value in data):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(data)
    exponent = 1
    while largest // exponent > 0:
        buckets: list[list[int]] = [[] for _ in range(_RADIX)]
        for value in data:
            buckets[(value // exponent) % _RADIX].append(value)
        data = [value for bucket in buckets for value in bucket]
        exponent *= _RADIX
    return data


def counting_sort_text(text: str) -> str:
    """Return the characters of ``text`` in ascending order of their codes.

    Only characters with codes below 256 can be counted.
    """
    counts = [0] * _CHAR_RANGE
    for char in text:
        code = ord(char)
        if code >= _CHAR_RANGE:
            raise ValueError(f"character {char!r} is outside the countable range")
        counts[code] += 1
    return "".join(chr(code) * count for code, count in enumerate(counts))


def _bucket_index(value: int, interval: int) -> int:
    # Division truncates toward zero, so small negatives land in bucket 0.
    quotient = abs(value) // interval
    return quotient if value >= 0 else -quotient


def fill_buckets(
    items: Iterable[int],
    bucket_count: int = _DEFAULT_BUCKETS,
    interval: int = _DEFAULT_INTERVAL,
) -> list[list[int]]:
    """Distribute integers into buckets of width ``interval``.

    Each value is put at the front of its bucket, so a bucket holds its
    values in the reverse of the order they arrived.
    """
    if bucket_count < 1:
        raise ValueError("bucket_count must be positive")
    if interval < 1:
        raise ValueError("interval must be positive")
    buckets: list[list[int]] = [[] for _ in range(bucket_count)]
    for value in items:
        index = _bucket_index(value, interval)
        if not 0 <= index < bucket_count:
            raise ValueError(
                f"value {value} falls outside {bucket_count} buckets of width {interval}"
            )
        buckets[index].insert(0, value)
    return buckets


def bucket_sort(
    items: Iterable[int],
    bucket_count: int = _DEFAULT_BUCKETS,
    interval: int = _DEFAULT_INTERVAL,
) -> list[int]:
    """Sort integers by bucketing them by range and insertion-sorting each bucket."""
    buckets = fill_buckets(items, bucket_count, interval)
    return [value for bucket in buckets for value in insertion_sort(bucket)]


def bucket_sort_fractions(values: Sequence[float]) -> list[float]:
    """Sort numbers in [0, 1) using one bucket per value."""
    size = len(values)
    buckets: list[list[float]] = [[] for _ in range(size)]
    for value in values:
        index = int(size * value)
        if not 0 <= index < size:
            raise ValueError(f"value {value} is outside the range [0, 1)")
        buckets[index].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]