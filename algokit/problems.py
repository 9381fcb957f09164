"""Assorted problems: randomized product check, segment union and increasing runs."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "freivald",
    "is_product",
    "segment_union_length",
    "longest_increasing_subsequence",
]

Matrix = Sequence[Sequence[int]]


def _common_size(*matrices: Matrix) -> int:
    size = len(matrices[0])
    for matrix in matrices:
        if len(matrix) != size or any(len(row) != size for row in matrix):
            raise ValueError("matrices must be square and of the same size")
    return size


def _times(matrix: Matrix, vector: Sequence[int]) -> list[int]:
    return [sum(entry * value for entry, value in zip(row, vector)) for row in matrix]


def freivald(a: Matrix, b: Matrix, c: Matrix, rng: Any = None) -> bool:
    """One round of Freivalds' check that ``a @ b`` equals ``c``.

    A random 0/1 vector ``r`` is drawn with ``rng.randrange(2)`` and
    ``a @ (b @ r)`` is compared with ``c @ r``. A False answer is certain;
    a True answer may be wrong with probability at most one half.
    """
    size = _common_size(a, b, c)
    source = rng if rng is not None else random
    vector = [source.randrange(2) for _ in range(size)]
    return _times(a, _times(b, vector)) == _times(c, vector)


def is_product(
    a: Matrix, b: Matrix, c: Matrix, k: int = 2, rng: Any = None
) -> bool:
    """Run ``k`` rounds of Freivalds' check; more rounds mean fewer false positives."""
    _common_size(a, b, c)
    return all(freivald(a, b, c, rng) for _ in range(k))


def segment_union_length(segments: Iterable[tuple[int, int]]) -> int:
    """Total length covered by the union of ``(start, end)`` segments."""
    points = sorted(
        point
        for start, end in segments
        for point in ((start, False), (end, True))
    )
    total = 0
    open_segments = 0
    previous = None
    for value, is_end in points:
        if open_segments:
            total += value - previous
        open_segments += -1 if is_end else 1
        previous = value
    return total


def longest_increasing_subsequence(items: Iterable) -> int:
    """Length of the longest strictly increasing subsequence of ``items``."""
    values: list = []
    lengths: list[int] = []
    for value in items:
        best = max(
            (length for earlier, length in zip(values, lengths) if earlier < value),
            default=0,
        )
        values.append(value)
        lengths.append(best + 1)
    return max(lengths, default=0)