"""Searching a sequence for a value."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["linear_search", "binary_search"]


def linear_search(items: Sequence, target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or None."""
    return next(
        (index for index, item in enumerate(items) if item == target), None
    )


def binary_search(items: Sequence, target: Any) -> int | None:
    """Return an index of ``target`` in ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = low + (high - low) // 2
        value = items[middle]
        if value == target:
            return middle
        if value > target:
            high = middle - 1
        else:
            low = middle + 1
    return None