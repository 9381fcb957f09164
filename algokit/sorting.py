"""Comparison sorts.

Every sort accepts any iterable of mutually comparable values and returns a
new ascending list; the input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "BubbleStep",
    "heap_sort",
    "insertion_sort",
    "selection_sort",
    "shell_sort",
    "exchange_sort",
    "bubble_sort",
    "bubble_sort_steps",
    "merge_sort",
    "quick_sort",
]


@dataclass(frozen=True, slots=True)
class BubbleStep:
    """One comparison made by bubble sort.

    ``left`` and ``right`` are the neighbouring values as they stood when
    compared; ``swapped`` tells whether they were exchanged.
    """

    pass_number: int
    index: int
    left: Any
    right: Any
    swapped: bool


def _sift_down(data: list, size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def heap_sort(items: Iterable) -> list:
    """Sort with a binary max-heap."""
    data = list(items)
    size = len(data)
    for root in reversed(range(size // 2)):
        _sift_down(data, size, root)
    for end in reversed(range(1, size)):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


def insertion_sort(items: Iterable) -> list:
    """Sort by inserting each value into the sorted prefix before it."""
    data = list(items)
    for position in range(1, len(data)):
        key = data[position]
        slot = position
        while slot > 0 and data[slot - 1] > key:
            data[slot] = data[slot - 1]
            slot -= 1
        data[slot] = key
    return data


def selection_sort(items: Iterable) -> list:
    """Sort by repeatedly moving the smallest remaining value forward."""
    data = list(items)
    for position in range(len(data) - 1):
        smallest = min(range(position, len(data)), key=data.__getitem__)
        data[position], data[smallest] = data[smallest], data[position]
    return data


def shell_sort(items: Iterable) -> list:
    """Gapped insertion sort with gaps n/2, n/4, ..., 1."""
    data = list(items)
    gap = len(data) // 2
    while gap > 0:
        for position in range(gap, len(data)):
            value = data[position]
            slot = position
            while slot >= gap and data[slot - gap] > value:
                data[slot] = data[slot - gap]
                slot -= gap
            data[slot] = value
        gap //= 2
    return data


def exchange_sort(items: Iterable) -> list:
    """Compare every pair of positions and swap whenever they are out of order."""
    data = list(items)
    positions = range(len(data))
    for i in positions:
        for j in positions:
            if data[i] < data[j]:
                data[i], data[j] = data[j], data[i]
    return data


def _bubble(data: list) -> Iterator[BubbleStep]:
    """Bubble-sort ``data`` in place, yielding each comparison made."""
    size = len(data)
    for pass_index in range(size - 1):
        swapped_any = False
        for index in range(size - 1 - pass_index):
            left, right = data[index], data[index + 1]
            swapped = left > right
            if swapped:
                data[index], data[index + 1] = right, left
                swapped_any = True
            yield BubbleStep(pass_index + 1, index, left, right, swapped)
        if not swapped_any:
            return


def bubble_sort(items: Iterable) -> list:
    """Bubble sort that stops after the first pass without a swap."""
    data = list(items)
    for _ in _bubble(data):
        pass
    return data


def bubble_sort_steps(items: Iterable) -> Iterator[BubbleStep]:
    """Yield every comparison bubble sort makes on a copy of ``items``."""
    yield from _bubble(list(items))


def merge_sort(items: Iterable) -> list:
    """Stable top-down merge sort."""
    data = list(items)
    if len(data) < 2:
        return data
    middle = (len(data) - 1) // 2 + 1
    left = merge_sort(data[:middle])
    right = merge_sort(data[middle:])
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _partition(data: list, low: int, high: int) -> int:
    pivot = data[high]
    boundary = low - 1
    for index in range(low, high):
        if data[index] < pivot:
            boundary += 1
            data[boundary], data[index] = data[index], data[boundary]
    data[boundary + 1], data[high] = data[high], data[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable) -> list:
    """Quicksort using the last element of each range as pivot."""
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(data, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return data