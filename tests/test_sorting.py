import functools
import random

import pytest

from algokit.sorting import (
    BubbleStep,
    bubble_sort,
    bubble_sort_steps,
    exchange_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)

_rng = random.Random(1234)

DATASETS = [
    [],
    [42],
    [12, 11, 13, 5, 6],
    [1, 12, 9, 5, 6, 10],
    [14, 7, 10, 3, 21, 18, 15],
    [9, 8, 3, 4, 1, 2, 7, 5, 6],
    [12, 11, 13, 5, 6, 7],
    [10, 7, 8, 9, 1, 5],
    [1, 8, 4, 6, 0, 3, 5, 2, 7, 9],
    [5, -3, 0, -3, 5, 5, 2],
    list(range(20)),
    list(range(20, 0, -1)),
    [_rng.randint(-100, 100) for _ in range(200)],
]


@pytest.mark.parametrize("data", DATASETS)
def test_sorts_match_builtin(data):
    expected = sorted(data)
    assert heap_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert shell_sort(data) == expected
    assert exchange_sort(data) == expected
    assert bubble_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected


def test_source_examples():
    assert insertion_sort([12, 11, 13, 5, 6]) == [5, 6, 11, 12, 13]
    assert heap_sort([1, 12, 9, 5, 6, 10]) == [1, 5, 6, 9, 10, 12]
    assert selection_sort([14, 7, 10, 3, 21, 18, 15]) == [3, 7, 10, 14, 15, 18, 21]
    assert exchange_sort([9, 8, 3, 4, 1, 2, 7, 5, 6]) == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert merge_sort([12, 11, 13, 5, 6, 7]) == [5, 6, 7, 11, 12, 13]
    assert quick_sort([10, 7, 8, 9, 1, 5]) == [1, 5, 7, 8, 9, 10]
    assert bubble_sort([1, 8, 4, 6, 0, 3, 5, 2, 7, 9]) == list(range(10))


def test_input_is_not_modified():
    data = [3, 1, 2, 9, 0]
    original = list(data)
    expected = [0, 1, 2, 3, 9]
    assert heap_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert shell_sort(data) == expected
    assert exchange_sort(data) == expected
    assert bubble_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert data == original


def test_accepts_any_iterable():
    values = (7, 3, 5, 1)
    expected = [1, 3, 5, 7]
    assert heap_sort(iter(values)) == expected
    assert insertion_sort(iter(values)) == expected
    assert selection_sort(iter(values)) == expected
    assert shell_sort(iter(values)) == expected
    assert exchange_sort(iter(values)) == expected
    assert bubble_sort(iter(values)) == expected
    assert merge_sort(iter(values)) == expected
    assert quick_sort(iter(values)) == expected


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana", "apple"]
    expected = ["apple", "apple", "banana", "fig", "pear"]
    assert heap_sort(words) == expected
    assert insertion_sort(words) == expected
    assert selection_sort(words) == expected
    assert shell_sort(words) == expected
    assert exchange_sort(words) == expected
    assert bubble_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected


@functools.total_ordering
class _Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __eq__(self, other):
        return self.key == other.key

    def __lt__(self, other):
        return self.key < other.key


def test_merge_sort_is_stable():
    items = [_Keyed(k, tag) for tag, k in enumerate([3, 1, 3, 2, 1, 3, 2])]
    result = merge_sort(items)
    assert [item.key for item in result] == sorted(item.key for item in items)
    for first, second in zip(result, result[1:]):
        if first.key == second.key:
            assert first.tag < second.tag


def test_bubble_steps_on_sorted_input_make_one_pass():
    data = list(range(8))
    steps = list(bubble_sort_steps(data))
    assert len(steps) == len(data) - 1
    assert all(step.pass_number == 1 for step in steps)
    assert not any(step.swapped for step in steps)


def test_bubble_steps_swap_count_equals_inversions():
    data = [1, 8, 4, 6, 0, 3, 5, 2, 7, 9]
    inversions = sum(
        1 for i, a in enumerate(data) for b in data[i + 1 :] if a > b
    )
    steps = list(bubble_sort_steps(data))
    assert sum(step.swapped for step in steps) == inversions


def test_bubble_steps_record_compared_values():
    steps = list(bubble_sort_steps([2, 1]))
    assert steps == [BubbleStep(1, 0, 2, 1, True)]


def test_bubble_steps_flag_matches_comparison():
    for step in bubble_sort_steps([5, -3, 0, -3, 5, 5, 2]):
        assert step.swapped == (step.left > step.right)


def test_bubble_steps_do_not_modify_input():
    data = [3, 2, 1]
    list(bubble_sort_steps(data))
    assert data == [3, 2, 1]


def test_bubble_steps_empty_input():
    assert list(bubble_sort_steps([])) == []