"""A singly linked list and array reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any

__all__ = ["LinkedList", "reverse_array"]


@dataclass(eq=False, slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list; iteration runs from the head."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.push(value)

    def push(self, value: Any) -> None:
        """Put ``value`` at the head of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def nth_from_end(self, n: int) -> Any:
        """Value of the ``n``-th node counting from the tail, the tail being 1."""
        if not 1 <= n <= self._size:
            raise IndexError(f"position {n} from the end is outside a list of {self._size}")
        return next(islice(self, self._size - n, None))


def reverse_array(items: Iterable) -> list:
    """Return the items in reverse order as a new list."""
    return list(items)[::-1]