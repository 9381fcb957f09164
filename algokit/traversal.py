"""Breadth-first and depth-first traversal of undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

__all__ = ["UndirectedGraph", "matrix_breadth_first"]


class UndirectedGraph:
    """An undirected graph on vertices ``0 .. vertex_count - 1`` held as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(
                f"vertex {vertex} is outside 0..{len(self._adjacency) - 1}"
            )

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        """Neighbours of ``vertex`` in the order their edges were added."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def describe(self) -> str:
        """One line per vertex listing its neighbours, newest edge first."""
        lines = []
        for vertex, adjacent in enumerate(self._adjacency):
            listing = " -> ".join(str(other) for other in reversed(adjacent))
            lines.append(f"Adjacency list of vertex {vertex}: {listing}".rstrip())
        return "\n".join(lines)

    def breadth_first(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order = []
        queue = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            for other in self._adjacency[current]:
                if other not in visited:
                    visited.add(other)
                    queue.append(other)
        return order

    def depth_first(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in depth-first order.

        Neighbours are explored newest edge first.
        """
        self._check(start)
        visited = {start}
        order = [start]
        stack: list[Iterator[int]] = [reversed(self._adjacency[start])]
        while stack:
            for other in stack[-1]:
                if other not in visited:
                    visited.add(other)
                    order.append(other)
                    stack.append(reversed(self._adjacency[other]))
                    break
            else:
                stack.pop()
        return order

    def is_bipartite(self, start: int = 0) -> bool:
        """Whether the component containing ``start`` can be two-coloured."""
        self._check(start)
        colours = {start: 1}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for other in self._adjacency[current]:
                if other not in colours:
                    colours[other] = 1 - colours[current]
                    queue.append(other)
                elif colours[other] == colours[current]:
                    return False
        return True


def matrix_breadth_first(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Breadth-first order over a square adjacency matrix; nonzero entries are edges."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"vertex {start} is outside 0..{size - 1}")
    visited = {start}
    order = []
    queue = deque([start])
    while queue:
        current = queue.popleft()
        order.append(current)
        for other, connected in enumerate(matrix[current]):
            if connected and other not in visited:
                visited.add(other)
                queue.append(other)
    return order