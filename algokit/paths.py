"""Shortest paths and minimum spanning trees."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = ["Edge", "NegativeCycleError", "bellman_ford", "dijkstra", "prim_mst"]


@dataclass(frozen=True, slots=True)
class Edge:
    """A weighted edge from ``source`` to ``target``."""

    source: int
    target: int
    weight: float


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def _square(matrix: Sequence[Sequence[float]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge], source: int
) -> list[float]:
    """Distances from ``source`` over directed weighted edges.

    Unreachable vertices get ``math.inf``. Raises NegativeCycleError if a
    negative cycle is reachable from ``source``.
    """
    if not 0 <= source < vertex_count:
        raise IndexError(f"source {source} is outside 0..{vertex_count - 1}")
    edge_list = list(edges)
    for edge in edge_list:
        for end in (edge.source, edge.target):
            if not 0 <= end < vertex_count:
                raise IndexError(f"edge endpoint {end} is outside the graph")
    distances = [math.inf] * vertex_count
    distances[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for edge in edge_list:
            start = distances[edge.source]
            if start != math.inf and start + edge.weight < distances[edge.target]:
                distances[edge.target] = start + edge.weight
                changed = True
        if not changed:
            break
    for edge in edge_list:
        start = distances[edge.source]
        if start != math.inf and start + edge.weight < distances[edge.target]:
            raise NegativeCycleError("graph contains a negative weight cycle")
    return distances


def dijkstra(matrix: Sequence[Sequence[float]], source: int) -> list[float]:
    """Distances from ``source`` over an adjacency matrix; zero means no edge.

    Unreachable vertices get ``math.inf``.
    """
    size = _square(matrix)
    if not 0 <= source < size:
        raise IndexError(f"source {source} is outside 0..{size - 1}")
    distances = [math.inf] * size
    distances[source] = 0
    pending = set(range(size))
    while pending:
        current = min(pending, key=distances.__getitem__)
        pending.remove(current)
        if distances[current] == math.inf:
            break
        for other in pending:
            weight = matrix[current][other]
            if weight and distances[current] + weight < distances[other]:
                distances[other] = distances[current] + weight
    return distances


def prim_mst(matrix: Sequence[Sequence[float]]) -> list[Edge]:
    """Minimum spanning tree of a connected graph given as an adjacency matrix.

    Zero entries mean no edge. Returns one edge per vertex other than 0,
    from its parent in the tree to the vertex, ordered by vertex.
    """
    size = _square(matrix)
    if size == 0:
        return []
    keys = [math.inf] * size
    parents: list[int | None] = [None] * size
    keys[0] = 0
    outside = set(range(size))
    while outside:
        current = min(outside, key=keys.__getitem__)
        if keys[current] == math.inf:
            raise ValueError("graph is not connected")
        outside.remove(current)
        for other in outside:
            weight = matrix[current][other]
            if weight and weight < keys[other]:
                keys[other] = weight
                parents[other] = current
    return [
        Edge(parent, vertex, matrix[vertex][parent])
        for vertex, parent in enumerate(parents)
        if parent is not None
    ]