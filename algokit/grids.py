"""Walks over two-dimensional grids: spiral order and a rat's path through a maze."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["spiral_order", "solve_maze"]


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list:
    """Elements of a rectangular matrix in clockwise spiral order from the top left."""
    if any(len(row) != len(matrix[0]) for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    order: list = []
    if not matrix:
        return order
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        order.extend(matrix[top][col] for col in range(left, right + 1))
        top += 1
        order.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            order.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return order


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path from the top-left to the bottom-right of a square maze.

    Cells holding 1 are open. The rat moves only down or right, trying down
    first. The destination cell is accepted whatever it holds. Returns a
    grid marking the path with 1, or None if there is no path.
    """
    size = len(maze)
    if any(len(row) != size for row in maze):
        raise ValueError("maze must be square")
    solution = [[0] * size for _ in range(size)]
    dead: set[tuple[int, int]] = set()

    def walk(x: int, y: int) -> bool:
        if x == size - 1 and y == size - 1:
            solution[x][y] = 1
            return True
        if x >= size or y >= size or maze[x][y] != 1 or (x, y) in dead:
            return False
        solution[x][y] = 1
        if walk(x + 1, y) or walk(x, y + 1):
            return True
        solution[x][y] = 0
        dead.add((x, y))
        return False

    return solution if walk(0, 0) else None