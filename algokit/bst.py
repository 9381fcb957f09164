"""Binary trees: traversals, levels and binary-search-tree insertion and deletion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "TreeNode",
    "preorder",
    "inorder",
    "postorder",
    "level_of",
    "bst_insert",
    "min_node",
    "bst_delete",
]


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(node: TreeNode | None) -> list:
    """Values in root, left, right order."""
    order = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        order.append(current.value)
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return order


def inorder(node: TreeNode | None) -> list:
    """Values in left, root, right order."""
    order = []
    stack: list[TreeNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        order.append(current.value)
        current = current.right
    return order


def postorder(node: TreeNode | None) -> list:
    """Values in left, right, root order."""
    order = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        order.append(current.value)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    order.reverse()
    return order


def level_of(node: TreeNode | None, value: Any) -> int | None:
    """Level of the first node holding ``value``, the root being level 1.

    Nodes are searched root first, then the left subtree before the right.
    Returns None when no node holds ``value``.
    """
    stack = [(node, 1)] if node is not None else []
    while stack:
        current, level = stack.pop()
        if current.value == value:
            return level
        if current.right is not None:
            stack.append((current.right, level + 1))
        if current.left is not None:
            stack.append((current.left, level + 1))
    return None


def bst_insert(node: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` into a binary search tree and return its root.

    Equal values go to the right.
    """
    new = TreeNode(value)
    if node is None:
        return new
    current = node
    while True:
        if value < current.value:
            if current.left is None:
                current.left = new
                return node
            current = current.left
        else:
            if current.right is None:
                current.right = new
                return node
            current = current.right


def min_node(node: TreeNode | None) -> TreeNode | None:
    """The leftmost node below and including ``node``."""
    current = node
    while current is not None and current.left is not None:
        current = current.left
    return current


def bst_delete(node: TreeNode | None, value: Any) -> TreeNode | None:
    """Remove one node holding ``value`` from a binary search tree and return its root.

    A node with two children takes the value of its in-order successor,
    which is then removed from the right subtree.
    """
    parent = None
    current = node
    while current is not None and current.value != value:
        parent = current
        current = current.left if value < current.value else current.right
    if current is None:
        return node
    if current.left is not None and current.right is not None:
        successor = min_node(current.right)
        current.value = successor.value
        current.right = bst_delete(current.right, successor.value)
        return node
    child = current.left if current.left is not None else current.right
    if parent is None:
        return child
    if parent.left is current:
        parent.left = child
    else:
        parent.right = child
    return node