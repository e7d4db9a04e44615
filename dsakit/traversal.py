"""Depth-first, breadth-first and threaded traversals of a binary tree."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from dsakit.node import Node


def _inorder(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def inorder(root: Optional[Node]) -> list[int]:
    """Values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: Optional[Node]) -> list[int]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: Optional[Node]) -> list[int]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def _levels(root: Optional[Node]) -> Iterator[list[Node]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child is not None]


def level_order(root: Optional[Node]) -> list[list[int]]:
    """Values grouped by depth, each level left to right."""
    return [[node.data for node in level] for level in _levels(root)]


def morris_inorder(root: Optional[Node]) -> list[int]:
    """Inorder values using temporary threads instead of a stack.

    The tree is restored to its original shape when the walk ends.
    """
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.data)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            result.append(current.data)
            current = current.right
    return result


def reverse_level_order(root: Optional[Node]) -> list[int]:
    """Breadth-first visiting order, reversed."""
    if root is None:
        return []
    visited = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        visited.append(node.data)
        if node.left:
            queue.append(node.left)
        if node.right:
            queue.append(node.right)
    return visited[::-1]


def zigzag(root: Optional[Node]) -> list[int]:
    """Level order with every other level read right to left, starting left to right."""
    result = []
    for depth, level in enumerate(level_order(root)):
        result.extend(level if depth % 2 == 0 else reversed(level))
    return result