"""Views of a binary tree: side, top, bottom, vertical, diagonal and boundary."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterator, Optional

from dsakit.node import Node


def _side_view(root: Optional[Node], right_first: bool) -> list[int]:
    seen: list[int] = []

    def walk(node: Optional[Node], depth: int) -> None:
        if node is None:
            return
        if depth == len(seen):
            seen.append(node.data)
        first, second = (node.right, node.left) if right_first else (node.left, node.right)
        walk(first, depth + 1)
        walk(second, depth + 1)

    walk(root, 0)
    return seen


def left_view(root: Optional[Node]) -> list[int]:
    """The first node seen on each level from the left."""
    return _side_view(root, right_first=False)


def right_view(root: Optional[Node]) -> list[int]:
    """The first node seen on each level from the right."""
    return _side_view(root, right_first=True)


def _with_columns(root: Optional[Node]) -> Iterator[tuple[Node, int, int]]:
    """Breadth-first nodes with their horizontal distance and depth."""
    if root is None:
        return
    queue = deque([(root, 0, 0)])
    while queue:
        node, column, depth = queue.popleft()
        yield node, column, depth
        if node.left:
            queue.append((node.left, column - 1, depth + 1))
        if node.right:
            queue.append((node.right, column + 1, depth + 1))


def top_view(root: Optional[Node]) -> list[int]:
    """The first node met in each column, columns left to right."""
    columns: dict[int, int] = {}
    for node, column, _ in _with_columns(root):
        columns.setdefault(column, node.data)
    return [columns[c] for c in sorted(columns)]


def bottom_view(root: Optional[Node]) -> list[int]:
    """The last node met in each column, columns left to right."""
    columns: dict[int, int] = {}
    for node, column, _ in _with_columns(root):
        columns[column] = node.data
    return [columns[c] for c in sorted(columns)]


def vertical_order(root: Optional[Node]) -> list[int]:
    """Values column by column, each column top to bottom."""
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(lambda: defaultdict(list))
    for node, column, depth in _with_columns(root):
        columns[column][depth].append(node.data)
    return [
        value
        for column in sorted(columns)
        for depth in sorted(columns[column])
        for value in columns[column][depth]
    ]


def _flatten_diagonals(diagonals: dict[int, list[int]]) -> list[int]:
    return [value for key in sorted(diagonals) for value in diagonals[key]]


def diagonal(root: Optional[Node]) -> list[int]:
    """Values diagonal by diagonal, collected breadth first."""
    diagonals: defaultdict[int, list[int]] = defaultdict(list)
    if root is None:
        return []
    queue = deque([(root, 0)])
    while queue:
        node, slope = queue.popleft()
        diagonals[slope].append(node.data)
        if node.left:
            queue.append((node.left, slope + 1))
        if node.right:
            queue.append((node.right, slope))
    return _flatten_diagonals(diagonals)


def diagonal_recursive(root: Optional[Node]) -> list[int]:
    """Values diagonal by diagonal, collected depth first."""
    diagonals: defaultdict[int, list[int]] = defaultdict(list)

    def walk(node: Optional[Node], slope: int) -> None:
        if node is None:
            return
        diagonals[slope].append(node.data)
        walk(node.left, slope + 1)
        walk(node.right, slope)

    walk(root, 0)
    return _flatten_diagonals(diagonals)


def _left_edge(node: Optional[Node]) -> Iterator[int]:
    while node is not None and not node.is_leaf:
        yield node.data
        node = node.left if node.left else node.right


def _leaves(node: Optional[Node]) -> Iterator[int]:
    if node is None:
        return
    if node.is_leaf:
        yield node.data
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def _right_edge(node: Optional[Node]) -> Iterator[int]:
    edge = []
    while node is not None and not node.is_leaf:
        edge.append(node.data)
        node = node.right if node.right else node.left
    return reversed(edge)


def boundary(root: Optional[Node]) -> list[int]:
    """Anticlockwise boundary: root, left edge, leaves, then right edge bottom up."""
    if root is None:
        return []
    return [
        root.data,
        *_left_edge(root.left),
        *_leaves(root.left),
        *_leaves(root.right),
        *_right_edge(root.right),
    ]