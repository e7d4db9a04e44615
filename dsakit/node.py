"""Binary tree nodes and builders that read node values from a stream of integers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

NULL_MARKER = -1
"""Input value that stands for a missing child."""


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _take(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None


def create_tree(values: Iterable[int]) -> Optional[Node]:
    """Build a tree from values in preorder, where -1 marks a missing child."""
    stream = iter(values)

    def build() -> Optional[Node]:
        value = _take(stream)
        if value == NULL_MARKER:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_from_level_order(values: Iterable[int]) -> Node:
    """Build a tree from values in level order, where -1 marks a missing child.

    The first value always becomes the root.
    """
    stream = iter(values)
    root = Node(_take(stream))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = _take(stream)
        if left != NULL_MARKER:
            node.left = Node(left)
            pending.append(node.left)
        right = _take(stream)
        if right != NULL_MARKER:
            node.right = Node(right)
            pending.append(node.right)
    return root