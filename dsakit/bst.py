"""Binary search tree operations on plain Node trees."""

from __future__ import annotations

import math
from itertools import islice
from typing import Iterable, Iterator, Optional, Sequence

from dsakit.node import NULL_MARKER, Node
from dsakit.traversal import inorder


def insert(root: Optional[Node], value: int) -> Node:
    """Insert a value and return the root; equal values go to the left."""
    if root is None:
        return Node(value)
    if value > root.data:
        root.right = insert(root.right, value)
    else:
        root.left = insert(root.left, value)
    return root


def build_bst(values: Iterable[int]) -> Optional[Node]:
    """Insert values one by one, stopping at the first -1."""
    root: Optional[Node] = None
    for value in values:
        if value == NULL_MARKER:
            break
        root = insert(root, value)
    return root


def min_node(root: Optional[Node]) -> Node:
    """The leftmost node of a non-empty tree."""
    if root is None:
        raise ValueError("an empty tree has no minimum")
    node = root
    while node.left is not None:
        node = node.left
    return node


def delete(root: Optional[Node], key: int) -> Optional[Node]:
    """Remove one node holding key and return the new root.

    A node with two children takes the smallest value of its right subtree.
    """
    if root is None:
        return None
    if root.data > key:
        root.left = delete(root.left, key)
        return root
    if root.data < key:
        root.right = delete(root.right, key)
        return root
    if root.left is None:
        return root.right
    if root.right is None:
        return root.left
    successor = min_node(root.right).data
    root.data = successor
    root.right = delete(root.right, successor)
    return root


def is_valid_bst(root: Optional[Node]) -> bool:
    """True when every node lies strictly between the bounds set by its ancestors."""

    def check(node: Optional[Node], low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.data < high:
            return False
        return check(node.left, low, node.data) and check(node.right, node.data, high)

    return check(root, -math.inf, math.inf)


def bst_from_preorder(preorder: Sequence[int]) -> Optional[Node]:
    """Rebuild a BST from its preorder values."""
    position = 0

    def build(low: float, high: float) -> Optional[Node]:
        nonlocal position
        if position >= len(preorder):
            return None
        value = preorder[position]
        if value < low or value > high:
            return None
        position += 1
        node = Node(value)
        node.left = build(low, value)
        node.right = build(value, high)
        return node

    return build(-math.inf, math.inf)


def _ascending(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield from _ascending(node.left)
        yield node.data
        yield from _ascending(node.right)


def kth_smallest(root: Optional[Node], k: int) -> Optional[int]:
    """The k-th smallest value counting from 1, or None when there is none."""
    if k < 1:
        return None
    return next(islice(_ascending(root), k - 1, None), None)


def lca_bst(root: Optional[Node], a: int, b: int) -> Optional[int]:
    """Value of the node where the search paths for a and b split; None for an empty tree."""
    node = root
    while node is not None:
        if node.data < a and node.data < b:
            node = node.right
        elif node.data > a and node.data > b:
            node = node.left
        else:
            return node.data
    return None


def balance(root: Optional[Node]) -> Optional[Node]:
    """A new height-balanced tree holding the inorder values of the given tree."""
    values = inorder(root)

    def build(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        middle = (start + end) // 2
        node = Node(values[middle])
        node.left = build(start, middle - 1)
        node.right = build(middle + 1, end)
        return node

    return build(0, len(values) - 1)