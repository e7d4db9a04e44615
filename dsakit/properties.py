"""Measures and checks over a whole binary tree."""

from __future__ import annotations

from typing import Optional

from dsakit.node import Node


def height(root: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _diameter_and_height(node: Optional[Node]) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_diameter, left_height = _diameter_and_height(node.left)
    right_diameter, right_height = _diameter_and_height(node.right)
    through_node = left_height + right_height + 1
    return (
        max(left_diameter, right_diameter, through_node),
        max(left_height, right_height) + 1,
    )


def diameter(root: Optional[Node]) -> int:
    """Number of nodes on the longest path between any two nodes."""
    return _diameter_and_height(root)[0]


def _balanced_and_height(node: Optional[Node]) -> tuple[bool, int]:
    if node is None:
        return True, 0
    left_ok, left_height = _balanced_and_height(node.left)
    right_ok, right_height = _balanced_and_height(node.right)
    balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
    return balanced, max(left_height, right_height) + 1


def is_balanced(root: Optional[Node]) -> bool:
    """True when every node's subtrees differ in height by at most one."""
    return _balanced_and_height(root)[0]


def is_identical(first: Optional[Node], second: Optional[Node]) -> bool:
    """True when both trees have the same shape and the same values."""
    if first is None or second is None:
        return first is None and second is None
    return (
        first.data == second.data
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def _sum_tree_total(node: Optional[Node]) -> Optional[int]:
    """Sum of the subtree's values, or None when it is not a sum tree."""
    if node is None:
        return 0
    if node.is_leaf:
        return node.data
    left = _sum_tree_total(node.left)
    if left is None:
        return None
    right = _sum_tree_total(node.right)
    if right is None or node.data != left + right:
        return None
    return 2 * node.data


def is_sum_tree(root: Optional[Node]) -> bool:
    """True when every non-leaf node equals the sum of both its subtrees."""
    return _sum_tree_total(root) is not None


def count_leaves(root: Optional[Node]) -> int:
    """Number of nodes without children."""
    if root is None:
        return 0
    if root.is_leaf:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def _longest_path(node: Optional[Node]) -> tuple[int, int]:
    if node is None:
        return 0, 0
    length, total = max(_longest_path(node.left), _longest_path(node.right))
    return length + 1, total + node.data


def longest_path_sum(root: Optional[Node]) -> int:
    """Sum of the longest root-to-leaf path; among equally long paths the largest sum.

    An empty tree gives 0.
    """
    return _longest_path(root)[1]


def _with_and_without(node: Optional[Node]) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_with, left_without = _with_and_without(node.left)
    right_with, right_without = _with_and_without(node.right)
    including = node.data + left_without + right_without
    excluding = max(left_with, left_without) + max(right_with, right_without)
    return including, excluding


def max_non_adjacent_sum(root: Optional[Node]) -> int:
    """Largest sum of values chosen so that no chosen node is a parent of another."""
    return max(_with_and_without(root))