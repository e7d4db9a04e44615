"""Path, ancestor and spreading questions on a binary tree."""

from __future__ import annotations

import math
from collections import deque
from typing import Optional

from dsakit.node import Node


def k_sum_paths(root: Optional[Node], k: int) -> int:
    """Count downward paths whose values add up to k."""
    path: list[int] = []

    def walk(node: Optional[Node]) -> int:
        if node is None:
            return 0
        path.append(node.data)
        found = walk(node.left) + walk(node.right)
        total = 0
        for value in reversed(path):
            total += value
            if total == k:
                found += 1
        path.pop()
        return found

    return walk(root)


def kth_ancestor(root: Optional[Node], k: int, node: int) -> Optional[int]:
    """Value of the k-th ancestor of the first node holding `node`.

    Returns None when the node is absent or has fewer than k ancestors.
    A k of zero or less gives the parent.
    """
    remaining: float = k

    def search(current: Optional[Node]) -> Optional[Node]:
        nonlocal remaining
        if current is None:
            return None
        if current.data == node:
            return current
        left = search(current.left)
        right = search(current.right)
        found = left if right is None else right if left is None else None
        if found is None:
            return None
        remaining -= 1
        if remaining <= 0:
            remaining = math.inf
            return current
        return found

    answer = search(root)
    if answer is None or answer.data == node:
        return None
    return answer.data


def lca(root: Optional[Node], n1: int, n2: int) -> Optional[Node]:
    """Lowest common ancestor of the nodes holding n1 and n2.

    When only one of them is present, that node is returned; when neither is, None.
    """
    if root is None:
        return None
    if root.data in (n1, n2):
        return root
    left = lca(root.left, n1, n2)
    right = lca(root.right, n1, n2)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _parents_and_target(root: Node, target: int) -> tuple[dict[int, Optional[Node]], Optional[Node]]:
    parents: dict[int, Optional[Node]] = {id(root): None}
    found = None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.data == target:
            found = node
        for child in (node.left, node.right):
            if child is not None:
                parents[id(child)] = node
                queue.append(child)
    return parents, found


def min_burn_time(root: Optional[Node], target: int) -> int:
    """Steps for fire starting at `target` to reach every node.

    Fire spreads each step to a node's children and parent. When several nodes
    hold the target value, the last one in level order is the start.
    """
    if root is None:
        raise ValueError("cannot burn an empty tree")
    parents, start = _parents_and_target(root, target)
    if start is None:
        raise ValueError(f"no node holds {target}")
    burned = {id(start)}
    frontier = [start]
    steps = 0
    while frontier:
        next_frontier = []
        for node in frontier:
            for neighbour in (node.left, node.right, parents[id(node)]):
                if neighbour is not None and id(neighbour) not in burned:
                    burned.add(id(neighbour))
                    next_frontier.append(neighbour)
        if next_frontier:
            steps += 1
        frontier = next_frontier
    return steps


def flatten(root: Optional[Node]) -> None:
    """Rearrange the tree in place into a right-leaning list in preorder."""
    current = root
    while current is not None:
        if current.left is not None:
            predecessor = current.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            predecessor.right = current.right
            current.right = current.left
            current.left = None
        current = current.right