"""Adjacency-list graphs, traversals and cycle detection."""

from __future__ import annotations

from collections import deque
from typing import Generic, Hashable, Sequence, TypeVar

T = TypeVar("T", bound=Hashable)

Adjacency = Sequence[Sequence[int]]


class Graph(Generic[T]):
    """A graph stored as a mapping from each node to its neighbours."""

    def __init__(self) -> None:
        self.adjacency: dict[T, list[T]] = {}

    def add_edge(self, u: T, v: T, directed: bool) -> None:
        """Add an edge from u to v, and back again unless directed."""
        self.adjacency.setdefault(u, []).append(v)
        if not directed:
            self.adjacency.setdefault(v, []).append(u)

    def render(self) -> str:
        """One line per node: the node, an arrow, then its neighbours."""
        return "".join(
            f"{node} ->" + "".join(f"{neighbour}, " for neighbour in neighbours) + "\n"
            for node, neighbours in self.adjacency.items()
        )


def bfs(adjacency: Adjacency) -> list[int]:
    """Breadth-first order of the nodes reachable from node 0."""
    if not adjacency:
        return []
    visited = {0}
    queue = deque([0])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Adjacency, start: int) -> list[int]:
    """Depth-first order of the nodes reachable from start."""
    if not 0 <= start < len(adjacency):
        raise ValueError(f"start node {start} is not in the graph")
    visited: set[int] = set()
    order = []
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        stack.extend(n for n in reversed(adjacency[node]) if n not in visited)
    return order


def has_cycle_dfs(adjacency: Adjacency) -> bool:
    """True when the undirected graph has a cycle, found depth first."""
    visited: set[int] = set()
    for source in range(len(adjacency)):
        if source in visited:
            continue
        visited.add(source)
        stack = [(source, -1, iter(adjacency[source]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def has_cycle_bfs(adjacency: Adjacency) -> bool:
    """True when the undirected graph has a cycle, found breadth first."""
    visited: set[int] = set()
    for source in range(len(adjacency)):
        if source in visited:
            continue
        visited.add(source)
        queue = deque([(source, -1)])
        while queue:
            node, parent = queue.popleft()
            for neighbour in adjacency[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append((neighbour, node))
                elif neighbour != parent:
                    return True
    return False