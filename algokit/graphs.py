"""Bipartiteness check and topological sorting."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


class BipartiteChecker:
    """Checks whether an undirected graph is bipartite.

    After a successful ``solve``, ``components`` holds one pair of vertex lists
    per connected component: the two sides of that component.
    """

    def __init__(self, v: int = 0) -> None:
        if v < 0:
            raise ValueError("number of vertices must be non-negative")
        self.vertices = v
        self.adj: list[list[int]] = [[] for _ in range(v)]
        self.components: list[tuple[list[int], list[int]]] = []

    def add_edge(self, a: int, b: int) -> None:
        """Add an undirected edge between ``a`` and ``b``."""
        for node in (a, b):
            if not 0 <= node < self.vertices:
                raise ValueError(f"node {node} out of range [0, {self.vertices})")
        self.adj[a].append(b)
        self.adj[b].append(a)

    def solve(self) -> bool:
        """Return True iff the graph is bipartite, filling ``components`` on the way."""
        depth = [-1] * self.vertices
        self.components = []

        for start in range(self.vertices):
            if depth[start] >= 0:
                continue
            sides: tuple[list[int], list[int]] = ([], [])
            self.components.append(sides)
            depth[start] = 0
            sides[0].append(start)
            frames = [(start, -1, iter(self.adj[start]))]

            while frames:
                node, parent, neighbours = frames[-1]
                for neighbour in neighbours:
                    if neighbour == parent:
                        continue
                    if depth[neighbour] < 0:
                        depth[neighbour] = depth[node] + 1
                        sides[depth[neighbour] % 2].append(neighbour)
                        frames.append((neighbour, node, iter(self.adj[neighbour])))
                        break
                    if depth[node] % 2 == depth[neighbour] % 2:
                        return False
                else:
                    frames.pop()

        return True


def topological_sort(adj: Sequence[Sequence[int]]) -> list[int]:
    """Return the nodes in a topological order.

    If the graph has a cycle, the result is shorter than the number of nodes.
    """
    in_degree = [0] * len(adj)
    for neighbours in adj:
        for neighbour in neighbours:
            in_degree[neighbour] += 1

    queue = deque(node for node, degree in enumerate(in_degree) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            in_degree[neighbour] -= 1
            if in_degree[neighbour] == 0:
                queue.append(neighbour)

    return order