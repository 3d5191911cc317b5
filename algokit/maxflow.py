"""Maximum flow and minimum cut using Dinic's algorithm."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from enum import Enum


class EdgeType(Enum):
    """Kind of a residual edge."""

    DIRECTIONAL = 0
    DIRECTIONAL_REVERSE = 1
    BIDIRECTIONAL = 2


class _Edge:
    """A residual edge stored in the adjacency list of its tail."""

    __slots__ = ("node", "rev", "capacity", "type")

    def __init__(self, node: int, rev: int, capacity, edge_type: EdgeType) -> None:
        self.node = node
        self.rev = rev
        self.capacity = capacity
        self.type = edge_type

    def __repr__(self) -> str:
        return f"_Edge(node={self.node}, capacity={self.capacity}, type={self.type.name})"


@dataclass(frozen=True)
class CutEdge:
    """An edge of a minimum cut with its original capacity."""

    capacity: int
    from_node: int
    to_node: int


class Dinic:
    """A flow network solved with Dinic's blocking-flow algorithm.

    Calling ``flow`` again continues from the current residual graph, which
    allows incremental or reversed flows after the graph is modified.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must be non-negative")
        self.vertices = vertices
        self.adj: list[list[_Edge]] = [[] for _ in range(vertices)]
        self._dist: list[int] = []
        self._flow_called = False

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.vertices:
            raise ValueError(f"node {node} out of range [0, {self.vertices})")

    def _add_edge(self, u, v, capacity1, capacity2, type1, type2) -> None:
        self._check_node(u)
        self._check_node(v)
        if capacity1 < 0 or capacity2 < 0:
            raise ValueError("capacities must be non-negative")
        uv_edge = _Edge(v, len(self.adj[v]) + (1 if u == v else 0), capacity1, type1)
        vu_edge = _Edge(u, len(self.adj[u]), capacity2, type2)
        self.adj[u].append(uv_edge)
        self.adj[v].append(vu_edge)

    def add_directional_edge(self, u: int, v: int, capacity) -> None:
        """Add an edge from ``u`` to ``v``."""
        self._add_edge(u, v, capacity, 0, EdgeType.DIRECTIONAL, EdgeType.DIRECTIONAL_REVERSE)

    def add_bidirectional_edge(self, u: int, v: int, capacity) -> None:
        """Add an undirected edge between ``u`` and ``v``."""
        self._add_edge(u, v, capacity, capacity, EdgeType.BIDIRECTIONAL, EdgeType.BIDIRECTIONAL)

    def _reverse(self, edge: _Edge) -> _Edge:
        return self.adj[edge.node][edge.rev]

    def _bfs(self, source: int, sink: int) -> bool:
        dist = [-1] * self.vertices
        dist[source] = 0
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for edge in self.adj[node]:
                if edge.capacity > 0 and dist[edge.node] < 0:
                    dist[edge.node] = dist[node] + 1
                    queue.append(edge.node)
        self._dist = dist
        return dist[sink] >= 0

    def _blocking_flow(self, source: int, sink: int, limit):
        dist = self._dist
        sink_dist = dist[sink]
        pointer = [0] * self.vertices
        total = 0

        while limit > 0:
            path: list[_Edge] = []
            node = source
            while node != sink:
                edges = self.adj[node]
                advanced = False
                while pointer[node] < len(edges):
                    edge = edges[pointer[node]]
                    if (
                        edge.capacity > 0
                        and dist[edge.node] == dist[node] + 1
                        and dist[edge.node] <= sink_dist
                    ):
                        path.append(edge)
                        node = edge.node
                        advanced = True
                        break
                    pointer[node] += 1
                if advanced:
                    continue
                if node == source:
                    return total
                dead_edge = path.pop()
                node = self._reverse(dead_edge).node
                pointer[node] += 1

            bottleneck = min(limit, min(edge.capacity for edge in path))
            for edge in path:
                edge.capacity -= bottleneck
                self._reverse(edge).capacity += bottleneck
            total += bottleneck
            limit -= bottleneck

        return total

    def flow(self, source: int, sink: int, flow_cap=None):
        """Push up to ``flow_cap`` (unbounded if None) units from source to sink; return the amount pushed."""
        self._check_node(source)
        self._check_node(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        self._flow_called = True
        limit = math.inf if flow_cap is None else flow_cap
        total = 0

        while limit > 0 and self._bfs(source, sink):
            increment = self._blocking_flow(source, sink, limit)
            if increment <= 0:
                break
            total += increment
            limit -= increment

        return total

    def _reachable(self, source: int) -> list[bool]:
        reachable = [False] * self.vertices
        reachable[source] = True
        stack = [source]
        while stack:
            node = stack.pop()
            for edge in self.adj[node]:
                if edge.capacity > 0 and not reachable[edge.node]:
                    reachable[edge.node] = True
                    stack.append(edge.node)
        return reachable

    def min_cut(self, source: int) -> list[CutEdge]:
        """Return the edges of a minimum cut separating ``source`` after ``flow``."""
        if not self._flow_called:
            raise RuntimeError("flow must be computed before the minimum cut")
        self._check_node(source)
        reachable = self._reachable(source)
        cut = []
        for node, edges in enumerate(self.adj):
            if not reachable[node]:
                continue
            for edge in edges:
                if not reachable[edge.node] and edge.type is not EdgeType.DIRECTIONAL_REVERSE:
                    rev_cap = self._reverse(edge).capacity
                    original = rev_cap // 2 if edge.type is EdgeType.BIDIRECTIONAL else rev_cap
                    cut.append(CutEdge(original, node, edge.node))
        return cut

    def find_edge(self, a: int, b: int):
        """Return the first residual edge from ``a`` to ``b``, or None."""
        self._check_node(a)
        return next((edge for edge in self.adj[a] if edge.node == b), None)