"""Minimum-cost maximum flow and the assignment problem."""

from __future__ import annotations

import heapq
import math


class _Edge:
    """A residual edge with a per-unit cost."""

    __slots__ = ("node", "rev", "capacity", "cost")

    def __init__(self, node: int, rev: int, capacity, cost) -> None:
        self.node = node
        self.rev = rev
        self.capacity = capacity
        self.cost = cost

    def __repr__(self) -> str:
        return f"_Edge(node={self.node}, capacity={self.capacity}, cost={self.cost})"


class MinCostFlow:
    """Successive shortest paths: Bellman-Ford first, Dijkstra with potentials once that gets expensive."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must be non-negative")
        self.vertices = vertices
        self.edge_count = 0
        self.adj: list[list[_Edge]] = [[] for _ in range(vertices)]
        self.too_much_bellman_ford = False
        self._dist: list = [math.inf] * vertices
        self._prev_edge: list = [None] * vertices

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.vertices:
            raise ValueError(f"node {node} out of range [0, {self.vertices})")

    def add_directional_edge(self, u: int, v: int, capacity, cost) -> None:
        """Add an edge from ``u`` to ``v`` with the given capacity and per-unit cost."""
        self._check_node(u)
        self._check_node(v)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        uv_edge = _Edge(v, len(self.adj[v]) + (1 if u == v else 0), capacity, cost)
        vu_edge = _Edge(u, len(self.adj[u]), 0, -cost)
        self.adj[u].append(uv_edge)
        self.adj[v].append(vu_edge)
        self.edge_count += 1

    def _reverse(self, edge: _Edge) -> _Edge:
        return self.adj[edge.node][edge.rev]

    def _bellman_ford(self, source: int, sink: int) -> bool:
        n = self.vertices
        dist = [math.inf] * n
        prev_edge = [None] * n
        dist[source] = 0
        last_seen = [-1] * n
        nodes = [source]
        work = 0

        for iteration in range(n):
            if not nodes:
                break
            next_nodes = []
            for node in nodes:
                for edge in self.adj[node]:
                    if edge.capacity > 0 and dist[node] + edge.cost < dist[edge.node]:
                        dist[edge.node] = dist[node] + edge.cost
                        prev_edge[edge.node] = edge
                        if last_seen[edge.node] != iteration:
                            last_seen[edge.node] = iteration
                            next_nodes.append(edge.node)
                work += len(self.adj[node])
            nodes = next_nodes

        self._dist = dist
        self._prev_edge = prev_edge

        if work > 1.75 * self.edge_count * n.bit_length() + 100:
            self.too_much_bellman_ford = True
            return False

        return prev_edge[sink] is not None

    def _dijkstra(self, source: int, sink: int) -> bool:
        dist = [math.inf] * self.vertices
        prev_edge = [None] * self.vertices
        dist[source] = 0
        heap = [(0, source)]

        while heap:
            top_dist, node = heapq.heappop(heap)
            if top_dist > dist[node]:
                continue
            for edge in self.adj[node]:
                if edge.capacity > 0:
                    candidate = top_dist + edge.cost
                    if candidate < dist[edge.node]:
                        dist[edge.node] = candidate
                        prev_edge[edge.node] = edge
                        heapq.heappush(heap, (candidate, edge.node))

        self._dist = dist
        self._prev_edge = prev_edge
        return prev_edge[sink] is not None

    def _reduce_cost(self) -> None:
        dist = self._dist
        for node, edges in enumerate(self.adj):
            if dist[node] == math.inf:
                continue
            for edge in edges:
                if dist[edge.node] < math.inf:
                    edge.cost += dist[node] - dist[edge.node]

    def _path_to(self, sink: int) -> list[_Edge]:
        path = []
        node = sink
        while (edge := self._prev_edge[node]) is not None:
            path.append(edge)
            node = self._reverse(edge).node
        return path

    def solve(self, source: int, sink: int, flow_goal=None) -> tuple:
        """Send up to ``flow_goal`` (unbounded if None) units at minimum cost; return (flow, cost)."""
        self._check_node(source)
        self._check_node(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        goal = math.inf if flow_goal is None else flow_goal
        total_flow = 0
        total_cost = 0
        reduce_sum = 0

        def augment() -> None:
            nonlocal total_flow, total_cost
            path = self._path_to(sink)
            path_cap = min(goal - total_flow, min(edge.capacity for edge in path))
            cost_sum = 0
            for edge in path:
                edge.capacity -= path_cap
                self._reverse(edge).capacity += path_cap
                cost_sum += edge.cost
            total_flow += path_cap
            total_cost += (reduce_sum + cost_sum) * path_cap

        while total_flow < goal and self._bellman_ford(source, sink):
            augment()

        if self.too_much_bellman_ford:
            found = self._prev_edge[sink] is not None
            while found and total_flow < goal:
                self._reduce_cost()
                reduce_sum += self._dist[sink]
                augment()
                found = total_flow < goal and self._dijkstra(source, sink)

        return total_flow, total_cost


def assignment_problem(costs) -> tuple:
    """Match rows to distinct columns, as many as possible, at minimum total cost.

    Returns the total cost and, for every row, its column or -1.
    """
    n = len(costs)
    m = len(costs[0]) if costs else 0
    if any(len(row) != m for row in costs):
        raise ValueError("all rows of the cost matrix must have the same length")

    source, sink = n + m, n + m + 1
    graph = MinCostFlow(n + m + 2)

    for i in range(n):
        graph.add_directional_edge(source, i, 1, 0)
    for j in range(m):
        graph.add_directional_edge(n + j, sink, 1, 0)
    for i, row in enumerate(costs):
        for j, cost in enumerate(row):
            graph.add_directional_edge(i, n + j, 1, cost)

    _, total = graph.solve(source, sink)
    assignment = [-1] * n
    for i in range(n):
        for edge in graph.adj[i]:
            if n <= edge.node < n + m and edge.capacity == 0:
                assignment[i] = edge.node - n

    return total, assignment