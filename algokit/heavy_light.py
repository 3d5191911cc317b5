"""Heavy-light decomposition supporting path and subtree updates and queries."""

from __future__ import annotations

from collections.abc import Callable

from .segment_tree import Segment, SegmentChange, SegTree


class SubtreeHeavyLight:
    """Path and subtree operations on a forest of ``n`` nodes.

    In vertex mode values live on nodes. Otherwise each node ``v`` holds the
    value of the edge from ``v`` to its parent. Each tree is rooted at its
    lowest-numbered node. Call ``build`` after adding all edges.
    """

    def __init__(self, n: int = 0, vertex_mode: bool = False) -> None:
        if n < 0:
            raise ValueError("number of nodes must be non-negative")
        self.n = n
        self.vertex_mode = vertex_mode
        self.adj: list[list[int]] = [[] for _ in range(n)]
        self.children: list[list[int]] = [[] for _ in range(n)]
        self.parent = [-1] * n
        self.depth = [0] * n
        self.subtree_size = [1] * n
        self.tour_start = [0] * n
        self.tour_end = [0] * n
        self.chain_root = list(range(n))
        self.full_tree = SegTree(n)

    def add_edge(self, a: int, b: int) -> None:
        """Connect nodes ``a`` and ``b``."""
        for node in (a, b):
            if not 0 <= node < self.n:
                raise ValueError(f"node {node} out of range [0, {self.n})")
        self.adj[a].append(b)
        self.adj[b].append(a)

    def build(self, initial: Segment) -> None:
        """Root the forest, decompose it and fill every position with ``initial``."""
        n = self.n
        self.parent = [-1] * n
        self.depth = [0] * n
        self.subtree_size = [1] * n
        self.children = [[] for _ in range(n)]
        visited = [False] * n
        tour = 0

        for root in range(n):
            if visited[root]:
                continue
            visited[root] = True
            order = [root]
            stack = [root]
            while stack:
                node = stack.pop()
                for neighbour in self.adj[node]:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        self.parent[neighbour] = node
                        self.depth[neighbour] = self.depth[node] + 1
                        self.children[node].append(neighbour)
                        stack.append(neighbour)
                        order.append(neighbour)

            for node in reversed(order):
                if self.parent[node] >= 0:
                    self.subtree_size[self.parent[node]] += self.subtree_size[node]
            for node in order:
                self.children[node].sort(key=lambda c: -self.subtree_size[c])

            chain_stack = [(root, False)]
            while chain_stack:
                node, heavy = chain_stack.pop()
                self.chain_root[node] = self.chain_root[self.parent[node]] if heavy else node
                self.tour_start[node] = tour
                self.tour_end[node] = tour + self.subtree_size[node]
                tour += 1
                kids = self.children[node]
                for index in range(len(kids) - 1, -1, -1):
                    chain_stack.append((kids[index], index == 0))

        self.full_tree = SegTree(n)
        self.full_tree.build([initial] * n)

    def _offset(self) -> int:
        return 0 if self.vertex_mode else 1

    def query_subtree(self, v: int) -> Segment:
        """Summarise the values in the subtree of ``v``."""
        return self.full_tree.query(self.tour_start[v] + self._offset(), self.tour_end[v])

    def update_subtree(self, v: int, change: SegmentChange) -> None:
        """Apply ``change`` to every value in the subtree of ``v``."""
        self.full_tree.update(self.tour_start[v] + self._offset(), self.tour_end[v], change)

    def _process_path(self, u: int, v: int, op: Callable[[int, int], None]) -> int:
        chain_root, depth, tour_start = self.chain_root, self.depth, self.tour_start
        while chain_root[u] != chain_root[v]:
            # Always climb the chain whose root is deeper.
            if depth[chain_root[u]] > depth[chain_root[v]]:
                u, v = v, u
            root = chain_root[v]
            op(tour_start[root], tour_start[v] + 1)
            v = self.parent[root]
            if v < 0:
                raise ValueError("nodes are in different trees")
        if depth[u] > depth[v]:
            u, v = v, u
        op(tour_start[u] + self._offset(), tour_start[v] + 1)
        return u

    def get_lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        return self._process_path(u, v, lambda a, b: None)

    def query_path(self, u: int, v: int) -> Segment:
        """Summarise the values on the path between ``u`` and ``v``."""
        answer = Segment()

        def collect(a: int, b: int) -> None:
            nonlocal answer
            answer = answer.join(self.full_tree.query(a, b))

        self._process_path(u, v, collect)
        return answer

    def update_path(self, u: int, v: int, change: SegmentChange) -> None:
        """Apply ``change`` to every value on the path between ``u`` and ``v``."""
        self._process_path(u, v, lambda a, b: self.full_tree.update(a, b, change))

    def update_single(self, v: int, seg: Segment) -> None:
        """Replace the value of node ``v`` (or of the edge above it) with ``seg``."""
        self.full_tree.update_single(self.tour_start[v], seg)