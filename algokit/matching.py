"""Maximum bipartite matching with Hopcroft-Karp style phases."""

from __future__ import annotations

from collections import deque

_INF = float("inf")


class BipartiteMatching:
    """Maximum matching between ``n`` left nodes and ``m`` right nodes.

    After ``match`` runs, ``partner_of_left[i]`` is the right node matched to
    left node ``i`` and ``partner_of_right[j]`` the left node matched to right
    node ``j``, or -1 where there is none.
    """

    def __init__(self, n: int = 0, m: int = 0) -> None:
        if n < 0 or m < 0:
            raise ValueError("side sizes must be non-negative")
        self.n = n
        self.m = m
        self.adj: list[list[int]] = [[] for _ in range(n)]
        self.partner_of_left: list[int] = [-1] * n
        self.partner_of_right: list[int] = [-1] * m
        self.matches = 0
        self._match_called = False
        self._dist: list[float] = []
        self._edge_index: list[int] = []

    def add_edge(self, a: int, b: int) -> None:
        """Connect left node ``a`` with right node ``b``."""
        if not 0 <= a < self.n:
            raise ValueError(f"left node {a} out of range [0, {self.n})")
        if not 0 <= b < self.m:
            raise ValueError(f"right node {b} out of range [0, {self.m})")
        self.adj[a].append(b)

    def _bfs(self) -> bool:
        dist = [_INF] * self.n
        queue = deque()
        for left in range(self.n):
            if self.partner_of_left[left] < 0:
                dist[left] = 0
                queue.append(left)

        has_path = False
        while queue:
            left = queue.popleft()
            for right in self.adj[left]:
                nxt = self.partner_of_right[right]
                if nxt < 0:
                    has_path = True
                elif dist[left] + 1 < dist[nxt]:
                    dist[nxt] = dist[left] + 1
                    queue.append(nxt)

        self._dist = dist
        return has_path

    def _augment(self, start: int) -> bool:
        dist = self._dist
        edge_index = self._edge_index
        stack = [start]
        rights: list[int] = []

        while stack:
            left = stack[-1]
            edges = self.adj[left]
            descended = False
            while edge_index[left] < len(edges):
                right = edges[edge_index[left]]
                edge_index[left] += 1
                nxt = self.partner_of_right[right]
                if nxt < 0:
                    rights.append(right)
                    for matched_left, matched_right in zip(stack, rights):
                        self.partner_of_right[matched_right] = matched_left
                        self.partner_of_left[matched_left] = matched_right
                    return True
                if dist[left] + 1 == dist[nxt]:
                    rights.append(right)
                    stack.append(nxt)
                    descended = True
                    break
            if descended:
                continue
            dist[left] = _INF
            stack.pop()
            if rights:
                rights.pop()

        return False

    def match(self) -> int:
        """Compute a maximum matching and return its size."""
        self._match_called = True
        self.partner_of_left = [-1] * self.n
        self.partner_of_right = [-1] * self.m
        self.matches = 0

        while self._bfs():
            self._edge_index = [0] * self.n
            for left in range(self.n):
                if self.partner_of_left[left] < 0 and self._augment(left):
                    self.matches += 1

        return self.matches

    def _solve_reachable(self) -> tuple[list[bool], list[bool]]:
        if not self._match_called:
            raise RuntimeError("match must be computed first")
        reach_left = [False] * self.n
        reach_right = [False] * self.m

        for start in range(self.n):
            if self.partner_of_left[start] >= 0 or reach_left[start]:
                continue
            reach_left[start] = True
            stack = [start]
            while stack:
                left = stack.pop()
                for right in self.adj[left]:
                    if right != self.partner_of_left[left] and not reach_right[right]:
                        reach_right[right] = True
                        nxt = self.partner_of_right[right]
                        if nxt >= 0 and not reach_left[nxt]:
                            reach_left[nxt] = True
                            stack.append(nxt)

        return reach_left, reach_right

    def min_vertex_cover(self) -> list[int]:
        """Return a minimum vertex cover; right node ``j`` appears as ``n + j``."""
        reach_left, reach_right = self._solve_reachable()
        cover = [i for i in range(self.n) if not reach_left[i]]
        cover.extend(self.n + j for j in range(self.m) if reach_right[j])
        return cover

    def max_independent_set(self) -> list[int]:
        """Return a maximum independent set; right node ``j`` appears as ``n + j``."""
        reach_left, reach_right = self._solve_reachable()
        independent = [i for i in range(self.n) if reach_left[i]]
        independent.extend(self.n + j for j in range(self.m) if not reach_right[j])
        return independent