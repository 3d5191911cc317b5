"""Minimum spanning tree of points under the Manhattan (L1) metric."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class MSTEdge:
    """An edge between two input points, identified by their positions."""

    index1: int
    index2: int
    dist: int


class _UnionFind:
    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, x: int) -> int:
        parent = self._parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def unite(self, x: int, y: int) -> bool:
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._size[x] < self._size[y]:
            x, y = y, x
        self._parent[y] = x
        self._size[x] += self._size[y]
        return True


# Internal points are (x, y, index) tuples.
_Pt = tuple[int, int, int]


def _has_better_sum(a: _Pt | None, b: _Pt | None) -> bool:
    if a is None:
        return False
    if b is None:
        return True
    return a[0] + a[1] < b[0] + b[1]


def _solve(points: list[_Pt], closest: list[_Pt | None], start: int, end: int) -> None:
    """For each point find the smallest x + y point above it in its right octant.

    Also merge-sorts the range by y - x.
    """
    if end - start <= 1:
        return

    mid = (start + end) // 2
    _solve(points, closest, start, mid)
    _solve(points, closest, mid, end)

    right = mid
    min_sum: _Pt | None = None
    merged_points: list[_Pt] = []
    merged_closest: list[_Pt | None] = []

    for i in range(start, mid):
        p = points[i]
        while right < end and points[right][1] - points[right][0] <= p[1] - p[0]:
            q = points[right]
            merged_points.append(q)
            merged_closest.append(closest[right])
            if _has_better_sum(q, min_sum):
                min_sum = q
            right += 1

        if _has_better_sum(min_sum, closest[i]):
            closest[i] = min_sum

        merged_points.append(p)
        merged_closest.append(closest[i])

    count = len(merged_points)
    points[start:start + count] = merged_points
    closest[start:start + count] = merged_closest


def manhattan_mst(points: Iterable[tuple[int, int]]) -> list[MSTEdge]:
    """Return the edges of a minimum spanning tree of ``points`` under L1 distance.

    Edges refer to points by their position in the input and come in
    non-decreasing order of distance.
    """
    pts: list[_Pt] = [(x, y, i) for i, (x, y) in enumerate(points)]
    n = len(pts)
    edges: list[MSTEdge] = []

    # One candidate per point in each of the four octants on its right.
    for rep in range(4):
        pts.sort(key=lambda p: (p[1], p[0]))
        closest: list[_Pt | None] = [None] * n
        _solve(pts, closest, 0, n)

        for p, c in zip(pts, closest):
            if c is not None:
                edges.append(MSTEdge(p[2], c[2], abs(p[0] - c[0]) + abs(p[1] - c[1])))

        if rep % 2 == 0:
            pts = [(y, x, i) for x, y, i in pts]
        else:
            pts = [(-y, x, i) for x, y, i in pts]

    edges.sort(key=lambda e: e.dist)
    union_find = _UnionFind(n)
    return [e for e in edges if union_find.unite(e.index1, e.index2)]