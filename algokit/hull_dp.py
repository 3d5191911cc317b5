"""Convex hull tricks: maximum of linear functions a*x + b."""

from __future__ import annotations

from collections import deque

from sortedcontainers import SortedKeyList

from .point import Point, left_turn_strict


class DPHull:
    """Insert lines (a, b) and query max(a*x + b*y) in logarithmic time, in any order."""

    def __init__(self) -> None:
        self._points = SortedKeyList(key=lambda p: (p.x, p.y))

    def __len__(self) -> int:
        return len(self._points)

    def _bad(self, index: int) -> bool:
        pts = self._points
        if index <= 0 or index >= len(pts) - 1:
            return False
        return not left_turn_strict(pts[index + 1], pts[index], pts[index - 1])

    def insert(self, a: int, b: int) -> None:
        """Add the line a*x + b."""
        pts = self._points
        p = Point(a, b)
        i = pts.bisect_key_left((a, b))

        if i < len(pts) and pts[i].x == a:
            return

        if i > 0:
            prev = pts[i - 1]
            if prev.x == a:
                del pts[i - 1]
                i -= 1
            elif i < len(pts) and not left_turn_strict(pts[i], p, prev):
                return

        pts.add(p)

        while i > 0 and self._bad(i - 1):
            del pts[i - 1]
            i -= 1

        while self._bad(i + 1):
            del pts[i + 1]

    def query(self, x: int, y: int = 1) -> int:
        """Return the maximum of a*x + b*y over inserted lines; ``y`` must be positive."""
        pts = self._points
        if not pts:
            raise IndexError("query on an empty hull")
        if y <= 0:
            raise ValueError("y must be positive")

        lo, hi = 0, len(pts) - 1
        while lo < hi:
            mid = (lo + hi) // 2
            cur, nxt = pts[mid], pts[mid + 1]
            if (nxt.x - cur.x) * x + (nxt.y - cur.y) * y > 0:
                lo = mid + 1
            else:
                hi = mid

        best = pts[lo]
        return best.x * x + best.y * y


class MonotonicDPHull:
    """Amortised O(1) hull for non-decreasing slopes and non-decreasing query points."""

    def __init__(self) -> None:
        self._points: deque[Point] = deque()
        self._prev_x: int | None = None
        self._prev_y = 1

    def clear(self) -> None:
        """Remove all lines and forget previous queries."""
        self._points.clear()
        self._prev_x = None
        self._prev_y = 1

    def __len__(self) -> int:
        return len(self._points)

    def insert(self, a: int, b: int) -> None:
        """Add the line a*x + b; ``a`` must not be smaller than any earlier slope."""
        pts = self._points
        if pts and a < pts[-1].x:
            raise ValueError("slopes must be inserted in non-decreasing order")

        if pts and a == pts[-1].x:
            if b <= pts[-1].y:
                return
            pts.pop()

        p = Point(a, b)
        while len(pts) >= 2 and not left_turn_strict(p, pts[-1], pts[-2]):
            pts.pop()

        pts.append(p)

    def query(self, x: int, y: int = 1) -> int:
        """Return the maximum of a*x + b*y; x / y must not decrease between queries."""
        pts = self._points
        if not pts:
            raise IndexError("query on an empty hull")
        if y <= 0:
            raise ValueError("y must be positive")
        if self._prev_x is not None and x * self._prev_y < self._prev_x * y:
            raise ValueError("queries must be made in non-decreasing order")
        self._prev_x, self._prev_y = x, y

        while len(pts) >= 2 and (pts[1].x - pts[0].x) * x + (pts[1].y - pts[0].y) * y >= 0:
            pts.popleft()

        return pts[0].x * x + pts[0].y * y