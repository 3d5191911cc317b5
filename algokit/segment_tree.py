"""Lazy segment tree with range add, range assignment, maximum and sum."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import reduce


@dataclass(frozen=True)
class SegmentChange:
    """A pending range update: first assign ``to_set`` (if given), then add ``to_add``."""

    to_add: int = 0
    to_set: int | None = None

    def has_set(self) -> bool:
        """True if this change assigns a value."""
        return self.to_set is not None

    def has_change(self) -> bool:
        """True unless this is the identity change."""
        return self.has_set() or self.to_add != 0

    def combine(self, other: SegmentChange) -> SegmentChange:
        """Return the change equal to applying this one and then ``other``."""
        if other.has_set():
            return other
        return SegmentChange(self.to_add + other.to_add, self.to_set)


@dataclass(frozen=True)
class Segment:
    """Summary of a range: its maximum and its total. The default is the empty segment."""

    maximum: float = -math.inf
    total: int = 0

    def is_empty(self) -> bool:
        """True for the identity segment, which covers no values."""
        return self.maximum == -math.inf

    def apply(self, length: int, change: SegmentChange) -> Segment:
        """Return this segment of ``length`` values after ``change``."""
        maximum, total = self.maximum, self.total
        if change.has_set():
            maximum = change.to_set
            total = length * change.to_set
        return Segment(maximum + change.to_add, total + length * change.to_add)

    def join(self, other: Segment) -> Segment:
        """Return the summary of this range followed by ``other``."""
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        return Segment(max(self.maximum, other.maximum), self.total + other.total)


_IDENTITY_CHANGE = SegmentChange()
_EMPTY = Segment()


class SegTree:
    """A bottom-up segment tree over ``tree_n`` leaves (``n`` rounded up to a power of two)."""

    def __init__(self, n: int = 0) -> None:
        self._reset(n)

    def _reset(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        size = 1
        while size < n:
            size *= 2
        self.tree_n = size
        self._height = size.bit_length() - 1
        self._tree: list[Segment] = [_EMPTY] * (2 * size)
        self._changes: list[SegmentChange] = [_IDENTITY_CHANGE] * size

    def build(self, initial: Iterable[Segment]) -> None:
        """Replace the contents with ``initial`` in linear time."""
        leaves = list(initial)
        self._reset(len(leaves))
        n = self.tree_n
        self._tree[n:n + len(leaves)] = leaves
        for position in range(n - 1, 0, -1):
            self._tree[position] = self._tree[2 * position].join(self._tree[2 * position + 1])

    def _check_range(self, a: int, b: int) -> None:
        if not 0 <= a <= b <= self.tree_n:
            raise ValueError(f"invalid range [{a}, {b}) for size {self.tree_n}")

    def _apply_and_combine(self, position: int, length: int, change: SegmentChange) -> None:
        self._tree[position] = self._tree[position].apply(length, change)
        if position < self.tree_n:
            self._changes[position] = self._changes[position].combine(change)

    def _push_down(self, position: int, length: int) -> None:
        change = self._changes[position]
        if change.has_change():
            half = length // 2
            self._apply_and_combine(2 * position, half, change)
            self._apply_and_combine(2 * position + 1, half, change)
            self._changes[position] = _IDENTITY_CHANGE

    def _push_all(self, a: int, b: int) -> None:
        a += self.tree_n
        b += self.tree_n - 1
        for up in range(self._height, 0, -1):
            x, y = a >> up, b >> up
            self._push_down(x, 1 << up)
            if x != y:
                self._push_down(y, 1 << up)

    def _join_and_apply(self, position: int, length: int) -> None:
        joined = self._tree[2 * position].join(self._tree[2 * position + 1])
        self._tree[position] = joined.apply(length, self._changes[position])

    def _join_all(self, a: int, b: int) -> None:
        a += self.tree_n
        b += self.tree_n - 1
        length = 1
        while a > 1:
            a //= 2
            b //= 2
            length *= 2
            self._join_and_apply(a, length)
            if a != b:
                self._join_and_apply(b, length)

    def _nodes(self, a: int, b: int) -> list[tuple[int, int]]:
        """Push pending changes and return the covering nodes of [a, b) from left to right."""
        self._check_range(a, b)
        if a == b:
            return []
        self._push_all(a, b)
        left: list[tuple[int, int]] = []
        right: list[tuple[int, int]] = []
        length = 1
        a += self.tree_n
        b += self.tree_n
        while a < b:
            if a & 1:
                left.append((a, length))
                a += 1
            if b & 1:
                b -= 1
                right.append((b, length))
            a //= 2
            b //= 2
            length *= 2
        left.extend(reversed(right))
        return left

    def query(self, a: int, b: int) -> Segment:
        """Return the summary of the range [a, b)."""
        return reduce(
            lambda acc, node: acc.join(self._tree[node[0]]), self._nodes(a, b), Segment()
        )

    def query_full(self) -> Segment:
        """Return the summary of the whole tree."""
        return self._tree[1]

    def update(self, a: int, b: int, change: SegmentChange) -> None:
        """Apply ``change`` to every value in [a, b)."""
        nodes = self._nodes(a, b)
        for position, length in nodes:
            self._apply_and_combine(position, length, change)
        if nodes:
            self._join_all(a, b)

    def update_single(self, index: int, seg: Segment) -> None:
        """Replace the value at ``index`` with ``seg``."""
        if not 0 <= index < self.tree_n:
            raise ValueError(f"index {index} out of range [0, {self.tree_n})")
        position = self.tree_n + index
        for up in range(self._height, 0, -1):
            self._push_down(position >> up, 1 << up)
        self._tree[position] = seg
        while position > 1:
            position //= 2
            self._tree[position] = self._tree[2 * position].join(self._tree[2 * position + 1])

    def to_array(self) -> list[Segment]:
        """Return all ``tree_n`` leaves with every pending change applied."""
        for position in range(1, self.tree_n):
            self._push_down(position, self.tree_n >> (position.bit_length() - 1))
        return self._tree[self.tree_n:]

    def find_last_subarray(
        self, should_join: Callable[[Segment, Segment], bool], n: int, first: int = 0
    ) -> int:
        """Return the end of the longest range starting at ``first`` built while ``should_join`` holds.

        ``should_join(current, next_piece)`` decides whether ``next_piece`` may be
        appended to the range summarised by ``current``. Returns ``first - 1`` if
        even the empty range is rejected.
        """
        if not 0 <= first <= n:
            raise ValueError(f"first {first} out of range [0, {n}]")
        current = Segment()
        if not should_join(current, current):
            return first - 1

        def search(position: int, start: int, end: int) -> int:
            nonlocal current
            if end <= first:
                return end
            if first <= start and end <= n and should_join(current, self._tree[position]):
                current = current.join(self._tree[position])
                return end
            if end - start == 1:
                return start
            self._push_down(position, end - start)
            mid = (start + end) // 2
            left = search(2 * position, start, mid)
            return left if left < mid else search(2 * position + 1, mid, end)

        return search(1, 0, self.tree_n)