"""Nearest-neighbour scans, coordinate compression and formatting of sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def closest_left(values: Sequence[T], compare: Callable[[T, T], bool]) -> list[int]:
    """For each i, the largest j < i with ``compare(values[j], values[i])``, else -1."""
    closest: list[int] = []
    stack: list[int] = []
    for i, value in enumerate(values):
        while stack and not compare(values[stack[-1]], value):
            stack.pop()
        closest.append(stack[-1] if stack else -1)
        stack.append(i)
    return closest


def closest_right(values: Sequence[T], compare: Callable[[T, T], bool]) -> list[int]:
    """For each i, the smallest j > i with ``compare(values[j], values[i])``, else ``len(values)``."""
    n = len(values)
    closest = [n] * n
    stack: list[int] = []
    for i in reversed(range(n)):
        while stack and not compare(values[stack[-1]], values[i]):
            stack.pop()
        closest[i] = stack[-1] if stack else n
        stack.append(i)
    return closest


def compress_array(arr: Sequence[T]) -> list[int]:
    """Map each value to its rank among the distinct values, keeping order."""
    ranks = sorted(set(arr))
    return [bisect_left(ranks, x) for x in arr]


def format_vector(
    v: Sequence[Any],
    add_one: bool = False,
    start: int | None = None,
    end: int | None = None,
) -> str:
    """Format ``v[start:end]`` space-separated with a trailing newline.

    With ``add_one`` each value is shown plus one. A missing or negative
    ``start`` means 0 and a missing or negative ``end`` means ``len(v)``. An
    empty range gives an empty string.
    """
    if start is None or start < 0:
        start = 0
    if end is None or end < 0:
        end = len(v)
    shift = 1 if add_one else 0
    parts = [str(v[i] + shift) for i in range(start, end)]
    return " ".join(parts) + "\n" if parts else ""