"""Order-sensitive hashing of integer arrays with constant-time point updates."""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator

MASK64 = (1 << 64) - 1


def splitmix64(x: int) -> int:
    """Mix a 64-bit integer into a well-distributed 64-bit hash."""
    x = (x + 0x9E3779B97F4A7C15) & MASK64
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & MASK64
    return x ^ (x >> 31)


FIXED_RANDOM = splitmix64(time.monotonic_ns() * (id(object()) | 1))


class ArrayHash:
    """An array of integers whose hash ``hash`` is kept up to date on each change.

    Two arrays with the same values in the same positions have the same hash
    within one process. Passing an int creates that many zeros.
    """

    def __init__(self, values: Iterable[int] | int = ()) -> None:
        if isinstance(values, int):
            if values < 0:
                raise ValueError("length must be non-negative")
            values = [0] * values
        self._values = list(values)
        self.hash = sum(self._element_hash(i) for i in range(len(self._values))) & MASK64

    def _element_hash(self, index: int) -> int:
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range [0, {len(self._values)})")
        # Tie the value to its position, mixing between every arithmetic step.
        value = self._values[index] & MASK64
        return splitmix64(value ^ splitmix64(index ^ FIXED_RANDOM))

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def modify(self, index: int, value: int) -> None:
        """Set position ``index`` to ``value`` and update the hash."""
        self.hash = (self.hash - self._element_hash(index)) & MASK64
        self._values[index] = value
        self.hash = (self.hash + self._element_hash(index)) & MASK64