"""Polynomial rolling hashes of sequences with substring, palindrome and comparison queries."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from typing import Any

# 2^32 - 13337 is a safe prime: both P and (P - 1) / 2 are prime.
HASH_P = (1 << 32) - 13337
HASH_COUNT = 2

_rng = random.Random()
# Avoid multiplication bases near 0 or P - 1.
HASH_MULT = tuple(
    _rng.randint(int(0.1 * HASH_P), int(0.9 * HASH_P)) for _ in range(HASH_COUNT)
)
HASH_INV = tuple(pow(mult, -1, HASH_P) for mult in HASH_MULT)

_hash_pow: list[list[int]] = [[1] for _ in range(HASH_COUNT)]

_LOW32 = (1 << 32) - 1
_FIRST = 5
_MANUAL = 15


def _power(h: int, k: int) -> int:
    powers = _hash_pow[h]
    while len(powers) <= k:
        powers.append(powers[-1] * HASH_MULT[h] % HASH_P)
    return powers[k]


def _code(item: Any) -> int:
    return ord(item) if isinstance(item, str) else int(item)


def _combine(parts: Iterable[int]) -> int:
    return sum(part << (32 * h) for h, part in enumerate(parts))


def hash_sequence(seq: Iterable[Any]) -> int:
    """Hash a whole sequence; equals ``StringHash(seq).complete_hash()``."""
    items = [_code(x) for x in seq]
    parts = []
    for mult in HASH_MULT:
        value = 1
        for x in items:
            value = (mult * value + x) % HASH_P
        parts.append(value)
    return _combine(parts)


class StringHash:
    """Prefix hashes of a string or integer sequence, forwards and reversed.

    Elements may be characters or integers; ``items`` holds them as given.
    """

    def __init__(self, s: Iterable[Any] = ()) -> None:
        self.build(s)

    def build(self, s: Iterable[Any]) -> None:
        """Discard the contents and hash ``s`` instead."""
        self.items: list[Any] = []
        self._prefix = [[0] for _ in range(HASH_COUNT)]
        self._inv_prefix = [[0] for _ in range(HASH_COUNT)]
        for c in s:
            self.add_char(c)

    def __len__(self) -> int:
        return len(self._prefix[0]) - 1

    def add_char(self, c: Any) -> None:
        """Append one element."""
        code = _code(c)
        self.items.append(c)
        for mult, inv, prefix, inv_prefix in zip(
            HASH_MULT, HASH_INV, self._prefix, self._inv_prefix
        ):
            prefix.append((mult * prefix[-1] + code) % HASH_P)
            inv_prefix.append((inv_prefix[-1] + code) * inv % HASH_P)

    def pop_char(self) -> None:
        """Remove the last element."""
        self.items.pop()
        for prefix, inv_prefix in zip(self._prefix, self._inv_prefix):
            prefix.pop()
            inv_prefix.pop()

    def _check_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self):
            raise ValueError(f"invalid range [{start}, {end}) for length {len(self)}")

    def _single_hash(self, h: int, start: int, end: int) -> int:
        # Adding the power of the length keeps leading zeros significant.
        power = _power(h, end - start)
        prefix = self._prefix[h]
        return (power + prefix[end] - prefix[start] * power) % HASH_P

    def _reverse_single_hash(self, h: int, start: int, end: int) -> int:
        power = _power(h, end - start)
        inv_prefix = self._inv_prefix[h]
        return (power + inv_prefix[end] * power - inv_prefix[start]) % HASH_P

    def substring_hash(self, start: int, end: int) -> int:
        """Hash of the elements in [start, end)."""
        self._check_range(start, end)
        return _combine(self._single_hash(h, start, end) for h in range(HASH_COUNT))

    def complete_hash(self) -> int:
        """Hash of the whole sequence."""
        return self.substring_hash(0, len(self))

    def reverse_substring_hash(self, start: int, end: int) -> int:
        """Hash of the elements in [start, end) read backwards."""
        self._check_range(start, end)
        return _combine(self._reverse_single_hash(h, start, end) for h in range(HASH_COUNT))

    def reverse_complete_hash(self) -> int:
        """Hash of the whole sequence read backwards."""
        return self.reverse_substring_hash(0, len(self))

    def equal(self, start1: int, start2: int, length: int) -> bool:
        """True if the two substrings of ``length`` starting at the given positions match."""
        return self.substring_hash(start1, start1 + length) == self.substring_hash(
            start2, start2 + length
        )

    def is_palindrome(self, start: int, end: int) -> bool:
        """True if the elements in [start, end) read the same both ways."""
        return self.substring_hash(start, end) == self.reverse_substring_hash(start, end)

    def compare(self, start1: int, start2: int, max_length: int | None = None) -> int:
        """Compare the suffixes at ``start1`` and ``start2``: -1, 0 or +1."""
        return hash_compare(self, start1, self, start2, max_length)


def concat_hashes(hash1: int, hash2: int, len2: int) -> int:
    """Hash of a concatenation, given both hashes and the second part's length."""
    if len2 == 0:
        return hash1
    combined = 0
    for h in range(HASH_COUNT):
        part1 = (hash1 >> (32 * h)) & _LOW32
        part2 = (hash2 >> (32 * h)) & _LOW32
        power = _power(h, len2)
        combined += ((part1 * power + part2 - power) % HASH_P) << (32 * h)
    return combined


def first_mismatch(
    hash1: StringHash,
    start1: int,
    hash2: StringHash,
    start2: int,
    max_length: int | None = None,
) -> int:
    """Length of the common prefix of the two suffixes, capped at ``max_length``."""
    limit = min(len(hash1) - start1, len(hash2) - start2)
    if max_length is not None:
        limit = min(limit, max_length)
    a, b = hash1.items, hash2.items

    first = min(limit, _FIRST)
    for i in range(first):
        if a[start1 + i] != b[start2 + i]:
            return i

    if hash1.substring_hash(start1, start1 + limit) == hash2.substring_hash(
        start2, start2 + limit
    ):
        return limit

    low, high = first, limit - 1
    while high - low > _MANUAL:
        mid = (low + high + 1) // 2
        if hash1.substring_hash(start1, start1 + mid) == hash2.substring_hash(
            start2, start2 + mid
        ):
            low = mid
        else:
            high = mid - 1

    for i in range(low, high):
        if a[start1 + i] != b[start2 + i]:
            return i
    return high


def hash_compare(
    hash1: StringHash,
    start1: int,
    hash2: StringHash,
    start2: int,
    max_length: int | None = None,
) -> int:
    """Lexicographically compare two suffixes, capped at ``max_length``: -1, 0 or +1."""
    mismatch = first_mismatch(hash1, start1, hash2, start2, max_length)
    length1 = len(hash1) - start1
    length2 = len(hash2) - start2
    if max_length is not None:
        length1 = min(length1, max_length)
        length2 = min(length2, max_length)

    if mismatch == min(length1, length2):
        return (length1 > length2) - (length1 < length2)

    x = hash1.items[start1 + mismatch]
    y = hash2.items[start2 + mismatch]
    return (x > y) - (x < y)


def _sequence_of(items: Sequence[Any]) -> StringHash:
    return StringHash(items)