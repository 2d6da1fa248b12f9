# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Fixed-size bit vector backing each constraint field."""

from __future__ import annotations

from timefind.core.exceptions import EmptyError


class BitSet:
    """A fixed-length set of bit positions ``0 .. size-1``.

    Bits are packed into a single ``int``.  The size is fixed at creation.
    """

    __slots__ = ("_bits", "_size")

    def __init__(self, size: int, bits: int = 0) -> None:
        if size < 0:
            raise ValueError(f"BitSet size must be non-negative, got {size}")
        self._size = size
        self._bits = bits & self._mask()

    @classmethod
    def full(cls, size: int) -> BitSet:
        bs = cls(size)
        bs.set_all()
        return bs

    def _mask(self) -> int:
        return (1 << self._size) - 1

    def _check(self, i: int) -> None:
        if not 0 <= i < self._size:
            raise IndexError(f"bit {i} out of range for BitSet of size {self._size}")

    def set(self, i: int) -> None:
        self._check(i)
        self._bits |= 1 << i

    def test(self, i: int) -> bool:
        self._check(i)
        return bool(self._bits >> i & 1)

    def set_all(self) -> None:
        self._bits = self._mask()

    def count(self) -> int:
        return bin(self._bits).count("1")

    def intersection(self, other: BitSet) -> BitSet:
        """Return a new BitSet holding the bits set in both operands."""
        if other._size != self._size:
            raise ValueError(
                f"Cannot intersect BitSets of size {self._size} and {other._size}"
            )
        return BitSet(self._size, self._bits & other._bits)

    def lowest_set_index(self) -> int:
        """Return the smallest set position.

        Raises:
            EmptyError: If no bit is set.
        """
        if self._bits == 0:
            raise EmptyError("BitSet has no bit set")
        return (self._bits & -self._bits).bit_length() - 1

    def indices(self) -> list[int]:
        """Return the set positions in ascending order."""
        return [i for i in range(self._size) if self._bits >> i & 1]

    def copy(self) -> BitSet:
        return BitSet(self._size, self._bits)

    def is_full(self) -> bool:
        return self._bits == self._mask()

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._size == other._size and self._bits == other._bits

    def __hash__(self) -> int:
        return hash((self._size, self._bits))

    def __repr__(self) -> str:
        return f"BitSet(size={self._size}, indices={self.indices()})"
