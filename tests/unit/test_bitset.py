# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the fixed-size BitSet."""

from __future__ import annotations

import pytest

from timefind.core.exceptions import EmptyError
from timefind.query.bitset import BitSet


class TestBitSet:
    def test_new_bitset_is_empty(self):
        bs = BitSet(12)
        assert len(bs) == 12
        assert bs.count() == 0
        assert bs.indices() == []

    def test_set_and_test(self):
        bs = BitSet(8)
        bs.set(0)
        bs.set(5)
        assert bs.test(0)
        assert bs.test(5)
        assert not bs.test(1)
        assert bs.count() == 2

    def test_set_is_idempotent(self):
        bs = BitSet(8)
        bs.set(3)
        bs.set(3)
        assert bs.count() == 1

    def test_set_all(self):
        bs = BitSet(60)
        bs.set_all()
        assert bs.count() == 60
        assert bs.is_full()
        assert bs.indices() == list(range(60))

    def test_full_constructor(self):
        assert BitSet.full(7) == BitSet(7, 0b1111111)

    def test_out_of_range_index(self):
        bs = BitSet(4)
        with pytest.raises(IndexError):
            bs.set(4)
        with pytest.raises(IndexError):
            bs.test(-1)

    def test_intersection(self):
        a = BitSet(10)
        b = BitSet(10)
        for i in (1, 2, 3):
            a.set(i)
        for i in (3, 4):
            b.set(i)
        result = a.intersection(b)
        assert result.indices() == [3]
        # operands untouched
        assert a.indices() == [1, 2, 3]
        assert b.indices() == [3, 4]

    def test_intersection_size_mismatch(self):
        with pytest.raises(ValueError, match="size"):
            BitSet(3).intersection(BitSet(4))

    def test_lowest_set_index(self):
        bs = BitSet(24)
        bs.set(17)
        bs.set(9)
        assert bs.lowest_set_index() == 9

    def test_lowest_set_index_empty(self):
        with pytest.raises(EmptyError):
            BitSet(24).lowest_set_index()

    def test_indices_ascending(self):
        bs = BitSet(31)
        for i in (30, 0, 14):
            bs.set(i)
        assert bs.indices() == [0, 14, 30]

    def test_copy_is_independent(self):
        bs = BitSet(5)
        bs.set(1)
        clone = bs.copy()
        clone.set(2)
        assert bs.indices() == [1]
        assert clone.indices() == [1, 2]

    def test_equality_considers_size(self):
        assert BitSet(5) != BitSet(6)
        assert BitSet(5, 0b101) == BitSet(5, 0b101)

    def test_bits_beyond_size_are_masked(self):
        assert BitSet(3, 0b11111).count() == 3
