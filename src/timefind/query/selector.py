# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Selector parser for a single constraint field.

Supported selectors:
    *           — any value
    */N         — every Nth value starting at the field minimum
    N           — specific value (e.g. 5)
    N-M         — inclusive range (e.g. 1-5)
    N,M-K,...   — comma list of values and ranges
"""

from __future__ import annotations

import re

from timefind.core.constants import Field
from timefind.core.exceptions import ParseError, RangeError
from timefind.query.bitset import BitSet

_STEP = re.compile(r"^\*/([0-9]+)$")
_TERMS = re.compile(r"^[0-9]+(-[0-9]+)?(,[0-9]+(-[0-9]+)?)*$")
_RANGE = re.compile(r"^([0-9]+)-([0-9]+)$")


def _checked(field: Field, value: int) -> int:
    lo, hi = field.bounds
    if value < lo or value > hi:
        raise RangeError(field, value)
    return value


def selector_values(field: Field, selector: str) -> list[int]:
    """Resolve *selector* into the ascending list of raw calendar values.

    Raises:
        ParseError: If the selector matches no supported form.
        RangeError: If a value lies outside the field bounds.
    """
    text = selector.strip()
    lo, hi = field.bounds

    if text == "*":
        return list(range(lo, hi + 1))

    step_match = _STEP.match(text)
    if step_match:
        step = int(step_match.group(1))
        if step <= 0:
            raise ParseError(f"Step must be positive: {selector!r}")
        return list(range(lo, hi + 1, step))

    if not _TERMS.match(text):
        raise ParseError(f"Not supported selector {selector!r} for {field.label}")

    values: set[int] = set()
    for term in text.split(","):
        range_match = _RANGE.match(term)
        if range_match:
            start = _checked(field, int(range_match.group(1)))
            end = _checked(field, int(range_match.group(2)))
            if start > end:
                raise ParseError(f"Invalid range {term!r}: start is after end")
            values.update(range(start, end + 1))
        else:
            values.add(_checked(field, int(term)))

    return sorted(values)


def parse_selector(field: Field, selector: str) -> BitSet:
    """Build the BitSet for *field* described by *selector*."""
    bits = BitSet(field.size)
    for value in selector_values(field, selector):
        bits.set(field.index(value))
    return bits
