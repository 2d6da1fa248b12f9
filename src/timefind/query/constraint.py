# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Constraint — five calendar-field bit-sets plus optional time bounds.

A constraint is an immutable value.  Every narrowing, bounding or
combination returns a new ``Constraint`` or raises; the receiver is
never modified, so one constraint can safely serve as the base for
several independent refinements::

    base = from_string("0 9 * * *")
    weekdays_only = base.weekdays("1-5")
    first_of_month = base.day(1)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from timefind.core.constants import Field
from timefind.core.exceptions import EmptyError, ParseError, RangeError
from timefind.query.bitset import BitSet
from timefind.query.selector import parse_selector

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class Bound:
    """An absolute time limit that is either present or explicitly absent."""

    instant: datetime | None = None

    @classmethod
    def unbounded(cls) -> Bound:
        return cls(None)

    @classmethod
    def at(cls, instant: datetime) -> Bound:
        return cls(instant)

    @property
    def bounded(self) -> bool:
        return self.instant is not None


_UNBOUNDED = Bound.unbounded()


def later(a: Bound, b: Bound) -> Bound:
    """The more restrictive of two lower bounds (absent means -inf)."""
    if a.instant is None:
        return b
    if b.instant is None:
        return a
    return b if a.instant < b.instant else a


def earlier(a: Bound, b: Bound) -> Bound:
    """The more restrictive of two upper bounds (absent means +inf)."""
    if a.instant is None:
        return b
    if b.instant is None:
        return a
    return a if a.instant < b.instant else b


class Constraint:
    """Accepted values per calendar field plus an optional time window."""

    __slots__ = ("_fields", "_lower", "_upper")

    def __init__(self) -> None:
        self._fields: tuple[BitSet, ...] = tuple(BitSet.full(f.size) for f in Field)
        self._lower = _UNBOUNDED
        self._upper = _UNBOUNDED

    @classmethod
    def _build(
        cls, fields: tuple[BitSet, ...], lower: Bound, upper: Bound
    ) -> Constraint:
        c = cls.__new__(cls)
        c._fields = fields
        c._lower = lower
        c._upper = upper
        return c

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def lower(self) -> Bound:
        return self._lower

    @property
    def upper(self) -> Bound:
        return self._upper

    def field(self, f: Field) -> BitSet:
        """Return a copy of the bit-set for field *f*."""
        return self._fields[f].copy()

    def values(self, f: Field) -> list[int]:
        """Return the accepted calendar values of *f* in ascending order."""
        return [f.value_of(i) for i in self._fields[f].indices()]

    def test(self, f: Field, value: int) -> bool:
        return self._fields[f].test(f.index(value))

    def is_empty(self) -> bool:
        if any(bits.count() == 0 for bits in self._fields):
            return True
        lo, hi = self._lower.instant, self._upper.instant
        return lo is not None and hi is not None and hi < lo

    # ------------------------------------------------------------------
    # Narrowing
    # ------------------------------------------------------------------

    def _replace_field(self, f: Field, bits: BitSet) -> Constraint:
        fields = list(self._fields)
        fields[f] = self._fields[f].intersection(bits)
        result = Constraint._build(tuple(fields), self._lower, self._upper)
        if result._fields[f].count() == 0:
            raise EmptyError(f"No {f.label} value is left in the constraint")
        return result

    def narrow(self, f: Field, *values: int) -> Constraint:
        """Keep only *values* for field *f*.

        Raises:
            RangeError: If a value lies outside the field bounds.
            EmptyError: If no value of *f* remains.
        """
        lo, hi = f.bounds
        bits = BitSet(f.size)
        for value in values:
            if value < lo or value > hi:
                raise RangeError(f, value)
            bits.set(f.index(value))
        return self._replace_field(f, bits)

    def narrow_selector(self, f: Field, selector: str) -> Constraint:
        """Keep only the values of *f* described by a textual selector."""
        return self._replace_field(f, parse_selector(f, selector))

    def minute(self, *minutes: int) -> Constraint:
        return self.narrow(Field.MINUTE, *minutes)

    def hour(self, *hours: int) -> Constraint:
        return self.narrow(Field.HOUR, *hours)

    def day(self, *days: int) -> Constraint:
        return self.narrow(Field.DAY_OF_MONTH, *days)

    def month(self, *months: int) -> Constraint:
        return self.narrow(Field.MONTH, *months)

    def weekday(self, *days: int) -> Constraint:
        return self.narrow(Field.DAY_OF_WEEK, *days)

    def minutes(self, selector: str) -> Constraint:
        return self.narrow_selector(Field.MINUTE, selector)

    def hours(self, selector: str) -> Constraint:
        return self.narrow_selector(Field.HOUR, selector)

    def days(self, selector: str) -> Constraint:
        return self.narrow_selector(Field.DAY_OF_MONTH, selector)

    def months(self, selector: str) -> Constraint:
        return self.narrow_selector(Field.MONTH, selector)

    def weekdays(self, selector: str) -> Constraint:
        return self.narrow_selector(Field.DAY_OF_WEEK, selector)

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    def _with_bounds(self, lower: Bound, upper: Bound) -> Constraint:
        result = Constraint._build(self._fields, lower, upper)
        if result.is_empty():
            raise EmptyError("Upper bound lies before lower bound")
        return result

    def after(self, t: datetime) -> Constraint:
        """Start the occurrence search at *t*; results are strictly after it."""
        return self._with_bounds(Bound.at(t), self._upper)

    def before(self, t: datetime) -> Constraint:
        """Only accept timestamps at or before *t*."""
        return self._with_bounds(self._lower, Bound.at(t))

    def between(self, t1: datetime, t2: datetime) -> Constraint:
        """Only accept timestamps within ``[t1, t2]`` in either argument order."""
        lo, hi = (t1, t2) if t1 <= t2 else (t2, t1)
        return self._with_bounds(Bound.at(lo), Bound.at(hi))

    def within_bounds(self, t: datetime) -> bool:
        if self._lower.instant is not None and t < self._lower.instant:
            return False
        return not (self._upper.instant is not None and t > self._upper.instant)

    # ------------------------------------------------------------------
    # Queries (see timefind.query.search)
    # ------------------------------------------------------------------

    def match(self, t: datetime) -> bool:
        from timefind.query.search import match

        return match(self, t)

    def contains(self, t: datetime) -> bool:
        """``match`` plus the bound check."""
        return self.match(t) and self.within_bounds(t)

    def next(self, t: datetime) -> datetime:
        from timefind.query.search import next_occurrence

        return next_occurrence(self, t)

    def next_list(self, t: datetime, n: int) -> list[datetime]:
        from timefind.query.search import next_list

        return next_list(self, t, n)

    def occurrences(self, t: datetime) -> Iterator[datetime]:
        from timefind.query.search import iter_occurrences

        return iter_occurrences(self, t)

    # ------------------------------------------------------------------
    # Combination and text form
    # ------------------------------------------------------------------

    def __and__(self, other: object) -> Constraint:
        if not isinstance(other, Constraint):
            return NotImplemented
        return combine(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return (
            self._fields == other._fields
            and self._lower == other._lower
            and self._upper == other._upper
        )

    def __hash__(self) -> int:
        return hash((self._fields, self._lower, self._upper))

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        parts = [repr(to_string(self))]
        if self._lower.bounded:
            parts.append(f"after={self._lower.instant.isoformat()}")
        if self._upper.bounded:
            parts.append(f"before={self._upper.instant.isoformat()}")
        return f"Constraint({', '.join(parts)})"


# ---------------------------------------------------------------------------
# Module-level construction API
# ---------------------------------------------------------------------------


def from_values(f: Field, *values: int) -> Constraint:
    return Constraint().narrow(f, *values)


def from_selector(f: Field, selector: str) -> Constraint:
    return Constraint().narrow_selector(f, selector)


def minute(*minutes: int) -> Constraint:
    return from_values(Field.MINUTE, *minutes)


def hour(*hours: int) -> Constraint:
    return from_values(Field.HOUR, *hours)


def day(*days: int) -> Constraint:
    return from_values(Field.DAY_OF_MONTH, *days)


def month(*months: int) -> Constraint:
    return from_values(Field.MONTH, *months)


def weekday(*days: int) -> Constraint:
    return from_values(Field.DAY_OF_WEEK, *days)


def minutes(selector: str) -> Constraint:
    return from_selector(Field.MINUTE, selector)


def hours(selector: str) -> Constraint:
    return from_selector(Field.HOUR, selector)


def days(selector: str) -> Constraint:
    return from_selector(Field.DAY_OF_MONTH, selector)


def months(selector: str) -> Constraint:
    return from_selector(Field.MONTH, selector)


def weekdays(selector: str) -> Constraint:
    return from_selector(Field.DAY_OF_WEEK, selector)


def after(c: Constraint, t: datetime) -> Constraint:
    return c.after(t)


def before(c: Constraint, t: datetime) -> Constraint:
    return c.before(t)


def between(c: Constraint, t1: datetime, t2: datetime) -> Constraint:
    return c.between(t1, t2)


def combine(c1: Constraint, c2: Constraint) -> Constraint:
    """Intersect two constraints field by field and tighten their bounds.

    Raises:
        EmptyError: If any field is exhausted or the bounds cross.
    """
    fields = tuple(a.intersection(b) for a, b in zip(c1._fields, c2._fields, strict=True))
    result = Constraint._build(
        fields,
        later(c1._lower, c2._lower),
        earlier(c1._upper, c2._upper),
    )
    if result.is_empty():
        raise EmptyError()
    return result


def from_string(expression: str) -> Constraint:
    """Parse a five-field expression: ``minute hour day month weekday``.

    Raises:
        ParseError: If the field count is wrong or a selector is malformed.
        RangeError: If a selector names an out-of-range value.
    """
    parts = expression.split()
    if len(parts) != len(Field):
        raise ParseError(
            "There should be five entries (minute, hour, day of month, month, "
            f"day of week), got {len(parts)}: {expression!r}"
        )

    c = Constraint()
    for f, selector in zip(Field, parts, strict=True):
        c = c.narrow_selector(f, selector)
    return c


def _render(f: Field, bits: BitSet) -> str:
    if bits.is_full():
        return "*"
    return ",".join(str(f.value_of(i)) for i in bits.indices())


def to_string(c: Constraint) -> str:
    """Render *c* in the same five-field order that ``from_string`` reads."""
    return " ".join(_render(f, c._fields[f]) for f in Field)
