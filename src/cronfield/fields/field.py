# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CronField: the set of values selected by one crontab field expression.

Values are kept in an integer bitmask (bit ``i`` stands for
``spec.min_value + i``) together with the lowest and highest selected
value, which bound successor scans.  A field is populated only while it is
being parsed and is read-only afterwards, so one instance can be shared
freely between threads once it has been returned.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from datetime import datetime

from cronfield.core.constants import FieldKind
from cronfield.core.exceptions import (
    OccurrenceNotAllowedError,
    ValueAboveMaxError,
    ValueBelowMinError,
)
from cronfield.fields.calendar import component, occurrence_in_month, window_anchor
from cronfield.fields.result import ParseResult
from cronfield.fields.spec import FieldSpec, Writer

logger = logging.getLogger("cronfield.fields")

_UNSET_MIN = 2**31 - 1


class CronField:
    """Parsed membership set for a single field kind."""

    __slots__ = ("_spec", "_bits", "_min_set", "_max_set", "_occurrence", "_every")

    def __init__(self, spec: FieldSpec) -> None:
        self._spec = spec
        self._bits = 0
        self._min_set = _UNSET_MIN
        self._max_set = -1
        self._occurrence = 0
        self._every: int | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, kind: FieldKind | str, expression: str | None) -> CronField:
        """Parse *expression* for *kind*.

        Raises:
            InvalidFieldKindError: If *kind* is unknown.
            InvalidExpressionError: If *expression* is invalid.
        """
        return parse_field(kind, expression).unwrap()

    @classmethod
    def try_parse(cls, kind: FieldKind | str, expression: str | None) -> CronField | None:
        """Like :meth:`parse` but returns ``None`` for an invalid expression."""
        return parse_field(kind, expression).or_none()

    def _accumulate(self, start: int, end: int, interval: int, occurrence: int) -> None:
        spec = self._spec
        if occurrence > 0 and not spec.occurrence_allowed:
            raise OccurrenceNotAllowedError(spec.kind.value)

        min_value = spec.min_value
        max_value = spec.max_value
        self._occurrence = max(occurrence, 0)
        self._every = interval if interval > 1 else None

        if start == end:
            if start < 0:
                if interval <= 1:
                    self._bits = (1 << spec.value_count) - 1
                    self._min_set = min_value
                    self._max_set = max_value
                    return
                start, end = min_value, max_value
            else:
                if start < min_value:
                    raise ValueBelowMinError(start, min_value, max_value, spec.kind.value)
                if start > max_value:
                    raise ValueAboveMaxError(start, min_value, max_value, spec.kind.value)
        else:
            if start > end:
                start, end = end, start

            if start < 0:
                start = min_value
            elif start < min_value:
                raise ValueBelowMinError(start, min_value, max_value, spec.kind.value)

            if end < 0:
                end = max_value
            elif end > max_value:
                raise ValueAboveMaxError(end, min_value, max_value, spec.kind.value)

        interval = max(interval, 1)
        for value in range(start, end + 1, interval):
            self._bits |= 1 << (value - min_value)

        # Stepping may stop short of ``end``.
        last = start + (end - start) // interval * interval
        self._min_set = min(self._min_set, start)
        self._max_set = max(self._max_set, last)

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------

    @property
    def spec(self) -> FieldSpec:
        return self._spec

    @property
    def kind(self) -> FieldKind:
        return self._spec.kind

    @property
    def bits(self) -> int:
        """Membership bitmask; bit ``i`` is value ``spec.min_value + i``."""
        return self._bits

    @property
    def occurrence(self) -> int:
        return self._occurrence

    @property
    def every(self) -> int | None:
        return self._every

    def first(self) -> int:
        """Lowest selected value, or -1 if nothing is selected."""
        return self._min_set if self._min_set != _UNSET_MIN else -1

    def next(self, start: int) -> int:
        """Lowest selected value that is ``>= start``, or -1 if there is none."""
        if self._min_set == _UNSET_MIN:
            return -1
        if start <= self._min_set:
            return self._min_set

        min_value = self._spec.min_value
        for index in range(start - min_value, self._max_set - min_value + 1):
            if self._bits >> index & 1:
                return index + min_value
        return -1

    def contains(self, value: int) -> bool:
        """Bit test without bounds checking; *value* must lie in the field's range."""
        return bool(self._bits >> (value - self._spec.min_value) & 1)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        if not self._spec.min_value <= value <= self._spec.max_value:
            return False
        return self.contains(value)

    def values(self) -> Iterator[int]:
        """Selected values in ascending order."""
        value = self.first()
        while value != -1:
            yield value
            value = self.next(value + 1)

    def __iter__(self) -> Iterator[int]:
        return self.values()

    # ------------------------------------------------------------------
    # Calendar matching
    # ------------------------------------------------------------------

    def match(self, instant: datetime) -> bool:
        """Whether *instant*'s component for this kind is selected.

        With an occurrence (``1#2``) the weekday must also be that
        occurrence within its month.
        """
        if not self.contains(component(self.kind, instant)):
            return False
        if self._occurrence > 0:
            return self._occurrence == occurrence_in_month(instant)
        return True

    def match_window(self, start: datetime, instant: datetime) -> bool:
        """Stepped match: is *instant* on the ``every``-unit lattice from *start*?

        Falls back to :meth:`match` when the field has no step.  The
        occurrence is not consulted here.
        """
        if self._every is None:
            return self.match(instant)
        anchor = window_anchor(self.kind, start, instant, self._every)
        return component(self.kind, anchor) == component(self.kind, instant)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, writer: Writer, suppress_names: bool = False) -> None:
        self._spec.format(self, writer, suppress_names)

    def to_string(self, fmt: str | None = None) -> str:
        """Render with a format code: ``G`` (default) for numbers, ``N`` for names."""
        if fmt in (None, "", "G"):
            suppress_names = True
        elif fmt == "N":
            suppress_names = False
        else:
            raise ValueError(f"Unknown format code {fmt!r} for CronField")

        buffer = io.StringIO()
        self.format(buffer, suppress_names)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)

    def __repr__(self) -> str:
        return f"CronField({self.kind.value}, {self.to_string()!r})"


def parse_field(kind: FieldKind | str, expression: str | None) -> ParseResult:
    """Parse *expression* for *kind* into a :class:`ParseResult`.

    Raises:
        InvalidFieldKindError: If *kind* is unknown.
    """
    spec = FieldSpec.from_kind(kind)
    field = CronField(spec)
    error = spec.parse(expression, field._accumulate)
    if error is not None:
        logger.debug(
            "Rejected field expression: %s",
            error.reason,
            extra={"kind": spec.kind.value, "expression": expression},
        )
        return ParseResult(error=error)
    return ParseResult(field=field)


def seconds(expression: str) -> CronField:
    return CronField.parse(FieldKind.SECOND, expression)


def minutes(expression: str) -> CronField:
    return CronField.parse(FieldKind.MINUTE, expression)


def hours(expression: str) -> CronField:
    return CronField.parse(FieldKind.HOUR, expression)


def days(expression: str) -> CronField:
    """Parse a day-of-month expression."""
    return CronField.parse(FieldKind.DAY, expression)


def months(expression: str) -> CronField:
    return CronField.parse(FieldKind.MONTH, expression)


def days_of_week(expression: str) -> CronField:
    return CronField.parse(FieldKind.DAY_OF_WEEK, expression)
