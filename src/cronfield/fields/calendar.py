# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Calendar component extraction and unit arithmetic per field kind."""

from __future__ import annotations

import calendar
import math
from datetime import datetime, timedelta

from cronfield.core.constants import FieldKind

_FIXED_UNITS: dict[FieldKind, timedelta] = {
    FieldKind.SECOND: timedelta(seconds=1),
    FieldKind.MINUTE: timedelta(minutes=1),
    FieldKind.HOUR: timedelta(hours=1),
    FieldKind.DAY: timedelta(days=1),
    FieldKind.DAY_OF_WEEK: timedelta(days=7),
}


def component(kind: FieldKind, instant: datetime) -> int:
    """Return the value of *instant* for the given field kind.

    Day of week counts from 0 (Sunday) to 6 (Saturday).
    """
    if kind is FieldKind.SECOND:
        return instant.second
    if kind is FieldKind.MINUTE:
        return instant.minute
    if kind is FieldKind.HOUR:
        return instant.hour
    if kind is FieldKind.DAY:
        return instant.day
    if kind is FieldKind.MONTH:
        return instant.month
    return instant.isoweekday() % 7


def occurrence_in_month(instant: datetime) -> int:
    """1-based ordinal of the weekday of *instant* within its month."""
    return math.ceil(instant.day / 7)


def add_months(instant: datetime, months: int) -> datetime:
    """Shift by whole months, clamping the day to the end of the target month."""
    index = instant.year * 12 + (instant.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(instant.day, calendar.monthrange(year, month)[1])
    return instant.replace(year=year, month=month, day=day)


def advance(kind: FieldKind, instant: datetime, units: int) -> datetime:
    """Move *instant* by *units* of the field's natural unit (may be negative)."""
    if kind is FieldKind.MONTH:
        return add_months(instant, units)
    return instant + _FIXED_UNITS[kind] * units


def window_anchor(kind: FieldKind, start: datetime, instant: datetime, every: int) -> datetime:
    """Latest point of the lattice ``start + k * every`` units not after *instant*.

    When *start* is already past *instant* the result is one step before
    *start*.
    """
    if start > instant:
        return advance(kind, start, -every)

    if kind is FieldKind.MONTH:
        anchor = start
        while anchor <= instant:
            anchor = advance(kind, anchor, every)
        return advance(kind, anchor, -every)

    steps = (instant - start) // (_FIXED_UNITS[kind] * every)
    return advance(kind, start, steps * every)
