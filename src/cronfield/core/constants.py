# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Field kinds and the fixed value-name tables."""

from enum import StrEnum


class FieldKind(StrEnum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    DAY_OF_WEEK = "day-of-week"


MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Index 0 is Sunday, matching the day-of-week field range 0-6.
DAY_OF_WEEK_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

# Numeric literals must fit a signed 32-bit integer.
MAX_NUMERIC_VALUE = 2**31 - 1
