# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""cronfield - crontab field parsing, matching and formatting."""

__version__ = "0.1.0"

from cronfield.core.constants import FieldKind
from cronfield.core.exceptions import CronFieldError, InvalidExpressionError
from cronfield.fields.field import (
    CronField,
    days,
    days_of_week,
    hours,
    minutes,
    months,
    parse_field,
    seconds,
)
from cronfield.fields.result import ParseResult
from cronfield.fields.spec import FieldSpec

__all__ = [
    "CronField",
    "CronFieldError",
    "FieldKind",
    "FieldSpec",
    "InvalidExpressionError",
    "ParseResult",
    "__version__",
    "days",
    "days_of_week",
    "hours",
    "minutes",
    "months",
    "parse_field",
    "seconds",
]
