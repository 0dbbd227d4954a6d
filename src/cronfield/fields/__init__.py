# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Field descriptors, parsing and the parsed field set."""

from cronfield.fields.field import CronField, parse_field
from cronfield.fields.result import ParseResult
from cronfield.fields.spec import FieldSpec

__all__ = [
    "CronField",
    "FieldSpec",
    "ParseResult",
    "parse_field",
]
