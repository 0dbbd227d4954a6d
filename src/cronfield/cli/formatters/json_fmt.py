# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

import json

from cronfield.fields.field import CronField


def field_summary(field: CronField, expression: str, *, use_names: bool = False) -> dict:
    """Plain-data description of a parsed field."""
    values = list(field.values())
    return {
        "kind": field.kind.value,
        "expression": expression,
        "canonical": field.to_string("N" if use_names else "G"),
        "values": values,
        "first": field.first(),
        "last": values[-1] if values else -1,
        "every": field.every,
        "occurrence": field.occurrence,
    }


def format_json(field: CronField, expression: str, *, use_names: bool = False) -> str:
    """Return the field summary as formatted JSON string."""
    return json.dumps(field_summary(field, expression, use_names=use_names), indent=2)
