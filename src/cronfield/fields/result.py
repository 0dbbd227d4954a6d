# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""ParseResult: outcome of parsing one field expression."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cronfield.core.exceptions import InvalidExpressionError

if TYPE_CHECKING:
    from cronfield.fields.field import CronField


@dataclass(frozen=True)
class ParseResult:
    """Either a parsed field or the error that prevented it."""

    field: CronField | None = None
    error: InvalidExpressionError | None = None

    def __post_init__(self) -> None:
        if (self.field is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of field or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> CronField:
        """Return the field, raising the parse error if there is none."""
        if self.error is not None:
            raise self.error
        assert self.field is not None
        return self.field

    def or_none(self) -> CronField | None:
        return self.field
