# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-kind field descriptors and the field expression grammar.

A :class:`FieldSpec` knows the value range of one field kind, its optional
name table and whether the ``#`` occurrence suffix is allowed.  It drives
the expression grammar, handing every parsed clause to an accumulator, and
renders a parsed field back to canonical text.

Grammar (one field)::

    expr   := clause (',' clause)*
    clause := base ['#' occurrence] ['/' step]
    base   := '*' | value | value '-' value
    value  := integer | name-prefix
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Protocol

from pydantic import BaseModel, ConfigDict, model_validator

from cronfield.core.constants import (
    DAY_OF_WEEK_NAMES,
    MAX_NUMERIC_VALUE,
    MONTH_NAMES,
    FieldKind,
)
from cronfield.core.exceptions import (
    CronFieldError,
    EmptyFieldValueError,
    InvalidExpressionError,
    InvalidFieldKindError,
    InvalidFieldValueError,
    UnknownValueNameError,
)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DIGITS = re.compile(r"[0-9]+")
_MAX_DIGITS = len(str(MAX_NUMERIC_VALUE))

# Precomputed renderings for the values every field kind actually uses.
_SMALL_NUMBERS: tuple[str, ...] = tuple(str(i) for i in range(100))

Accumulator = Callable[[int, int, int, int], None]
"""Receives ``(start, end, interval, occurrence)`` for each parsed clause.

``start == end == -1`` stands for the whole range.  Rejections are raised
as :class:`CronFieldError`.
"""


class Enumerable(Protocol):
    """Anything that can list its selected values in ascending order."""

    def first(self) -> int: ...

    def next(self, start: int) -> int: ...


class Writer(Protocol):
    def write(self, text: str, /) -> object: ...


class FieldSpec(BaseModel):
    """Immutable descriptor for one field kind."""

    model_config = ConfigDict(frozen=True)

    kind: FieldKind
    min_value: int
    max_value: int
    names: tuple[str, ...] | None = None
    occurrence_allowed: bool = False

    @model_validator(mode="after")
    def _check_bounds(self) -> FieldSpec:
        if self.min_value < 0:
            raise ValueError("min_value must be non-negative")
        if self.max_value < self.min_value:
            raise ValueError("max_value must not be below min_value")
        if self.names is not None and len(self.names) != self.value_count:
            raise ValueError(
                f"names must hold exactly {self.value_count} entries, got {len(self.names)}"
            )
        return self

    @property
    def value_count(self) -> int:
        return self.max_value - self.min_value + 1

    @classmethod
    def from_kind(cls, kind: FieldKind | str) -> FieldSpec:
        """Return the shared descriptor for *kind*.

        Raises:
            InvalidFieldKindError: If *kind* is not one of the defined kinds.
        """
        try:
            return _SPECS[FieldKind(kind)]
        except (ValueError, KeyError):
            valid = ", ".join(k.value for k in FieldKind)
            raise InvalidFieldKindError(
                f"Invalid crontab field kind {kind!r}. Valid values are {valid}."
            ) from None

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(
        self, expression: str | None, accumulate: Accumulator
    ) -> InvalidExpressionError | None:
        """Feed each clause of *expression* to *accumulate*.

        Returns ``None`` on success (including an empty expression, for
        which the accumulator is never called) or the error describing the
        first failing clause.
        """
        if not expression:
            return None
        try:
            self._parse_list(expression, accumulate)
        except CronFieldError as exc:
            return InvalidExpressionError(expression, self.kind.value, exc)
        return None

    def _parse_list(self, text: str, accumulate: Accumulator) -> None:
        if not text:
            raise EmptyFieldValueError()

        # A leading comma is not a list separator; it fails as a bad value.
        if text.find(",") > 0:
            for token in text.split(","):
                self._parse_clause(token, accumulate)
            return

        self._parse_clause(text, accumulate)

    def _parse_clause(self, text: str, accumulate: Accumulator) -> None:
        if not text:
            raise EmptyFieldValueError()

        every = 1
        occurrence = 0

        slash = text.find("/")
        if slash > 0:
            every = self._parse_int(text[slash + 1 :])
            text = text[:slash]

        hash_index = text.find("#")
        if hash_index > 0:
            occurrence = self._parse_int(text[hash_index + 1 :])
            text = text[:hash_index]

        if text == "*":
            accumulate(-1, -1, every, occurrence)
            return

        dash = text.find("-")
        if dash > 0:
            first = self.parse_value(text[:dash])
            last = self.parse_value(text[dash + 1 :])
            accumulate(first, last, every, occurrence)
            return

        value = self.parse_value(text)
        if every == 1:
            accumulate(value, value, 1, occurrence)
        else:
            accumulate(value, self.max_value, every, occurrence)

    def _parse_int(self, text: str) -> int:
        if not _INTEGER.fullmatch(text):
            raise InvalidFieldValueError(
                f"'{text}' is not a valid integer in a [{self.kind}] crontab field."
            )
        return self._to_bounded_int(text)

    def _to_bounded_int(self, text: str) -> int:
        # Check the digit count before int(); very long strings exceed its conversion limit.
        digits = text.lstrip("+-").lstrip("0")
        if len(digits) > _MAX_DIGITS or abs(int(text)) > MAX_NUMERIC_VALUE:
            raise InvalidFieldValueError(f"'{text}' is too large for a [{self.kind}] crontab field.")
        return int(text)

    def parse_value(self, token: str) -> int:
        """Parse one value token: a decimal integer or a name prefix."""
        if not token:
            raise EmptyFieldValueError()

        if token[0].isascii() and token[0].isdigit():
            if not _DIGITS.fullmatch(token):
                raise InvalidFieldValueError(
                    f"'{token}' is not a valid [{self.kind}] crontab field value."
                )
            return self._to_bounded_int(token)

        if self.names is None:
            raise UnknownValueNameError(
                f"'{token}' is not a valid [{self.kind}] crontab field value. "
                f"It must be a numeric value between {self.min_value} and "
                f"{self.max_value} (all inclusive)."
            )

        folded = token.casefold()
        for index, name in enumerate(self.names):
            if name.casefold().startswith(folded):
                return self.min_value + index

        raise UnknownValueNameError(
            f"'{token}' is not a known value name. "
            f"Use one of the following: {', '.join(self.names)}."
        )

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, field: Enumerable, writer: Writer, suppress_names: bool = False) -> None:
        """Write the canonical text of *field* to *writer*.

        Consecutive values collapse into ``first-last`` runs; a first run
        covering the whole range is written as ``*``.
        """
        next_value = field.first()
        count = 0

        while next_value != -1:
            first = next_value
            while True:
                last = next_value
                next_value = field.next(last + 1)
                if next_value - last != 1:
                    break

            if count == 0 and first == self.min_value and last == self.max_value:
                writer.write("*")
                return

            if count > 0:
                writer.write(",")

            writer.write(self.format_value(first, suppress_names))
            if first != last:
                writer.write("-")
                writer.write(self.format_value(last, suppress_names))

            count += 1

    def format_value(self, value: int, suppress_names: bool = False) -> str:
        if suppress_names or self.names is None:
            if 0 <= value < 100:
                return _SMALL_NUMBERS[value]
            return str(value)
        return self.names[value - self.min_value]


_SPECS: dict[FieldKind, FieldSpec] = {
    FieldKind.SECOND: FieldSpec(kind=FieldKind.SECOND, min_value=0, max_value=59),
    FieldKind.MINUTE: FieldSpec(kind=FieldKind.MINUTE, min_value=0, max_value=59),
    FieldKind.HOUR: FieldSpec(kind=FieldKind.HOUR, min_value=0, max_value=23),
    FieldKind.DAY: FieldSpec(kind=FieldKind.DAY, min_value=1, max_value=31),
    FieldKind.MONTH: FieldSpec(
        kind=FieldKind.MONTH, min_value=1, max_value=12, names=MONTH_NAMES
    ),
    FieldKind.DAY_OF_WEEK: FieldSpec(
        kind=FieldKind.DAY_OF_WEEK,
        min_value=0,
        max_value=6,
        names=DAY_OF_WEEK_NAMES,
        occurrence_allowed=True,
    ),
}
