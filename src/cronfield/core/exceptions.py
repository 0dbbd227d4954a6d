# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for cronfield."""

from __future__ import annotations


class CronFieldError(Exception):
    """Base exception for all cronfield errors."""


class InvalidFieldKindError(CronFieldError, ValueError):
    """Field kind is not one of the six defined kinds."""


class EmptyFieldValueError(CronFieldError):
    """A field value or list item is empty."""

    def __init__(self) -> None:
        super().__init__("A crontab field value cannot be empty.")


class InvalidFieldValueError(CronFieldError):
    """Malformed or unrepresentable numeric literal."""


class UnknownValueNameError(InvalidFieldValueError):
    """Name token matches no entry of the field's name table."""


class OccurrenceNotAllowedError(CronFieldError):
    """An occurrence suffix (#) was used on a field kind that forbids it."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"For the [{kind}] field occurrence (#) is not allowed.")


class ValueOutOfRangeError(CronFieldError):
    """Explicit numeric endpoint outside the field's bounds."""

    _relation = "not an"

    def __init__(self, value: int, min_value: int, max_value: int, kind: str) -> None:
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        self.kind = kind
        super().__init__(
            f"{value} is {self._relation} allowable value for the [{kind}] field. "
            f"Value must be between {min_value} and {max_value} (all inclusive)."
        )


class ValueBelowMinError(ValueOutOfRangeError):
    _relation = "lower than the minimum"


class ValueAboveMaxError(ValueOutOfRangeError):
    _relation = "higher than the maximum"


class InvalidExpressionError(CronFieldError):
    """A field expression failed to parse.

    ``reason`` holds the specific error (also chained as ``__cause__``).
    """

    def __init__(self, expression: str, kind: str, reason: CronFieldError) -> None:
        self.expression = expression
        self.kind = kind
        self.reason = reason
        super().__init__(
            f"'{expression}' is not a valid [{kind}] crontab field expression. {reason}"
        )
        self.__cause__ = reason
