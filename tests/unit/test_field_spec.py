# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for FieldSpec: descriptor registry, expression grammar and value rendering."""

from __future__ import annotations

import io

import pytest
from pydantic import ValidationError

from cronfield.core.constants import FieldKind
from cronfield.core.exceptions import (
    CronFieldError,
    EmptyFieldValueError,
    InvalidExpressionError,
    InvalidFieldKindError,
    InvalidFieldValueError,
    UnknownValueNameError,
    ValueAboveMaxError,
)
from cronfield.fields.spec import FieldSpec


class Recorder:
    """Accumulator that records every clause it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int, int, int]] = []

    def __call__(self, start: int, end: int, interval: int, occurrence: int) -> None:
        self.calls.append((start, end, interval, occurrence))


def _parse(kind: FieldKind, expression: str) -> list[tuple[int, int, int, int]]:
    recorder = Recorder()
    error = FieldSpec.from_kind(kind).parse(expression, recorder)
    assert error is None
    return recorder.calls


def _reason(kind: FieldKind, expression: str) -> CronFieldError:
    error = FieldSpec.from_kind(kind).parse(expression, Recorder())
    assert isinstance(error, InvalidExpressionError)
    return error.reason


# =========================================================================
# Registry
# =========================================================================


class TestFromKind:
    """Tests for the six shared descriptors."""

    @pytest.mark.parametrize(
        ("kind", "low", "high"),
        [
            (FieldKind.SECOND, 0, 59),
            (FieldKind.MINUTE, 0, 59),
            (FieldKind.HOUR, 0, 23),
            (FieldKind.DAY, 1, 31),
            (FieldKind.MONTH, 1, 12),
            (FieldKind.DAY_OF_WEEK, 0, 6),
        ],
    )
    def test_bounds(self, kind, low, high):
        spec = FieldSpec.from_kind(kind)
        assert spec.kind is kind
        assert spec.min_value == low
        assert spec.max_value == high
        assert spec.value_count == high - low + 1

    def test_same_instance_every_time(self):
        assert FieldSpec.from_kind(FieldKind.HOUR) is FieldSpec.from_kind(FieldKind.HOUR)

    def test_accepts_string_value(self):
        assert FieldSpec.from_kind("day-of-week") is FieldSpec.from_kind(FieldKind.DAY_OF_WEEK)

    def test_name_tables(self):
        assert FieldSpec.from_kind(FieldKind.MONTH).names[0] == "January"
        assert FieldSpec.from_kind(FieldKind.DAY_OF_WEEK).names[0] == "Sunday"
        assert FieldSpec.from_kind(FieldKind.HOUR).names is None

    def test_only_day_of_week_allows_occurrence(self):
        allowed = [k for k in FieldKind if FieldSpec.from_kind(k).occurrence_allowed]
        assert allowed == [FieldKind.DAY_OF_WEEK]

    @pytest.mark.parametrize("kind", ["year", "", None, 7])
    def test_unknown_kind(self, kind):
        with pytest.raises(InvalidFieldKindError, match="Valid values are"):
            FieldSpec.from_kind(kind)

    def test_unknown_kind_is_value_error(self):
        with pytest.raises(ValueError):
            FieldSpec.from_kind("weekday")

    def test_descriptor_is_frozen(self):
        spec = FieldSpec.from_kind(FieldKind.MINUTE)
        with pytest.raises(ValidationError):
            spec.max_value = 99

    def test_name_table_length_checked(self):
        with pytest.raises(ValidationError, match="exactly 3 entries"):
            FieldSpec(kind=FieldKind.DAY, min_value=1, max_value=3, names=("a", "b"))

    def test_bounds_checked(self):
        with pytest.raises(ValidationError):
            FieldSpec(kind=FieldKind.DAY, min_value=5, max_value=1)


# =========================================================================
# Grammar
# =========================================================================


class TestGrammar:
    """Tests for how expressions are split into accumulated clauses."""

    def test_single_value(self):
        assert _parse(FieldKind.MINUTE, "5") == [(5, 5, 1, 0)]

    def test_wildcard(self):
        assert _parse(FieldKind.MINUTE, "*") == [(-1, -1, 1, 0)]

    def test_stepped_wildcard(self):
        assert _parse(FieldKind.MINUTE, "*/15") == [(-1, -1, 15, 0)]

    def test_range(self):
        assert _parse(FieldKind.HOUR, "9-17") == [(9, 17, 1, 0)]

    def test_stepped_range(self):
        assert _parse(FieldKind.HOUR, "9-17/2") == [(9, 17, 2, 0)]

    def test_descending_range_passed_through(self):
        assert _parse(FieldKind.HOUR, "17-9") == [(17, 9, 1, 0)]

    def test_value_with_step_runs_to_max(self):
        assert _parse(FieldKind.HOUR, "5/10") == [(5, 23, 10, 0)]

    def test_list(self):
        assert _parse(FieldKind.DAY, "1,3,5-7") == [(1, 1, 1, 0), (3, 3, 1, 0), (5, 7, 1, 0)]

    def test_occurrence(self):
        assert _parse(FieldKind.DAY_OF_WEEK, "1#2") == [(1, 1, 1, 2)]

    def test_occurrence_then_step(self):
        assert _parse(FieldKind.DAY_OF_WEEK, "1#2/2") == [(1, 6, 2, 2)]

    def test_occurrence_is_left_to_accumulator(self):
        """The grammar captures '#' for every kind; rejection happens on accumulate."""
        assert _parse(FieldKind.HOUR, "3#1") == [(3, 3, 1, 1)]

    def test_names(self):
        assert _parse(FieldKind.DAY_OF_WEEK, "Mon-Fri") == [(1, 5, 1, 0)]
        assert _parse(FieldKind.MONTH, "jan,JUL") == [(1, 1, 1, 0), (7, 7, 1, 0)]

    @pytest.mark.parametrize("expression", ["", None])
    def test_empty_expression_skips_accumulator(self, expression):
        recorder = Recorder()
        assert FieldSpec.from_kind(FieldKind.MINUTE).parse(expression, recorder) is None
        assert recorder.calls == []


class TestGrammarErrors:
    """Tests for parse failures and their reported reason."""

    def test_empty_list_item(self):
        assert isinstance(_reason(FieldKind.MINUTE, "1,,2"), EmptyFieldValueError)

    def test_trailing_comma(self):
        assert isinstance(_reason(FieldKind.MINUTE, "1,"), EmptyFieldValueError)

    def test_leading_comma(self):
        assert isinstance(_reason(FieldKind.MINUTE, ",5"), InvalidFieldValueError)

    def test_leading_dash(self):
        assert isinstance(_reason(FieldKind.MINUTE, "-5"), InvalidFieldValueError)

    def test_malformed_number(self):
        reason = _reason(FieldKind.MINUTE, "5x")
        assert type(reason) is InvalidFieldValueError

    def test_underscore_digits_rejected(self):
        assert isinstance(_reason(FieldKind.MINUTE, "1_0"), InvalidFieldValueError)

    def test_bad_step(self):
        assert isinstance(_reason(FieldKind.MINUTE, "*/x"), InvalidFieldValueError)

    def test_missing_step(self):
        assert isinstance(_reason(FieldKind.MINUTE, "*/"), InvalidFieldValueError)

    def test_bad_occurrence(self):
        assert isinstance(_reason(FieldKind.DAY_OF_WEEK, "1#x"), InvalidFieldValueError)

    def test_step_before_occurrence_rejected(self):
        assert isinstance(_reason(FieldKind.DAY_OF_WEEK, "1/2#3"), InvalidFieldValueError)

    def test_oversized_number(self):
        assert isinstance(_reason(FieldKind.MINUTE, "99999999999"), InvalidFieldValueError)

    def test_very_long_value(self):
        reason = _reason(FieldKind.MINUTE, "9" * 5000)
        assert type(reason) is InvalidFieldValueError
        assert "too large" in str(reason)

    def test_very_long_step(self):
        reason = _reason(FieldKind.MINUTE, "*/" + "9" * 5000)
        assert type(reason) is InvalidFieldValueError

    def test_very_long_occurrence(self):
        assert isinstance(_reason(FieldKind.DAY_OF_WEEK, "1#" + "9" * 5000), InvalidFieldValueError)

    def test_leading_zeros_are_not_too_large(self):
        assert _parse(FieldKind.MINUTE, "0" * 20 + "5") == [(5, 5, 1, 0)]

    def test_name_on_numeric_field(self):
        reason = _reason(FieldKind.HOUR, "noon")
        assert isinstance(reason, UnknownValueNameError)
        assert "between 0 and 23" in str(reason)

    def test_unknown_name(self):
        reason = _reason(FieldKind.MONTH, "Zz")
        assert isinstance(reason, UnknownValueNameError)
        assert "January" in str(reason)

    def test_accumulator_error_wrapped(self):
        def reject(start, end, interval, occurrence):
            raise ValueAboveMaxError(start, 0, 59, "minute")

        error = FieldSpec.from_kind(FieldKind.MINUTE).parse("70", reject)
        assert isinstance(error, InvalidExpressionError)
        assert isinstance(error.reason, ValueAboveMaxError)
        assert error.__cause__ is error.reason

    def test_wrapped_error_carries_context(self):
        error = FieldSpec.from_kind(FieldKind.MINUTE).parse("1,x", Recorder())
        assert error.expression == "1,x"
        assert error.kind == "minute"
        assert "'1,x' is not a valid [minute] crontab field expression" in str(error)

    def test_stops_at_first_failing_clause(self):
        recorder = Recorder()
        FieldSpec.from_kind(FieldKind.MINUTE).parse("1,x,3", recorder)
        assert recorder.calls == [(1, 1, 1, 0)]


# =========================================================================
# Values
# =========================================================================


class TestParseValue:
    """Tests for numeric and name-prefix value tokens."""

    @pytest.mark.parametrize("token", ["Jan", "January", "jan", "JANUARY", "J"])
    def test_month_prefix(self, token):
        assert FieldSpec.from_kind(FieldKind.MONTH).parse_value(token) == 1

    def test_first_matching_name_wins(self):
        spec = FieldSpec.from_kind(FieldKind.MONTH)
        assert spec.parse_value("Ju") == 6
        assert spec.parse_value("M") == 3

    def test_weekday_prefix(self):
        spec = FieldSpec.from_kind(FieldKind.DAY_OF_WEEK)
        assert spec.parse_value("sun") == 0
        assert spec.parse_value("Sat") == 6
        assert spec.parse_value("T") == 2

    def test_token_longer_than_name(self):
        with pytest.raises(UnknownValueNameError):
            FieldSpec.from_kind(FieldKind.MONTH).parse_value("Januaryx")

    def test_numeric_not_range_checked(self):
        assert FieldSpec.from_kind(FieldKind.MINUTE).parse_value("75") == 75

    def test_empty_token(self):
        with pytest.raises(EmptyFieldValueError):
            FieldSpec.from_kind(FieldKind.MINUTE).parse_value("")


class TestFormatValue:
    """Tests for endpoint rendering."""

    def test_number(self):
        spec = FieldSpec.from_kind(FieldKind.MINUTE)
        assert spec.format_value(0) == "0"
        assert spec.format_value(7) == "7"
        assert spec.format_value(42) == "42"

    def test_large_number(self):
        spec = FieldSpec(kind=FieldKind.DAY, min_value=0, max_value=150)
        assert spec.format_value(120) == "120"

    def test_names(self):
        spec = FieldSpec.from_kind(FieldKind.MONTH)
        assert spec.format_value(12) == "December"
        assert spec.format_value(12, suppress_names=True) == "12"

    def test_format_against_any_enumerable(self):
        class Evens:
            def first(self) -> int:
                return 0

            def next(self, start: int) -> int:
                value = start + start % 2
                return value if value <= 6 else -1

        writer = io.StringIO()
        FieldSpec.from_kind(FieldKind.DAY_OF_WEEK).format(Evens(), writer, suppress_names=True)
        assert writer.getvalue() == "0,2,4,6"
