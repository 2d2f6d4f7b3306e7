"""Unit tests for the cell value model."""

import math

import numpy as np
import pytest

from field_profiler.profiler.values import (
    ValueKind,
    classify_value,
    field_exists,
    field_sample,
    format_number,
)


class TestClassifyValue:
    """Null, text and number classification."""

    @pytest.mark.parametrize("raw", [None, float("nan")])
    def test_nulls(self, raw):
        cell = classify_value(raw)
        assert cell.is_null
        assert not cell.is_empty_string

    def test_empty_string_is_null_but_flagged(self):
        cell = classify_value("")
        assert cell.is_null
        assert cell.is_empty_string

    def test_whitespace_is_text(self):
        cell = classify_value("  ")
        assert cell.kind is ValueKind.TEXT
        assert cell.text == "  "

    def test_integral_float_renders_without_fraction(self):
        assert classify_value(3.0).text == "3"
        assert classify_value(3).text == "3"

    def test_fractional_float(self):
        cell = classify_value(2.5)
        assert cell.kind is ValueKind.NUMBER
        assert cell.text == "2.5"
        assert cell.number == 2.5

    def test_bool_is_text(self):
        assert classify_value(True).kind is ValueKind.TEXT
        assert classify_value(False).text == "false"

    def test_numpy_scalar_is_number(self):
        cell = classify_value(np.int64(7))
        assert cell.kind is ValueKind.NUMBER
        assert cell.text == "7"

    def test_int_beyond_float_range_is_text(self):
        cell = classify_value(10 ** 400)
        assert cell.kind is ValueKind.TEXT
        assert cell.text == "1" + "0" * 400

    def test_numpy_nan_is_null(self):
        assert classify_value(np.float64("nan")).is_null


class TestFormatNumber:

    def test_large_integral_float(self):
        assert format_number(1e20) == "100000000000000000000"

    def test_huge_float_keeps_exponent(self):
        assert format_number(1e22) == "1e+22"

    def test_infinity(self):
        assert format_number(math.inf) == "inf"


class TestFieldHelpers:

    def test_field_sample_skips_nulls(self):
        rows = [{"f": "a"}, {"f": None}, {"f": ""}, {"g": "x"}, {"f": 1}]
        assert [cell.text for cell in field_sample(rows, "f")] == ["a", "1"]

    def test_field_exists(self):
        rows = [{"a": 1}, {"b": None}]
        assert field_exists(rows, "b")
        assert not field_exists(rows, "c")
