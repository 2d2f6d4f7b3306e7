"""
Unit tests for numeric_statistics.py

Tests descriptive statistics, quartiles, shape measures and outlier
detection.
"""

import numpy as np
import pytest

from field_profiler.profiler.numeric_statistics import (
    calculate_mode,
    calculate_numeric_statistics,
    calculate_quartiles,
    calculate_shape,
    detect_outliers,
)


# ----------------------------------------------------------------------------
# Descriptive statistics
# ----------------------------------------------------------------------------

class TestDescriptive:
    """Central tendency and spread."""

    def test_ten_to_fifty(self, mixed_rows):
        result = calculate_numeric_statistics(mixed_rows, "amount")

        assert result.is_numeric
        assert result.descriptive["mean"] == 30
        assert result.descriptive["median"] == 30
        assert result.descriptive["sum"] == 150
        assert result.descriptive["count"] == 5
        assert result.spread["range"] == 40
        assert result.spread["variance"] == pytest.approx(250)
        assert result.spread["std_dev"] == pytest.approx(15.811, abs=1e-3)

    def test_even_count_median(self, make_rows):
        result = calculate_numeric_statistics(make_rows([4, 1, 3, 2]), "f")
        assert result.descriptive["median"] == 2.5

    def test_single_value(self, make_rows):
        result = calculate_numeric_statistics(make_rows(["7"]), "f")

        descriptive = result.descriptive
        assert descriptive["min"] == descriptive["max"] == descriptive["mean"] == 7
        assert descriptive["median"] == 7
        assert result.spread["std_dev"] == 0
        assert result.spread["variance"] == 0
        assert result.outliers["count"] == 0
        assert result.distribution["skewness"] is None

    def test_nulls_and_text_are_tracked(self, make_rows):
        values = [str(i) for i in range(1, 11)] + [None, ""]
        result = calculate_numeric_statistics(make_rows(values), "f")

        assert result.quality == {"null_count": 2, "non_numeric_count": 0, "total_rows": 12}
        assert result.descriptive["count"] == 10


class TestMode:

    def test_all_tied_values(self):
        assert calculate_mode([3.0, 1.0, 2.0, 3.0, 1.0]) == [1.0, 3.0]

    def test_no_repeats(self):
        assert calculate_mode([1.0, 2.0, 3.0]) == []

    def test_empty(self):
        assert calculate_mode([]) == []


# ----------------------------------------------------------------------------
# Distribution
# ----------------------------------------------------------------------------

class TestQuartiles:

    def test_one_to_nine(self, make_rows):
        result = calculate_numeric_statistics(make_rows(list(range(1, 10))), "f")

        assert result.distribution["quartiles"] == {"q1": 2.5, "q2": 5.0, "q3": 7.5}
        assert result.spread["iqr"] == 5.0

    def test_even_count(self):
        assert calculate_quartiles(np.array([1.0, 2.0, 3.0, 4.0])) == (1.5, 2.5, 3.5)

    def test_single_value(self):
        assert calculate_quartiles(np.array([4.0])) == (4.0, 4.0, 4.0)

    def test_percentiles_interpolate_linearly(self, make_rows):
        result = calculate_numeric_statistics(make_rows(list(range(1, 101))), "f")
        percentiles = result.distribution["percentiles"]

        assert percentiles["p10"] == pytest.approx(10.9)
        assert percentiles["p50"] == pytest.approx(50.5)
        assert percentiles["p90"] == pytest.approx(90.1)


class TestShape:

    def test_symmetric_values_have_no_skew(self):
        shape = calculate_shape(np.array([1.0, 2.0, 3.0, 4.0, 5.0]), std_dev=1.58)
        assert shape["skewness"] == pytest.approx(0.0)
        assert shape["kurtosis"] == pytest.approx(-1.2)

    def test_right_tail_is_positive(self):
        shape = calculate_shape(np.array([1.0, 1.0, 1.0, 2.0, 10.0]), std_dev=3.9)
        assert shape["skewness"] > 0

    def test_fewer_than_three_values(self):
        assert calculate_shape(np.array([1.0, 2.0]), std_dev=0.7) == {
            "skewness": None, "kurtosis": None,
        }

    def test_three_values_have_no_kurtosis(self):
        shape = calculate_shape(np.array([1.0, 2.0, 4.0]), std_dev=1.5)
        assert shape["skewness"] is not None
        assert shape["kurtosis"] is None

    def test_no_spread(self):
        shape = calculate_shape(np.array([2.0, 2.0, 2.0, 2.0]), std_dev=0.0)
        assert shape == {"skewness": None, "kurtosis": None}


# ----------------------------------------------------------------------------
# Outliers
# ----------------------------------------------------------------------------

class TestOutliers:

    def test_single_high_outlier(self, make_rows):
        rows = make_rows([10, 12, 14, 16, 18, 20, 100])
        outliers = calculate_numeric_statistics(rows, "f").outliers

        assert outliers["count"] == 1
        assert outliers["values"] == [100.0]
        assert outliers["bounds"] == [0.0, 32.0]
        assert outliers["percentage"] == 14.29

    def test_cap_limits_listed_values(self):
        values = np.array([-500.0, -400.0] + [1.0] * 20 + [400.0, 500.0])
        outliers = detect_outliers(values, 1.0, 1.0, outlier_list_cap=3)

        assert outliers["count"] == 4
        assert outliers["values"] == [-500.0, -400.0, 400.0]


# ----------------------------------------------------------------------------
# Non-numeric fields
# ----------------------------------------------------------------------------

class TestNonNumeric:

    def test_empty_rows(self):
        assert calculate_numeric_statistics([], "f").error == "No data available"

    def test_no_numbers(self, make_rows):
        result = calculate_numeric_statistics(make_rows(["a", "b", None]), "f")

        assert result.error == "No numeric values available"
        assert result.non_numeric_count == 2
        assert result.null_count == 1

    def test_mostly_text(self, make_rows):
        result = calculate_numeric_statistics(make_rows(["1", "a", "b"]), "f")

        assert not result.is_numeric
        assert result.numeric_count == 1
        assert result.descriptive is None
        assert result.to_dict() == {
            "is_numeric": False,
            "numeric_count": 1,
            "non_numeric_count": 2,
            "null_count": 0,
        }

    def test_is_repeatable(self, mixed_rows):
        first = calculate_numeric_statistics(mixed_rows, "amount").to_dict()
        second = calculate_numeric_statistics(mixed_rows, "amount").to_dict()
        assert first == second
