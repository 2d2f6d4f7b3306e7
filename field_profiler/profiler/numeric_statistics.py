"""
Numeric Statistics Engine - descriptive statistics for numeric fields.

Architecture:
    The numeric subset of a field (cells accepted by ``coerce_number``) is
    loaded into a sorted numpy array once. Every measure is derived from it:
    1. Descriptive: min, max, mean, median, sum, count, mode
    2. Spread: range, sample variance / standard deviation (n-1), IQR
    3. Distribution: quartiles, percentiles, skewness, excess kurtosis
    4. Outliers: Tukey's fences at 1.5 x IQR

Design Decisions:
    - Percentiles use linear interpolation at p * (n - 1), numpy's default.
    - Quartiles are Tukey's hinges: the medians of the lower and upper
      halves, leaving out the middle value when the count is odd. IQR and
      the outlier fences are built from them, so q1 may differ from p25.
    - Skewness and kurtosis use scipy's bias-corrected estimators. They are
      None when there are fewer than 3 values or no spread; kurtosis is also
      None at exactly 3 values because its correction divides by n - 3.
    - Mode lists every value sharing the highest frequency, ascending, and is
      empty when no value repeats.
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
from scipy import stats

from field_profiler.core.constants import (
    DEFAULT_OUTLIER_LIST_CAP,
    NUMERIC_FIELD_THRESHOLD,
    OUTLIER_IQR_MULTIPLIER,
    PERCENTILES,
)
from field_profiler.profiler.profile_result import NumericStatistics
from field_profiler.profiler.type_detector import coerce_number
from field_profiler.profiler.values import Row, iter_cells

logger = logging.getLogger(__name__)


def _finite_or_none(value: float) -> Optional[float]:
    value = float(value)
    return None if np.isnan(value) or np.isinf(value) else value


def calculate_mode(values: Sequence[float]) -> List[float]:
    """
    All values sharing the highest frequency, ascending.

    Returns:
        Modal values, or an empty list when every value occurs once
    """
    if not values:
        return []
    counts = Counter(values)
    top = max(counts.values())
    if top == 1:
        return []
    return sorted(value for value, count in counts.items() if count == top)


def calculate_shape(sorted_values: np.ndarray, std_dev: float) -> Dict[str, Optional[float]]:
    """
    Skewness and excess kurtosis.

    Args:
        sorted_values: Numeric values
        std_dev: Sample standard deviation of the values

    Returns:
        Dict with ``skewness`` and ``kurtosis`` (None when undefined)
    """
    count = len(sorted_values)
    if count < 3 or std_dev == 0:
        return {"skewness": None, "kurtosis": None}

    skewness = _finite_or_none(stats.skew(sorted_values, bias=False))
    kurtosis = None
    if count > 3:
        kurtosis = _finite_or_none(stats.kurtosis(sorted_values, fisher=True, bias=False))
    return {"skewness": skewness, "kurtosis": kurtosis}


def calculate_quartiles(sorted_values: np.ndarray) -> Tuple[float, float, float]:
    """
    Quartiles as the medians of the lower and upper halves.

    Example:
        >>> calculate_quartiles(np.arange(1, 10))
        (2.5, 5.0, 7.5)
    """
    count = len(sorted_values)
    median = float(np.median(sorted_values))
    if count == 1:
        return median, median, median

    half = count // 2
    lower = sorted_values[:half]
    upper = sorted_values[count - half:]
    return float(np.median(lower)), median, float(np.median(upper))


def detect_outliers(
    sorted_values: np.ndarray,
    q1: float,
    q3: float,
    outlier_list_cap: int = DEFAULT_OUTLIER_LIST_CAP,
) -> Dict[str, Any]:
    """
    Find values outside Tukey's fences.

    Args:
        sorted_values: Ascending numeric values
        q1: First quartile
        q3: Third quartile
        outlier_list_cap: Maximum number of outlier values listed

    Returns:
        Dict with count, percentage, values (ascending, capped) and bounds
    """
    iqr = q3 - q1
    lower_bound = q1 - OUTLIER_IQR_MULTIPLIER * iqr
    upper_bound = q3 + OUTLIER_IQR_MULTIPLIER * iqr

    mask = (sorted_values < lower_bound) | (sorted_values > upper_bound)
    outliers = sorted_values[mask]

    return {
        "count": int(outliers.size),
        "percentage": round(outliers.size / sorted_values.size * 100, 2),
        "values": [float(value) for value in outliers[:outlier_list_cap]],
        "lower_bound": float(lower_bound),
        "upper_bound": float(upper_bound),
        "bounds": [float(lower_bound), float(upper_bound)],
    }


def calculate_numeric_statistics(
    rows: Sequence[Row],
    field_name: str,
    outlier_list_cap: int = DEFAULT_OUTLIER_LIST_CAP,
    numeric_threshold: float = NUMERIC_FIELD_THRESHOLD,
) -> NumericStatistics:
    """
    Calculate statistics for the numeric values of a field.

    Args:
        rows: Dataset rows
        field_name: Field to analyze
        outlier_list_cap: Maximum number of outlier values listed
        numeric_threshold: Fraction of non-null values that must be numbers

    Returns:
        NumericStatistics; ``is_numeric`` is False (with counts) when the
        field is not predominantly numeric, and ``error`` is set when there
        is nothing to analyze
    """
    if not rows:
        return NumericStatistics(error="No data available")

    numbers: List[float] = []
    null_count = 0
    non_numeric_count = 0

    for cell in iter_cells(rows, field_name):
        if cell.is_null:
            null_count += 1
            continue
        number = coerce_number(cell)
        if number is None:
            non_numeric_count += 1
        else:
            numbers.append(number)

    if not numbers:
        return NumericStatistics(
            error="No numeric values available",
            numeric_count=0,
            non_numeric_count=non_numeric_count,
            null_count=null_count,
        )

    if len(numbers) / (len(numbers) + non_numeric_count) < numeric_threshold:
        logger.debug(
            f"Field '{field_name}' is not predominantly numeric "
            f"({len(numbers)} numeric, {non_numeric_count} non-numeric)"
        )
        return NumericStatistics(
            is_numeric=False,
            numeric_count=len(numbers),
            non_numeric_count=non_numeric_count,
            null_count=null_count,
        )

    values = np.sort(np.asarray(numbers, dtype=float))
    count = int(values.size)

    minimum = float(values[0])
    maximum = float(values[-1])
    mean = float(np.mean(values))
    variance = float(np.var(values, ddof=1)) if count > 1 else 0.0
    std_dev = float(np.sqrt(variance))

    fractions = [fraction for fraction, _ in PERCENTILES]
    percentile_values = np.percentile(values, [fraction * 100 for fraction in fractions])
    percentiles = {
        key: float(value)
        for (_, key), value in zip(PERCENTILES, percentile_values)
    }
    q1, median, q3 = calculate_quartiles(values)
    iqr = q3 - q1

    return NumericStatistics(
        is_numeric=True,
        descriptive={
            "min": minimum,
            "max": maximum,
            "mean": mean,
            "median": median,
            "mode": calculate_mode(numbers),
            "sum": float(np.sum(values)),
            "count": count,
        },
        spread={
            "range": maximum - minimum,
            "variance": variance,
            "std_dev": std_dev,
            "iqr": iqr,
        },
        distribution={
            "quartiles": {"q1": q1, "q2": median, "q3": q3},
            "percentiles": percentiles,
            **calculate_shape(values, std_dev),
        },
        outliers=detect_outliers(values, q1, q3, outlier_list_cap),
        quality={
            "null_count": null_count,
            "non_numeric_count": non_numeric_count,
            "total_rows": len(rows),
        },
    )
