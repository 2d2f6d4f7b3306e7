"""
Data Quality Engine - completeness, cardinality, uniqueness and distribution.

Architecture:
    ``calculate_data_quality_metrics`` combines four metric groups into an
    overall assessment:
    1. Completeness: true nulls versus empty strings
    2. Cardinality: distinct values relative to row count
    3. Uniqueness: how many occurrences belong to repeating values
    4. Distribution: Shannon entropy and Pielou's evenness index

Design Decisions:
    - ``null_count`` is the frequency profiler's count (nulls plus empty
      strings); completeness separates the two, so ``missing_count`` holds
      only true nulls while ``fill_rate`` excludes both.
    - ``duplicate_count`` counts every occurrence of a repeating value, not
      just the occurrences after the first.
    - The quality score starts at 100 and loses fixed penalties; it is never
      negative.
"""

import logging
import math
from collections import Counter
from typing import Any, Dict, List, Sequence

from scipy.stats import entropy

from field_profiler.core.constants import (
    CARDINALITY_HIGH_THRESHOLD,
    CARDINALITY_LOW_THRESHOLD,
    DEFAULT_TOP_DUPLICATES_LIMIT,
    HIGHLY_SKEWED_EVENNESS_THRESHOLD,
    QUALITY_FAIR_SCORE,
    QUALITY_GOOD_SCORE,
    SKEWED_EVENNESS_THRESHOLD,
)
from field_profiler.profiler.profile_result import DataQualityMetrics
from field_profiler.profiler.values import Row, iter_cells

logger = logging.getLogger(__name__)

CARDINALITY_LEVELS = {
    "High": {
        "classification": "High Cardinality",
        "color": "blue",
        "recommendation": (
            "Potential identifier/key field. Consider using as a primary key "
            "or unique identifier."
        ),
    },
    "Medium": {
        "classification": "Medium Cardinality",
        "color": "yellow",
        "recommendation": (
            "Good for filtering and grouping operations. Balanced selectivity "
            "for analysis."
        ),
    },
    "Low": {
        "classification": "Low Cardinality",
        "color": "green",
        "recommendation": (
            "Good dimension candidate. Suitable for filtering, grouping, and "
            "categorical analysis."
        ),
    },
}

# (minimum evenness, label), checked in order
EVENNESS_LABELS = (
    (0.8, "Very Even"),
    (0.6, "Moderately Even"),
    (0.4, "Slightly Skewed"),
    (0.2, "Moderately Skewed"),
    (0.0, "Highly Skewed"),
)


def _percentage(count: float, total: int) -> float:
    return round(count / total * 100, 2) if total else 0.0


def calculate_completeness(
    total_rows: int, null_count: int, empty_string_count: int
) -> Dict[str, Any]:
    """
    Completeness of a field.

    Args:
        total_rows: Rows in the dataset
        null_count: Null plus empty-string cells
        empty_string_count: Empty-string cells

    Returns:
        Completeness metrics
    """
    missing_count = null_count - empty_string_count
    return {
        "non_null_percentage": _percentage(total_rows - missing_count, total_rows),
        "fill_rate": _percentage(total_rows - null_count, total_rows),
        "missing_count": missing_count,
        "missing_percentage": _percentage(missing_count, total_rows),
        "empty_string_count": empty_string_count,
        "empty_string_percentage": _percentage(empty_string_count, total_rows),
    }


def classify_cardinality(ratio: float) -> Dict[str, Any]:
    """Cardinality level, color and recommendation for a distinct/total ratio."""
    if ratio >= CARDINALITY_HIGH_THRESHOLD:
        level = "High"
    elif ratio >= CARDINALITY_LOW_THRESHOLD:
        level = "Medium"
    else:
        level = "Low"
    return {
        "ratio": round(ratio, 4),
        "ratio_percentage": round(ratio * 100, 2),
        "level": level,
        **CARDINALITY_LEVELS[level],
    }


def calculate_uniqueness(
    value_counts: Counter,
    total_rows: int,
    unique_value_count: int,
    top_duplicates_limit: int = DEFAULT_TOP_DUPLICATES_LIMIT,
) -> Dict[str, Any]:
    """
    Duplicate statistics.

    Args:
        value_counts: Occurrences per distinct non-null value
        total_rows: Rows in the dataset
        unique_value_count: Distinct non-null values
        top_duplicates_limit: Repeating values listed

    Returns:
        Uniqueness metrics with the most frequent repeating values
    """
    repeating = [(value, count) for value, count in value_counts.most_common() if count > 1]
    duplicate_count = sum(count for _, count in repeating)

    return {
        "unique_percentage": _percentage(unique_value_count, total_rows),
        "duplicate_count": duplicate_count,
        "duplicate_percentage": _percentage(duplicate_count, total_rows),
        "duplicated_distinct_values": len(repeating),
        "top_duplicates": [
            {"value": value, "count": count, "percentage": _percentage(count, total_rows)}
            for value, count in repeating[:top_duplicates_limit]
        ],
    }


def calculate_distribution_quality(value_counts: Counter) -> Dict[str, Any]:
    """
    Shannon entropy and evenness of the value distribution.

    Evenness is entropy divided by its maximum, log2 of the distinct count.
    It is 0 when there is at most one distinct value, and such a distribution
    is not reported as skewed.
    """
    if len(value_counts) <= 1:
        return {
            "evenness_score": 0.0,
            "is_skewed": False,
            "skewness": "N/A",
            "shannon_entropy": 0.0,
            "max_entropy": 0.0,
        }

    shannon_entropy = float(entropy(list(value_counts.values()), base=2))
    max_entropy = math.log2(len(value_counts))
    evenness = shannon_entropy / max_entropy if max_entropy > 0 else 0.0
    # Floating point can push a perfectly even distribution past 1
    evenness = min(evenness, 1.0)

    label = next(name for minimum, name in EVENNESS_LABELS if evenness >= minimum)
    return {
        "evenness_score": round(evenness, 4),
        "is_skewed": evenness < SKEWED_EVENNESS_THRESHOLD,
        "skewness": label,
        "shannon_entropy": round(shannon_entropy, 4),
        "max_entropy": round(max_entropy, 4),
    }


def quality_color(completeness: Dict[str, Any], distribution: Dict[str, Any]) -> str:
    """Traffic light color for the assessment."""
    if completeness["non_null_percentage"] < 50 or completeness["fill_rate"] < 30:
        return "red"
    if completeness["non_null_percentage"] < 90 or completeness["fill_rate"] < 80:
        return "yellow"
    if distribution["is_skewed"] and distribution["evenness_score"] < HIGHLY_SKEWED_EVENNESS_THRESHOLD:
        return "yellow"
    return "green"


def generate_assessment(
    completeness: Dict[str, Any],
    distribution: Dict[str, Any],
    unique_value_count: int,
    total_rows: int,
) -> Dict[str, Any]:
    """
    Overall quality score with issues and warnings.

    Returns:
        Dict with quality_score (0-100), quality_level, color, issues, warnings
    """
    issues: List[str] = []
    warnings: List[str] = []
    score = 100

    missing_percentage = completeness["missing_percentage"]
    if missing_percentage > 50:
        issues.append("Critical: More than 50% of values are missing")
        score -= 40
    elif missing_percentage > 10:
        warnings.append(f"{missing_percentage:.1f}% of values are missing")
        score -= 10

    fill_rate = completeness["fill_rate"]
    if fill_rate < 50:
        issues.append("Critical: Low fill rate with many empty strings")
        score -= 20
    elif fill_rate < 80:
        warnings.append(f"Fill rate is {fill_rate:.1f}% (many empty strings)")
        score -= 5

    if unique_value_count <= 1 and total_rows > 1:
        if unique_value_count == 1:
            warnings.append("Field contains a single distinct value")
        else:
            warnings.append("Field contains no values")
        score -= 10

    if distribution["is_skewed"] and distribution["evenness_score"] < HIGHLY_SKEWED_EVENNESS_THRESHOLD:
        warnings.append(f"Distribution is {distribution['skewness'].lower()}")
        score -= 5

    score = max(0, score)
    if score >= QUALITY_GOOD_SCORE:
        level = "Good"
    elif score >= QUALITY_FAIR_SCORE:
        level = "Fair"
    else:
        level = "Poor"

    return {
        "quality_score": score,
        "quality_level": level,
        "color": quality_color(completeness, distribution),
        "issues": issues,
        "warnings": warnings,
    }


def calculate_data_quality_metrics(
    rows: Sequence[Row],
    field_name: str,
    unique_value_count: int,
    null_count: int,
    empty_string_count: int = 0,
    top_duplicates_limit: int = DEFAULT_TOP_DUPLICATES_LIMIT,
) -> DataQualityMetrics:
    """
    Calculate the data quality metrics of a field.

    Args:
        rows: Dataset rows
        field_name: Field to assess
        unique_value_count: Distinct non-null values (not truncated)
        null_count: Null plus empty-string cells
        empty_string_count: Empty-string cells
        top_duplicates_limit: Repeating values listed in uniqueness

    Returns:
        DataQualityMetrics (with ``error`` set when there are no rows)
    """
    if not rows:
        return DataQualityMetrics(error="No data available for quality analysis")

    total_rows = len(rows)
    value_counts: Counter = Counter(
        cell.text for cell in iter_cells(rows, field_name) if not cell.is_null
    )

    completeness = calculate_completeness(total_rows, null_count, empty_string_count)
    distribution = calculate_distribution_quality(value_counts)

    return DataQualityMetrics(
        total_rows=total_rows,
        null_count=null_count,
        completeness=completeness,
        cardinality=classify_cardinality(unique_value_count / total_rows),
        uniqueness=calculate_uniqueness(
            value_counts, total_rows, unique_value_count, top_duplicates_limit
        ),
        distribution=distribution,
        assessment=generate_assessment(
            completeness, distribution, unique_value_count, total_rows
        ),
    )
