"""
Type Detector - classifies a field as numeric, date-like or text.

Architecture:
    Each check walks the non-null cells of a field once and compares the
    fraction of matching values with a threshold:
    1. Numeric: the value is a number, or text that parses completely as a
       finite decimal / scientific literal (>= 90% by default)
    2. Date-like: the value matches one of the date shapes in
       ``date_detection.DATE_SHAPES`` (>= 80% by default)
    3. Text: anything with at least one non-null value that is neither

Design Decisions:
    - ``coerce_number`` is the only place text is turned into a number.
      Every engine that needs numbers goes through it.
    - Numeric and date flags are independent; compact dates such as
      20240115 satisfy both.
    - A field with no non-null values is none of the three.

Usage:
    info = detect_field_type(rows, "amount")
    if info.is_numeric: ...
"""

import logging
import math
import re
from typing import List, NamedTuple, Optional, Sequence

from field_profiler.core.constants import NUMERIC_FIELD_THRESHOLD, DATE_FIELD_THRESHOLD
from field_profiler.profiler.date_detection import detect_date_format, match_date_shape
from field_profiler.profiler.profile_result import FieldTypeInfo
from field_profiler.profiler.values import CellValue, Row, ValueKind, field_sample

logger = logging.getLogger(__name__)

# Whole trimmed string: optional sign, digits with optional fraction, optional exponent
NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


class DateDetection(NamedTuple):
    """Outcome of the date-likeness check."""
    is_date: bool
    dominant_format: Optional[str]
    confidence: float


def coerce_number(cell: CellValue) -> Optional[float]:
    """
    Coerce a cell to a finite number.

    Args:
        cell: Classified cell

    Returns:
        The number, or None for nulls, non-numeric text and infinities
    """
    if cell.kind is ValueKind.NUMBER:
        return cell.number if math.isfinite(cell.number) else None
    if cell.kind is ValueKind.NULL:
        return None

    candidate = cell.text.strip()
    if not NUMBER_PATTERN.match(candidate):
        return None
    number = float(candidate)
    return number if math.isfinite(number) else None


def _numeric_ratio(cells: List[CellValue]) -> float:
    if not cells:
        return 0.0
    numeric = sum(1 for cell in cells if coerce_number(cell) is not None)
    return numeric / len(cells)


def _date_detection(cells: List[CellValue], threshold: float) -> DateDetection:
    if not cells:
        return DateDetection(False, None, 0.0)

    date_like = sum(1 for cell in cells if match_date_shape(cell.text) is not None)
    if date_like / len(cells) < threshold:
        return DateDetection(False, None, 0.0)

    info = detect_date_format(cells)
    return DateDetection(True, info.dominant_format, info.confidence)


def is_numeric_field(
    rows: Sequence[Row],
    field_name: str,
    threshold: float = NUMERIC_FIELD_THRESHOLD,
) -> bool:
    """
    Check whether a field is predominantly numeric.

    Args:
        rows: Dataset rows
        field_name: Field to check
        threshold: Minimum fraction of non-null values that must be numeric

    Returns:
        True if at least ``threshold`` of the non-null values are numbers
    """
    cells = field_sample(rows, field_name)
    return bool(cells) and _numeric_ratio(cells) >= threshold


def date_field_detection(
    rows: Sequence[Row],
    field_name: str,
    threshold: float = DATE_FIELD_THRESHOLD,
) -> DateDetection:
    """
    Check whether a field is date-like and find its dominant date shape.

    Args:
        rows: Dataset rows
        field_name: Field to check
        threshold: Minimum fraction of non-null values that must be dates

    Returns:
        DateDetection with the dominant shape and its share (0..1) among
        the date-like values
    """
    return _date_detection(field_sample(rows, field_name), threshold)


def is_date_field(
    rows: Sequence[Row],
    field_name: str,
    threshold: float = DATE_FIELD_THRESHOLD,
) -> bool:
    """True if at least ``threshold`` of the non-null values are dates."""
    return date_field_detection(rows, field_name, threshold).is_date


def is_string_field(
    rows: Sequence[Row],
    field_name: str,
    numeric_threshold: float = NUMERIC_FIELD_THRESHOLD,
    date_threshold: float = DATE_FIELD_THRESHOLD,
) -> bool:
    """True if the field has values but is neither numeric nor date-like."""
    return detect_field_type(rows, field_name, numeric_threshold, date_threshold).is_string


def detect_field_type(
    rows: Sequence[Row],
    field_name: str,
    numeric_threshold: float = NUMERIC_FIELD_THRESHOLD,
    date_threshold: float = DATE_FIELD_THRESHOLD,
) -> FieldTypeInfo:
    """
    Classify a field.

    Args:
        rows: Dataset rows
        field_name: Field to classify
        numeric_threshold: Fraction required for the numeric flag
        date_threshold: Fraction required for the date flag

    Returns:
        FieldTypeInfo with the three flags and the dominant date format
    """
    cells = field_sample(rows, field_name)
    if not cells:
        logger.debug(f"Field '{field_name}' has no non-null values")
        return FieldTypeInfo()

    is_numeric = _numeric_ratio(cells) >= numeric_threshold
    dates = _date_detection(cells, date_threshold)

    info = FieldTypeInfo(
        is_numeric=is_numeric,
        is_date=dates.is_date,
        is_string=not (is_numeric or dates.is_date),
        date_format=dates.dominant_format,
        date_confidence=dates.confidence,
    )
    logger.debug(
        f"Field '{field_name}': numeric={info.is_numeric}, date={info.is_date}, "
        f"string={info.is_string}"
    )
    return info
