"""
Date shape detection and parsing.

The recognized date shapes form an ordered table of (kind, matcher) pairs.
A value is tried against the shapes in priority order and the first shape
whose pattern matches *and* yields a valid calendar date wins. The table is
shared by the type detector and the temporal analysis engine so both agree
on what a date is.

All parsed instants are naive datetimes. Values carrying a UTC offset are
converted to UTC before the offset is dropped; epoch timestamps are UTC.
"""

import re
from collections import Counter
from datetime import datetime, timedelta
from typing import Callable, Dict, Iterable, NamedTuple, Optional, Pattern, Tuple

from field_profiler.profiler.values import CellValue, classify_value

_EPOCH = datetime(1970, 1, 1)


class DateShape(NamedTuple):
    """One recognized date shape."""
    kind: str
    description: str
    pattern: Pattern
    parse: Callable[["re.Match"], Optional[datetime]]


class DateFormatInfo(NamedTuple):
    """Dominant date shape among a set of values."""
    dominant_format: str
    format_description: str
    confidence: float
    format_counts: Dict[str, int]


def _safe_date(year: int, month: int, day: int, *time_parts: int) -> Optional[datetime]:
    try:
        return datetime(year, month, day, *time_parts)
    except ValueError:
        return None


def _parse_ymd(match: "re.Match") -> Optional[datetime]:
    year, month, day = (int(part) for part in match.group(1, 2, 3))
    return _safe_date(year, month, day)


def _parse_iso_datetime(match: "re.Match") -> Optional[datetime]:
    year, month, day, hour, minute = (int(part) for part in match.group(1, 2, 3, 4, 5))
    second = int(match.group(6) or 0)
    fraction = match.group(7) or ""
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0

    parsed = _safe_date(year, month, day, hour, minute, second, microsecond)
    if parsed is None:
        return None

    offset = match.group(8)
    if offset and offset != "Z":
        sign = -1 if offset[0] == "-" else 1
        digits = offset[1:].replace(":", "")
        hours, minutes = int(digits[:2]), int(digits[2:])
        if hours > 23 or minutes > 59:
            return None
        try:
            parsed = parsed - sign * timedelta(hours=hours, minutes=minutes)
        except OverflowError:
            return None
    return parsed


def _parse_epoch_ms(match: "re.Match") -> Optional[datetime]:
    return _EPOCH + timedelta(milliseconds=int(match.group(0)))


def _parse_us(match: "re.Match") -> Optional[datetime]:
    month, day, year = (int(part) for part in match.group(1, 2, 3))
    return _safe_date(year, month, day)


def _parse_eu(match: "re.Match") -> Optional[datetime]:
    day, month, year = (int(part) for part in match.group(1, 2, 3))
    return _safe_date(year, month, day)


# Evaluated in order; the first shape that matches and parses wins.
DATE_SHAPES: Tuple[DateShape, ...] = (
    DateShape(
        "ISO_DATE",
        "ISO 8601 date (YYYY-MM-DD)",
        re.compile(r"^(\d{4})-(\d{2})-(\d{2})$"),
        _parse_ymd,
    ),
    DateShape(
        "ISO_8601",
        "ISO 8601 with time",
        re.compile(
            r"^(\d{4})-(\d{2})-(\d{2})[T ](\d{2}):(\d{2})"
            r"(?::(\d{2})(?:\.(\d{1,9}))?)?"
            r"(Z|[+-]\d{2}:?\d{2})?$"
        ),
        _parse_iso_datetime,
    ),
    DateShape(
        "TIMESTAMP_MS",
        "Unix timestamp (milliseconds)",
        re.compile(r"^\d{13}$"),
        _parse_epoch_ms,
    ),
    DateShape(
        "US_DATE",
        "US format (M/D/YYYY)",
        re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$"),
        _parse_us,
    ),
    DateShape(
        "EU_DATE",
        "EU format (D.M.YYYY)",
        re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$"),
        _parse_eu,
    ),
    DateShape(
        "YYYYMMDD",
        "Compact format (YYYYMMDD)",
        re.compile(r"^(\d{4})(\d{2})(\d{2})$"),
        _parse_ymd,
    ),
)

OTHER_FORMAT = "OTHER"
OTHER_FORMAT_DESCRIPTION = "Mixed or other format"


def match_date_shape(text: str) -> Optional[Tuple[str, datetime]]:
    """
    Match text against the shape table.

    Args:
        text: Candidate value (surrounding whitespace is ignored)

    Returns:
        (shape kind, parsed datetime) for the first valid shape, else None
    """
    candidate = text.strip()
    if not candidate:
        return None
    for shape in DATE_SHAPES:
        match = shape.pattern.match(candidate)
        if match is None:
            continue
        parsed = shape.parse(match)
        if parsed is not None:
            return shape.kind, parsed
    return None


def parse_date(value) -> Optional[datetime]:
    """
    Parse a raw value or CellValue into a datetime.

    Returns:
        Parsed datetime, or None for nulls and non-dates
    """
    cell = value if isinstance(value, CellValue) else classify_value(value)
    if cell.is_null:
        return None
    matched = match_date_shape(cell.text)
    return matched[1] if matched else None


def describe_format(kind: str) -> str:
    """Human readable description of a shape kind."""
    for shape in DATE_SHAPES:
        if shape.kind == kind:
            return shape.description
    return OTHER_FORMAT_DESCRIPTION


def detect_date_format(cells: Iterable[CellValue]) -> DateFormatInfo:
    """
    Find the dominant date shape among date-like values.

    Confidence is the fraction (0..1) of date-like values that use the
    dominant shape. Ties go to the shape with higher priority.

    Args:
        cells: Classified values (nulls and non-dates are ignored)

    Returns:
        DateFormatInfo with per-shape counts
    """
    counts: Counter = Counter()
    for cell in cells:
        if cell.is_null:
            continue
        matched = match_date_shape(cell.text)
        if matched:
            counts[matched[0]] += 1

    format_counts = {shape.kind: counts.get(shape.kind, 0) for shape in DATE_SHAPES}
    total = sum(format_counts.values())
    if total == 0:
        return DateFormatInfo(OTHER_FORMAT, OTHER_FORMAT_DESCRIPTION, 0.0, format_counts)

    dominant = max(DATE_SHAPES, key=lambda shape: format_counts[shape.kind]).kind
    return DateFormatInfo(
        dominant,
        describe_format(dominant),
        format_counts[dominant] / total,
        format_counts,
    )
