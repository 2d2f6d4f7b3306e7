"""
Temporal analysis for date-like fields.

Provides:
- Date range with a human readable span and the dominant date format
- Distribution by year, month, quarter and day of week
- Gap detection over the distinct calendar days
- Monthly trend classification from a least-squares slope

Dates are handled as plain ``datetime`` objects rather than pandas
timestamps so that the whole range of 13-digit millisecond epochs
(up to the year 2286) stays representable.
"""

import calendar
import logging
from collections import Counter
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence

from scipy.stats import linregress

from field_profiler.core.constants import (
    MAX_GAP_SAMPLES,
    TEMPORAL_MIN_VALID_RATIO,
    TREND_CONSTANT_TOLERANCE,
    TREND_MIN_BUCKETS,
    TREND_STRONG_THRESHOLD,
)
from field_profiler.profiler.date_detection import detect_date_format, match_date_shape
from field_profiler.profiler.profile_result import TemporalAnalysis
from field_profiler.profiler.values import CellValue, Row, iter_cells

logger = logging.getLogger(__name__)

MONTH_NAMES = tuple(calendar.month_name[1:])
DAY_NAMES = tuple(calendar.day_name)

TREND_DESCRIPTIONS = {
    "insufficient_data": "Insufficient data for trend analysis",
    "constant": "Relatively constant over time",
    "moderate_growth": "Moderate growth trend detected",
    "strong_growth": "Strong growth trend detected",
    "moderate_decline": "Moderate decline trend detected",
    "strong_decline": "Strong decline trend detected",
}


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count != 1 else ''}"


def describe_span(span_days: int) -> str:
    """
    Describe a span of whole days.

    Months are counted as 30 days and years as 365 days.

    Args:
        span_days: Whole days between the earliest and latest date

    Returns:
        Text such as "Single day", "2 weeks, 3 days" or "1 year, 2 months"
    """
    if span_days <= 0:
        return "Single day"
    if span_days < 7:
        return _plural(span_days, "day")
    if span_days < 31:
        weeks, days = divmod(span_days, 7)
        text = _plural(weeks, "week")
        return f"{text}, {_plural(days, 'day')}" if days else text
    if span_days < 365:
        return _plural(span_days // 30, "month")

    years, remainder = divmod(span_days, 365)
    months = remainder // 30
    text = _plural(years, "year")
    return f"{text}, {_plural(months, 'month')}" if months else text


class TemporalAnalyzer:
    """
    Analyze the dates of a field.

    Example:
        >>> analyzer = TemporalAnalyzer()
        >>> result = analyzer.analyze(rows, "order_date")
        >>> result.range["span_description"]
        '2 weeks, 3 days'
    """

    def __init__(self, min_valid_ratio: float = TEMPORAL_MIN_VALID_RATIO,
                 max_gap_samples: int = MAX_GAP_SAMPLES):
        """
        Initialize temporal analyzer.

        Args:
            min_valid_ratio: Fraction of non-null values that must parse as
                dates before the field is analyzed
            max_gap_samples: Maximum number of individual gaps reported
        """
        self.min_valid_ratio = min_valid_ratio
        self.max_gap_samples = max_gap_samples

    def analyze(self, rows: Sequence[Row], field_name: str) -> TemporalAnalysis:
        """
        Run the temporal analysis of a field.

        Args:
            rows: Dataset rows
            field_name: Field to analyze

        Returns:
            TemporalAnalysis; ``is_date`` is False with counts when too few
            values are dates, and ``error`` is set when there is nothing to
            analyze
        """
        if not rows:
            return TemporalAnalysis(error="No data available")

        dates: List[datetime] = []
        raw_cells: List[CellValue] = []
        null_count = 0
        invalid_count = 0

        for cell in iter_cells(rows, field_name):
            if cell.is_null:
                null_count += 1
                continue
            raw_cells.append(cell)
            matched = match_date_shape(cell.text)
            if matched is None:
                invalid_count += 1
            else:
                dates.append(matched[1])

        if not raw_cells:
            return TemporalAnalysis(error="No non-null values available", null_count=null_count)

        if len(dates) / len(raw_cells) < self.min_valid_ratio:
            logger.debug(
                f"Field '{field_name}' has too few valid dates "
                f"({len(dates)} of {len(raw_cells)})"
            )
            return TemporalAnalysis(
                is_date=False,
                date_count=len(dates),
                invalid_date_count=invalid_count,
                null_count=null_count,
            )

        dates.sort()
        total_rows = len(rows)

        return TemporalAnalysis(
            is_date=True,
            range=self._calculate_range(dates, raw_cells),
            distribution=self._calculate_distribution(dates),
            gaps=self._detect_gaps(dates),
            trends=self._analyze_trend(dates),
            quality={
                "null_count": null_count,
                "invalid_date_count": invalid_count,
                "valid_date_count": len(dates),
                "valid_percentage": round(len(dates) / total_rows * 100, 2),
                "total_rows": total_rows,
            },
        )

    def _calculate_range(self, dates: List[datetime], raw_cells: List[CellValue]) -> Dict[str, Any]:
        """Earliest/latest instant, span and dominant format."""
        earliest, latest = dates[0], dates[-1]
        span_days = (latest - earliest).days
        format_info = detect_date_format(raw_cells)

        return {
            "earliest": earliest.isoformat(),
            "latest": latest.isoformat(),
            "span_days": span_days,
            "span_description": describe_span(span_days),
            "format": {
                "dominant_format": format_info.dominant_format,
                "format_description": format_info.format_description,
                "confidence": round(format_info.confidence, 4),
                "format_counts": dict(format_info.format_counts),
            },
        }

    def _calculate_distribution(self, dates: List[datetime]) -> Dict[str, List[Dict[str, Any]]]:
        """Counts per year, month name, quarter and weekday; empty buckets omitted."""
        by_year = Counter(d.year for d in dates)
        by_month = Counter(d.month for d in dates)
        by_quarter = Counter((d.year, (d.month - 1) // 3 + 1) for d in dates)
        by_weekday = Counter(d.weekday() for d in dates)

        return {
            "by_year": [
                {"period": str(year), "count": by_year[year]}
                for year in sorted(by_year)
            ],
            "by_month": [
                {"period": MONTH_NAMES[month - 1], "count": by_month[month]}
                for month in range(1, 13) if by_month[month]
            ],
            "by_quarter": [
                {"period": f"Q{quarter} {year}", "count": by_quarter[(year, quarter)]}
                for year, quarter in sorted(by_quarter)
            ],
            "by_day_of_week": [
                {"period": DAY_NAMES[weekday], "count": by_weekday[weekday]}
                for weekday in range(7) if by_weekday[weekday]
            ],
        }

    def _detect_gaps(self, dates: List[datetime]) -> Dict[str, Any]:
        """
        Detect missing calendar days between the distinct dates.

        Returns:
            Dict with gap flags, largest gap, sample gaps and coverage
        """
        days: List[date] = sorted({d.date() for d in dates})
        expected = (days[-1] - days[0]).days + 1

        gaps = []
        for previous, current in zip(days, days[1:]):
            delta = (current - previous).days
            if delta > 1:
                gaps.append({"from": previous.isoformat(), "to": current.isoformat(), "days": delta})

        largest_gap: Optional[Dict[str, Any]] = None
        for gap in gaps:
            if largest_gap is None or gap["days"] > largest_gap["days"]:
                largest_gap = gap

        coverage = min(100.0, len(days) / expected * 100)

        return {
            "has_gaps": bool(gaps),
            "gap_count": len(gaps),
            "largest_gap": largest_gap,
            "gaps": gaps[:self.max_gap_samples],
            "coverage": round(coverage, 2),
            "expected_dates": expected,
            "actual_dates": len(days),
        }

    def _analyze_trend(self, dates: List[datetime]) -> Dict[str, Any]:
        """
        Classify the trend of monthly counts.

        Every calendar month between the first and last date is a bucket,
        including months without dates.
        """
        first, last = dates[0], dates[-1]
        start = first.year * 12 + first.month - 1
        bucket_count = last.year * 12 + last.month - 1 - start + 1

        if bucket_count < TREND_MIN_BUCKETS:
            return {
                "has_trend": False,
                "trend_type": "insufficient_data",
                "description": TREND_DESCRIPTIONS["insufficient_data"],
                "slope": None,
                "group_unit": "month",
                "period_count": bucket_count,
            }

        counts = [0] * bucket_count
        for d in dates:
            counts[d.year * 12 + d.month - 1 - start] += 1

        slope = float(linregress(range(bucket_count), counts).slope)
        mean_count = sum(counts) / bucket_count
        relative_slope = abs(slope) / mean_count

        if relative_slope < TREND_CONSTANT_TOLERANCE:
            trend_type = "constant"
        else:
            strength = "strong" if relative_slope > TREND_STRONG_THRESHOLD else "moderate"
            direction = "growth" if slope > 0 else "decline"
            trend_type = f"{strength}_{direction}"

        return {
            "has_trend": trend_type != "constant",
            "trend_type": trend_type,
            "description": TREND_DESCRIPTIONS[trend_type],
            "slope": slope,
            "group_unit": "month",
            "period_count": bucket_count,
        }


def calculate_temporal_analysis(
    rows: Sequence[Row],
    field_name: str,
    min_valid_ratio: float = TEMPORAL_MIN_VALID_RATIO,
) -> TemporalAnalysis:
    """Run ``TemporalAnalyzer.analyze`` with default settings."""
    return TemporalAnalyzer(min_valid_ratio=min_valid_ratio).analyze(rows, field_name)
