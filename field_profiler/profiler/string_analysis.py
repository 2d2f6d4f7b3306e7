"""
String Analysis Engine - textual profiling of text fields.

Architecture:
    StringAnalyzer runs five independent passes over the non-null text
    values of a field:
    1. Length statistics and length histogram
    2. Common prefixes and suffixes
    3. Character composition and whitespace / non-ASCII flags
    4. Case classification (upper, lower, title, mixed)
    5. Format detection against ordered matcher tables

Design Decisions:
    - Matcher tables are module-level tuples of (kind, compiled pattern),
      evaluated in order; the first phone, SSN or date-string shape that
      matches wins. SSN shapes are only tried when no phone shape matched,
      since several of them overlap with local phone numbers.
    - Patterns are compiled with ``re.ASCII`` so ``\\d`` and ``\\w`` mean
      ASCII digits and word characters.
    - Case detection uses ``str.isupper`` / ``str.islower`` and therefore
      handles accented letters. Values without cased letters are not
      classified.
    - Percentages are rounded to 1 decimal; at most 5 samples are kept per
      detected format.
"""

import logging
import re
from collections import Counter
from typing import Any, Dict, List, Pattern, Sequence, Tuple

from field_profiler.core.constants import (
    MAX_AFFIX_LENGTH,
    MAX_AFFIXES_REPORTED,
    MAX_FORMAT_SAMPLES,
    MIN_AFFIX_LENGTH,
    MIN_AFFIX_OCCURRENCES,
)
from field_profiler.profiler.profile_result import StringAnalysis
from field_profiler.profiler.values import Row, iter_cells

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$", re.ASCII)
URL_PATTERN = re.compile(r"^(https?://)?[\da-z.-]+\.[a-z.]{2,6}[/\w .-]*/?$", re.ASCII | re.IGNORECASE)

PHONE_PATTERNS: Tuple[Tuple[str, Pattern], ...] = tuple(
    (country, re.compile(pattern, re.ASCII))
    for country, pattern in (
        ("US", r"^(\+1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}$"),
        ("UK", r"^(\+44[-.\s]?)?(\d{4}[-.\s]?\d{6}|\d{5}[-.\s]?\d{5})$"),
        ("DE", r"^(\+49[-.\s]?\d{2,4}[-.\s]?\d{5,8}|0\d{2,4}[-.\s]?\d{5,8})$"),
        ("FR", r"^(\+33[-.\s]?\d[-.\s]?\d{2}[-.\s]?\d{2}[-.\s]?\d{2}[-.\s]?\d{2}"
               r"|0\d[-.\s]?\d{2}[-.\s]?\d{2}[-.\s]?\d{2}[-.\s]?\d{2})$"),
        ("NL", r"^(\+31[-.\s]?\d{1,2}[-.\s]?\d{8}|0\d[-.\s]?\d{8})$"),
        ("BE", r"^(\+32[-.\s]?\d{1,2}[-.\s]?\d{6,7}|0\d{1,2}[-.\s]?\d{6,7})$"),
        ("SE", r"^(\+46[-.\s]?\d{2,3}[-.\s]?\d{6,7}|0\d{2,3}[-.\s]?\d{6,7})$"),
        ("DK", r"^(\+45[-.\s]?)?\d{8}$"),
        ("FI", r"^(\+358[-.\s]?\d{1,2}[-.\s]?\d{6,8}|0\d{1,2}[-.\s]?\d{6,8})$"),
        ("generic", r"^\+\d{1,3}[-.\s]?\d{4,14}$"),
    )
)

SSN_PATTERNS: Tuple[Tuple[str, Pattern], ...] = tuple(
    (country, re.compile(pattern, re.ASCII))
    for country, pattern in (
        ("US", r"^\d{3}-?\d{2}-?\d{4}$"),
        ("UK", r"^[A-Z]{2}\d{6}[A-Z]$"),
        ("DE", r"^\d{8}[A-Z]\d{3}$"),
        ("FR", r"^[12]\d{2}(0[1-9]|1[0-2])\d{10}$"),
        ("NL", r"^\d{9}$"),
        ("BE", r"^\d{2}\.\d{2}\.\d{2}-\d{3}\.\d{2}$"),
        ("SE", r"^\d{6}-?\d{4}$"),
        ("DK", r"^\d{6}-?\d{4}$"),
        ("FI", r"^\d{6}[-+A]?\d{3}[0-9A-Z]$"),
    )
)

DATE_STRING_PATTERNS: Tuple[Tuple[str, Pattern], ...] = tuple(
    (name, re.compile(pattern, re.ASCII))
    for name, pattern in (
        ("ISO 8601", r"^\d{4}-\d{2}-\d{2}(T\d{2}:\d{2}:\d{2}(\.\d{1,3})?(Z|[+-]\d{2}:\d{2})?)?$"),
        ("US format", r"^\d{1,2}/\d{1,2}/\d{2,4}$"),
        ("EU format", r"^\d{1,2}\.\d{1,2}\.\d{2,4}$"),
        ("Long format", r"^\w{3,9}\s+\d{1,2},?\s+\d{4}$"),
    )
)

_ASCII_ALPHA = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_DIGITS = frozenset("0123456789")


def _percentage(count: int, total: int) -> float:
    return round(count / total * 100, 1) if total else 0.0


def _first_match(value: str, patterns: Tuple[Tuple[str, Pattern], ...]):
    for name, pattern in patterns:
        if pattern.match(value):
            return name
    return None


class _FormatTally:
    """Count, samples and optional per-shape breakdown of one format."""

    def __init__(self, breakdown_key: str = None):
        self.count = 0
        self.samples: List[str] = []
        self.breakdown_key = breakdown_key
        self.breakdown: Counter = Counter()

    def add(self, value: str, shape: str = None) -> None:
        self.count += 1
        if len(self.samples) < MAX_FORMAT_SAMPLES:
            self.samples.append(value)
        if shape is not None:
            self.breakdown[shape] += 1

    def to_dict(self, total: int) -> Dict[str, Any]:
        result = {
            "count": self.count,
            "percentage": _percentage(self.count, total),
            "samples": list(self.samples),
        }
        if self.breakdown_key:
            result[self.breakdown_key] = dict(self.breakdown)
        return result


class StringAnalyzer:
    """
    Text analysis of a field.

    Example:
        >>> result = StringAnalyzer().analyze(rows, "customer_email")
        >>> result.format_detection["email"]["count"]
        42
    """

    def analyze(self, rows: Sequence[Row], field_name: str) -> StringAnalysis:
        """
        Analyze the text values of a field.

        Args:
            rows: Dataset rows
            field_name: Field to analyze

        Returns:
            StringAnalysis (with ``error`` set when there is nothing to analyze)
        """
        if not rows:
            return StringAnalysis(error="No data available")

        values: List[str] = []
        null_count = 0
        for cell in iter_cells(rows, field_name):
            if cell.is_null:
                null_count += 1
            else:
                values.append(cell.text)

        if not values:
            return StringAnalysis(error="No non-null values available", null_count=null_count)

        return StringAnalysis(
            is_string=True,
            value_count=len(values),
            null_count=null_count,
            length_stats=self.calculate_length_stats(values),
            patterns={
                "prefixes": self.detect_affixes(values, suffix=False),
                "suffixes": self.detect_affixes(values, suffix=True),
            },
            character_composition=self.analyze_character_composition(values),
            case_analysis=self.analyze_case(values),
            format_detection=self.detect_formats(values),
        )

    @staticmethod
    def calculate_length_stats(values: List[str]) -> Dict[str, Any]:
        """Min, max, average and modal length plus a length histogram."""
        lengths = [len(value) for value in values]
        frequency = Counter(lengths)
        most_common, most_common_count = frequency.most_common(1)[0]

        return {
            "min": min(lengths),
            "max": max(lengths),
            "average": round(sum(lengths) / len(lengths), 2),
            "most_common": most_common,
            "most_common_count": most_common_count,
            "distribution": [
                {"length": length, "count": frequency[length]}
                for length in sorted(frequency)
            ],
        }

    @staticmethod
    def detect_affixes(values: List[str], suffix: bool = False) -> List[Dict[str, Any]]:
        """
        Find prefixes (or suffixes) shared by several values.

        Args:
            values: Text values
            suffix: Look at value endings instead of beginnings

        Returns:
            Up to 10 affixes ordered by count (ties in first-seen order)
        """
        frequency: Counter = Counter()
        for value in values:
            longest = min(len(value), MAX_AFFIX_LENGTH)
            for length in range(MIN_AFFIX_LENGTH, longest + 1):
                frequency[value[-length:] if suffix else value[:length]] += 1

        key = "suffix" if suffix else "prefix"
        return [
            {key: affix, "count": count, "percentage": _percentage(count, len(values))}
            for affix, count in frequency.most_common()
            if count >= MIN_AFFIX_OCCURRENCES
        ][:MAX_AFFIXES_REPORTED]

    @staticmethod
    def analyze_character_composition(values: List[str]) -> Dict[str, Any]:
        """Share of alphanumeric, whitespace and special characters."""
        total_chars = alphabetic = numeric = whitespace = special = non_ascii_chars = 0
        leading = trailing = non_ascii_values = 0

        for value in values:
            total_chars += len(value)
            if value[:1].isspace():
                leading += 1
            if value[-1:].isspace():
                trailing += 1

            has_non_ascii = False
            for char in value:
                if char in _ASCII_ALPHA:
                    alphabetic += 1
                elif char in _ASCII_DIGITS:
                    numeric += 1
                elif char.isspace():
                    whitespace += 1
                else:
                    special += 1
                if ord(char) > 127:
                    non_ascii_chars += 1
                    has_non_ascii = True
            if has_non_ascii:
                non_ascii_values += 1

        return {
            "alphanumeric_percentage": _percentage(alphabetic + numeric, total_chars),
            "alphabetic_percentage": _percentage(alphabetic, total_chars),
            "numeric_percentage": _percentage(numeric, total_chars),
            "special_char_percentage": _percentage(special, total_chars),
            "whitespace_percentage": _percentage(whitespace, total_chars),
            "leading_whitespace_count": leading,
            "trailing_whitespace_count": trailing,
            "non_ascii_count": non_ascii_values,
            "non_ascii_percentage": _percentage(non_ascii_chars, total_chars),
        }

    @staticmethod
    def classify_case(value: str):
        """
        Case class of a value.

        Returns:
            "uppercase", "lowercase", "title", "mixed", or None when the
            value has no cased letters
        """
        has_upper = any(char.isupper() for char in value)
        has_lower = any(char.islower() for char in value)
        if not (has_upper or has_lower):
            return None
        if not has_lower:
            return "uppercase"
        if not has_upper:
            return "lowercase"

        words = value.split()
        if all(word[0].isupper() and not any(char.isupper() for char in word[1:]) for word in words):
            return "title"
        return "mixed"

    def analyze_case(self, values: List[str]) -> Dict[str, Any]:
        """Counts and percentages of each case class."""
        counts = Counter(self.classify_case(value) for value in values)
        total = len(values)
        result: Dict[str, Any] = {}
        for case, key in (("uppercase", "uppercase"), ("lowercase", "lowercase"),
                          ("mixed", "mixed_case"), ("title", "title_case")):
            result[f"{key}_count"] = counts[case]
            result[f"{key}_percentage"] = _percentage(counts[case], total)
        return result

    @staticmethod
    def detect_formats(values: List[str]) -> Dict[str, Any]:
        """
        Match trimmed values against the format tables.

        Returns:
            Per-format count, percentage and samples; phone and SSN carry a
            country breakdown, date strings a pattern breakdown
        """
        email = _FormatTally()
        url = _FormatTally()
        phone = _FormatTally("country_breakdown")
        ssn = _FormatTally("country_breakdown")
        date_string = _FormatTally("pattern_breakdown")

        for value in values:
            trimmed = value.strip()
            if EMAIL_PATTERN.match(trimmed):
                email.add(trimmed)
            if URL_PATTERN.match(trimmed):
                url.add(trimmed)

            country = _first_match(trimmed, PHONE_PATTERNS)
            if country is not None:
                phone.add(trimmed, country)
            else:
                country = _first_match(trimmed, SSN_PATTERNS)
                if country is not None:
                    ssn.add(trimmed, country)

            pattern_name = _first_match(trimmed, DATE_STRING_PATTERNS)
            if pattern_name is not None:
                date_string.add(trimmed, pattern_name)

        total = len(values)
        return {
            "email": email.to_dict(total),
            "url": url.to_dict(total),
            "phone": phone.to_dict(total),
            "ssn": ssn.to_dict(total),
            "date_string": date_string.to_dict(total),
        }


def calculate_string_analysis(rows: Sequence[Row], field_name: str) -> StringAnalysis:
    """Run ``StringAnalyzer.analyze`` on a field."""
    return StringAnalyzer().analyze(rows, field_name)
