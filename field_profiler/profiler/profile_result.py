"""
Data structures for storing profiling results.

Each analyzer returns one of these dataclasses. Section payloads are plain
dictionaries of primitives (numbers, strings, lists) so that ``to_dict``
output can be serialized or compared without further conversion. An
analyzer that cannot run stores a message in ``error`` instead of raising.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional

from field_profiler.core.constants import DEFAULT_MAX_UNIQUE_VALUES


def _sections(obj, names: List[str]) -> Dict[str, Any]:
    """Collect the named attributes that are set."""
    return {
        name: getattr(obj, name)
        for name in names
        if getattr(obj, name) is not None
    }


@dataclass
class FrequencyEntry:
    """
    One row of a frequency table.

    Attributes:
        value: Canonical text of the value (or the null label)
        count: Occurrences of the value
        percentage: count / total rows * 100, rounded to 2 decimals
    """
    value: str
    count: int
    percentage: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "count": self.count,
            "percentage": self.percentage,
        }


@dataclass
class FrequencyProfile:
    """
    Bounded value frequency table for one field.

    Attributes:
        field_name: Profiled field
        total_rows: Rows in the dataset
        unique_values: Distinct non-null values seen (even past truncation)
        null_count: Null and empty-string cells
        empty_string_count: The part of null_count made of empty strings
        distributions: Entries sorted by count, null entry last
        truncated: True when more distinct values were seen than stored
        truncated_at: Maximum distinct values stored
        error: Reason the table could not be built
    """
    field_name: str
    total_rows: int = 0
    unique_values: int = 0
    null_count: int = 0
    empty_string_count: int = 0
    distributions: List[FrequencyEntry] = field(default_factory=list)
    truncated: bool = False
    truncated_at: int = DEFAULT_MAX_UNIQUE_VALUES
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        if self.error:
            return {"field_name": self.field_name, "error": self.error}
        return {
            "field_name": self.field_name,
            "total_rows": self.total_rows,
            "unique_values": self.unique_values,
            "null_count": self.null_count,
            "empty_string_count": self.empty_string_count,
            "distributions": [entry.to_dict() for entry in self.distributions],
            "truncated": self.truncated,
            "truncated_at": self.truncated_at,
        }


@dataclass
class FieldTypeInfo:
    """
    Type flags for a field.

    A field may be both numeric and date-like (compact YYYYMMDD dates or
    millisecond epochs); ``is_string`` is set only when it is neither.
    """
    is_numeric: bool = False
    is_date: bool = False
    is_string: bool = False
    date_format: Optional[str] = None
    date_confidence: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_numeric": self.is_numeric,
            "is_date": self.is_date,
            "is_string": self.is_string,
            "date_format": self.date_format,
            "date_confidence": round(self.date_confidence, 4),
        }


@dataclass
class NumericStatistics:
    """
    Descriptive statistics for a numeric field.

    When the field is not predominantly numeric only the counts are filled
    in and ``is_numeric`` is False.
    """
    is_numeric: bool = False
    descriptive: Optional[Dict[str, Any]] = None
    spread: Optional[Dict[str, Any]] = None
    distribution: Optional[Dict[str, Any]] = None
    outliers: Optional[Dict[str, Any]] = None
    quality: Optional[Dict[str, Any]] = None
    numeric_count: Optional[int] = None
    non_numeric_count: Optional[int] = None
    null_count: Optional[int] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {"is_numeric": self.is_numeric}
        result.update(_sections(self, [
            "descriptive", "spread", "distribution", "outliers", "quality",
            "numeric_count", "non_numeric_count", "null_count", "error",
        ]))
        return result


@dataclass
class TemporalAnalysis:
    """Range, distribution, gap and trend analysis of a date-like field."""
    is_date: bool = False
    range: Optional[Dict[str, Any]] = None
    distribution: Optional[Dict[str, Any]] = None
    gaps: Optional[Dict[str, Any]] = None
    trends: Optional[Dict[str, Any]] = None
    quality: Optional[Dict[str, Any]] = None
    date_count: Optional[int] = None
    invalid_date_count: Optional[int] = None
    null_count: Optional[int] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {"is_date": self.is_date}
        result.update(_sections(self, [
            "range", "distribution", "gaps", "trends", "quality",
            "date_count", "invalid_date_count", "null_count", "error",
        ]))
        return result


@dataclass
class StringAnalysis:
    """Length, pattern, composition, case and format analysis of text values."""
    is_string: bool = False
    value_count: Optional[int] = None
    null_count: Optional[int] = None
    length_stats: Optional[Dict[str, Any]] = None
    patterns: Optional[Dict[str, Any]] = None
    character_composition: Optional[Dict[str, Any]] = None
    case_analysis: Optional[Dict[str, Any]] = None
    format_detection: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {"is_string": self.is_string}
        result.update(_sections(self, [
            "value_count", "null_count", "length_stats", "patterns",
            "character_composition", "case_analysis", "format_detection",
            "error",
        ]))
        return result


@dataclass
class DataQualityMetrics:
    """
    Completeness, cardinality, uniqueness and distribution quality.

    ``total_rows`` and ``null_count`` repeat the frequency profile's values
    so both reports can be checked against each other.
    """
    total_rows: int = 0
    null_count: int = 0
    completeness: Optional[Dict[str, Any]] = None
    cardinality: Optional[Dict[str, Any]] = None
    uniqueness: Optional[Dict[str, Any]] = None
    distribution: Optional[Dict[str, Any]] = None
    assessment: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.error:
            return {"error": self.error}
        result = {"total_rows": self.total_rows, "null_count": self.null_count}
        result.update(_sections(self, [
            "completeness", "cardinality", "uniqueness", "distribution",
            "assessment",
        ]))
        return result


@dataclass
class FieldProfile:
    """
    Composite profile of one field.

    Attributes:
        field_name: Profiled field
        frequency: Value frequency table
        type_info: Numeric / date / text flags
        statistics: Numeric statistics, when the field is numeric
        temporal_analysis: Temporal analysis, when the field is date-like
        string_analysis: Text analysis, when the field is text
        quality_metrics: Data quality metrics
        error: Reason the field could not be profiled
    """
    field_name: str
    frequency: Optional[FrequencyProfile] = None
    type_info: FieldTypeInfo = field(default_factory=FieldTypeInfo)
    statistics: Optional[NumericStatistics] = None
    temporal_analysis: Optional[TemporalAnalysis] = None
    string_analysis: Optional[StringAnalysis] = None
    quality_metrics: Optional[DataQualityMetrics] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, with the frequency table at the top level."""
        if self.error:
            return {"field_name": self.field_name, "error": self.error}

        result = self.frequency.to_dict() if self.frequency else {"field_name": self.field_name}
        result.update(self.type_info.to_dict())
        for name in ("statistics", "temporal_analysis", "string_analysis", "quality_metrics"):
            section = getattr(self, name)
            result[name] = section.to_dict() if section is not None else None
        return result


@dataclass
class ProfileReport:
    """
    Result of one profiling request.

    Attributes:
        fields: Field profiles in the requested order
        total_rows: Rows in the dataset
        large_dataset_warning: True when the row count exceeds the threshold
        error: Reason the request could not be served
    """
    fields: List[FieldProfile] = field(default_factory=list)
    total_rows: int = 0
    large_dataset_warning: bool = False
    error: Optional[str] = None

    def get_field(self, field_name: str) -> Optional[FieldProfile]:
        """Return the profile of a field, or None."""
        for profile in self.fields:
            if profile.field_name == field_name:
                return profile
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "error": self.error,
            "total_rows": self.total_rows,
            "large_dataset_warning": self.large_dataset_warning,
            "fields": [profile.to_dict() for profile in self.fields],
        }
