"""
Field profiling engines.

Key Components:
- FieldProfiler / profile_fields: Orchestrates the analyzers for 1-3 fields
- detect_field_type: Numeric / date / text classification
- profile_frequencies: Bounded value frequency table
- calculate_numeric_statistics: Descriptive statistics and outliers
- TemporalAnalyzer: Date range, distribution, gaps and trend
- StringAnalyzer: Length, pattern, case and format analysis
- calculate_data_quality_metrics: Completeness, cardinality and evenness
"""

from .engine import FieldProfiler, profile_fields, should_warn_large_dataset
from .type_detector import detect_field_type, is_numeric_field, is_date_field, is_string_field
from .frequency import profile_frequencies
from .numeric_statistics import calculate_numeric_statistics
from .temporal_analysis import TemporalAnalyzer, calculate_temporal_analysis
from .string_analysis import StringAnalyzer, calculate_string_analysis
from .data_quality import calculate_data_quality_metrics
from .profile_result import FieldProfile, ProfileReport

__all__ = [
    'FieldProfiler',
    'profile_fields',
    'should_warn_large_dataset',
    'detect_field_type',
    'is_numeric_field',
    'is_date_field',
    'is_string_field',
    'profile_frequencies',
    'calculate_numeric_statistics',
    'TemporalAnalyzer',
    'calculate_temporal_analysis',
    'StringAnalyzer',
    'calculate_string_analysis',
    'calculate_data_quality_metrics',
    'FieldProfile',
    'ProfileReport',
]
