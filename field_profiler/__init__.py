"""
Field Profiler

Value distribution, statistics and data quality profiling for individual
fields of tabular data.
"""

__version__ = "0.1.0"
