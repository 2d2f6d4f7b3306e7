"""Explanatory help text for the reported metrics."""

from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Optional


class MetricHelp(NamedTuple):
    """Help entry: explanation plus a link for further reading."""
    text: str
    link: str


METRIC_HELP: Mapping[str, MetricHelp] = MappingProxyType({
    # Data quality
    "non_null_percentage": MetricHelp(
        "Percentage of values that are not null. High percentages indicate "
        "better data completeness.",
        "https://en.wikipedia.org/wiki/Data_quality#Completeness",
    ),
    "fill_rate": MetricHelp(
        "Percentage of values that are populated (excluding empty strings). "
        "Differs from non-null % as it counts empty strings as missing.",
        "https://en.wikipedia.org/wiki/Data_quality#Completeness",
    ),
    "missing_values": MetricHelp(
        "Count and percentage of null values in the field.",
        "https://en.wikipedia.org/wiki/Missing_data",
    ),
    "empty_strings": MetricHelp(
        "Count and percentage of empty string values. These are non-null but "
        "contain no data.",
        "https://en.wikipedia.org/wiki/Empty_string",
    ),
    "cardinality_ratio": MetricHelp(
        "Ratio of unique values to total rows (0-100%).\n\n"
        "High ratios (90% or more) indicate many unique values with few "
        "duplicates.\n\n"
        "Low ratios (<5%) indicate few unique values with many duplicates.",
        "https://en.wikipedia.org/wiki/Cardinality_(data_modeling)",
    ),
    "classification": MetricHelp(
        "Automatic classification based on cardinality ratio:\n\n"
        "- High Cardinality (90% or more) for identifiers/keys\n"
        "- Medium Cardinality (5-90%) for filters\n"
        "- Low Cardinality (<5%) for dimensions.",
        "https://en.wikipedia.org/wiki/Cardinality_(data_modeling)",
    ),
    "unique_values": MetricHelp(
        "Distinct values relative to total rows. High uniqueness indicates "
        "potential key fields.",
        "https://en.wikipedia.org/wiki/Unique_key",
    ),
    "duplicate_count": MetricHelp(
        "Total number of occurrences of values that appear more than once, "
        "counting every occurrence. Helps identify data redundancy.",
        "https://en.wikipedia.org/wiki/Data_redundancy",
    ),
    "duplicated_distinct_values": MetricHelp(
        "Number of distinct values that appear more than once. Indicates "
        "variety in duplicated data.",
        "https://en.wikipedia.org/wiki/Data_redundancy",
    ),
    "evenness_score": MetricHelp(
        "Measure of distribution evenness using Pielou's evenness index "
        "(0-1). Higher scores indicate more uniform distribution.",
        "https://en.wikipedia.org/wiki/Species_evenness",
    ),
    "distribution_type": MetricHelp(
        "Classification of distribution pattern from Very Even to Highly "
        "Skewed based on evenness score.",
        "https://en.wikipedia.org/wiki/Skewness",
    ),
    "shannon_entropy": MetricHelp(
        "Shannon entropy measures information diversity. Higher values "
        "indicate more diverse value distributions.",
        "https://en.wikipedia.org/wiki/Entropy_(information_theory)",
    ),
    "total_rows_profiling": MetricHelp(
        "Total number of rows used for this profiling analysis. Every loaded "
        "row is analyzed; datasets above the large dataset threshold "
        "(100,000 rows by default) are flagged because profiling them takes "
        "longer.",
        "https://en.wikipedia.org/wiki/Data_profiling",
    ),
    "truncated_distribution": MetricHelp(
        "All rows are analyzed, but the distribution table is limited to the "
        "first distinct values encountered (1,000 by default) to bound "
        "memory. For example, with 98,543 rows and 5,234 unique values all "
        "98,543 rows are counted, but only 1,000 values are listed.",
        "https://en.wikipedia.org/wiki/Data_profiling",
    ),
    "data_quality_assessment": MetricHelp(
        "The Data Quality Assessment provides an overall score (0-100) that "
        "starts at 100 and loses points for:\n\n"
        "- Missing values (-40 above 50%, -10 above 10%)\n"
        "- Empty strings lowering the fill rate (-20 below 50%, -5 below 80%)\n"
        "- At most one distinct value over more than one row (-10)\n"
        "- A highly skewed distribution (-5)\n\n"
        "Score Interpretation:\n"
        "- 0-49 (Poor): Significant data quality issues detected - review issues\n"
        "- 50-79 (Fair): Some quality concerns - check warnings\n"
        "- 80-100 (Good): High quality data with minimal issues",
        "https://en.wikipedia.org/wiki/Data_quality",
    ),

    # Temporal analysis
    "temporal_earliest": MetricHelp(
        "The oldest date found in the field. Helps identify the beginning of "
        "your time series data.",
        "https://en.wikipedia.org/wiki/Time_series",
    ),
    "temporal_latest": MetricHelp(
        "The most recent date found in the field. Helps identify the end of "
        "your time series data.",
        "https://en.wikipedia.org/wiki/Time_series",
    ),
    "temporal_time_span": MetricHelp(
        "The total time period covered by the data, displayed in "
        "human-readable format (e.g., '2 years, 3 months'). Months count as "
        "30 days and years as 365 days.",
        "https://en.wikipedia.org/wiki/Time_series",
    ),
    "temporal_format": MetricHelp(
        "The detected date format used in the field. Supports ISO 8601, "
        "millisecond Unix timestamps, US/EU formats and compact YYYYMMDD. "
        "Higher confidence indicates more consistent formatting.",
        "https://en.wikipedia.org/wiki/ISO_8601",
    ),
    "temporal_has_gaps": MetricHelp(
        "Indicates whether calendar days are missing between the dates "
        "present. 'Yes' suggests data collection gaps or business closures.",
        "https://en.wikipedia.org/wiki/Missing_data",
    ),
    "temporal_gap_count": MetricHelp(
        "Number of gaps detected in the date sequence. A gap is more than "
        "one calendar day between consecutive distinct dates.",
        "https://en.wikipedia.org/wiki/Missing_data",
    ),
    "temporal_coverage": MetricHelp(
        "Percentage of calendar days in the date range that are present in "
        "the dataset. 100% means no day is missing. Lower values indicate "
        "gaps.",
        "https://en.wikipedia.org/wiki/Data_quality#Completeness",
    ),
    "temporal_largest_gap": MetricHelp(
        "The longest period (in days) without any data. Helps identify major "
        "data collection issues or business closure periods.",
        "https://en.wikipedia.org/wiki/Missing_data",
    ),
    "temporal_trend_type": MetricHelp(
        "Classification of the overall pattern in your time series data:\n\n"
        "- Strong/Moderate Growth: Increasing over time\n"
        "- Constant: Stable over time\n"
        "- Strong/Moderate Decline: Decreasing over time\n\n"
        "Based on linear regression over monthly counts.",
        "https://en.wikipedia.org/wiki/Trend_analysis",
    ),
    "temporal_trend_description": MetricHelp(
        "Human-readable explanation of the detected trend pattern. Helps "
        "understand if your data is growing, declining, or remaining stable "
        "over time.",
        "https://en.wikipedia.org/wiki/Trend_analysis",
    ),
    "temporal_yearly_distribution": MetricHelp(
        "Count of records per year. Helps identify yearly patterns, growth "
        "trends, and data collection consistency across years.",
        "https://en.wikipedia.org/wiki/Time_series",
    ),
    "temporal_monthly_distribution": MetricHelp(
        "Count of records per month (January through December). Useful for "
        "identifying seasonal patterns and monthly trends in your data.",
        "https://en.wikipedia.org/wiki/Seasonality",
    ),
    "temporal_day_of_week_distribution": MetricHelp(
        "Count of records per day of week (Monday through Sunday). Helps "
        "identify business patterns, such as weekday vs. weekend activity.",
        "https://en.wikipedia.org/wiki/Time_series",
    ),
    "temporal_quarterly_distribution": MetricHelp(
        "Count of records per quarter (Q1-Q4 by year). Useful for business "
        "analysis and identifying quarterly patterns.",
        "https://en.wikipedia.org/wiki/Fiscal_quarter",
    ),
    "temporal_valid_dates": MetricHelp(
        "Number of values that were successfully parsed as valid dates. "
        "Higher counts indicate better data quality.",
        "https://en.wikipedia.org/wiki/Data_quality",
    ),
    "temporal_invalid_dates": MetricHelp(
        "Number of values that could not be parsed as dates. High counts may "
        "indicate formatting issues or data quality problems.",
        "https://en.wikipedia.org/wiki/Data_quality",
    ),
    "temporal_valid_percentage": MetricHelp(
        "Percentage of total values that are valid dates. Higher percentages "
        "indicate better data quality. Values below 80% may need "
        "investigation.",
        "https://en.wikipedia.org/wiki/Data_quality",
    ),
})


def get_metric_help(metric: str) -> Optional[MetricHelp]:
    """
    Look up the help entry of a metric.

    Accepts the snake_case key or its camelCase spelling
    (``fillRate`` -> ``fill_rate``).
    """
    key = "".join(f"_{char.lower()}" if char.isupper() else char for char in metric).lstrip("_")
    return METRIC_HELP.get(metric) or METRIC_HELP.get(key)


def list_metrics() -> List[str]:
    """All metric keys, sorted."""
    return sorted(METRIC_HELP)
