"""
Field Profiler Constants.

This module defines the magic numbers, configuration defaults, and constants
used throughout the profiler. Centralizing these values keeps thresholds
deterministic and documents what each one controls.
"""

# ============================================================================
# Profiling Request Limits
# ============================================================================

# Maximum number of fields a single profiling request may select
MAX_FIELDS_PER_REQUEST: int = 3

# Default number of distinct values kept in a frequency table.
# Values beyond this are still counted toward unique_values but not stored.
DEFAULT_MAX_UNIQUE_VALUES: int = 1000

# Row count above which callers should warn before profiling
LARGE_DATASET_WARNING_THRESHOLD: int = 100_000

# Label used for the synthetic null/empty frequency entry
NULL_ENTRY_LABEL: str = "(NULL/Empty)"


# ============================================================================
# Configuration Security Limits
# ============================================================================

# Maximum YAML configuration file size (1MB)
MAX_YAML_FILE_SIZE: int = 1024 * 1024

# Maximum YAML nesting depth
MAX_YAML_NESTING_DEPTH: int = 10

# Maximum number of keys/items in a YAML document
MAX_YAML_KEY_COUNT: int = 1_000


# ============================================================================
# Type Detection Thresholds
# ============================================================================

# Fraction of non-null values that must parse as numbers
NUMERIC_FIELD_THRESHOLD: float = 0.9

# Fraction of non-null values that must parse as dates
DATE_FIELD_THRESHOLD: float = 0.8

# Fraction of valid dates the temporal engine needs before analysing a field
TEMPORAL_MIN_VALID_RATIO: float = 0.6


# ============================================================================
# Numeric Statistics Constants
# ============================================================================

# IQR multiplier for outlier detection (Tukey's fence)
# Outliers are values < Q1 - 1.5×IQR or > Q3 + 1.5×IQR
OUTLIER_IQR_MULTIPLIER: float = 1.5

# Maximum number of outlier values reported
DEFAULT_OUTLIER_LIST_CAP: int = 100

# Percentiles reported for numeric fields (fraction -> key)
PERCENTILES: tuple = (
    (0.10, "p10"),
    (0.25, "p25"),
    (0.50, "p50"),
    (0.75, "p75"),
    (0.90, "p90"),
)


# ============================================================================
# Temporal Analysis Constants
# ============================================================================

# Relative slope below which a monthly series is "constant"
TREND_CONSTANT_TOLERANCE: float = 0.05

# Relative slope above which a trend is "strong"
TREND_STRONG_THRESHOLD: float = 0.2

# Minimum number of monthly buckets needed for trend classification
TREND_MIN_BUCKETS: int = 3

# Maximum number of individual gaps reported
MAX_GAP_SAMPLES: int = 10


# ============================================================================
# String Analysis Constants
# ============================================================================

# Prefix/suffix lengths considered
MIN_AFFIX_LENGTH: int = 2
MAX_AFFIX_LENGTH: int = 10

# Minimum number of values an affix must appear in
MIN_AFFIX_OCCURRENCES: int = 2

# Number of prefixes/suffixes reported
MAX_AFFIXES_REPORTED: int = 10

# Number of sample values kept per detected format
MAX_FORMAT_SAMPLES: int = 5


# ============================================================================
# Data Quality Constants
# ============================================================================

# Cardinality ratio boundaries
CARDINALITY_HIGH_THRESHOLD: float = 0.9
CARDINALITY_LOW_THRESHOLD: float = 0.05

# Evenness below which a distribution is flagged as skewed
SKEWED_EVENNESS_THRESHOLD: float = 0.5

# Evenness below which skew also costs quality points
HIGHLY_SKEWED_EVENNESS_THRESHOLD: float = 0.3

# Number of duplicated values listed in uniqueness metrics
DEFAULT_TOP_DUPLICATES_LIMIT: int = 5

# Quality level boundaries (score >= value)
QUALITY_GOOD_SCORE: int = 80
QUALITY_FAIR_SCORE: int = 50


# ============================================================================
# Logging Constants
# ============================================================================

# Default log message format
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Log date format
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


# ============================================================================
# Row Source Constants
# ============================================================================

# File formats understood by the local row source
SUPPORTED_FILE_FORMATS: tuple = ("csv", "json")

# File extension to format mapping
FILE_EXTENSION_MAP: dict = {
    ".csv": "csv",
    ".tsv": "csv",
    ".txt": "csv",
    ".json": "json",
    ".jsonl": "json",
}
