"""
Profile orchestrator.

Runs the analyzers for up to three caller-selected fields and assembles one
composite FieldProfile per field:

    type detection -> frequency table -> numeric statistics (numeric fields)
    -> temporal analysis (date-like fields) -> string analysis (text fields)
    -> data quality metrics

Problems with the request itself (no rows, no fields, too many fields) become
the report's ``error``. Problems with one field (absent field, unexpected
failure in an analyzer) become that field's ``error``; the other fields are
still profiled.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from field_profiler.core.config import ProfilingConfig
from field_profiler.core.constants import (
    LARGE_DATASET_WARNING_THRESHOLD,
    TEMPORAL_MIN_VALID_RATIO,
)
from field_profiler.core.exceptions import (
    FieldNotFoundError,
    InsufficientDataError,
    ProfilerError,
)
from field_profiler.profiler.data_quality import calculate_data_quality_metrics
from field_profiler.profiler.frequency import NO_DATA_ERROR, profile_frequencies
from field_profiler.profiler.numeric_statistics import calculate_numeric_statistics
from field_profiler.profiler.profile_result import FieldProfile, ProfileReport
from field_profiler.profiler.string_analysis import StringAnalyzer
from field_profiler.profiler.temporal_analysis import TemporalAnalyzer
from field_profiler.profiler.type_detector import detect_field_type
from field_profiler.profiler.values import Row, field_exists

logger = logging.getLogger(__name__)


def should_warn_large_dataset(row_count: int, threshold: int = LARGE_DATASET_WARNING_THRESHOLD) -> bool:
    """True when profiling ``row_count`` rows deserves a warning."""
    return row_count > threshold


def _available_fields(rows: Sequence[Row]) -> List[str]:
    seen = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


class FieldProfiler:
    """
    Profile selected fields of a dataset.

    Example:
        >>> profiler = FieldProfiler(ProfilingConfig(parallel=True))
        >>> report = profiler.profile(rows, ["country", "amount"])
        >>> report.fields[0].quality_metrics.assessment["quality_level"]
        'Good'
    """

    def __init__(self, config: Optional[ProfilingConfig] = None):
        """
        Initialize the profiler.

        Args:
            config: Profiling settings (defaults when omitted)
        """
        self.config = config or ProfilingConfig()
        self.temporal_analyzer = TemporalAnalyzer(
            min_valid_ratio=min(TEMPORAL_MIN_VALID_RATIO, self.config.date_threshold)
        )
        self.string_analyzer = StringAnalyzer()

    def profile(self, rows: Sequence[Row], field_names: Sequence[str]) -> ProfileReport:
        """
        Profile the selected fields.

        Args:
            rows: Dataset rows
            field_names: Fields to profile, in report order

        Returns:
            ProfileReport with one FieldProfile per requested field, or an
            error describing why the request could not be served
        """
        rows = rows or []
        field_names = list(field_names or [])

        try:
            self._validate_request(rows, field_names)
        except ProfilerError as e:
            logger.warning(f"Profiling request rejected: {e.message}")
            return ProfileReport(total_rows=len(rows), error=e.message)

        large = should_warn_large_dataset(len(rows), self.config.large_dataset_threshold)
        if large:
            logger.warning(
                f"Profiling {len(rows):,} rows (above {self.config.large_dataset_threshold:,}); "
                f"this may take a while"
            )

        logger.info(f"Profiling {len(field_names)} field(s) over {len(rows):,} rows")

        if self.config.parallel and len(field_names) > 1:
            with ThreadPoolExecutor(max_workers=len(field_names)) as executor:
                profiles = list(executor.map(lambda name: self._safe_profile_field(rows, name), field_names))
        else:
            profiles = [self._safe_profile_field(rows, name) for name in field_names]

        return ProfileReport(
            fields=profiles,
            total_rows=len(rows),
            large_dataset_warning=large,
        )

    def _validate_request(self, rows: Sequence[Row], field_names: List[str]) -> None:
        """
        Raises:
            InsufficientDataError: If there are no rows
            ProfilerError: If the field selection is empty or too large
        """
        if not rows:
            raise InsufficientDataError(NO_DATA_ERROR, operation="profile")
        if not field_names:
            raise ProfilerError("No fields selected for profiling", operation="field_selection")
        if len(field_names) > self.config.max_fields:
            raise ProfilerError(
                f"Too many fields selected: {len(field_names)} "
                f"(maximum {self.config.max_fields})",
                operation="field_selection",
            )

    def _safe_profile_field(self, rows: Sequence[Row], field_name: str) -> FieldProfile:
        """Profile one field, turning any failure into that field's error."""
        try:
            return self.profile_field(rows, field_name)
        except FieldNotFoundError as e:
            logger.warning(e.message)
            return FieldProfile(field_name=field_name, error=e.message)
        except Exception as e:
            logger.exception(f"Profiling failed for field '{field_name}'")
            error = ProfilerError(
                f"Profiling failed: {e}",
                operation="profile_field",
                field_name=field_name,
                original_exception=e,
            )
            return FieldProfile(field_name=field_name, error=error.message)

    def profile_field(self, rows: Sequence[Row], field_name: str) -> FieldProfile:
        """
        Profile a single field.

        Raises:
            FieldNotFoundError: If no row carries the field
        """
        if not field_exists(rows, field_name):
            raise FieldNotFoundError(field_name, available_fields=_available_fields(rows))

        config = self.config
        type_info = detect_field_type(
            rows, field_name, config.numeric_threshold, config.date_threshold
        )
        frequency = profile_frequencies(rows, field_name, config.max_unique_values)

        profile = FieldProfile(field_name=field_name, frequency=frequency, type_info=type_info)

        if type_info.is_numeric:
            profile.statistics = calculate_numeric_statistics(
                rows, field_name, config.outlier_list_cap, config.numeric_threshold
            )
        if type_info.is_date:
            profile.temporal_analysis = self.temporal_analyzer.analyze(rows, field_name)
        if type_info.is_string:
            profile.string_analysis = self.string_analyzer.analyze(rows, field_name)

        profile.quality_metrics = calculate_data_quality_metrics(
            rows,
            field_name,
            unique_value_count=frequency.unique_values,
            null_count=frequency.null_count,
            empty_string_count=frequency.empty_string_count,
            top_duplicates_limit=config.top_duplicates_limit,
        )
        return profile


def profile_fields(
    rows: Sequence[Row],
    field_names: Sequence[str],
    config: Optional[ProfilingConfig] = None,
) -> ProfileReport:
    """
    Profile up to ``config.max_fields`` fields of a dataset.

    Args:
        rows: Dataset rows
        field_names: Fields to profile
        config: Profiling settings

    Returns:
        ProfileReport
    """
    return FieldProfiler(config).profile(rows, field_names)
