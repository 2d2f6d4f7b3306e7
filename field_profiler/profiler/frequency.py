"""
Value frequency profiling.

Counts how often each distinct value of a field occurs. Memory is bounded by
``max_unique_values``: once that many distinct values are stored, further new
values are still counted toward ``unique_values`` but are not kept.
"""

import logging
from collections import Counter
from typing import Sequence

from field_profiler.core.constants import DEFAULT_MAX_UNIQUE_VALUES, NULL_ENTRY_LABEL
from field_profiler.profiler.profile_result import FrequencyEntry, FrequencyProfile
from field_profiler.profiler.values import Row, iter_cells

logger = logging.getLogger(__name__)

NO_DATA_ERROR = "No data available for profiling"


def _percentage(count: int, total: int) -> float:
    return round(count / total * 100, 2)


def profile_frequencies(
    rows: Sequence[Row],
    field_name: str,
    max_unique_values: int = DEFAULT_MAX_UNIQUE_VALUES,
) -> FrequencyProfile:
    """
    Build the frequency table of a field.

    Null and empty-string cells are counted in ``null_count`` and reported
    as a single synthetic entry at the end of the table. Entries are sorted
    by count descending; equal counts keep first-seen order.

    Args:
        rows: Dataset rows
        field_name: Field to profile
        max_unique_values: Distinct values stored before truncation

    Returns:
        FrequencyProfile (with ``error`` set when there are no rows)
    """
    if not rows:
        return FrequencyProfile(field_name=field_name, truncated_at=max_unique_values,
                                error=NO_DATA_ERROR)

    total_rows = len(rows)
    counts: Counter = Counter()
    unique_value_count = 0
    null_count = 0
    empty_string_count = 0

    for cell in iter_cells(rows, field_name):
        if cell.is_null:
            null_count += 1
            if cell.is_empty_string:
                empty_string_count += 1
            continue

        if cell.text in counts:
            counts[cell.text] += 1
        else:
            unique_value_count += 1
            if unique_value_count <= max_unique_values:
                counts[cell.text] = 1

    distributions = [
        FrequencyEntry(value, count, _percentage(count, total_rows))
        for value, count in counts.most_common()
    ]
    if null_count > 0:
        distributions.append(
            FrequencyEntry(NULL_ENTRY_LABEL, null_count, _percentage(null_count, total_rows))
        )

    truncated = unique_value_count > max_unique_values
    if truncated:
        logger.info(
            f"Field '{field_name}' has {unique_value_count:,} distinct values; "
            f"frequency table truncated at {max_unique_values:,}"
        )

    return FrequencyProfile(
        field_name=field_name,
        total_rows=total_rows,
        unique_values=unique_value_count,
        null_count=null_count,
        empty_string_count=empty_string_count,
        distributions=distributions,
        truncated=truncated,
        truncated_at=max_unique_values,
    )
