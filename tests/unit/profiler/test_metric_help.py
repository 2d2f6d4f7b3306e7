"""Unit tests for metric help lookup and JSON serialization helpers."""

import io
import json
from datetime import date, datetime

import numpy as np
import pytest

from field_profiler.profiler.json_utils import (
    convert_to_json_serializable,
    safe_json_dump,
    safe_json_dumps,
)
from field_profiler.profiler.metric_help import (
    METRIC_HELP,
    MetricHelp,
    get_metric_help,
    list_metrics,
)


class TestMetricHelp:

    def test_lookup_by_key(self):
        entry = get_metric_help("fill_rate")

        assert isinstance(entry, MetricHelp)
        assert "empty strings" in entry.text
        assert entry.link.startswith("https://")

    def test_camel_case_lookup(self):
        assert get_metric_help("fillRate") == get_metric_help("fill_rate")
        assert get_metric_help("temporalHasGaps") == METRIC_HELP["temporal_has_gaps"]

    def test_unknown_metric(self):
        assert get_metric_help("no_such_metric") is None

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            METRIC_HELP["new_metric"] = MetricHelp("text", "link")

    def test_list_metrics_is_sorted(self):
        metrics = list_metrics()

        assert metrics == sorted(metrics)
        assert "duplicate_count" in metrics
        assert len(metrics) == len(METRIC_HELP)


class TestJsonUtils:

    def test_numpy_values(self):
        result = convert_to_json_serializable({
            "count": np.int64(3),
            "mean": np.float64(2.5),
            "flag": np.bool_(True),
            "values": np.array([1, 2]),
        })

        assert result == {"count": 3, "mean": 2.5, "flag": True, "values": [1, 2]}
        assert type(result["count"]) is int

    def test_non_finite_become_null(self):
        assert convert_to_json_serializable([float("nan"), np.inf, 1.0]) == [None, None, 1.0]

    def test_dates_and_sets(self):
        result = convert_to_json_serializable({
            "day": date(2024, 1, 2),
            "at": datetime(2024, 1, 2, 3, 4),
            "modes": {3.0, 1.0},
        })

        assert result == {"day": "2024-01-02", "at": "2024-01-02T03:04:00", "modes": [1.0, 3.0]}

    def test_dumps_is_indented(self):
        text = safe_json_dumps({"a": np.int32(1)})

        assert json.loads(text) == {"a": 1}
        assert "\n" in text

    def test_dumps_nested_values(self):
        text = safe_json_dumps({"stats": [float("nan"), (np.int64(1), date(2024, 5, 6))]}, indent=None)

        assert "NaN" not in text
        assert json.loads(text) == {"stats": [None, [1, "2024-05-06"]]}

    def test_dump_to_file(self):
        buffer = io.StringIO()
        safe_json_dump({"score": np.float32(0.5)}, buffer, indent=None)
        assert buffer.getvalue() == '{"score": 0.5}'
