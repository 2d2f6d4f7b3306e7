"""Unit tests for the value frequency profiler."""

from field_profiler.core.constants import NULL_ENTRY_LABEL
from field_profiler.profiler.frequency import profile_frequencies


class TestProfileFrequencies:
    """Frequency table construction."""

    def test_abc_scenario(self, abc_rows):
        profile = profile_frequencies(abc_rows, "f")

        assert [(e.value, e.count, e.percentage) for e in profile.distributions] == [
            ("A", 3, 60.0),
            ("B", 1, 20.0),
            ("C", 1, 20.0),
        ]
        assert profile.total_rows == 5
        assert profile.unique_values == 3
        assert profile.null_count == 0
        assert not profile.truncated

    def test_ties_keep_first_seen_order(self, make_rows):
        profile = profile_frequencies(make_rows(["z", "y", "x", "y", "z"]), "f")
        assert [e.value for e in profile.distributions] == ["z", "y", "x"]

    def test_null_entry_appended(self, make_rows):
        profile = profile_frequencies(make_rows(["a", None, "", "a"]), "f")

        assert profile.null_count == 2
        assert profile.empty_string_count == 1
        last = profile.distributions[-1]
        assert last.value == NULL_ENTRY_LABEL
        assert last.count == 2
        assert last.percentage == 50.0

    def test_counts_sum_to_total_rows(self, make_rows):
        rows = make_rows(["a", "b", None, "a", 3, 3.0, ""])
        profile = profile_frequencies(rows, "f")

        assert sum(e.count for e in profile.distributions) == profile.total_rows

    def test_integral_numbers_share_a_key(self, make_rows):
        profile = profile_frequencies(make_rows([3, 3.0, "3"]), "f")

        assert profile.unique_values == 1
        assert profile.distributions[0].count == 3

    def test_truncation(self, make_rows):
        rows = make_rows(["a", "b", "c", "d", "a"])
        profile = profile_frequencies(rows, "f", max_unique_values=2)

        assert profile.truncated
        assert profile.truncated_at == 2
        assert profile.unique_values == 4
        assert [(e.value, e.count) for e in profile.distributions] == [("a", 2), ("b", 1)]

    def test_missing_field_counts_as_null(self):
        profile = profile_frequencies([{"g": 1}, {"f": "x"}], "f")
        assert profile.null_count == 1

    def test_empty_rows(self):
        profile = profile_frequencies([], "f")

        assert profile.error == "No data available for profiling"
        assert profile.to_dict() == {"field_name": "f", "error": "No data available for profiling"}

    def test_to_dict(self, abc_rows):
        result = profile_frequencies(abc_rows, "f").to_dict()

        assert result["field_name"] == "f"
        assert result["distributions"][0] == {"value": "A", "count": 3, "percentage": 60.0}
        assert result["truncated_at"] == 1000
