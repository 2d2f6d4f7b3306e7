"""
Unit tests for ProfilingConfig.

Tests defaults, validation, YAML loading and the structural limits applied
to configuration files.
"""

import pytest

from field_profiler.core.config import ProfilingConfig
from field_profiler.core.constants import MAX_YAML_FILE_SIZE
from field_profiler.core.exceptions import ConfigError, ConfigValidationError, YAMLSizeError


class TestProfilingConfigDefaults:
    """Default values and validation."""

    def test_defaults(self):
        config = ProfilingConfig()

        assert config.max_unique_values == 1000
        assert config.top_duplicates_limit == 5
        assert config.outlier_list_cap == 100
        assert config.max_fields == 3
        assert config.parallel is False
        assert config.numeric_threshold == 0.9
        assert config.date_threshold == 0.8

    @pytest.mark.parametrize("name,value", [
        ("max_unique_values", 0),
        ("max_unique_values", -5),
        ("max_unique_values", "100"),
        ("top_duplicates_limit", True),
        ("outlier_list_cap", 1.5),
    ])
    def test_rejects_invalid_integers(self, name, value):
        with pytest.raises(ConfigValidationError) as exc_info:
            ProfilingConfig(**{name: value})
        assert exc_info.value.field == name

    @pytest.mark.parametrize("value", [0, 1.5, -0.1])
    def test_rejects_threshold_out_of_range(self, value):
        with pytest.raises(ConfigValidationError):
            ProfilingConfig(numeric_threshold=value)

    def test_rejects_non_bool_parallel(self):
        with pytest.raises(ConfigValidationError):
            ProfilingConfig(parallel="yes")

    def test_with_overrides_ignores_none(self):
        config = ProfilingConfig().with_overrides(max_unique_values=50, parallel=None)

        assert config.max_unique_values == 50
        assert config.parallel is False

    def test_to_dict(self):
        assert ProfilingConfig(max_fields=2).to_dict()["max_fields"] == 2


class TestProfilingConfigFromDict:
    """Dictionary loading."""

    def test_none_gives_defaults(self):
        assert ProfilingConfig.from_dict(None) == ProfilingConfig()

    def test_top_level_settings(self):
        config = ProfilingConfig.from_dict({"max_unique_values": 10})
        assert config.max_unique_values == 10

    def test_nested_profiling_section(self):
        config = ProfilingConfig.from_dict({"profiling": {"parallel": True}})
        assert config.parallel is True

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigValidationError, match="Unknown configuration keys"):
            ProfilingConfig.from_dict({"max_uniq": 10})

    def test_non_mapping_rejected(self):
        with pytest.raises(ConfigError):
            ProfilingConfig.from_dict(["max_unique_values"])


class TestProfilingConfigFromYaml:
    """YAML loading with structural limits."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "profiling.yaml"
        path.write_text("profiling:\n  max_unique_values: 250\n  top_duplicates_limit: 3\n")

        config = ProfilingConfig.from_yaml(str(path))

        assert config.max_unique_values == 250
        assert config.top_duplicates_limit == 3

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ProfilingConfig.from_yaml(str(path)) == ProfilingConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            ProfilingConfig.from_yaml(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("profiling: [unclosed\n")

        with pytest.raises(ConfigError, match="Failed to parse YAML"):
            ProfilingConfig.from_yaml(str(path))

    def test_file_too_large(self, tmp_path):
        path = tmp_path / "large.yaml"
        path.write_text("# " + "x" * MAX_YAML_FILE_SIZE + "\n")

        with pytest.raises(YAMLSizeError):
            ProfilingConfig.from_yaml(str(path))

    def test_nesting_too_deep(self, tmp_path):
        path = tmp_path / "deep.yaml"
        lines = ["  " * depth + "level:" for depth in range(13)]
        lines[-1] += " 1"
        path.write_text("\n".join(lines) + "\n")

        with pytest.raises(ConfigValidationError, match="nesting depth"):
            ProfilingConfig.from_yaml(str(path))
