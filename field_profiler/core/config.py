"""Configuration parsing and validation."""

import os
from dataclasses import dataclass, fields, asdict, replace
from pathlib import Path
from typing import Dict, Any, List, Optional

import yaml

from field_profiler.core.exceptions import (
    ConfigError,
    YAMLSizeError,
    ConfigValidationError
)
from field_profiler.core.constants import (
    MAX_YAML_FILE_SIZE,
    MAX_YAML_NESTING_DEPTH,
    MAX_YAML_KEY_COUNT,
    MAX_FIELDS_PER_REQUEST,
    DEFAULT_MAX_UNIQUE_VALUES,
    DEFAULT_TOP_DUPLICATES_LIMIT,
    DEFAULT_OUTLIER_LIST_CAP,
    NUMERIC_FIELD_THRESHOLD,
    DATE_FIELD_THRESHOLD,
    LARGE_DATASET_WARNING_THRESHOLD,
)


@dataclass(frozen=True)
class ProfilingConfig:
    """
    Settings for one profiling request.

    Attributes:
        max_unique_values: Distinct values stored in a frequency table
        top_duplicates_limit: Duplicated values listed in uniqueness metrics
        outlier_list_cap: Outlier values listed in numeric statistics
        max_fields: Fields a single request may select
        parallel: Profile the selected fields concurrently
        numeric_threshold: Fraction of values that must parse as numbers
        date_threshold: Fraction of values that must parse as dates
        large_dataset_threshold: Row count above which a warning is raised
    """
    max_unique_values: int = DEFAULT_MAX_UNIQUE_VALUES
    top_duplicates_limit: int = DEFAULT_TOP_DUPLICATES_LIMIT
    outlier_list_cap: int = DEFAULT_OUTLIER_LIST_CAP
    max_fields: int = MAX_FIELDS_PER_REQUEST
    parallel: bool = False
    numeric_threshold: float = NUMERIC_FIELD_THRESHOLD
    date_threshold: float = DATE_FIELD_THRESHOLD
    large_dataset_threshold: int = LARGE_DATASET_WARNING_THRESHOLD

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        """Check types and ranges of every setting."""
        for name in ("max_unique_values", "top_duplicates_limit", "outlier_list_cap",
                     "max_fields", "large_dataset_threshold"):
            value = getattr(self, name)
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigValidationError(
                    f"{name} must be a positive integer",
                    field=name,
                    expected="int > 0",
                    actual=repr(value)
                )

        for name in ("numeric_threshold", "date_threshold"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 < value <= 1:
                raise ConfigValidationError(
                    f"{name} must be a number in (0, 1]",
                    field=name,
                    expected="0 < float <= 1",
                    actual=repr(value)
                )

        if not isinstance(self.parallel, bool):
            raise ConfigValidationError(
                "parallel must be true or false",
                field="parallel",
                expected="bool",
                actual=repr(self.parallel)
            )

    @classmethod
    def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> "ProfilingConfig":
        """
        Build a config from a dictionary.

        Accepts either the settings at the top level or nested under a
        ``profiling`` key. Unknown keys are rejected.

        Args:
            config_dict: Configuration dictionary (None yields defaults)

        Returns:
            ProfilingConfig instance

        Raises:
            ConfigError: If the structure is not a mapping
            ConfigValidationError: If a key is unknown or a value invalid
        """
        if config_dict is None:
            return cls()
        if not isinstance(config_dict, dict):
            raise ConfigError("Configuration must be a mapping")

        settings = config_dict.get("profiling", config_dict)
        if settings is None:
            return cls()
        if not isinstance(settings, dict):
            raise ConfigError("'profiling' section must be a mapping", field="profiling")

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in settings if key not in known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                field=unknown[0],
                expected=", ".join(sorted(known)),
                actual=", ".join(unknown)
            )

        return cls(**settings)

    @classmethod
    def from_yaml(cls, config_path: str) -> "ProfilingConfig":
        """
        Load configuration from YAML file with structural limits.

        Protections:
        - File size limit
        - Nesting depth limit
        - Total keys limit

        Args:
            config_path: Path to YAML configuration file

        Returns:
            ProfilingConfig instance

        Raises:
            ConfigError: If file not found or invalid
            YAMLSizeError: If file exceeds size limit
            ConfigValidationError: If structure is too complex or values invalid
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        file_size = os.path.getsize(config_file)
        if file_size > MAX_YAML_FILE_SIZE:
            raise YAMLSizeError(
                f"Configuration file too large: {file_size:,} bytes. "
                f"Maximum allowed: {MAX_YAML_FILE_SIZE:,} bytes",
                file_size=file_size,
                max_size=MAX_YAML_FILE_SIZE
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML file: {str(e)}")
        except UnicodeDecodeError as e:
            raise ConfigError(f"Invalid file encoding (expected UTF-8): {str(e)}")

        if config_dict is not None:
            cls._validate_yaml_structure(config_dict)

        return cls.from_dict(config_dict)

    @classmethod
    def _validate_yaml_structure(cls, obj: Any, current_depth: int = 0, total_keys: List[int] = None) -> None:
        """
        Validate YAML structure against depth and size limits.

        Args:
            obj: Object to validate (dict, list, or primitive)
            current_depth: Current nesting depth
            total_keys: Mutable list with single element tracking total key count

        Raises:
            ConfigValidationError: If structure is too complex
        """
        if total_keys is None:
            total_keys = [0]

        if current_depth > MAX_YAML_NESTING_DEPTH:
            raise ConfigValidationError(
                f"YAML nesting depth exceeds maximum of {MAX_YAML_NESTING_DEPTH} levels"
            )

        if isinstance(obj, dict):
            total_keys[0] += len(obj)
            if total_keys[0] > MAX_YAML_KEY_COUNT:
                raise ConfigValidationError(
                    f"YAML structure contains more than {MAX_YAML_KEY_COUNT:,} keys/items"
                )
            for value in obj.values():
                cls._validate_yaml_structure(value, current_depth + 1, total_keys)

        elif isinstance(obj, list):
            total_keys[0] += len(obj)
            if total_keys[0] > MAX_YAML_KEY_COUNT:
                raise ConfigValidationError(
                    f"YAML structure contains more than {MAX_YAML_KEY_COUNT:,} keys/items"
                )
            for item in obj:
                cls._validate_yaml_structure(item, current_depth + 1, total_keys)

    def with_overrides(self, **overrides: Any) -> "ProfilingConfig":
        """Return a copy with the given non-None settings replaced."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
