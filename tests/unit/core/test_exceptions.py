"""
Unit tests for exception hierarchy.

Tests the field profiler exception classes and their serialization.
"""

import pytest
from field_profiler.core.exceptions import (
    FieldProfilerException,
    ErrorSeverity,
    ConfigError,
    YAMLSizeError,
    ConfigValidationError,
    DataLoadError,
    UnsupportedFormatError,
    ProfilerError,
    FieldNotFoundError,
    InsufficientDataError,
)


class TestErrorSeverity:
    """Test error severity enum."""

    def test_severity_values(self):
        """Test that all severity levels exist."""
        assert ErrorSeverity.FATAL.value == "fatal"
        assert ErrorSeverity.CRITICAL.value == "critical"
        assert ErrorSeverity.RECOVERABLE.value == "recoverable"
        assert ErrorSeverity.WARNING.value == "warning"


class TestFieldProfilerException:
    """Test base exception class."""

    def test_basic_exception(self):
        exc = FieldProfilerException("Test error")

        assert str(exc) == "Test error"
        assert exc.message == "Test error"
        assert exc.severity == ErrorSeverity.RECOVERABLE
        assert exc.details == {}
        assert exc.original_exception is None

    def test_exception_serialization(self):
        exc = FieldProfilerException(
            "Test error",
            severity=ErrorSeverity.CRITICAL,
            details={'field': 'amount'},
            original_exception=ValueError("Original")
        )

        result = exc.to_dict()

        assert result['type'] == 'FieldProfilerException'
        assert result['message'] == 'Test error'
        assert result['severity'] == 'critical'
        assert result['details'] == {'field': 'amount'}
        assert result['original_error'] == 'Original'

    def test_exception_serialization_no_original(self):
        result = FieldProfilerException("Test error").to_dict()
        assert result['original_error'] is None


class TestConfigErrors:
    """Test configuration errors."""

    def test_config_error_is_fatal(self):
        exc = ConfigError("Invalid config")
        assert exc.severity == ErrorSeverity.FATAL

    def test_config_error_with_field(self):
        exc = ConfigError("Bad value", field="profiling")
        assert exc.field == "profiling"
        assert exc.details['field'] == "profiling"

    def test_yaml_size_error(self):
        exc = YAMLSizeError("Too large", file_size=2_000_000, max_size=1_000_000)

        assert exc.severity == ErrorSeverity.FATAL
        assert exc.details['file_size'] == 2_000_000
        assert exc.details['max_size'] == 1_000_000

    def test_config_validation_error(self):
        exc = ConfigValidationError(
            "max_unique_values must be a positive integer",
            field="max_unique_values",
            expected="int > 0",
            actual="-5"
        )

        assert exc.field == "max_unique_values"
        assert exc.details['expected'] == "int > 0"
        assert exc.details['actual'] == "-5"


class TestDataLoadErrors:
    """Test row source errors."""

    def test_data_load_error_is_critical(self):
        exc = DataLoadError("Cannot read", file_path="data.csv")

        assert exc.severity == ErrorSeverity.CRITICAL
        assert exc.file_path == "data.csv"
        assert exc.details['file_path'] == "data.csv"

    def test_unsupported_format_error(self):
        exc = UnsupportedFormatError("table.qvd", format="qvd", supported_formats=["csv", "json"])

        assert "qvd" in exc.message
        assert "csv, json" in exc.message
        assert exc.details['format'] == "qvd"
        assert exc.details['supported_formats'] == ["csv", "json"]


class TestProfilerErrors:
    """Test field-level errors."""

    def test_profiler_error_is_recoverable(self):
        exc = ProfilerError("Failed", operation="numeric_statistics", field_name="amount")

        assert exc.severity == ErrorSeverity.RECOVERABLE
        assert exc.operation == "numeric_statistics"
        assert exc.field_name == "amount"

    def test_field_not_found_message(self):
        exc = FieldNotFoundError("email", available_fields=["id", "name"])

        assert exc.message == "Field 'email' not found in data. Available: id, name"
        assert exc.operation == "field_lookup"
        assert exc.details['available_fields'] == ["id", "name"]

    def test_field_not_found_without_available_fields(self):
        exc = FieldNotFoundError("email")
        assert exc.message == "Field 'email' not found in data"

    def test_insufficient_data_error(self):
        exc = InsufficientDataError("No data available for profiling", operation="profile")
        assert exc.operation == "profile"


class TestExceptionInheritance:
    """Test exception hierarchy."""

    @pytest.mark.parametrize("exc_class", [
        ConfigError, YAMLSizeError, ConfigValidationError, DataLoadError,
        ProfilerError, InsufficientDataError,
    ])
    def test_all_inherit_from_base(self, exc_class):
        assert issubclass(exc_class, FieldProfilerException)

    def test_config_errors_inherit(self):
        assert issubclass(YAMLSizeError, ConfigError)
        assert issubclass(ConfigValidationError, ConfigError)

    def test_profiler_errors_inherit(self):
        assert issubclass(FieldNotFoundError, ProfilerError)
        assert issubclass(InsufficientDataError, ProfilerError)
        assert issubclass(UnsupportedFormatError, DataLoadError)
