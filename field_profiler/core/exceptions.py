"""
Field Profiler Exception Hierarchy.

This module defines the exception hierarchy for the profiler, providing clear
categorization of errors and standardized error handling across components.

Analysis engines never raise across their boundary: input problems (empty
rows, missing fields, insufficient data) are reported as ``error`` values in
the returned profile. The exceptions below are raised by the configuration
layer and the row source, and inside the orchestrator where a per-field
failure is converted back to data.

Exception Severity Levels:
    - FATAL: Stop all processing immediately
    - CRITICAL: Stop processing the current input, nothing to profile
    - RECOVERABLE: Record the error for one field, continue with the others
    - WARNING: Log warning, profiling continues
"""

from typing import Optional, Dict, Any, List
from enum import Enum


class ErrorSeverity(Enum):
    """
    Classify error severity for handling decisions.

    Attributes:
        FATAL: Unrecoverable error, stop all processing
        CRITICAL: Input-level error, nothing can be profiled
        RECOVERABLE: Field-level error, continue with other fields
        WARNING: Non-critical issue, log and continue
    """
    FATAL = "fatal"
    CRITICAL = "critical"
    RECOVERABLE = "recoverable"
    WARNING = "warning"


class FieldProfilerException(Exception):
    """
    Base exception for all profiler errors with enhanced context.

    Provides:
    - Severity classification for handling decisions
    - Structured details dictionary for logging/reporting
    - Original exception preservation for debugging
    - Serialization support for JSON/dict output

    Attributes:
        message (str): Human-readable error message
        severity (ErrorSeverity): Error severity level
        details (Dict[str, Any]): Additional context (field name, file path, etc.)
        original_exception (Optional[Exception]): Original exception if wrapping

    Example:
        >>> try:
        ...     stats = compute()
        ... except ValueError as e:
        ...     raise FieldProfilerException(
        ...         "Statistics failed",
        ...         details={'field': 'amount'},
        ...         original_exception=e
        ...     )
    """

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.RECOVERABLE,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        """
        Initialize profiler exception.

        Args:
            message: Human-readable error description
            severity: Error severity level (default: RECOVERABLE)
            details: Additional context dictionary
            original_exception: Original exception if this wraps another error
        """
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.details = details or {}
        self.original_exception = original_exception

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize exception to dictionary for logging/reporting.

        Returns:
            Dictionary containing exception details suitable for JSON serialization
        """
        return {
            'type': self.__class__.__name__,
            'message': self.message,
            'severity': self.severity.value,
            'details': self.details,
            'original_error': str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Configuration Errors (Fatal)
# ============================================================================

class ConfigError(FieldProfilerException):
    """
    Configuration file errors (fatal - stop all processing).

    Raised when:
    - Configuration file not found
    - Invalid YAML syntax
    - Invalid configuration structure

    Attributes:
        field (Optional[str]): Specific config field that caused error
    """

    def __init__(self, message: str, field: Optional[str] = None):
        """
        Initialize configuration error.

        Args:
            message: Error description
            field: Specific config field that failed (optional)
        """
        super().__init__(
            message,
            severity=ErrorSeverity.FATAL,
            details={'field': field} if field else {}
        )
        self.field = field


class YAMLSizeError(ConfigError):
    """
    YAML file too large.

    Raised when a configuration file exceeds the maximum allowed size.
    """

    def __init__(self, message: str, file_size: Optional[int] = None, max_size: Optional[int] = None):
        """
        Initialize YAML size error.

        Args:
            message: Error description
            file_size: Actual file size in bytes
            max_size: Maximum allowed size in bytes
        """
        super().__init__(message)
        self.details.update({
            'file_size': file_size,
            'max_size': max_size
        })


class ConfigValidationError(ConfigError):
    """
    Configuration values failed validation.

    Raised when the YAML parses but a key is unknown, a value has the wrong
    type, or a value is out of range.

    Example:
        >>> raise ConfigValidationError(
        ...     "max_unique_values must be a positive integer",
        ...     field="max_unique_values",
        ...     expected="int > 0",
        ...     actual="-5"
        ... )
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None
    ):
        """
        Initialize config validation error.

        Args:
            message: Error description
            field: Config field that failed validation
            expected: Expected value or type
            actual: Actual value found
        """
        super().__init__(message, field)
        self.details.update({
            'expected': expected,
            'actual': actual
        })


# ============================================================================
# Data Loading Errors (Critical)
# ============================================================================

class DataLoadError(FieldProfilerException):
    """
    Row source loading errors (critical - nothing to profile).

    Raised when:
    - Data file not found
    - File format invalid or corrupted
    - Parsing errors (malformed CSV, invalid JSON, etc.)

    Attributes:
        file_path (str): Path to file that failed to load
    """

    def __init__(
        self,
        message: str,
        file_path: str,
        original_exception: Optional[Exception] = None
    ):
        """
        Initialize data load error.

        Args:
            message: Error description
            file_path: Path to file being loaded
            original_exception: Original exception from loader
        """
        super().__init__(
            message,
            severity=ErrorSeverity.CRITICAL,
            details={'file_path': file_path},
            original_exception=original_exception
        )
        self.file_path = file_path


class UnsupportedFormatError(DataLoadError):
    """
    File format not supported by the row source.

    Example:
        >>> raise UnsupportedFormatError(
        ...     "table.qvd",
        ...     format="qvd",
        ...     supported_formats=["csv", "json"]
        ... )
    """

    def __init__(self, file_path: str, format: str, supported_formats: List[str]):
        """
        Initialize unsupported format error.

        Args:
            file_path: Path to file with unsupported format
            format: Detected or specified format
            supported_formats: List of supported formats
        """
        super().__init__(
            f"Unsupported file format '{format}'. Supported: {', '.join(supported_formats)}",
            file_path
        )
        self.details.update({
            'format': format,
            'supported_formats': supported_formats
        })


# ============================================================================
# Profiler Errors (Recoverable)
# ============================================================================

class ProfilerError(FieldProfilerException):
    """
    Field profiling errors.

    Raised inside the orchestrator when an analysis of one field fails.
    The orchestrator records the message as that field's error and keeps
    profiling the remaining fields.

    Example:
        >>> raise ProfilerError(
        ...     "Numeric statistics failed",
        ...     operation="numeric_statistics",
        ...     field_name="amount"
        ... )
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        field_name: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        """
        Initialize profiler error.

        Args:
            message: Error description
            operation: Profiling operation that failed
            field_name: Field being profiled
            original_exception: Original exception
        """
        super().__init__(
            message,
            severity=ErrorSeverity.RECOVERABLE,
            details={
                'operation': operation,
                'field_name': field_name
            },
            original_exception=original_exception
        )
        self.operation = operation
        self.field_name = field_name


class FieldNotFoundError(ProfilerError):
    """
    Requested field is not present in any row.

    Example:
        >>> raise FieldNotFoundError("email", available_fields=["id", "name"])
    """

    def __init__(self, field_name: str, available_fields: Optional[List[str]] = None):
        """
        Initialize field not found error.

        Args:
            field_name: Field that is missing
            available_fields: Fields present in the rows
        """
        available = available_fields or []
        message = f"Field '{field_name}' not found in data"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(message, operation="field_lookup", field_name=field_name)
        self.details['available_fields'] = available


class InsufficientDataError(ProfilerError):
    """
    Not enough data for a requested analysis.

    Example:
        >>> raise InsufficientDataError("No data available for profiling")
    """

    def __init__(self, message: str, field_name: Optional[str] = None, operation: Optional[str] = None):
        """
        Initialize insufficient data error.

        Args:
            message: Error description
            field_name: Field being profiled (if any)
            operation: Analysis that could not run
        """
        super().__init__(message, operation=operation, field_name=field_name)
