"""
Validation and error handling for the hwsentry package.

This module provides the exception taxonomy, consistent error logging helpers,
the start-up retry helper and configuration value validators.
"""

# Core exception classes and error handling
from .exceptions import (
    ErrorSeverity,
    HwSentryError,
    InsufficientResource,
    RoutineFailure,
    SensorParseError,
    SourceUnavailable,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
)

# Retry
from .strategies import simple_retry

# Validation functions
from .validators import (
    validate_bool,
    validate_directory,
    validate_host,
    validate_positive_float,
    validate_positive_integer,
)

__all__ = [
    # Core functionality
    "ErrorSeverity",
    "HwSentryError",
    "InsufficientResource",
    "RoutineFailure",
    "SensorParseError",
    "SourceUnavailable",
    "ValidationError",
    "handle_cli_error",
    "handle_config_error",
    "handle_error",
    # Retry
    "simple_retry",
    # Validators
    "validate_bool",
    "validate_directory",
    "validate_host",
    "validate_positive_float",
    "validate_positive_integer",
]
