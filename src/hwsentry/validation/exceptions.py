"""
Exception types and error handling helpers.

This module provides the hwsentry exception taxonomy together with the small
set of helpers used to log errors consistently across the application.
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ValidationError(Exception):
    """
    Exception raised when a configuration value fails validation.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class HwSentryError(Exception):
    """Base class for all domain errors raised by hwsentry."""


class SourceUnavailable(HwSentryError):
    """The hardware monitor could not be reached or returned malformed data."""


class InsufficientResource(HwSentryError):
    """Not enough free memory or disk space to run a stress routine."""


class SensorParseError(HwSentryError):
    """A single sensor value is not numeric after clean-up."""

    def __init__(self, name: str, raw_value: str):
        super().__init__(f"Sensor '{name}' has a non-numeric value: {raw_value!r}")
        self.name = name
        self.raw_value = raw_value


class RoutineFailure(HwSentryError):
    """
    A stress routine raised; wraps the original exception.

    The string form is the message recorded in the run's error list.
    """

    def __init__(self, component: str, cause: BaseException):
        super().__init__(f"{component} stress test failed: {type(cause).__name__}: {cause}")
        self.component = component
        self.cause = cause


_LOG_LEVELS = {
    ErrorSeverity.DEBUG: logging.DEBUG,
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Log an error as ``Error in <context>: <error>`` and optionally re-raise it.

    Debug and critical severities also log the traceback.

    Args:
        error: The exception that occurred
        context: Where the error occurred
        severity: ErrorSeverity or its string value (case-insensitive)
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to this module's logger)
    """
    if isinstance(severity, str):
        severity = ErrorSeverity(severity.lower())
    target = logger or globals()['logger']
    target.log(
        _LOG_LEVELS[severity],
        f"Error in {context}: {error}",
        exc_info=severity in (ErrorSeverity.DEBUG, ErrorSeverity.CRITICAL),
    )

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Log a fatal CLI-level error and exit the process."""
    exit_code = kwargs.pop('exit_code', 1)
    include_traceback = kwargs.pop('include_traceback', False)

    severity = kwargs.pop('severity', ErrorSeverity.ERROR)
    if include_traceback:
        severity = ErrorSeverity.CRITICAL
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)

    sys.exit(exit_code)
