"""Custom exceptions for the iCalendar builder."""

from ..models.recurrence import RecurrenceViolation


class IcsBuilderError(Exception):
    """Base exception for iCalendar builder errors."""


class InvalidDateError(IcsBuilderError):
    """Raised when a date-like value cannot be parsed."""


class InvalidRecurrenceError(IcsBuilderError):
    """Raised when a recurrence rule fails validation."""

    def __init__(self, violation: RecurrenceViolation, message: str):
        super().__init__(message)
        self.violation = violation


class CalendarWriteError(IcsBuilderError):
    """Raised when delivering a calendar fails."""


class ConfigurationError(IcsBuilderError):
    """Raised when configuration is invalid."""
