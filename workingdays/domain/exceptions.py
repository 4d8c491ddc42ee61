"""
Domain-specific exception hierarchy for the working days calculator.
"""


class WorkingDaysError(Exception):
    """Base class for all application-level errors."""


class InvalidRequest(WorkingDaysError):
    """Raised when a calculation request violates the input contract."""


class HolidayProviderUnavailable(WorkingDaysError):
    """Raised when holiday data cannot be fetched or parsed."""


class CalendarExhausted(WorkingDaysError):
    """Raised when a calendar search exceeds its iteration bound."""
