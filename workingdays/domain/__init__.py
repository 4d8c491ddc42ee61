"""
Domain layer - Pure business logic without external dependencies.
"""

from .business_clock import BusinessClock, HolidayCalendar
from .exceptions import (
    CalendarExhausted,
    HolidayProviderUnavailable,
    InvalidRequest,
    WorkingDaysError,
)
from .models import (
    BusinessHoursPolicy,
    HolidayClassification,
    HolidayRecord,
    HolidaySource,
    YearHolidays,
)
from .working_time import ForwardAdvancer, anchor_backward

__all__ = [
    "BusinessClock",
    "BusinessHoursPolicy",
    "CalendarExhausted",
    "ForwardAdvancer",
    "HolidayCalendar",
    "HolidayClassification",
    "HolidayProviderUnavailable",
    "HolidayRecord",
    "HolidaySource",
    "InvalidRequest",
    "WorkingDaysError",
    "YearHolidays",
    "anchor_backward",
]
