"""
Civil-time view of instants and the working-time predicates built on it.
"""

from datetime import date, datetime
from typing import Protocol

import pendulum
from pendulum import DateTime

from .models import BusinessHoursPolicy

SATURDAY = 5
SUNDAY = 6


class HolidayCalendar(Protocol):
    """Capability the clock needs to tell holidays apart from working days."""

    def is_holiday(self, civil_date: date) -> bool:
        """Return True if ``civil_date`` is an observed holiday."""


class BusinessClock:
    """
    Converts UTC instants to local civil readings and evaluates working time.

    The local timezone is a fixed UTC offset without daylight-saving, so the
    conversion is lossless in both directions.
    """

    def __init__(
        self,
        calendar: HolidayCalendar,
        policy: BusinessHoursPolicy | None = None,
        utc_offset_hours: int = -5,
    ):
        self.calendar = calendar
        self.policy = policy or BusinessHoursPolicy()
        self.timezone = pendulum.fixed_timezone(utc_offset_hours * 3600)

    def to_local(self, instant: datetime) -> DateTime:
        """Local civil reading of ``instant``."""
        if not isinstance(instant, DateTime):
            instant = pendulum.instance(instant)
        return instant.in_timezone(self.timezone)

    def to_local_instant(self, reading: DateTime) -> DateTime:
        """UTC instant of a local civil reading."""
        return reading.in_timezone(pendulum.UTC)

    def is_working_day(self, moment: datetime) -> bool:
        """Monday to Friday and not a holiday, judged on the local civil date."""
        local = self.to_local(moment)
        if local.weekday() in (SATURDAY, SUNDAY):
            return False
        return not self.calendar.is_holiday(local.date())

    def is_before_start(self, local: DateTime) -> bool:
        return _minute_of_day(local) < _minutes(self.policy.start_hour, self.policy.start_minute)

    def is_after_end(self, local: DateTime) -> bool:
        return _minute_of_day(local) > _minutes(self.policy.end_hour, self.policy.end_minute)

    def is_in_lunch(self, local: DateTime) -> bool:
        """Lunch is closed at both ends: lunch start and lunch end are excluded."""
        policy = self.policy
        return (
            _minutes(policy.lunch_start_hour, policy.lunch_start_minute)
            <= _minute_of_day(local)
            <= _minutes(policy.lunch_end_hour, policy.lunch_end_minute)
        )

    def is_within_business_hours(self, local: DateTime) -> bool:
        """Inside [start, end] and outside the lunch window."""
        return not (
            self.is_before_start(local)
            or self.is_after_end(local)
            or self.is_in_lunch(local)
        )

    def is_business_instant(self, moment: datetime) -> bool:
        local = self.to_local(moment)
        return self.is_working_day(local) and self.is_within_business_hours(local)


def _minutes(hour: int, minute: int) -> int:
    return hour * 60 + minute


def _minute_of_day(local: DateTime) -> int:
    return _minutes(local.hour, local.minute)
