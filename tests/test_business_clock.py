"""
Tests for the business clock.
"""

from datetime import date, datetime, timezone

import pendulum

from workingdays.domain.business_clock import BusinessClock


class StubCalendar:
    """Minimal stub matching the HolidayCalendar protocol."""

    def __init__(self, holidays=()):
        self.holidays = set(holidays)
        self.asked = []

    def is_holiday(self, civil_date):
        self.asked.append(civil_date)
        return civil_date in self.holidays


def _local(clock, iso_utc):
    return clock.to_local(pendulum.parse(iso_utc))


class TestConversion:
    """Tests for UTC <-> local conversion."""

    def test_utc_to_bogota(self):
        clock = BusinessClock(StubCalendar())
        local = _local(clock, "2025-01-01T12:00:00Z")

        assert local.hour == 7
        assert local.minute == 0
        assert local.utcoffset().total_seconds() == -5 * 3600

    def test_local_date_differs_from_utc_date_near_midnight(self):
        clock = BusinessClock(StubCalendar())
        local = _local(clock, "2025-01-08T03:00:00Z")

        assert local.date() == date(2025, 1, 7)

    def test_round_trip(self):
        """Test that converting back yields the same instant."""
        clock = BusinessClock(StubCalendar())
        instant = pendulum.parse("2025-03-01T00:00:00Z")

        for minutes in range(0, 60 * 24 * 3, 37):
            x = instant.add(minutes=minutes)
            assert clock.to_local_instant(clock.to_local(x)) == x

    def test_accepts_stdlib_datetime(self):
        clock = BusinessClock(StubCalendar())
        local = clock.to_local(datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc))

        assert local.hour == 7


class TestWorkingDay:
    """Tests for the working day predicate."""

    def test_weekday_is_working_day(self):
        clock = BusinessClock(StubCalendar())
        assert clock.is_working_day(pendulum.parse("2025-01-08T15:00:00Z"))

    def test_weekend_is_not_working_day(self):
        clock = BusinessClock(StubCalendar())
        assert not clock.is_working_day(pendulum.parse("2025-01-04T15:00:00Z"))  # Saturday
        assert not clock.is_working_day(pendulum.parse("2025-01-05T15:00:00Z"))  # Sunday

    def test_holiday_is_not_working_day(self):
        clock = BusinessClock(StubCalendar({date(2025, 1, 6)}))
        assert not clock.is_working_day(pendulum.parse("2025-01-06T15:00:00Z"))

    def test_holiday_judged_on_local_date(self):
        """03:00 UTC on Jan 7 is still Jan 6 (a holiday) in Bogotá."""
        calendar = StubCalendar({date(2025, 1, 6)})
        clock = BusinessClock(calendar)

        assert not clock.is_working_day(pendulum.parse("2025-01-07T03:00:00Z"))
        assert calendar.asked[-1] == date(2025, 1, 6)


class TestBusinessHours:
    """Tests for the business hours predicate."""

    def test_inside_business_hours(self):
        clock = BusinessClock(StubCalendar())
        assert clock.is_within_business_hours(_local(clock, "2025-01-01T14:00:00Z"))  # 09:00

    def test_before_and_after(self):
        clock = BusinessClock(StubCalendar())
        assert not clock.is_within_business_hours(_local(clock, "2025-01-01T12:59:00Z"))  # 07:59
        assert not clock.is_within_business_hours(_local(clock, "2025-01-01T22:01:00Z"))  # 17:01

    def test_start_and_end_are_inclusive(self):
        clock = BusinessClock(StubCalendar())
        assert clock.is_within_business_hours(_local(clock, "2025-01-01T13:00:00Z"))  # 08:00
        assert clock.is_within_business_hours(_local(clock, "2025-01-01T22:00:00Z"))  # 17:00

    def test_lunch_is_closed_at_both_ends(self):
        """12:00 and 13:00 both count as lunch."""
        clock = BusinessClock(StubCalendar())
        assert not clock.is_within_business_hours(_local(clock, "2025-01-01T17:00:00Z"))  # 12:00
        assert not clock.is_within_business_hours(_local(clock, "2025-01-01T17:30:00Z"))  # 12:30
        assert not clock.is_within_business_hours(_local(clock, "2025-01-01T18:00:00Z"))  # 13:00
        assert clock.is_within_business_hours(_local(clock, "2025-01-01T18:01:00Z"))  # 13:01
        assert clock.is_within_business_hours(_local(clock, "2025-01-01T16:59:00Z"))  # 11:59

    def test_business_instant(self):
        clock = BusinessClock(StubCalendar())
        assert clock.is_business_instant(pendulum.parse("2025-01-08T15:00:00Z"))
        assert not clock.is_business_instant(pendulum.parse("2025-01-04T15:00:00Z"))
