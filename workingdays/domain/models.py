"""
Domain models for business hours and holiday data.
"""

from dataclasses import dataclass
from datetime import date, time, timedelta
from enum import Enum
from typing import Tuple

from pendulum import DateTime


class HolidayClassification(str, Enum):
    """Scope in which a holiday is observed."""
    NATIONAL = "national"
    REGIONAL = "regional"


class HolidaySource(str, Enum):
    """Where a year's holiday set came from."""
    EXTERNAL = "external"
    COMPUTED = "computed"


@dataclass(frozen=True)
class HolidayRecord:
    """A single observed holiday."""
    civil_date: date
    name: str
    classification: HolidayClassification = HolidayClassification.NATIONAL

    def __str__(self) -> str:
        return f"{self.civil_date.isoformat()} {self.name}"


@dataclass(frozen=True)
class YearHolidays:
    """
    Holiday dates of one year, tagged with their provenance.

    Invariant: dates are sorted, unique and all fall in ``year``.
    """
    year: int
    dates: Tuple[date, ...]
    source: HolidaySource

    def __post_init__(self):
        stray = [d for d in self.dates if d.year != self.year]
        if stray:
            raise ValueError(f"Dates {stray} do not belong to year {self.year}")
        if list(self.dates) != sorted(set(self.dates)):
            raise ValueError("Holiday dates must be sorted and unique")

    def __contains__(self, civil_date: date) -> bool:
        return civil_date in self.dates

    def __len__(self) -> int:
        return len(self.dates)


@dataclass(frozen=True)
class BusinessHoursPolicy:
    """
    Immutable business hours configuration.

    Invariant: start <= lunch start < lunch end <= end.
    """
    start_hour: int = 8
    start_minute: int = 0
    end_hour: int = 17
    end_minute: int = 0
    lunch_start_hour: int = 12
    lunch_start_minute: int = 0
    lunch_end_hour: int = 13
    lunch_end_minute: int = 0

    def __post_init__(self):
        start = self.start_time
        lunch_start = self.lunch_start_time
        lunch_end = self.lunch_end_time
        end = self.end_time
        if not start <= lunch_start < lunch_end <= end:
            raise ValueError(
                f"Business hours must satisfy start <= lunch start < lunch end <= end, "
                f"got {start:%H:%M}, {lunch_start:%H:%M}, {lunch_end:%H:%M}, {end:%H:%M}"
            )

    @property
    def start_time(self) -> time:
        return time(self.start_hour, self.start_minute)

    @property
    def end_time(self) -> time:
        return time(self.end_hour, self.end_minute)

    @property
    def lunch_start_time(self) -> time:
        return time(self.lunch_start_hour, self.lunch_start_minute)

    @property
    def lunch_end_time(self) -> time:
        return time(self.lunch_end_hour, self.lunch_end_minute)

    @property
    def lunch_duration(self) -> timedelta:
        minutes = (
            (self.lunch_end_hour * 60 + self.lunch_end_minute)
            - (self.lunch_start_hour * 60 + self.lunch_start_minute)
        )
        return timedelta(minutes=minutes)

    def start_of_day(self, local: DateTime) -> DateTime:
        """Business start on the civil date of ``local``."""
        return _at(local, self.start_time)

    def end_of_day(self, local: DateTime) -> DateTime:
        """Business end on the civil date of ``local``."""
        return _at(local, self.end_time)

    def lunch_start(self, local: DateTime) -> DateTime:
        return _at(local, self.lunch_start_time)

    def lunch_end(self, local: DateTime) -> DateTime:
        return _at(local, self.lunch_end_time)


def _at(local: DateTime, moment: time) -> DateTime:
    return local.set(hour=moment.hour, minute=moment.minute, second=0, microsecond=0)
