"""
Holiday authority combining the external holiday source with local rules.

The external list is fetched at most once per cache lifetime. For each year the
authority decides once whether to trust the external list (it has at least one
date in that year) or to compute the holidays locally, and that decision sticks
until the cache is invalidated or expires.
"""

from __future__ import annotations

import logging
import threading
from datetime import date
from typing import List, Optional, Tuple

from ..adapters.holiday_cache import HolidayCache, InMemoryHolidayCache
from ..adapters.holiday_client import HolidayProvider
from ..domain import holiday_rules
from ..domain.exceptions import HolidayProviderUnavailable
from ..domain.models import (
    HolidayClassification,
    HolidayRecord,
    HolidaySource,
    YearHolidays,
)

logger = logging.getLogger(__name__)


GENERIC_HOLIDAY_NAME = "Día Festivo"


class CalendarAuthority:
    """
    Answers "is this civil date a holiday?" for any year.

    Provider failures never reach callers: they are logged and the affected
    years fall back to the local rule computation.
    """

    def __init__(
        self,
        provider: Optional[HolidayProvider] = None,
        cache: Optional[HolidayCache] = None,
    ) -> None:
        """
        Args:
            provider: External holiday source; None means local rules only
            cache: Holiday cache; a non-expiring in-memory cache by default
        """
        self._provider = provider
        self._cache = cache if cache is not None else InMemoryHolidayCache()
        self._fetch_lock = threading.Lock()

    @property
    def cache(self) -> HolidayCache:
        return self._cache

    def holiday_set(self) -> Tuple[date, ...]:
        """
        Return the full external holiday list behind a single memoized fetch.

        A failed fetch is memoized as an empty list.
        """
        cached = self._cache.get_source()
        if cached is not None:
            return cached

        with self._fetch_lock:
            cached = self._cache.get_source()
            if cached is not None:
                return cached

            return self._cache.set_source(self._fetch_external())

    def local_holidays_for_year(self, year: int) -> Tuple[date, ...]:
        """Holiday dates of ``year`` computed from the local rules."""
        return holiday_rules.local_holidays_for_year(year)

    def holidays_for_year(self, year: int) -> YearHolidays:
        """Holiday dates of ``year`` tagged with the source they came from."""
        entry = self._cache.get(year)
        if entry is not None:
            return entry

        external = tuple(d for d in self.holiday_set() if d.year == year)

        if external:
            entry = YearHolidays(year=year, dates=external, source=HolidaySource.EXTERNAL)
        else:
            logger.info("No external holidays for %d, using local rules", year)
            entry = YearHolidays(
                year=year,
                dates=self.local_holidays_for_year(year),
                source=HolidaySource.COMPUTED,
            )

        return self._cache.set(entry)

    def is_holiday(self, civil_date: date) -> bool:
        """Check whether ``civil_date`` is an observed holiday."""
        return civil_date in self.holidays_for_year(civil_date.year)

    def holiday_records(self, year: int) -> List[HolidayRecord]:
        """
        Holiday records of ``year`` for display.

        External dates that coincide with a local rule carry that rule's name;
        the rest get a generic name.
        """
        entry = self.holidays_for_year(year)
        rule_names = {
            record.civil_date: record.name
            for record in holiday_rules.local_holiday_records(year)
        }

        return [
            HolidayRecord(
                civil_date=civil_date,
                name=rule_names.get(civil_date, GENERIC_HOLIDAY_NAME),
                classification=HolidayClassification.NATIONAL,
            )
            for civil_date in entry.dates
        ]

    def holidays_between(self, start: date, end: date) -> List[HolidayRecord]:
        """Holiday records between ``start`` and ``end``, both inclusive."""
        records: List[HolidayRecord] = []

        for year in range(start.year, end.year + 1):
            records.extend(
                record for record in self.holiday_records(year)
                if start <= record.civil_date <= end
            )

        return records

    def holiday_info(self, civil_date: date) -> Optional[HolidayRecord]:
        """The holiday record for ``civil_date``, or None on a non-holiday."""
        for record in self.holiday_records(civil_date.year):
            if record.civil_date == civil_date:
                return record
        return None

    def invalidate(self) -> None:
        """Forget the fetched list and every per-year decision."""
        self._cache.clear()

    def _fetch_external(self) -> List[date]:
        if self._provider is None:
            return []

        try:
            dates = self._provider.fetch_holidays()
        except HolidayProviderUnavailable as exc:
            logger.warning("Holiday provider unavailable, falling back to local rules: %s", exc)
            return []

        logger.debug("Fetched %d external holidays", len(dates))
        return dates
