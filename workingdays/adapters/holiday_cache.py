"""
In-memory holiday cache with whole-cache expiry.
"""

from __future__ import annotations

import logging
import threading
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, Optional, Protocol, Tuple

import pendulum
from pendulum import DateTime

from ..domain.models import YearHolidays

logger = logging.getLogger(__name__)


class HolidayCache(Protocol):
    """Port used by the calendar authority to memoize holiday data."""

    def get(self, year: int) -> Optional[YearHolidays]:
        """Return the cached entry for ``year``, if any."""

    def set(self, entry: YearHolidays) -> YearHolidays:
        """Store ``entry`` unless its year is cached already; return the stored entry."""

    def get_source(self) -> Optional[Tuple[date, ...]]:
        """Return the memoized external holiday list, if fetched."""

    def set_source(self, dates: Iterable[date]) -> Tuple[date, ...]:
        """Memoize the external holiday list; return the stored value."""

    def clear(self) -> None:
        """Drop every cached value."""


class InMemoryHolidayCache:
    """
    Process-local holiday cache.

    Entries are immutable once set: the first write for a year wins. With a
    TTL, the whole cache is dropped on the first access after the TTL has
    elapsed since it was first populated.
    """

    def __init__(
        self,
        ttl: Optional[timedelta] = None,
        now: Callable[[], DateTime] = pendulum.now,
    ):
        self.ttl = ttl
        self._now = now
        self._lock = threading.Lock()
        self._years: Dict[int, YearHolidays] = {}
        self._source: Optional[Tuple[date, ...]] = None
        self._populated_at: Optional[DateTime] = None

    def get(self, year: int) -> Optional[YearHolidays]:
        with self._lock:
            self._expire_if_stale()
            return self._years.get(year)

    def set(self, entry: YearHolidays) -> YearHolidays:
        with self._lock:
            self._expire_if_stale()
            stored = self._years.setdefault(entry.year, entry)
            if stored is entry:
                self._mark_populated()
                logger.debug(
                    "Cached %d %s holidays for %d", len(entry), entry.source.value, entry.year
                )
            return stored

    def get_source(self) -> Optional[Tuple[date, ...]]:
        with self._lock:
            self._expire_if_stale()
            return self._source

    def set_source(self, dates: Iterable[date]) -> Tuple[date, ...]:
        with self._lock:
            self._expire_if_stale()
            if self._source is None:
                self._source = tuple(sorted(set(dates)))
                self._mark_populated()
            return self._source

    def clear(self) -> None:
        with self._lock:
            self._clear()

    @property
    def cached_years(self) -> Tuple[int, ...]:
        with self._lock:
            self._expire_if_stale()
            return tuple(sorted(self._years))

    def _mark_populated(self) -> None:
        if self._populated_at is None:
            self._populated_at = self._now()

    def _expire_if_stale(self) -> None:
        if self.ttl is None or self._populated_at is None:
            return
        elapsed = self._now() - self._populated_at
        if elapsed.total_seconds() >= self.ttl.total_seconds():
            logger.debug("Holiday cache expired after %s", self.ttl)
            self._clear()

    def _clear(self) -> None:
        self._years.clear()
        self._source = None
        self._populated_at = None
