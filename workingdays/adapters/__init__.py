"""
Adapters layer - External integrations (holiday source, cache).
"""

from .holiday_cache import HolidayCache, InMemoryHolidayCache
from .holiday_client import DEFAULT_HOLIDAYS_URL, HolidayApiClient, HolidayProvider
from .mock_holiday_client import MockHolidayClient

__all__ = [
    "DEFAULT_HOLIDAYS_URL",
    "HolidayApiClient",
    "HolidayCache",
    "HolidayProvider",
    "InMemoryHolidayCache",
    "MockHolidayClient",
]
