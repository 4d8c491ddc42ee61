"""
HTTP client for the external Colombian holiday list.
"""

import logging
from datetime import date
from typing import Any, List, Protocol

import pendulum
import requests

from ..domain.exceptions import HolidayProviderUnavailable

logger = logging.getLogger(__name__)


DEFAULT_HOLIDAYS_URL = "https://content.capta.co/Recruitment/WorkingDays.json"


class HolidayProvider(Protocol):
    """Protocol describing a source of holiday civil dates."""

    def fetch_holidays(self) -> List[date]:
        """Return every known holiday date, across all years."""


class HolidayApiClient:
    """
    Client for a holiday endpoint returning a flat JSON list of dates.

    Response format:
    ["2025-01-01", "2025-01-06", ...]
    """

    def __init__(self, source_url: str = DEFAULT_HOLIDAYS_URL, timeout: float = 10):
        """
        Initialize the holiday client.

        Args:
            source_url: URL of the JSON holiday list
            timeout: Request timeout in seconds
        """
        self.source_url = source_url
        self.timeout = timeout

    def fetch_holidays(self) -> List[date]:
        """
        Download and parse the holiday list.

        Returns:
            Sorted list of unique holiday dates

        Raises:
            HolidayProviderUnavailable: If the request fails or the body is not
                a JSON list
        """
        try:
            response = requests.get(self.source_url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()

        except requests.exceptions.RequestException as e:
            raise HolidayProviderUnavailable(
                f"Failed to fetch holidays from {self.source_url}: {e}"
            ) from e

        except ValueError as e:
            raise HolidayProviderUnavailable(
                f"Holiday source {self.source_url} returned invalid JSON: {e}"
            ) from e

        return self._parse_holidays(data)

    def _parse_holidays(self, data: Any) -> List[date]:
        """Parse the JSON body into dates, skipping blank or malformed entries."""
        if not isinstance(data, list):
            raise HolidayProviderUnavailable(
                f"Expected a JSON list of dates, got {type(data).__name__}"
            )

        holidays: set[date] = set()

        for item in data:
            if not item:
                continue

            try:
                holidays.add(self._parse_date(item))
            except (TypeError, ValueError) as e:
                logger.warning("Skipping unparsable holiday entry %r: %s", item, e)
                continue

        return sorted(holidays)

    @staticmethod
    def _parse_date(value: Any) -> date:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")
        return pendulum.from_format(value.strip(), "YYYY-MM-DD").date()
