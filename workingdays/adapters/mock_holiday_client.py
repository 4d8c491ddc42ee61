"""
Offline holiday provider for testing without network access.
"""

import json
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

import pendulum


class MockHolidayClient:
    """
    Provider that serves a fixed holiday list.

    Without explicit dates it loads the bundled mock_holidays.json
    (Colombian national holidays of 2025).
    """

    def __init__(self, dates: Optional[Iterable[date]] = None):
        """
        Initialize the mock provider.

        Args:
            dates: Holiday dates to serve; the bundled list when omitted
        """
        self.calls = 0
        if dates is not None:
            self._dates = sorted(set(dates))
        else:
            self._dates = self._load_bundled_dates()

    def _load_bundled_dates(self) -> List[date]:
        """Load mock holiday data from JSON file."""
        data_file = Path(__file__).parent / "mock_holidays.json"

        if not data_file.exists():
            return []

        with open(data_file, "r", encoding="utf-8") as f:
            raw = json.load(f)

        return sorted({pendulum.from_format(item, "YYYY-MM-DD").date() for item in raw if item})

    def fetch_holidays(self) -> List[date]:
        """Return the configured holiday dates."""
        self.calls += 1
        return list(self._dates)
