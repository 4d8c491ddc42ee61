"""
Application service for working date-time calculations.

The service wires the holiday authority into a ``BusinessClock`` and delegates
the arithmetic to the domain-level ``ForwardAdvancer``. Callers hand in a raw
payload or a validated ``CalculationRequest`` and get a ``CalculationResult``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Union

from pendulum import DateTime

from ..adapters.holiday_cache import InMemoryHolidayCache
from ..adapters.holiday_client import HolidayApiClient, HolidayProvider
from ..adapters.mock_holiday_client import MockHolidayClient
from ..config import AppConfig
from ..domain.business_clock import BusinessClock
from ..domain.models import BusinessHoursPolicy
from ..domain.working_time import ForwardAdvancer, anchor_backward
from ..schemas import CalculationRequest, CalculationResult
from .calendar_authority import CalendarAuthority

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstantCheck:
    """Working-time facts about one instant."""
    local: DateTime
    is_working_day: bool
    is_within_business_hours: bool
    anchor: DateTime


class WorkingDaysService:
    """
    Calculates the instant reached after adding working days and hours.

    Every calculation either succeeds as a whole or raises; holiday provider
    failures are absorbed by the calendar authority.
    """

    def __init__(
        self,
        authority: CalendarAuthority,
        policy: Optional[BusinessHoursPolicy] = None,
        utc_offset_hours: int = -5,
        now: Optional[Callable[[], DateTime]] = None,
    ) -> None:
        self.authority = authority
        self.clock = BusinessClock(authority, policy, utc_offset_hours)
        self._advancer = ForwardAdvancer(self.clock, now=now)

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        *,
        provider: Optional[HolidayProvider] = None,
        mock: bool = False,
        offline: bool = False,
    ) -> "WorkingDaysService":
        """
        Build a service from application configuration.

        Args:
            config: Loaded application configuration
            provider: Explicit holiday provider, overrides mock/offline
            mock: Use the bundled holiday list instead of the network
            offline: Use local holiday rules only
        """
        if provider is None:
            if mock:
                provider = MockHolidayClient()
            elif not offline and config.holidays.use_remote:
                provider = HolidayApiClient(
                    source_url=config.holidays.source_url,
                    timeout=config.holidays.timeout_seconds,
                )

        cache = InMemoryHolidayCache(ttl=config.holidays.cache_ttl())
        authority = CalendarAuthority(provider=provider, cache=cache)

        return cls(
            authority=authority,
            policy=config.business_hours.to_policy(),
            utc_offset_hours=config.utc_offset_hours,
        )

    def calculate(
        self,
        request: Union[CalculationRequest, Mapping[str, Any]],
    ) -> CalculationResult:
        """
        Run a calculation request.

        Raises:
            InvalidRequest: If the payload violates the input contract
            CalendarExhausted: If a calendar search runs away
        """
        if not isinstance(request, CalculationRequest):
            request = CalculationRequest.parse(request)

        result = self.calculate_working_datetime(
            days=request.days,
            hours=request.hours,
            anchor=request.anchor_instant(),
        )

        logger.debug(
            "days=%s hours=%s anchor=%s -> %s",
            request.days, request.hours, request.date, result,
        )
        return CalculationResult(result_instant=result)

    def calculate_working_datetime(
        self,
        days: Optional[int] = None,
        hours: Optional[int] = None,
        anchor: Optional[datetime] = None,
    ) -> DateTime:
        """Add working days then working hours to ``anchor`` (default: now)."""
        return self._advancer.calculate_working_datetime(days=days, hours=hours, anchor=anchor)

    def check(self, moment: datetime) -> InstantCheck:
        """Describe ``moment`` in working-time terms."""
        local = self.clock.to_local(moment)
        return InstantCheck(
            local=local,
            is_working_day=self.clock.is_working_day(local),
            is_within_business_hours=self.clock.is_within_business_hours(local),
            anchor=anchor_backward(self.clock, local),
        )
