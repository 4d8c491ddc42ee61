"""
Working-time arithmetic: backward anchoring and forward advancement.

This is the heart of the application - pure date arithmetic over a
``BusinessClock``; the only external input is the holiday calendar the clock
was built with.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional

import pendulum
from pendulum import DateTime

from .business_clock import BusinessClock
from .exceptions import CalendarExhausted, InvalidRequest

# Longest run of consecutive non-working days any search may cross.
MAX_SEARCH_STEPS = 400

ZERO = timedelta(0)


def anchor_backward(clock: BusinessClock, moment: datetime) -> DateTime:
    """
    Normalize ``moment`` to the nearest business instant at or before it.

    Returns the local civil reading of the anchor. Steps:
    1. While the civil date is not a working day, go back one day to its
       business end.
    2. Before business start: go back one day to its business end and repeat
       from step 1.
    3. After business end: snap to business end of the same day.
    4. Inside lunch: snap to lunch start of the same day.

    Raises:
        CalendarExhausted: If no working day is found within MAX_SEARCH_STEPS
    """
    policy = clock.policy
    local = clock.to_local(moment)

    for _ in range(MAX_SEARCH_STEPS):
        if not clock.is_working_day(local) or clock.is_before_start(local):
            local = policy.end_of_day(local.subtract(days=1))
            continue

        if clock.is_after_end(local):
            return policy.end_of_day(local)

        if clock.is_in_lunch(local):
            return policy.lunch_start(local)

        return local

    raise CalendarExhausted(
        f"No business instant found within {MAX_SEARCH_STEPS} days before {moment}"
    )


class ForwardAdvancer:
    """
    Adds working days and then working hours to an anchor instant.

    Algorithm:
    1. Anchor the start instant backward if it is not already a business instant
    2. Add working days, keeping the time-of-day
    3. Add working hours, skipping lunch and non-working days
    """

    def __init__(
        self,
        clock: BusinessClock,
        now: Optional[Callable[[], DateTime]] = None,
    ):
        self.clock = clock
        self._now = now or (lambda: pendulum.now(pendulum.UTC))

    def calculate_working_datetime(
        self,
        days: Optional[int] = None,
        hours: Optional[int] = None,
        anchor: Optional[datetime] = None,
    ) -> DateTime:
        """
        Resolve the UTC instant reached after adding working days then hours.

        Args:
            days: Working days to add (None counts as 0)
            hours: Working hours to add (None counts as 0)
            anchor: Start instant; defaults to the current instant

        Returns:
            Result instant in UTC

        Raises:
            InvalidRequest: If days or hours are negative or not integers
            CalendarExhausted: If a calendar search runs away
        """
        days = _check_count("days", days)
        hours = _check_count("hours", hours)

        start = anchor if anchor is not None else self._now()

        if self.clock.is_business_instant(start):
            local = self.clock.to_local(start)
        else:
            local = anchor_backward(self.clock, start)

        # Days always before hours, whatever order the caller gave them in.
        if days > 0:
            local = self.add_working_days(local, days)

        if hours > 0:
            local = self.add_working_hours(local, hours)

        return self.clock.to_local_instant(local)

    def add_working_days(self, local: DateTime, days: int) -> DateTime:
        """
        Move forward ``days`` working days, keeping the time-of-day.

        The landing time is never re-snapped to business hours.
        """
        for _ in range(_check_count("days", days)):
            local = self._skip_non_working_days(local.add(days=1), keep_time=True)
        return local

    def add_working_hours(self, local: DateTime, hours: int) -> DateTime:
        """
        Consume ``hours`` business hours starting at ``local``.

        Hours that do not fit in the current day carry over to the business
        start of the next working day.
        """
        hours = _check_count("hours", hours)
        requested = timedelta(hours=hours)

        # Nothing left today and a single hour asked for: the answer is the
        # next business start itself.
        if self.remaining_business_time(local) == ZERO and hours == 1:
            return self.next_working_day_start(local)

        consumed = ZERO
        while consumed < requested:
            remaining = self.remaining_business_time(local)

            if remaining > ZERO:
                step = min(requested - consumed, remaining)
                local = self._advance_within_day(local, step)
                consumed += step

            if consumed < requested:
                local = self.next_working_day_start(local)

        return local

    def remaining_business_time(self, local: DateTime) -> timedelta:
        """Business time left between ``local`` and business end of its day."""
        if not self.clock.is_within_business_hours(local):
            return ZERO

        policy = self.clock.policy
        remaining = _span(local, policy.end_of_day(local))

        lunch_start = policy.lunch_start(local)
        lunch_end = policy.lunch_end(local)
        if local < lunch_start:
            remaining -= policy.lunch_duration
        elif local < lunch_end:
            remaining -= _span(local, lunch_end)

        return max(remaining, ZERO)

    def next_working_day_start(self, local: DateTime) -> DateTime:
        """Business start of the first working day after ``local``'s date."""
        candidate = self.clock.policy.start_of_day(local.add(days=1))
        return self._skip_non_working_days(candidate, keep_time=False)

    def _advance_within_day(self, local: DateTime, amount: timedelta) -> DateTime:
        """Add ``amount`` of business time, jumping over the lunch gap."""
        policy = self.clock.policy
        consumed = ZERO

        while consumed < amount:
            lunch_start = policy.lunch_start(local)
            lunch_end = policy.lunch_end(local)

            if local < lunch_start:
                step = min(amount - consumed, _span(local, lunch_start))
                local = local + step
                consumed += step
                if consumed < amount:
                    local = lunch_end
            elif local < lunch_end:
                local = lunch_end
            else:
                local = local + (amount - consumed)
                consumed = amount

        return local

    def _skip_non_working_days(self, local: DateTime, keep_time: bool) -> DateTime:
        start_of_day = self.clock.policy.start_of_day

        for _ in range(MAX_SEARCH_STEPS):
            if self.clock.is_working_day(local):
                return local
            local = local.add(days=1)
            if not keep_time:
                local = start_of_day(local)

        raise CalendarExhausted(
            f"No working day found within {MAX_SEARCH_STEPS} days after {local}"
        )


def _check_count(name: str, value: Optional[int]) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequest(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidRequest(f"{name} must be a non-negative integer, got {value}")
    return value


def _span(earlier: DateTime, later: DateTime) -> timedelta:
    # pendulum returns its own interval type; callers compare plain timedeltas.
    return timedelta(seconds=(later - earlier).total_seconds())
