"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .calendar_authority import CalendarAuthority
from .working_days import InstantCheck, WorkingDaysService

__all__ = ["CalendarAuthority", "InstantCheck", "WorkingDaysService"]
