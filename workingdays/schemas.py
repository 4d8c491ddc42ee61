"""
Boundary models for the working date-time calculation.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

import pendulum
from pendulum import DateTime
from pydantic import BaseModel, StrictInt, ValidationError, field_validator, model_validator

from .domain.exceptions import InvalidRequest


class CalculationRequest(BaseModel):
    """
    Validated calculation input.

    ``date`` is the anchor instant as ISO-8601 text with a ``Z`` suffix; when
    absent the calculation starts from the current instant.
    """
    days: Optional[StrictInt] = None
    hours: Optional[StrictInt] = None
    date: Optional[str] = None

    @field_validator("days", "hours")
    @classmethod
    def validate_non_negative(cls, value: Optional[int], info) -> Optional[int]:
        """Reject negative counts."""
        if value is not None and value < 0:
            raise ValueError(f"{info.field_name} must be a non-negative integer")
        return value

    @field_validator("date")
    @classmethod
    def validate_utc_instant(cls, value: Optional[str]) -> Optional[str]:
        """Require an unambiguous UTC instant."""
        if value is None:
            return value
        if not value.endswith("Z"):
            raise ValueError("date must be in UTC format with Z suffix")
        try:
            parsed = pendulum.parse(value)
        except ValueError as exc:
            raise ValueError(f"date is not a valid ISO 8601 instant: {value}") from exc
        if not isinstance(parsed, DateTime):
            raise ValueError(f"date must include a time of day: {value}")
        return value

    @model_validator(mode="after")
    def validate_has_amount(self) -> "CalculationRequest":
        """At least one of days or hours must be provided."""
        if self.days is None and self.hours is None:
            raise ValueError("At least one of days or hours must be provided")
        return self

    @classmethod
    def parse(cls, payload: Mapping[str, Any]) -> "CalculationRequest":
        """
        Validate a raw payload.

        Raises:
            InvalidRequest: With every validation message joined together
        """
        try:
            return cls.model_validate(dict(payload))
        except ValidationError as exc:
            messages = ", ".join(error["msg"] for error in exc.errors())
            raise InvalidRequest(f"Validation error: {messages}") from exc

    def anchor_instant(self) -> Optional[DateTime]:
        """The anchor as a UTC instant, or None for "now"."""
        if self.date is None:
            return None
        return pendulum.parse(self.date).in_timezone(pendulum.UTC)


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a successful calculation."""
    result_instant: datetime

    def to_response(self) -> Dict[str, str]:
        """Response body, e.g. {"date": "2025-04-21T15:00:00.000Z"}."""
        return {"date": format_utc(self.result_instant)}


def format_utc(instant: datetime) -> str:
    """ISO-8601 text in UTC with millisecond precision and a Z designator."""
    utc = instant.astimezone(timezone.utc)
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"
