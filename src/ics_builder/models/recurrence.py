"""Recurrence rule data model."""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class Frequency(str, Enum):
    """Supported RRULE frequencies."""

    YEARLY = "YEARLY"
    MONTHLY = "MONTHLY"
    WEEKLY = "WEEKLY"
    DAILY = "DAILY"


class Weekday(str, Enum):
    """BYDAY weekday codes."""

    SU = "SU"
    MO = "MO"
    TU = "TU"
    WE = "WE"
    TH = "TH"
    FR = "FR"
    SA = "SA"


class RecurrenceViolation(str, Enum):
    """Recurrence checks, in the order they are applied."""

    FREQUENCY = "frequency"
    UNTIL = "until"
    INTERVAL = "interval"
    COUNT = "count"
    BYDAY_TYPE = "byday_type"
    BYDAY_LENGTH = "byday_length"
    BYDAY_VALUE = "byday_value"


class RecurrenceRule(BaseModel):
    """Validated, normalized recurrence rule."""

    freq: Frequency
    until: Optional[datetime] = None
    interval: Optional[int] = Field(default=None, ge=1)
    count: Optional[int] = Field(default=None, ge=1)
    byday: tuple[Weekday, ...] = ()

    model_config = {"frozen": True}

    @field_validator("byday", mode="before")
    @classmethod
    def dedupe_byday(cls, value: Any) -> Any:
        """At most 7 entries before dedup; duplicates dropped in first-seen order."""
        if not isinstance(value, (list, tuple)):
            return value
        if len(value) > 7:
            raise ValueError("byday must not be longer than the 7 days in a week")
        unique = []
        for day in value:
            if day not in unique:
                unique.append(day)
        return unique
