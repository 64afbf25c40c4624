"""Event input and rendered event block models."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class EventInput(BaseModel):
    """Caller-supplied event description.

    Mandatory fields default to None; the serializer reports absent ones as a
    failed add rather than a construction error.
    """

    subject: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    is_full_day: bool = False

    # Date-like: datetime, date, str or epoch milliseconds
    start: Any = None
    end: Any = None

    # Raw RRULE string, mapping of rule parts, or RecurrenceRule
    recurrence: Any = None
    custom_fields: dict[str, Any] = Field(default_factory=dict)

    def missing_fields(self) -> list[str]:
        """Names of mandatory fields that are absent or empty."""
        return [
            name
            for name in ("subject", "description", "location", "start", "end")
            if not getattr(self, name)
        ]


class EventBlock(BaseModel):
    """Rendered VEVENT block, generated once when the event is added."""

    uid: str
    ordinal: int
    lines: tuple[str, ...]
    separator: str = "\r\n"

    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        return self.separator.join(self.lines)
