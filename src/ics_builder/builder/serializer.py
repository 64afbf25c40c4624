"""Serialization of a single event into a VEVENT block."""

import logging
from datetime import datetime
from typing import Callable, Optional

from ..models.event import EventBlock, EventInput
from ..recurrence.composer import RecurrenceRuleComposer
from ..recurrence.validator import RecurrenceRuleValidator
from ..utils.date_utils import format_date, format_timestamp
from ..utils.exceptions import InvalidDateError, InvalidRecurrenceError

logger = logging.getLogger(__name__)

# RRULE goes right after DESCRIPTION
RRULE_POSITION = 4


class EventSerializer:
    """Builds VEVENT blocks from event inputs."""

    def __init__(
        self,
        uid_domain: str = "default",
        separator: str = "\r\n",
        clock: Optional[Callable[[], datetime]] = None,
        validator: Optional[RecurrenceRuleValidator] = None,
        composer: Optional[RecurrenceRuleComposer] = None,
    ):
        """
        Initialize serializer.

        Args:
            uid_domain: Domain part of generated UIDs
            separator: Line separator for the rendered block
            clock: Source of the DTSTAMP time (defaults to datetime.now)
            validator: Recurrence validator
            composer: Recurrence composer
        """
        self.uid_domain = uid_domain
        self.separator = separator
        self.clock = clock
        self.validator = validator or RecurrenceRuleValidator()
        self.composer = composer or RecurrenceRuleComposer()

    def serialize(self, event: EventInput, ordinal: int) -> Optional[EventBlock]:
        """
        Serialize one event.

        Args:
            event: Event to serialize
            ordinal: Zero-based position of the event in its document

        Returns:
            EventBlock, or None if a mandatory field is missing or a date
            cannot be parsed

        Raises:
            InvalidRecurrenceError: If the recurrence spec fails validation
        """
        missing = event.missing_fields()
        if missing:
            logger.warning(f"Event not added, missing field(s): {', '.join(missing)}")
            return None

        full_day = event.is_full_day
        try:
            start = format_date(event.start, full_day)
            end = format_date(event.end, full_day)
        except InvalidDateError as e:
            logger.warning(f"Event not added, {e}")
            return None

        rrule_line = None
        if event.recurrence is not None and event.recurrence != "":
            result = self.validator.validate(event.recurrence)
            if not result.ok:
                raise InvalidRecurrenceError(result.violation, result.message)
            rrule_line = self.composer.compose(result.rule)

        value_type = "DATE" if full_day else "DATE-TIME"
        uid = f"{ordinal}@{self.uid_domain}"

        lines = [
            "BEGIN:VEVENT",
            f"UID:{uid}",
            "CLASS:PUBLIC",
            f"DESCRIPTION:{event.description}",
            f"DTSTAMP;VALUE=DATE-TIME:{format_timestamp(self.clock)}",
            f"DTSTART;VALUE={value_type}:{start}",
            f"DTEND;VALUE={value_type}:{end}",
            f"LOCATION:{event.location}",
            f"SUMMARY;LANGUAGE=en-us:{event.subject}",
            "TRANSP:TRANSPARENT",
        ]

        if rrule_line is not None:
            lines.insert(RRULE_POSITION, rrule_line)

        # Values are written as given; no escaping
        for key, value in event.custom_fields.items():
            lines.append(f"{key.upper()}:{value}")

        lines.append("END:VEVENT")

        logger.debug(f"Serialized event {uid}: {event.subject}")
        return EventBlock(
            uid=uid,
            ordinal=ordinal,
            lines=tuple(lines),
            separator=self.separator,
        )
