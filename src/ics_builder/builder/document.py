"""iCalendar document assembly."""

import logging
from datetime import datetime
from typing import Any, Callable, Optional

from ..config import AppConfig
from ..models.event import EventBlock, EventInput
from ..utils.exceptions import ConfigurationError
from ..writers.base import CalendarWriter
from .serializer import EventSerializer

logger = logging.getLogger(__name__)

LINE_SEPARATORS = ("\r\n", "\n")


class CalendarDocument:
    """Ordered collection of serialized events, rendered as one VCALENDAR."""

    def __init__(
        self,
        uid_domain: Optional[str] = None,
        product_id: Optional[str] = None,
        separator: str = "\r\n",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize document.

        Args:
            uid_domain: Domain part of event UIDs (default "default")
            product_id: PRODID value (default "Calendar")
            separator: Line separator, "\\r\\n" or "\\n"
            clock: Source of DTSTAMP times (defaults to datetime.now)
        """
        if separator not in LINE_SEPARATORS:
            raise ConfigurationError(f"Unsupported line separator: {separator!r}")

        self._uid_domain = uid_domain or "default"
        self._product_id = product_id or "Calendar"
        self._separator = separator
        self._serializer = EventSerializer(
            uid_domain=self._uid_domain,
            separator=separator,
            clock=clock,
        )
        self._blocks: list[EventBlock] = []

    @classmethod
    def from_config(
        cls,
        app_config: AppConfig,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> "CalendarDocument":
        """Create a document from application configuration."""
        return cls(
            uid_domain=app_config.uid_domain,
            product_id=app_config.product_id,
            separator=app_config.separator,
            clock=clock,
        )

    @property
    def uid_domain(self) -> str:
        return self._uid_domain

    @property
    def product_id(self) -> str:
        return self._product_id

    @property
    def separator(self) -> str:
        return self._separator

    def __len__(self) -> int:
        return len(self._blocks)

    def add(self, event: EventInput) -> Optional[EventBlock]:
        """
        Serialize and append an event.

        Args:
            event: Event to add

        Returns:
            The appended EventBlock, or None if a mandatory field is missing

        Raises:
            InvalidRecurrenceError: If the recurrence spec is invalid; the
                document is left unchanged
        """
        block = self._serializer.serialize(event, ordinal=len(self._blocks))
        if block is None:
            return None
        self._blocks.append(block)
        return block

    def add_event(
        self,
        subject: Optional[str],
        description: Optional[str],
        location: Optional[str],
        is_full_day: bool,
        start: Any,
        end: Any,
        recurrence: Any = None,
        custom_fields: Optional[dict[str, Any]] = None,
    ) -> Optional[EventBlock]:
        """Add an event from positional arguments. See add()."""
        return self.add(
            EventInput(
                subject=subject,
                description=description,
                location=location,
                is_full_day=is_full_day,
                start=start,
                end=end,
                recurrence=recurrence,
                custom_fields=custom_fields or {},
            )
        )

    def add_all_day_event(
        self,
        subject: Optional[str],
        description: Optional[str],
        location: Optional[str],
        day: Any,
        recurrence: Any = None,
        custom_fields: Optional[dict[str, Any]] = None,
    ) -> Optional[EventBlock]:
        """Add a full-day event starting and ending on ``day``."""
        return self.add_event(
            subject, description, location, True, day, day, recurrence, custom_fields
        )

    def events(self) -> tuple[str, ...]:
        """Rendered event blocks in insertion order."""
        return tuple(block.text for block in self._blocks)

    def render(self) -> Optional[str]:
        """
        Render the whole document.

        Returns:
            Calendar text, or None if the document has no events
        """
        if not self._blocks:
            logger.info("No events to render")
            return None

        lines = [
            "BEGIN:VCALENDAR",
            f"PRODID:{self._product_id}",
            "VERSION:2.0",
            *self.events(),
            "END:VCALENDAR",
        ]
        return self._separator.join(lines)

    def build(self) -> Optional[str]:
        """Build the calendar text for export."""
        return self.render()

    def download(
        self,
        writer: CalendarWriter,
        filename: Optional[str] = None,
        ext: Optional[str] = None,
    ) -> Optional[str]:
        """
        Build the calendar and hand it to a writer.

        Args:
            writer: Persistence collaborator
            filename: Target filename without extension (default "calendar")
            ext: File extension (default "ics")

        Returns:
            The delivered calendar text, or None if there was nothing to build

        Raises:
            CalendarWriteError: If the writer fails
        """
        calendar = self.build()
        if calendar is None:
            return None

        filename = filename or "calendar"
        ext = ext or "ics"
        writer.deliver(calendar, filename, ext)
        logger.info(f"Delivered {len(self._blocks)} event(s) as {filename}.{ext}")
        return calendar
