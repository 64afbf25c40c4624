"""Abstract base class for calendar writers."""

from abc import ABC, abstractmethod


class CalendarWriter(ABC):
    """Receives finished calendar text and persists or delivers it."""

    @abstractmethod
    def deliver(self, text: str, filename: str, extension: str) -> None:
        """
        Deliver rendered calendar text.

        Args:
            text: Complete iCalendar document
            filename: Target name without extension
            extension: File extension, e.g. "ics"

        Raises:
            CalendarWriteError: If delivery fails
        """
