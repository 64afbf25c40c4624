"""File and stream calendar writers."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from ..utils.exceptions import CalendarWriteError
from .base import CalendarWriter

logger = logging.getLogger(__name__)


class FileCalendarWriter(CalendarWriter):
    """Writes calendars to ``<output_dir>/<filename>.<extension>``."""

    def __init__(self, output_dir: Path = Path(".")):
        self.output_dir = Path(output_dir)
        self.last_path: Optional[Path] = None

    def deliver(self, text: str, filename: str, extension: str) -> None:
        path = self.output_dir / f"{filename}.{extension}"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            # newline="" keeps the document's own line separator
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise CalendarWriteError(f"Failed to write {path}: {e}") from e

        self.last_path = path
        logger.info(f"Calendar written to {path}")


class StreamCalendarWriter(CalendarWriter):
    """Writes calendars to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def deliver(self, text: str, filename: str, extension: str) -> None:
        try:
            self.stream.write(text)
            self.stream.flush()
        except OSError as e:
            raise CalendarWriteError(f"Failed to write {filename}.{extension}: {e}") from e
