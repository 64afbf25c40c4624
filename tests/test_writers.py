"""Tests for calendar writers."""

import io

import pytest

from ics_builder.utils.exceptions import CalendarWriteError
from ics_builder.writers.file_writer import FileCalendarWriter, StreamCalendarWriter

TEXT = "BEGIN:VCALENDAR\r\nVERSION:2.0\r\nEND:VCALENDAR"


class TestFileCalendarWriter:
    def test_writes_file_and_keeps_crlf(self, tmp_path):
        writer = FileCalendarWriter(tmp_path / "out" / "nested")

        writer.deliver(TEXT, "holidays", "ics")

        path = tmp_path / "out" / "nested" / "holidays.ics"
        assert writer.last_path == path
        assert path.read_bytes() == TEXT.encode("utf-8")

    def test_write_failure_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(CalendarWriteError):
            FileCalendarWriter(blocker).deliver(TEXT, "calendar", "ics")


def test_stream_writer():
    stream = io.StringIO()
    StreamCalendarWriter(stream).deliver(TEXT, "calendar", "ics")
    assert stream.getvalue() == TEXT
