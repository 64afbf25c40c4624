"""Tests for configuration and events file loading."""

from datetime import date, datetime

import pytest

from ics_builder.builder.document import CalendarDocument
from ics_builder.config import AppConfig, EventsFile
from ics_builder.utils.exceptions import ConfigurationError

EVENTS_YAML = """
calendar:
  filename: holidays
  extension: ics
  uid_domain: example.com
  product_id: Holidays
events:
  - subject: Christmas
    description: Christmas day
    location: Bethlehem
    day: 2013-12-25
  - subject: New Year
    description: First day
    location: Everywhere
    start: 2014-01-01
    end: 2014-01-01
  - subject: Soccer practice
    description: Weekly practice
    location: Soccer field
    start: 2014-08-18 18:00:00
    end: 2014-08-18 19:30:00
    recurrence: {freq: WEEKLY, byday: [MO, WE]}
    custom_fields: {room: A1}
"""


class TestAppConfig:
    def test_defaults(self, monkeypatch):
        for name in ("ICS_UID_DOMAIN", "ICS_PRODUCT_ID", "ICS_LINE_ENDING"):
            monkeypatch.delenv(name, raising=False)

        app_config = AppConfig()

        assert app_config.uid_domain == "default"
        assert app_config.product_id == "Calendar"
        assert app_config.separator == "\r\n"

    def test_environment_overrides(self, monkeypatch, clock):
        monkeypatch.setenv("ICS_UID_DOMAIN", "example.com")
        monkeypatch.setenv("ICS_PRODUCT_ID", "-//Example//EN")
        monkeypatch.setenv("ICS_LINE_ENDING", "lf")

        document = CalendarDocument.from_config(AppConfig(), clock=clock)

        assert document.uid_domain == "example.com"
        assert document.product_id == "-//Example//EN"
        assert document.separator == "\n"

    def test_invalid_line_ending(self, monkeypatch):
        monkeypatch.setenv("ICS_LINE_ENDING", "cr")
        with pytest.raises(ConfigurationError):
            AppConfig().separator


class TestEventsFile:
    def test_load(self, tmp_path):
        path = tmp_path / "events.yaml"
        path.write_text(EVENTS_YAML)

        events_file = EventsFile(path)

        assert events_file.filename == "holidays"
        assert events_file.extension == "ics"
        assert events_file.uid_domain == "example.com"
        assert events_file.product_id == "Holidays"
        assert len(events_file.events) == 3

        christmas, new_year, practice = events_file.events
        assert christmas.is_full_day
        assert christmas.start == christmas.end == date(2013, 12, 25)
        assert new_year.is_full_day
        assert not practice.is_full_day
        assert practice.start == datetime(2014, 8, 18, 18, 0, 0)
        assert practice.recurrence == {"freq": "WEEKLY", "byday": ["MO", "WE"]}
        assert practice.custom_fields == {"room": "A1"}

    def test_events_build_a_calendar(self, tmp_path, clock):
        path = tmp_path / "events.yaml"
        path.write_text(EVENTS_YAML)
        document = CalendarDocument(clock=clock)

        for event in EventsFile(path).events:
            document.add(event)

        text = document.render()
        assert "DTSTART;VALUE=DATE:20131225" in text
        assert "RRULE:FREQ=WEEKLY;BYDAY=MO,WE" in text
        assert "ROOM:A1" in text

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            EventsFile(tmp_path / "nope.yaml")

    @pytest.mark.parametrize(
        "content",
        [
            "events: [unclosed",
            "- just\n- a list\n",
            "events: not-a-list\n",
            "events:\n  - plain string\n",
        ],
    )
    def test_malformed_file(self, tmp_path, content):
        path = tmp_path / "events.yaml"
        path.write_text(content)
        with pytest.raises(ConfigurationError):
            EventsFile(path)

    def test_empty_file_has_no_events(self, tmp_path):
        path = tmp_path / "events.yaml"
        path.write_text("")
        assert EventsFile(path).events == []
