"""Configuration management for the iCalendar builder."""

from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.event import EventInput
from .utils.exceptions import ConfigurationError

load_dotenv()

LINE_ENDINGS = {"crlf": "\r\n", "lf": "\n"}


class AppConfig(BaseSettings):
    """Application configuration."""

    # Document
    uid_domain: str = Field(default="default", validation_alias="ICS_UID_DOMAIN")
    product_id: str = Field(default="Calendar", validation_alias="ICS_PRODUCT_ID")
    line_ending: str = Field(default="crlf", validation_alias="ICS_LINE_ENDING")

    # Output
    output_dir: Path = Field(default=Path("."), validation_alias="ICS_OUTPUT_DIR")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: Optional[Path] = Field(default=None, validation_alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_parse_none_str="",  # Treat empty string as None
    )

    @property
    def separator(self) -> str:
        try:
            return LINE_ENDINGS[self.line_ending.lower()]
        except KeyError:
            raise ConfigurationError(
                f"ICS_LINE_ENDING must be one of: {', '.join(LINE_ENDINGS)}"
            ) from None


class EventsFile:
    """Calendar events loaded from YAML.

    Expected layout::

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
          - subject: Soccer practice
            description: Weekly practice
            location: Soccer field
            start: 2014-08-18 18:00:00
            end: 2014-08-18 19:30:00
            recurrence: {freq: WEEKLY, byday: [MO, WE]}
            custom_fields: {room: A1}
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.filename: Optional[str] = None
        self.extension: Optional[str] = None
        self.uid_domain: Optional[str] = None
        self.product_id: Optional[str] = None
        self.events: list[EventInput] = []

        if not self.path.exists():
            raise ConfigurationError(f"Events file not found: {self.path}")

        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"{self.path} must contain a mapping")

        calendar_data = data.get("calendar") or {}
        self.filename = calendar_data.get("filename")
        self.extension = calendar_data.get("extension")
        self.uid_domain = calendar_data.get("uid_domain")
        self.product_id = calendar_data.get("product_id")

        event_list = data.get("events") or []
        if not isinstance(event_list, list):
            raise ConfigurationError(f"'events' in {self.path} must be a list")

        for index, event_data in enumerate(event_list):
            if not isinstance(event_data, dict):
                raise ConfigurationError(f"Event #{index} in {self.path} must be a mapping")
            try:
                self.events.append(self._parse_event(event_data))
            except ValidationError as e:
                raise ConfigurationError(f"Event #{index} in {self.path} is invalid: {e}") from e

    @staticmethod
    def _parse_event(data: dict[str, Any]) -> EventInput:
        day = data.get("day")
        if day is not None:
            start = end = day
            full_day = True
        else:
            start = data.get("start")
            end = data.get("end")
            full_day = bool(data.get("full_day", False))

        # YAML gives bare dates as date objects; they are full-day unless told otherwise
        if "full_day" not in data and isinstance(start, date) and not isinstance(start, datetime):
            full_day = True

        return EventInput(
            subject=_as_text(data.get("subject")),
            description=_as_text(data.get("description")),
            location=_as_text(data.get("location")),
            is_full_day=full_day,
            start=start,
            end=end,
            recurrence=data.get("recurrence"),
            custom_fields=data.get("custom_fields") or {},
        )


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


# Global config instance
config = AppConfig()
