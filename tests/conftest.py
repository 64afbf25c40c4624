"""Shared pytest fixtures for the iCalendar builder tests."""

from datetime import datetime

import pytest

from ics_builder.builder.document import CalendarDocument

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5)
FIXED_STAMP = "20240102T030405"


@pytest.fixture
def clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def document(clock):
    """Empty document with default settings and a fixed clock."""
    return CalendarDocument(clock=clock)
