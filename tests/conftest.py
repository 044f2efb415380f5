"""Shared fixtures for daylines tests."""

from datetime import date

import pytest

from daylines.domain import CalendarConfig


@pytest.fixture
def config() -> CalendarConfig:
    """Configuration used by the reference listing: width 35, '-', '=', '#'."""
    return CalendarConfig.build(35, "-", "=", "#")


@pytest.fixture
def ymd():
    """Parse 'YYYY-MM-DD' into a date for terse test setup."""

    def _ymd(s: str) -> date:
        return date.fromisoformat(s)

    return _ymd
