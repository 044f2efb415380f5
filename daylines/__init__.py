from __future__ import annotations

from .date_range import expand
from .domain import (
    CalendarConfig,
    DateRange,
    InvalidDateError,
    InvalidDateRangeError,
    OutputWriteError,
    Results,
)
from .formatter import format_lines


__all__ = [
    "CalendarConfig",
    "DateRange",
    "InvalidDateError",
    "InvalidDateRangeError",
    "OutputWriteError",
    "Results",
    "expand",
    "format_lines",
]
