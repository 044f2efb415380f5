from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Iterator


DATE_FORMAT = "%Y-%m-%d"
WEEKEND_MARKER_REPEAT = 4

DEFAULT_LINE_LENGTH = 35
DEFAULT_DAY_SEP_CHAR = "-"
DEFAULT_WEEK_SEP_CHAR = "="
DEFAULT_WEEKEND_MARKER_CHAR = "#"


class Weekday(IntEnum):
    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6


WEEKDAY_FULL_NAME = {
    Weekday.MON: "Monday",
    Weekday.TUE: "Tuesday",
    Weekday.WED: "Wednesday",
    Weekday.THU: "Thursday",
    Weekday.FRI: "Friday",
    Weekday.SAT: "Saturday",
    Weekday.SUN: "Sunday",
}

MONTH_FULL_NAME = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Day lines containing one of these start a new week block.
WEEK_BOUNDARY_WORDS = ("Sunday", "Saturday", "Monday")


class InvalidDateError(ValueError):
    pass


class InvalidDateRangeError(InvalidDateError):
    pass


class OutputWriteError(RuntimeError):
    pass


@dataclass(frozen=True)
class CalendarConfig:
    date_format: str
    line_length: int
    weekend_line_marker: str
    week_line_sep: str
    day_line_sep: str

    @classmethod
    def build(
        cls,
        line_length: int,
        day_sep_char: str,
        week_sep_char: str,
        weekend_marker_char: str,
    ) -> CalendarConfig:
        return cls(
            date_format=DATE_FORMAT,
            line_length=line_length,
            weekend_line_marker=weekend_marker_char * WEEKEND_MARKER_REPEAT,
            week_line_sep=week_sep_char * line_length,
            day_line_sep=day_sep_char * line_length,
        )


DEFAULT_CONFIG = CalendarConfig.build(
    DEFAULT_LINE_LENGTH,
    DEFAULT_DAY_SEP_CHAR,
    DEFAULT_WEEK_SEP_CHAR,
    DEFAULT_WEEKEND_MARKER_CHAR,
)


@dataclass(frozen=True)
class DateRange:
    dates: tuple[date, ...]  # ascending, inclusive of both ends

    @property
    def start(self) -> date:
        return self.dates[0]

    @property
    def end(self) -> date:
        return self.dates[-1]

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self) -> Iterator[date]:
        return iter(self.dates)

    def __contains__(self, d: object) -> bool:
        return d in self.dates


@dataclass(frozen=True)
class Results:
    lines: tuple[str, ...]  # separator line, then day line, per date

    def __len__(self) -> int:
        return len(self.lines)

    def text(self) -> str:
        return "\n".join(self.lines)
