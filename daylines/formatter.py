from __future__ import annotations

from datetime import date
from typing import Iterable

from loguru import logger

from .calendar_utils import is_weekend, month_full_name, weekday_full_name
from .domain import WEEK_BOUNDARY_WORDS, CalendarConfig, Results


def separators_for(d: date, config: CalendarConfig) -> tuple[str, str]:
    """Returns (day separator, week separator) for the line preceding ``d``.

    On the first of a month both carry the month name as a suffix.
    """
    day_sep = config.day_line_sep
    week_sep = config.week_line_sep
    if d.day == 1:
        month_name = month_full_name(d)
        day_sep += month_name
        week_sep += month_name
    return day_sep, week_sep


def format_day_line(d: date, config: CalendarConfig) -> str:
    # DD.MM.YYYY, year always four digits.
    stamp = f"{d.day:02d}.{d.month:02d}.{d.year:04d}"
    # Fixed width: padded with a full line of spaces, then cut back.
    body = f"{stamp} {weekday_full_name(d)}" + " " * config.line_length
    return body[: config.line_length]


def _starts_week_block(day_line: str) -> bool:
    return any(word in day_line for word in WEEK_BOUNDARY_WORDS)


def format_lines(date_range: Iterable[date], config: CalendarConfig) -> Results:
    lines: list[str] = []
    for d in date_range:
        day_sep, week_sep = separators_for(d, config)
        day_line = format_day_line(d, config)

        # Decided on the truncated text, before the weekend marker is added.
        sep = week_sep if _starts_week_block(day_line) else day_sep

        if is_weekend(d):
            day_line += config.weekend_line_marker

        lines.append(sep)
        lines.append(day_line)

    logger.debug(f"Formatted {len(lines) // 2} days into {len(lines)} lines")
    return Results(lines=tuple(lines))
