from __future__ import annotations

from datetime import date, datetime

from loguru import logger

from .calendar_utils import iter_dates
from .domain import CalendarConfig, DateRange, InvalidDateError, InvalidDateRangeError


def parse_date(value: str, config: CalendarConfig, label: str = "date") -> date:
    """Parse ``value`` strictly with ``config.date_format``.

    Raises InvalidDateError when the text does not match the pattern or names a
    day that does not exist (e.g. 2023-11-31).
    """
    try:
        return datetime.strptime(value, config.date_format).date()
    except (TypeError, ValueError) as e:
        raise InvalidDateError(f"cannot parse -{label}- date {value!r}: {e}") from e


def expand(from_: str, to: str, config: CalendarConfig) -> DateRange:
    """
    Returns every calendar day from ``from_`` to ``to`` inclusive, ascending.

    A reversed range (``to`` before ``from_``) is rejected with
    InvalidDateRangeError; equal bounds give a single day.
    """
    start = parse_date(from_, config, "from")
    end = parse_date(to, config, "to")
    if end < start:
        raise InvalidDateRangeError(
            f"-to- date {end.isoformat()} is before -from- date {start.isoformat()}"
        )

    dates = tuple(iter_dates(start, end))
    logger.debug(f"Expanded {start.isoformat()}..{end.isoformat()} into {len(dates)} days")
    return DateRange(dates=dates)
