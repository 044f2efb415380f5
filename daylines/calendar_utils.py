from __future__ import annotations

from datetime import date, timedelta

from .domain import MONTH_FULL_NAME, WEEKDAY_FULL_NAME, InvalidDateError, Weekday


def iter_dates(start: date, end_inclusive: date):
    cur = start
    while cur <= end_inclusive:
        yield cur
        cur += timedelta(days=1)


def weekday_of(d: date) -> Weekday:
    return Weekday(d.weekday())


def weekday_full_name(d: date) -> str:
    return WEEKDAY_FULL_NAME[weekday_of(d)]


def month_of(d: date) -> int:
    if not 1 <= d.month <= 12:
        raise InvalidDateError(f"month out of range: {d.month!r}")
    return d.month


def month_full_name(d: date) -> str:
    return MONTH_FULL_NAME[month_of(d) - 1]


def is_sunday(d: date) -> bool:
    return weekday_of(d) == Weekday.SUN


def is_saturday(d: date) -> bool:
    return weekday_of(d) == Weekday.SAT


def is_weekend(d: date) -> bool:
    return is_saturday(d) or is_sunday(d)
