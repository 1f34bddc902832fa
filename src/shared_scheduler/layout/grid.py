"""Pure calendar arithmetic for the month grid.

Weeks start on Sunday everywhere in the application.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import NamedTuple

from ..domain.errors import InvalidDateError

DAYS_PER_WEEK = 7
WEEK_START = calendar.SUNDAY
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class GridDay(NamedTuple):
    date: date
    in_month: bool


def _check_month(year: int, month: int) -> None:
    if not isinstance(year, int) or isinstance(year, bool):
        raise InvalidDateError(f"Year must be an integer: {year!r}")
    if not isinstance(month, int) or isinstance(month, bool) or not 1 <= month <= 12:
        raise InvalidDateError(f"Month must be between 1 and 12: {month!r}")


def days_in_month(year: int, month: int) -> int:
    _check_month(year, month)
    return calendar.monthrange(year, month)[1]


def leading_offset(year: int, month: int) -> int:
    """Number of previous-month cells shown before the 1st."""

    _check_month(year, month)
    weekday_of_first = calendar.monthrange(year, month)[0]
    return (weekday_of_first - WEEK_START) % DAYS_PER_WEEK


def month_row_count(year: int, month: int) -> int:
    filled = leading_offset(year, month) + days_in_month(year, month)
    return -(-filled // DAYS_PER_WEEK)


def layout_month(year: int, month: int) -> list[GridDay]:
    """Return every cell of the month grid, row by row, Sunday first.

    The grid covers whole weeks only, so it holds 28, 35 or 42 cells. Cells
    outside ``month`` are flagged with ``in_month=False``.
    """

    offset = leading_offset(year, month)
    total = month_row_count(year, month) * DAYS_PER_WEEK
    try:
        start = date(year, month, 1) - timedelta(days=offset)
        cells = [start + timedelta(days=index) for index in range(total)]
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"{year:04d}-{month:02d} cannot be laid out as a full grid.") from exc
    return [GridDay(day, day.month == month and day.year == year) for day in cells]


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    _check_month(year, month)
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    _check_month(year, month)
    if month == 12:
        return year + 1, 1
    return year, month + 1
