"""Date to grid-cell mapping for the year and month habit views."""

from __future__ import annotations

import calendar
import datetime as dt
from typing import Iterator

YEAR_CELL_WIDTH = 2
MONTH_NAMES = [calendar.month_abbr[month] for month in range(1, 13)]
WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def weekday_index(date: dt.date) -> int:
    # Sunday = 0 .. Saturday = 6
    return (date.weekday() + 1) % 7


def add_days(date: dt.date, days: int) -> dt.date:
    return date + dt.timedelta(days=days)


def first_of_month(date: dt.date) -> dt.date:
    return date.replace(day=1)


def first_of_next_month(date: dt.date) -> dt.date:
    if date.month == 12:
        return dt.date(date.year + 1, 1, 1)
    return dt.date(date.year, date.month + 1, 1)


def first_of_prev_month(date: dt.date) -> dt.date:
    if date.month == 1:
        return dt.date(date.year - 1, 12, 1)
    return dt.date(date.year, date.month - 1, 1)


def month_bounds(year: int, month: int) -> tuple[dt.date, dt.date]:
    first = dt.date(year, month, 1)
    last = first_of_next_month(first) - dt.timedelta(days=1)
    return first, last


def year_cell_position(date: dt.date) -> tuple[int, int]:
    """Return ``(week, weekday_row)`` of ``date`` in its year grid.

    Week 0 starts on January 1 and a new week column begins after every
    Saturday, so each column runs Sunday to Saturday.
    """
    jan1 = dt.date(date.year, 1, 1)
    offset = (date - jan1).days + weekday_index(jan1)
    return offset // 7, weekday_index(date)


def month_cell_position(date: dt.date) -> tuple[int, int]:
    """Return ``(week_row, weekday_column)`` of ``date`` in its month grid."""
    lead = weekday_index(first_of_month(date))
    return (date.day - 1 + lead) // 7, weekday_index(date)


def weeks_in_year(year: int) -> int:
    week, _ = year_cell_position(dt.date(year, 12, 31))
    return week + 1


def weeks_in_month(year: int, month: int) -> int:
    _, last = month_bounds(year, month)
    row, _ = month_cell_position(last)
    return row + 1


def iter_dates(start: dt.date, end: dt.date) -> Iterator[dt.date]:
    current = start
    while current <= end:
        yield current
        current = add_days(current, 1)


def year_dates(year: int) -> Iterator[dt.date]:
    return iter_dates(dt.date(year, 1, 1), dt.date(year, 12, 31))


def month_dates(year: int, month: int) -> Iterator[dt.date]:
    first, last = month_bounds(year, month)
    return iter_dates(first, last)


def month_label_positions(year: int) -> list[tuple[str, int]]:
    """Month names with the column of the week holding each month's 1st.

    A label that would start inside the previous one is dropped.
    """
    labels: list[tuple[str, int]] = []
    taken_until = 0
    for month, name in enumerate(MONTH_NAMES, start=1):
        week, _ = year_cell_position(dt.date(year, month, 1))
        column = week * YEAR_CELL_WIDTH
        if labels and column < taken_until:
            continue
        labels.append((name, column))
        taken_until = column + len(name)
    return labels


def month_label_line(year: int) -> str:
    line = ""
    for name, column in month_label_positions(year):
        line += " " * (column - len(line)) + name
    return line
