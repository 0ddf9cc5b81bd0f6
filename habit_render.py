"""Year and month grid rendering onto an abstract character surface."""

from __future__ import annotations

import calendar
import datetime as dt
from enum import Enum
from typing import Protocol

from date_grid import (
    WEEKDAYS,
    YEAR_CELL_WIDTH,
    month_cell_position,
    month_dates,
    month_label_line,
    weeks_in_month,
    weeks_in_year,
    year_cell_position,
    year_dates,
)
from habit_log import HabitLog
from view_state import ViewMode, ViewState

MONTH_CELL_WIDTH = 5
YEAR_GUTTER_WIDTH = 4
MIN_YEAR_WIDTH = 53 * YEAR_CELL_WIDTH
MIN_YEAR_HEIGHT = 8
MIN_MONTH_WIDTH = 7 * MONTH_CELL_WIDTH

FILLED = "■"
HOLLOW = "□"
YEAR_DAY_LABELS = ["", "Mon", "", "Wed", "", "Fri", ""]


class Color(Enum):
    EVENT = "event"
    NO_EVENT = "no-event"
    NO_DATA = "no-data"
    FIRST_EVENT = "first-event"
    FIRST_NO_EVENT = "first-no-event"
    FIRST_NO_DATA = "first-no-data"
    TODAY = "today"
    CURSOR = "cursor"
    CURSOR_LABEL = "cursor-label"
    TEXT = "text"
    DIM = "dim"
    TITLE = "title"


LEGEND = [
    (Color.EVENT, "Event"),
    (Color.NO_EVENT, "No event"),
    (Color.FIRST_NO_DATA, "First day of month"),
    (Color.TODAY, "Today"),
    (Color.CURSOR, "Cursor"),
]


class Surface(Protocol):
    def size(self) -> tuple[int, int]:
        ...

    def put(self, x: int, y: int, text: str, color: Color) -> None:
        ...


def base_style(value: bool | None) -> tuple[str, Color]:
    if value is True:
        return FILLED, Color.EVENT
    if value is False:
        return FILLED, Color.NO_EVENT
    return HOLLOW, Color.NO_DATA


def first_of_month_color(value: bool | None, mode: ViewMode) -> Color:
    if mode is ViewMode.MONTH or value is None:
        return Color.FIRST_NO_DATA
    return Color.FIRST_EVENT if value else Color.FIRST_NO_EVENT


def cell_style(
    date: dt.date,
    value: bool | None,
    *,
    today: dt.date,
    cursor: dt.date,
    mode: ViewMode,
) -> tuple[str, Color]:
    """Glyph and color of one day cell; later overlays win.

    In the month view the cursor only inverts the day label, see
    ``day_label_color``.
    """
    symbol, color = base_style(value)
    if date.day == 1:
        color = first_of_month_color(value, mode)
    if date == today:
        color = Color.TODAY
    if mode is ViewMode.YEAR and date == cursor:
        symbol, color = FILLED, Color.CURSOR
    return symbol, color


def day_label_color(date: dt.date, cursor: dt.date) -> Color:
    return Color.CURSOR_LABEL if date == cursor else Color.TEXT


def value_label(value: bool | None) -> str:
    if value is None:
        return "no data"
    return "event" if value else "no event"


def center_x(width: int, text: str) -> int:
    return max(0, (width - len(text)) // 2)


def render_year_view(
    surface: Surface,
    log: HabitLog,
    state: ViewState,
    today: dt.date,
    x: int,
    y: int,
    width: int,
    height: int,
) -> bool:
    year = state.cursor.year
    grid_width = max(MIN_YEAR_WIDTH, weeks_in_year(year) * YEAR_CELL_WIDTH)
    if width - YEAR_GUTTER_WIDTH < grid_width or height < MIN_YEAR_HEIGHT:
        return False

    for row, label in enumerate(YEAR_DAY_LABELS):
        if label:
            surface.put(x, y + 1 + row, label, Color.DIM)

    grid_x = x + YEAR_GUTTER_WIDTH
    surface.put(grid_x, y, month_label_line(year), Color.TEXT)
    for date in year_dates(year):
        week, row = year_cell_position(date)
        symbol, color = cell_style(
            date, log.get(date), today=today, cursor=state.cursor, mode=ViewMode.YEAR
        )
        surface.put(grid_x + week * YEAR_CELL_WIDTH, y + 1 + row, symbol, color)
    return True


def render_month_view(
    surface: Surface,
    log: HabitLog,
    state: ViewState,
    today: dt.date,
    x: int,
    y: int,
    width: int,
    height: int,
) -> bool:
    year, month = state.cursor.year, state.cursor.month
    # Title and weekday header sit above the week rows.
    if width < MIN_MONTH_WIDTH or height < 2 + weeks_in_month(year, month):
        return False

    grid_x = x + max(0, (width - MIN_MONTH_WIDTH) // 2)
    title = f"{calendar.month_name[month]} {year}"
    surface.put(grid_x + center_x(MIN_MONTH_WIDTH, title), y, title, Color.TITLE)
    for col, name in enumerate(WEEKDAYS):
        surface.put(grid_x + col * MONTH_CELL_WIDTH, y + 1, name, Color.DIM)

    for date in month_dates(year, month):
        row, col = month_cell_position(date)
        cell_x = grid_x + col * MONTH_CELL_WIDTH
        cell_y = y + 2 + row
        symbol, color = cell_style(
            date, log.get(date), today=today, cursor=state.cursor, mode=ViewMode.MONTH
        )
        surface.put(cell_x, cell_y, symbol, color)
        surface.put(cell_x + 2, cell_y, f"{date.day:02d}", day_label_color(date, state.cursor))
    return True


def render_legend(surface: Surface, y: int, width: int) -> None:
    line = " | ".join(f"{FILLED} {label}" for _, label in LEGEND)
    pos = center_x(width, line)
    for idx, (color, label) in enumerate(LEGEND):
        if idx:
            surface.put(pos, y, " | ", Color.DIM)
            pos += 3
        surface.put(pos, y, FILLED, color)
        surface.put(pos + 2, y, label, Color.TEXT)
        pos += len(label) + 2


def render_view(surface: Surface, log: HabitLog, state: ViewState, today: dt.date) -> bool:
    """Draw one full pass of the active view; return whether the grid fit."""
    width, height = surface.size()
    grid_height = max(0, height - 3)

    if state.mode is ViewMode.YEAR:
        title = f"Year {state.cursor.year}"
        surface.put(center_x(width, title), 0, title, Color.TITLE)
        drawn = render_year_view(surface, log, state, today, 0, 1, width, grid_height)
    else:
        drawn = render_month_view(surface, log, state, today, 0, 0, width, grid_height + 1)

    detail = f"{state.cursor:%A %d.%m.%Y}  ({value_label(log.get(state.cursor))})"
    surface.put(center_x(width, detail), height - 2, detail, Color.TEXT)
    render_legend(surface, height - 1, width)
    return drawn
