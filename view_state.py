"""Cursor and view-mode state machine for the habit calendar."""

from __future__ import annotations

import curses
import datetime as dt
from dataclasses import dataclass, replace
from enum import Enum

from date_grid import add_days, first_of_next_month, first_of_prev_month


class ViewMode(Enum):
    YEAR = "year"
    MONTH = "month"


class Command(Enum):
    MOVE_LEFT = "move-left"
    MOVE_RIGHT = "move-right"
    MOVE_UP = "move-up"
    MOVE_DOWN = "move-down"
    PAGE_PREV = "page-prev"
    PAGE_NEXT = "page-next"
    TOGGLE = "toggle"
    SWITCH_YEAR = "switch-year"
    SWITCH_MONTH = "switch-month"
    QUIT = "quit"


KEY_COMMANDS = {
    curses.KEY_LEFT: Command.MOVE_LEFT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,
    curses.KEY_UP: Command.MOVE_UP,
    curses.KEY_DOWN: Command.MOVE_DOWN,
    curses.KEY_PPAGE: Command.PAGE_PREV,
    curses.KEY_NPAGE: Command.PAGE_NEXT,
    ord(" "): Command.TOGGLE,
    ord("q"): Command.QUIT,
    ord("Q"): Command.QUIT,
    ord("y"): Command.SWITCH_YEAR,
    ord("Y"): Command.SWITCH_YEAR,
    ord("m"): Command.SWITCH_MONTH,
    ord("M"): Command.SWITCH_MONTH,
}

# In the year grid a column is a week and a row is a weekday; the month
# grid is the transpose.
STEP_DAYS = {
    ViewMode.YEAR: {
        Command.MOVE_LEFT: -7,
        Command.MOVE_RIGHT: 7,
        Command.MOVE_UP: -1,
        Command.MOVE_DOWN: 1,
    },
    ViewMode.MONTH: {
        Command.MOVE_LEFT: -1,
        Command.MOVE_RIGHT: 1,
        Command.MOVE_UP: -7,
        Command.MOVE_DOWN: 7,
    },
}


@dataclass(frozen=True)
class ViewState:
    mode: ViewMode
    cursor: dt.date


def initial_state(today: dt.date) -> ViewState:
    return ViewState(ViewMode.YEAR, today)


def command_for_key(key: int) -> Command | None:
    return KEY_COMMANDS.get(key)


def move_cursor(cursor: dt.date, mode: ViewMode, command: Command) -> dt.date:
    step = STEP_DAYS[mode].get(command)
    if step is not None:
        return add_days(cursor, step)
    if mode is ViewMode.MONTH:
        if command is Command.PAGE_PREV:
            return first_of_prev_month(cursor)
        if command is Command.PAGE_NEXT:
            return first_of_next_month(cursor)
    return cursor


def apply_command(state: ViewState, command: Command) -> ViewState:
    """Return the state after ``command``.

    Toggle and quit act on the log and the loop, so they leave the state as is.
    """
    if command is Command.SWITCH_YEAR:
        return replace(state, mode=ViewMode.YEAR)
    if command is Command.SWITCH_MONTH:
        return replace(state, mode=ViewMode.MONTH)
    return replace(state, cursor=move_cursor(state.cursor, state.mode, command))
