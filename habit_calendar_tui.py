#!/usr/bin/env python3
"""Terminal habit calendar: year and month grids of logged days."""

from __future__ import annotations

import curses
import datetime as dt
import locale
from typing import Callable

from habit_log import HabitLog, demo_log
from habit_render import Color, render_view
from view_state import Command, ViewMode, ViewState, apply_command, command_for_key, initial_state

APP_TITLE = "Habit Calendar"
SEED_DEMO_DATA = True
HELP_LINE = "Arrows move  PgUp/PgDn month  Space toggle  Y/M view  Q quit"

# (pair id, foreground on 256-color terminals, fallback foreground, background)
COLOR_PAIRS = {
    Color.EVENT: (1, curses.COLOR_RED, curses.COLOR_RED, -1),
    Color.NO_EVENT: (2, curses.COLOR_GREEN, curses.COLOR_GREEN, -1),
    Color.NO_DATA: (3, 238, curses.COLOR_WHITE, -1),
    Color.FIRST_EVENT: (4, 214, curses.COLOR_YELLOW, -1),
    Color.FIRST_NO_EVENT: (5, 154, curses.COLOR_YELLOW, -1),
    Color.FIRST_NO_DATA: (6, curses.COLOR_YELLOW, curses.COLOR_YELLOW, -1),
    Color.TODAY: (7, curses.COLOR_CYAN, curses.COLOR_CYAN, -1),
    Color.CURSOR: (8, curses.COLOR_WHITE, curses.COLOR_WHITE, -1),
    Color.CURSOR_LABEL: (9, curses.COLOR_BLACK, curses.COLOR_BLACK, curses.COLOR_WHITE),
    Color.TEXT: (10, curses.COLOR_WHITE, curses.COLOR_WHITE, -1),
    Color.DIM: (11, 244, curses.COLOR_WHITE, -1),
    Color.TITLE: (12, curses.COLOR_BLACK, curses.COLOR_BLACK, curses.COLOR_CYAN),
}


def init_colors() -> None:
    curses.start_color()
    curses.use_default_colors()
    rich = curses.COLORS >= 256
    for pair, fg_rich, fg_basic, bg in COLOR_PAIRS.values():
        curses.init_pair(pair, fg_rich if rich else fg_basic, bg)


def color_attr(color: Color) -> int:
    pair = COLOR_PAIRS[color][0]
    attr = curses.color_pair(pair)
    if color in (Color.NO_DATA, Color.DIM) and curses.COLORS < 256:
        attr |= curses.A_DIM
    if color in (Color.EVENT, Color.NO_EVENT, Color.CURSOR) and curses.COLORS < 256:
        attr |= curses.A_BOLD
    return attr


def truncate(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."


def safe_addnstr(stdscr: curses.window, y: int, x: int, text: str, width: int, attr: int) -> None:
    if width <= 0:
        return
    try:
        stdscr.addnstr(y, x, text, width, attr)
    except curses.error:
        return


class CursesSurface:
    """A rectangle of a curses window that the renderer draws into."""

    def __init__(
        self,
        stdscr: curses.window,
        top: int,
        left: int,
        height: int,
        width: int,
        attr_for: Callable[[Color], int] = color_attr,
    ) -> None:
        self.stdscr = stdscr
        self.top = top
        self.left = left
        self.height = max(0, height)
        self.width = max(0, width)
        self.attr_for = attr_for

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def put(self, x: int, y: int, text: str, color: Color) -> None:
        if x < 0 or y < 0 or y >= self.height or x >= self.width:
            return
        safe_addnstr(self.stdscr, self.top + y, self.left + x, text, self.width - x, self.attr_for(color))


def set_status(state: dict, message: str) -> None:
    state["status"] = message


def draw_header(stdscr: curses.window, view: ViewState, attr_for: Callable[[Color], int]) -> None:
    _, w = stdscr.getmaxyx()
    label = f"{APP_TITLE}  [{view.mode.value.upper()}]  {view.cursor.strftime('%Y-%m-%d')}"
    safe_addnstr(stdscr, 0, 0, " " * max(0, w - 1), w - 1, attr_for(Color.TITLE))
    safe_addnstr(stdscr, 0, 1, label, max(0, w - 2), attr_for(Color.TITLE))


def draw_footer(stdscr: curses.window, status: str, attr_for: Callable[[Color], int]) -> None:
    h, w = stdscr.getmaxyx()
    safe_addnstr(stdscr, h - 2, 1, " " * max(0, w - 2), max(0, w - 2), attr_for(Color.TEXT))
    safe_addnstr(stdscr, h - 2, 1, truncate(status, w - 2), max(0, w - 2), attr_for(Color.TEXT))
    safe_addnstr(stdscr, h - 1, 1, truncate(HELP_LINE, w - 2), max(0, w - 2), attr_for(Color.DIM))


def draw_screen(
    stdscr: curses.window,
    view: ViewState,
    log: HabitLog,
    today: dt.date,
    status: str,
    attr_for: Callable[[Color], int] = color_attr,
) -> bool:
    h, w = stdscr.getmaxyx()
    stdscr.erase()
    draw_header(stdscr, view, attr_for)
    body = CursesSurface(stdscr, 1, 1, h - 3, w - 2, attr_for)
    drawn = render_view(body, log, view, today)
    draw_footer(stdscr, status, attr_for)
    stdscr.refresh()
    return drawn


def status_for(command: Command, view: ViewState, log: HabitLog) -> str | None:
    if command is Command.TOGGLE:
        value = log.get(view.cursor)
        label = "event" if value else "no event"
        return f"Marked {view.cursor.strftime('%Y-%m-%d')}: {label}."
    if command is Command.SWITCH_YEAR:
        return "Year view"
    if command is Command.SWITCH_MONTH:
        return "Month view"
    if command in (Command.PAGE_PREV, Command.PAGE_NEXT) and view.mode is ViewMode.YEAR:
        return "Paging works in month view."
    return None


def run(
    stdscr: curses.window,
    log: HabitLog | None = None,
    today_fn: Callable[[], dt.date] = dt.date.today,
    attr_for: Callable[[Color], int] = color_attr,
) -> tuple[ViewState, HabitLog]:
    """Render, wait for one key, apply it; repeat until quit."""
    if log is None:
        log = HabitLog()
    state = {"status": f"Ready, {len(log)} days logged."}
    view = initial_state(today_fn())

    while True:
        draw_screen(stdscr, view, log, today_fn(), state["status"], attr_for)

        command = command_for_key(stdscr.getch())
        if command is None:
            continue
        if command is Command.QUIT:
            break
        if command is Command.TOGGLE:
            log.toggle(view.cursor)
        else:
            view = apply_command(view, command)

        message = status_for(command, view, log)
        if message:
            set_status(state, message)

    return view, log


def app(stdscr: curses.window) -> None:
    curses.curs_set(0)
    init_colors()
    stdscr.keypad(True)
    stdscr.timeout(-1)
    log = demo_log(dt.date.today()) if SEED_DEMO_DATA else HabitLog()
    run(stdscr, log)


def main() -> None:
    locale.setlocale(locale.LC_ALL, "")
    curses.wrapper(app)


if __name__ == "__main__":
    main()
