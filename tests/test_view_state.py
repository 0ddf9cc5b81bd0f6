import curses
import datetime as dt
import unittest

from view_state import (
    Command,
    ViewMode,
    ViewState,
    apply_command,
    command_for_key,
    initial_state,
)

DAY = dt.date(2024, 3, 15)


class TestTransitions(unittest.TestCase):
    def test_initial_state_is_year_view_on_today(self) -> None:
        self.assertEqual(initial_state(DAY), ViewState(ViewMode.YEAR, DAY))

    def test_year_mode_steps(self) -> None:
        state = ViewState(ViewMode.YEAR, DAY)
        expected = {
            Command.MOVE_LEFT: dt.date(2024, 3, 8),
            Command.MOVE_RIGHT: dt.date(2024, 3, 22),
            Command.MOVE_UP: dt.date(2024, 3, 14),
            Command.MOVE_DOWN: dt.date(2024, 3, 16),
            Command.PAGE_PREV: DAY,
            Command.PAGE_NEXT: DAY,
        }
        for command, cursor in expected.items():
            result = apply_command(state, command)
            self.assertEqual(result.cursor, cursor, msg=command.value)
            self.assertIs(result.mode, ViewMode.YEAR)

    def test_month_mode_steps(self) -> None:
        state = ViewState(ViewMode.MONTH, DAY)
        expected = {
            Command.MOVE_LEFT: dt.date(2024, 3, 14),
            Command.MOVE_RIGHT: dt.date(2024, 3, 16),
            Command.MOVE_UP: dt.date(2024, 3, 8),
            Command.MOVE_DOWN: dt.date(2024, 3, 22),
            Command.PAGE_PREV: dt.date(2024, 2, 1),
            Command.PAGE_NEXT: dt.date(2024, 4, 1),
        }
        for command, cursor in expected.items():
            self.assertEqual(apply_command(state, command).cursor, cursor, msg=command.value)

    def test_paging_wraps_year(self) -> None:
        state = ViewState(ViewMode.MONTH, dt.date(2024, 12, 31))
        self.assertEqual(apply_command(state, Command.PAGE_NEXT).cursor, dt.date(2025, 1, 1))
        state = ViewState(ViewMode.MONTH, dt.date(2024, 1, 10))
        self.assertEqual(apply_command(state, Command.PAGE_PREV).cursor, dt.date(2023, 12, 1))

    def test_left_right_round_trip(self) -> None:
        for mode in ViewMode:
            for start in (DAY, dt.date(2024, 1, 1), dt.date(2024, 12, 31)):
                state = ViewState(mode, start)
                back = apply_command(apply_command(state, Command.MOVE_LEFT), Command.MOVE_RIGHT)
                self.assertEqual(back, state)

    def test_page_round_trip_lands_on_first_of_month(self) -> None:
        state = ViewState(ViewMode.MONTH, DAY)
        back = apply_command(apply_command(state, Command.PAGE_NEXT), Command.PAGE_PREV)
        self.assertEqual(back.cursor, dt.date(2024, 3, 1))

    def test_switching_mode_keeps_cursor(self) -> None:
        state = ViewState(ViewMode.YEAR, DAY)
        month = apply_command(state, Command.SWITCH_MONTH)
        self.assertEqual(month, ViewState(ViewMode.MONTH, DAY))
        self.assertEqual(apply_command(month, Command.SWITCH_YEAR), state)
        self.assertEqual(apply_command(month, Command.SWITCH_MONTH), month)

    def test_toggle_and_quit_leave_state(self) -> None:
        state = ViewState(ViewMode.MONTH, DAY)
        self.assertEqual(apply_command(state, Command.TOGGLE), state)
        self.assertEqual(apply_command(state, Command.QUIT), state)


class TestKeyMapping(unittest.TestCase):
    def test_recognized_keys(self) -> None:
        self.assertIs(command_for_key(curses.KEY_LEFT), Command.MOVE_LEFT)
        self.assertIs(command_for_key(curses.KEY_RIGHT), Command.MOVE_RIGHT)
        self.assertIs(command_for_key(curses.KEY_UP), Command.MOVE_UP)
        self.assertIs(command_for_key(curses.KEY_DOWN), Command.MOVE_DOWN)
        self.assertIs(command_for_key(curses.KEY_PPAGE), Command.PAGE_PREV)
        self.assertIs(command_for_key(curses.KEY_NPAGE), Command.PAGE_NEXT)
        self.assertIs(command_for_key(ord(" ")), Command.TOGGLE)
        self.assertIs(command_for_key(ord("q")), Command.QUIT)
        self.assertIs(command_for_key(ord("y")), Command.SWITCH_YEAR)
        self.assertIs(command_for_key(ord("m")), Command.SWITCH_MONTH)

    def test_other_keys_are_ignored(self) -> None:
        for key in (ord("x"), ord("\n"), curses.KEY_RESIZE, -1):
            self.assertIsNone(command_for_key(key))


if __name__ == "__main__":
    unittest.main(verbosity=2)
