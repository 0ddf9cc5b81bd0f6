"""In-memory per-day habit log."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Iterable

DEMO_OFFSETS = (1, 2, 5, 10, 12, 13)


@dataclass
class HabitLog:
    """Maps a date to whether the tracked event happened that day.

    A missing date means "no data", which is not the same as ``False``.
    Once toggled a date never goes back to missing.
    """

    entries: dict[dt.date, bool] = field(default_factory=dict)

    @classmethod
    def from_dates(cls, dates: Iterable[dt.date], value: bool = True) -> HabitLog:
        return cls({date: value for date in dates})

    def get(self, date: dt.date) -> bool | None:
        return self.entries.get(date)

    def toggle(self, date: dt.date) -> bool:
        value = not self.entries.get(date, False)
        self.entries[date] = value
        return value

    def __len__(self) -> int:
        return len(self.entries)


def demo_log(today: dt.date) -> HabitLog:
    return HabitLog.from_dates(today - dt.timedelta(days=offset) for offset in DEMO_OFFSETS)
