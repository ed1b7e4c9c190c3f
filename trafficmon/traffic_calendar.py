"""A month-by-month calendar view over the daily traffic history."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Iterable

from trafficmon.calendar_helper import (
    CALENDAR_HEIGHT,
    CALENDAR_WIDTH,
    DayTraffic,
    get_calendar,
)
from trafficmon.formatting import kbytes_to_string

_KB_PER_GB = 1024 * 1024


@dataclasses.dataclass
class HistoryTraffic:
    """Traffic of one day, in kilobytes."""

    year: int
    month: int
    day: int
    up_kbytes: int = 0
    down_kbytes: int = 0
    mixed: bool = False

    @property
    def date_key(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day

    @property
    def kbytes(self) -> int:
        return self.up_kbytes + self.down_kbytes


class TrafficLevel(enum.Enum):
    """Colour band used to mark how much traffic a day had."""

    BLUE = "0~1GB"
    GREEN = "1GB~10GB"
    YELLOW = "10GB~100GB"
    RED = "100GB~1TB"
    DARK_RED = "1TB~"


def traffic_level(traffic: int) -> TrafficLevel:
    """The colour band for an amount of traffic given in kilobytes."""
    if traffic < _KB_PER_GB:
        return TrafficLevel.BLUE
    if traffic < 10 * _KB_PER_GB:
        return TrafficLevel.GREEN
    if traffic < 100 * _KB_PER_GB:
        return TrafficLevel.YELLOW
    if traffic < 1024 * _KB_PER_GB:
        return TrafficLevel.RED
    return TrafficLevel.DARK_RED


class TrafficCalendar:
    """The traffic history laid out as a calendar of one selected month.

    The newest entry of the history is taken as today; the months that can
    be selected run from January of the oldest year to December of the
    newest one.
    """

    def __init__(self, history_traffics: Iterable[HistoryTraffic], sunday_first: bool = True):
        history = sorted(history_traffics, key=lambda item: item.date_key, reverse=True)
        if not history:
            raise ValueError("the traffic history is empty")
        self._by_date: dict[tuple[int, int, int], HistoryTraffic] = {}
        for item in history:
            self._by_date.setdefault(item.date_key, item)
        self.today = history[0]
        self.year_max = history[0].year
        self.year_min = history[-1].year
        self.sunday_first = sunday_first
        self.year = self.today.year
        self.month = self.today.month
        self.calendar: list[list[DayTraffic]] = []
        self.month_total_upload = 0
        self.month_total_download = 0
        self._refresh()

    def _refresh(self) -> None:
        self.calendar = get_calendar(self.year, self.month, self.sunday_first)
        for row in self.calendar:
            for cell in row:
                if cell.day <= 0:
                    continue
                item = self._by_date.get((self.year, self.month, cell.day))
                if item is not None:
                    cell.up_traffic = item.up_kbytes
                    cell.down_traffic = item.down_kbytes
                    cell.mixed = item.mixed
        cells = [cell for row in self.calendar for cell in row]
        self.month_total_upload = sum(cell.up_traffic for cell in cells)
        self.month_total_download = sum(cell.down_traffic for cell in cells)

    @property
    def month_total(self) -> int:
        return self.month_total_upload + self.month_total_download

    def select(self, year: int, month: int) -> None:
        """Show the given month."""
        if not 1 <= month <= 12:
            raise ValueError(f"month out of range: {month}")
        if not self.year_min <= year <= self.year_max:
            raise ValueError(f"year out of range: {year}")
        self.year = year
        self.month = month
        self._refresh()

    def previous_month(self) -> bool:
        """Step back one month; False when already at the first month."""
        if self.year == self.year_min and self.month == 1:
            return False
        if self.month == 1:
            self.year -= 1
            self.month = 12
        else:
            self.month -= 1
        self._refresh()
        return True

    def next_month(self) -> bool:
        """Step forward one month; False when already at the last month."""
        if self.year == self.year_max and self.month == 12:
            return False
        if self.month == 12:
            self.year += 1
            self.month = 1
        else:
            self.month += 1
        self._refresh()
        return True

    def jump_to_today(self) -> None:
        """Show the month of the newest history entry."""
        self.year = self.today.year
        self.month = self.today.month
        self._refresh()

    def set_sunday_first(self, sunday_first: bool) -> None:
        """Start weeks on Sunday (True) or Monday (False) and lay the month out again."""
        self.sunday_first = sunday_first
        self._refresh()

    def is_weekend(self, index: int) -> bool:
        """Whether calendar column ``index`` (0..6) is Saturday or Sunday."""
        if self.sunday_first:
            return index in (0, 6)
        return index in (5, 6)

    def weekday_index(self, index: int) -> int:
        """Day of the week (0 Sunday .. 6 Saturday) shown in calendar column ``index``."""
        if not 0 <= index < CALENDAR_WIDTH:
            raise ValueError(f"column out of range: {index}")
        if self.sunday_first:
            return index
        return (index + 1) % 7

    def is_today(self, cell: DayTraffic) -> bool:
        """Whether a cell of the shown month is the newest history day."""
        return (self.year, self.month, cell.day) == self.today.date_key

    def cell(self, day: int) -> DayTraffic | None:
        """The calendar cell of a day in the shown month, or None."""
        if day <= 0:
            return None
        for row in self.calendar[:CALENDAR_HEIGHT]:
            for cell in row:
                if cell.day == day:
                    return cell
        return None

    def day_tip(self, day: int) -> str | None:
        """Tooltip text for a day of the shown month, or None if the day is not in it."""
        cell = self.cell(day)
        if cell is None:
            return None
        lines = [
            f"{self.year}/{self.month}/{day}",
            "Traffic used: " + kbytes_to_string(cell.traffic()),
        ]
        if not cell.mixed and cell.traffic() > 0:
            lines.append("Upload: " + kbytes_to_string(cell.up_traffic))
            lines.append("Download: " + kbytes_to_string(cell.down_traffic))
        return "\n".join(lines)