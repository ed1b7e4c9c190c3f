"""Month calendars laid out as a 6 x 7 grid of days."""

from __future__ import annotations

import dataclasses

CALENDAR_WIDTH = 7
CALENDAR_HEIGHT = 6

_CALENDAR_CELLS_FILLED = 37


@dataclasses.dataclass
class DayTraffic:
    """One cell of the calendar: its day number (0 for blank) and the traffic of that day."""

    day: int = 0
    up_traffic: int = 0
    down_traffic: int = 0
    mixed: bool = False

    def traffic(self) -> int:
        """Upload plus download traffic."""
        return self.up_traffic + self.down_traffic


def is_leap_year(year: int) -> bool:
    """Whether the year is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def calculate_week_day(y: int, m: int, d: int) -> int:
    """Day of the week for a date: 0 is Sunday, 6 is Saturday."""
    if m <= 2:
        m += 12
        y -= 1
    return (d + 2 * m + 3 * (m + 1) // 5 + y + y // 4 - y // 100 + y // 400 + 1) % 7


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def get_calendar(year: int, month: int, sunday_first: bool = True) -> list[list[DayTraffic]]:
    """The month as CALENDAR_HEIGHT rows of CALENDAR_WIDTH cells.

    Weeks start on Sunday when ``sunday_first`` is true, otherwise on Monday.
    Cells outside the month have day 0.
    """
    calendar = [[DayTraffic() for _ in range(CALENDAR_WIDTH)] for _ in range(CALENDAR_HEIGHT)]
    days = days_in_month(year, month)
    first_week_day = calculate_week_day(year, month, 1)
    if not sunday_first:
        first_week_day = (first_week_day - 1) % 7
    for n in range(_CALENDAR_CELLS_FILLED):
        day = n - first_week_day + 1
        if 1 <= day <= days:
            calendar[n // CALENDAR_WIDTH][n % CALENDAR_WIDTH].day = day
    return calendar