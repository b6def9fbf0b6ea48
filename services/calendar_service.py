"""
services/calendar_service.py
----------------------------
Builds the 6x7 month grid shown by the /calendar command.

The grid always has 42 cells: trailing days of the previous month, every
day of the displayed month, then leading days of the next month. Where the
previous month stops depends on the locale's first day of the week.
"""

from datetime import date

from models.calendar import CalendarDay
from utils.date_utils import days_in_month, shift_month
from utils.locale_week import (
    WEEKDAY_LABELS,
    adjust_day_of_week,
    first_day_of_week,
    reorder_weekday_labels,
)

GRID_SIZE = 42


def _sunday_based_weekday(value: date) -> int:
    """date.weekday() counts from Monday; the grid counts from Sunday."""
    return (value.weekday() + 1) % 7


def build_grid(month: int, year: int, locale: str, today: date) -> list[CalendarDay]:
    """
    Build the calendar cells for a month.

    Args:
        month: Month number (1-12).
        year: Year number.
        locale: IETF locale tag, decides the first column of the grid.
        today: The caller's current date, flagged with ``is_today``.

    Returns:
        Exactly 42 CalendarDay objects, row by row.
    """
    first_day = first_day_of_week(locale)
    leading = adjust_day_of_week(_sunday_based_weekday(date(year, month, 1)), first_day)

    prev_year, prev_month = shift_month(year, month, -1)
    next_year, next_month = shift_month(year, month, 1)
    days_in_prev = days_in_month(prev_year, prev_month)

    cells = [
        CalendarDay(day=days_in_prev - offset, month=prev_month, year=prev_year,
                    is_prev_month=True)
        for offset in range(leading - 1, -1, -1)
    ]

    for day in range(1, days_in_month(year, month) + 1):
        cells.append(CalendarDay(
            day=day, month=month, year=year,
            is_current_month=True,
            is_today=(today.year, today.month, today.day) == (year, month, day),
        ))

    cells.extend(
        CalendarDay(day=day, month=next_month, year=next_year, is_next_month=True)
        for day in range(1, GRID_SIZE - len(cells) + 1)
    )
    return cells


def weekday_labels(locale: str) -> list[str]:
    """Short weekday names in the column order used for ``locale``."""
    return reorder_weekday_labels(WEEKDAY_LABELS, first_day_of_week(locale))


def grid_rows(cells: list[CalendarDay]) -> list[list[CalendarDay]]:
    """Split the flat grid into six week rows."""
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]
