"""
models/calendar.py
------------------
Value objects produced for a displayed month: calendar cells, chart
segments and the month-over-month trend. All are derived on demand.
"""

from dataclasses import dataclass
from datetime import date

from models.subscription import Subscription


@dataclass(frozen=True)
class CalendarDay:
    """
    One cell of the 6x7 month grid.

    Exactly one of the membership flags is set. ``is_today`` is only ever
    set on a current-month cell.
    """
    day: int
    month: int
    year: int
    is_current_month: bool = False
    is_prev_month: bool = False
    is_next_month: bool = False
    is_today: bool = False

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)


@dataclass(frozen=True)
class ChartSegment:
    """A slice of the spending donut chart; angles are in degrees."""
    subscription: Subscription
    percentage: float
    start_angle: float
    end_angle: float
    color: str


@dataclass(frozen=True)
class TrendSummary:
    """
    Totals for the previous, displayed and next (projected) month.

    Change values are percentages; see summary_service.month_trend for
    the zero-total conventions.
    """
    prev_month: int
    prev_year: int
    prev_total: float
    month: int
    year: int
    total: float
    next_month: int
    next_year: int
    next_total: float
    prev_to_current_change: float
    current_to_next_change: float
