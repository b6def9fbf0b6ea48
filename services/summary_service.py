"""
services/summary_service.py
---------------------------
Aggregations over one displayed month: charges per day, the monthly
total, the trend against the neighbouring months and the chart slices.
Totals use the actual amounts charged in the month, not monthly
equivalents. Nothing here is cached; every call recomputes.
"""

from typing import Iterable, Optional

from models.calendar import ChartSegment, TrendSummary
from models.subscription import Subscription
from services.occurrence_service import subscriptions_for_day
from utils.date_utils import days_in_month, shift_month


def subscriptions_by_day(subscriptions: Iterable[Subscription], month: int,
                         year: int) -> dict[int, list[Subscription]]:
    """Map every day of the month to the subscriptions charging on it."""
    subs = list(subscriptions)
    return {
        day: subscriptions_for_day(day, subs, month, year)
        for day in range(1, days_in_month(year, month) + 1)
    }


def daily_totals(subscriptions: Iterable[Subscription], month: int, year: int) -> dict[int, float]:
    """Charged amount per day, only for days with at least one charge."""
    return {
        day: round(sum(sub.amount for sub in subs), 2)
        for day, subs in subscriptions_by_day(subscriptions, month, year).items()
        if subs
    }


def monthly_total(subscriptions: Iterable[Subscription], month: int, year: int) -> float:
    """Sum of all charges falling in (month, year)."""
    return round(sum(daily_totals(subscriptions, month, year).values()), 2)


def _change(before: float, after: float, when_zero: float) -> float:
    if before == 0:
        return when_zero
    return (after - before) / before * 100


def month_trend(subscriptions: Iterable[Subscription], month: int, year: int) -> TrendSummary:
    """
    Compare the displayed month with the previous and the next month.

    The change from the previous month is reported as +100% when the
    previous month had no charges; the projected change to the next month
    is 0% when the displayed month had none.
    """
    subs = list(subscriptions)
    prev_year, prev_month = shift_month(year, month, -1)
    next_year, next_month = shift_month(year, month, 1)

    prev_total = monthly_total(subs, prev_month, prev_year)
    total = monthly_total(subs, month, year)
    next_total = monthly_total(subs, next_month, next_year)

    return TrendSummary(
        prev_month=prev_month,
        prev_year=prev_year,
        prev_total=prev_total,
        month=month,
        year=year,
        total=total,
        next_month=next_month,
        next_year=next_year,
        next_total=next_total,
        prev_to_current_change=_change(prev_total, total, 100.0),
        current_to_next_change=_change(total, next_total, 0.0),
    )


def change_indicator(change: float) -> str:
    if change == 0:
        return "•"
    return "▲" if change > 0 else "▼"


def chart_segments(subscriptions: Iterable[Subscription],
                   total: Optional[float] = None) -> list[ChartSegment]:
    """
    Slice the spending donut: largest amount first, angles accumulated
    clockwise from 0 to 360 degrees. Zero amounts are left out.
    """
    valid = sorted((s for s in subscriptions if s.amount > 0), key=lambda s: -s.amount)
    if total is None:
        total = sum(s.amount for s in valid)
    if not valid or total <= 0:
        return []

    segments = []
    cumulative = 0.0
    for sub in valid:
        percentage = sub.amount / total * 100
        start_angle = cumulative / 100 * 360
        cumulative += percentage
        segments.append(ChartSegment(
            subscription=sub,
            percentage=percentage,
            start_angle=start_angle,
            end_angle=cumulative / 100 * 360,
            color=sub.color,
        ))
    return segments
