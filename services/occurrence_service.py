"""
services/occurrence_service.py
------------------------------
Decides when subscriptions charge.

Two questions are answered here:
    - Does a subscription charge in a given (month, year)? This drives the
      calendar icons, the monthly summary and the trend totals.
    - What is the next concrete charge date relative to "today"?

Sub-monthly frequencies (daily, weekly, biweekly) are not projected onto
individual days; they are shown once a month on their day of month.
A day of month beyond the end of a short month is clamped to its last day.

All functions are pure: ``today`` is always passed in by the caller.
"""

from datetime import date, timedelta
from typing import Iterable, Optional

from models.subscription import Subscription
from utils.date_utils import clamp_day, days_in_month, shift_month
from utils.frequency import (
    BIANNUALLY,
    BIWEEKLY,
    DAILY,
    MONTHLY,
    QUARTERLY,
    WEEKLY,
    YEARLY,
)

_EVERY_MONTH = {MONTHLY, WEEKLY, BIWEEKLY, DAILY}
_CYCLE_MONTHS = {QUARTERLY: 3, BIANNUALLY: 6}


def occurs_in_month(frequency: str, start_date: date, month: int, year: int,
                    end_date: Optional[date] = None) -> bool:
    """
    Check whether a subscription charges in the given month.

    Args:
        frequency: Canonical frequency code.
        start_date: Date of the first charge.
        month: Month number (1-12).
        year: Year number.
        end_date: Optional cancellation date; later months never charge.

    Returns:
        True if a charge falls in (month, year).
    """
    total_months_diff = (year - start_date.year) * 12 + (month - start_date.month)
    if total_months_diff < 0:
        return False

    if end_date is not None and (year, month) > (end_date.year, end_date.month):
        return False

    if frequency in _EVERY_MONTH:
        return True
    if frequency == YEARLY:
        return month == start_date.month and total_months_diff % 12 == 0
    if frequency in _CYCLE_MONTHS:
        return total_months_diff % _CYCLE_MONTHS[frequency] == 0

    # Unknown frequencies stay visible
    return True


def charge_day_in_month(subscription: Subscription, month: int, year: int) -> int:
    """The subscription's charge day in (month, year), clamped to the month length."""
    return min(subscription.day_of_month, days_in_month(year, month))


def charges_on(subscription: Subscription, day: date) -> bool:
    """
    True if the subscription has a charge on exactly this date.

    The start month always charges on its charge day, even when that day
    falls before the start date; only the end date cuts charges off.
    """
    if subscription.end_date is not None and day > subscription.end_date:
        return False
    if charge_day_in_month(subscription, day.month, day.year) != day.day:
        return False
    return occurs_in_month(
        subscription.frequency, subscription.start_date, day.month, day.year,
        subscription.end_date,
    )


def subscriptions_for_day(day: int, subscriptions: Iterable[Subscription],
                          month: int, year: int) -> list[Subscription]:
    """Subscriptions that charge on ``day`` of the displayed month."""
    target = date(year, month, day)
    return [sub for sub in subscriptions if charges_on(sub, target)]


def subscriptions_in_month(subscriptions: Iterable[Subscription],
                           month: int, year: int) -> list[Subscription]:
    """Subscriptions with a charge somewhere in (month, year)."""
    result = []
    for sub in subscriptions:
        charge = clamp_day(year, month, sub.day_of_month)
        if charges_on(sub, charge):
            result.append(sub)
    return result


def _cycle_target(today: date, phase: int, cycle: int, charge_day: int) -> tuple[int, int]:
    """
    Next (year, month) of a quarterly/half-yearly cycle aligned to ``phase``,
    the start month's 0-based position within the cycle.
    """
    month_index = today.month - 1
    block = month_index // cycle
    position = month_index % cycle

    if position > phase or (position == phase and today.day > charge_day):
        target = (block + 1) * cycle + phase
    else:
        target = block * cycle + phase

    return today.year + target // 12, target % 12 + 1


def next_charge_date(subscription: Subscription, today: date) -> Optional[date]:
    """
    Compute the next date the subscription charges, on or after ``today``.

    A charge due today counts as the next charge. Before the subscription
    starts, the projection begins at the first day of its start month.

    Returns:
        The next charge date, or None if it would fall after the end date.
    """
    start_month = subscription.start_date.replace(day=1)
    reference = max(today, start_month)
    frequency = subscription.frequency
    start = subscription.start_date
    dom = subscription.day_of_month

    if frequency == YEARLY:
        candidate = clamp_day(reference.year, start.month, dom)
        if candidate < reference:
            candidate = clamp_day(reference.year + 1, start.month, dom)

    elif frequency in _CYCLE_MONTHS:
        cycle = _CYCLE_MONTHS[frequency]
        phase = (start.month - 1) % cycle
        charge_day = min(dom, days_in_month(reference.year, reference.month))
        year, month = _cycle_target(reference, phase, cycle, charge_day)
        candidate = clamp_day(year, month, dom)

    else:
        # monthly, and the default for everything else
        candidate = clamp_day(reference.year, reference.month, dom)
        if candidate < reference:
            year, month = shift_month(reference.year, reference.month, 1)
            candidate = clamp_day(year, month, dom)

    if subscription.end_date is not None and candidate > subscription.end_date:
        return None
    return candidate


def upcoming_charges(subscriptions: Iterable[Subscription], today: date,
                     days_ahead: int) -> list[tuple[date, Subscription]]:
    """
    Charges falling between ``today`` and ``today + days_ahead`` (inclusive),
    sorted by date. Used by the reminder job.
    """
    horizon = today + timedelta(days=days_ahead)
    result = []
    for sub in subscriptions:
        charge = next_charge_date(sub, today)
        if charge is not None and charge <= horizon:
            result.append((charge, sub))
    result.sort(key=lambda item: (item[0], item[1].name.lower()))
    return result


def charges_in_month(subscriptions: Iterable[Subscription], month: int,
                     year: int) -> list[tuple[date, Subscription]]:
    """Every (charge date, subscription) pair of a month, ordered by date."""
    result = []
    for sub in subscriptions_in_month(subscriptions, month, year):
        result.append((clamp_day(year, month, sub.day_of_month), sub))
    result.sort(key=lambda item: (item[0], item[1].name.lower()))
    return result
