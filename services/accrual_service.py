"""
services/accrual_service.py
---------------------------
How much has a subscription cost so far?

Counts the whole billing periods elapsed between the start date and
"today" (a period ending today counts) and multiplies by the per-charge
amount. The figure is informational only and never reconciled against
real payments.
"""

from datetime import date

from models.subscription import Subscription
from utils.date_utils import days_in_month, months_between
from utils.frequency import (
    BIANNUALLY,
    BIWEEKLY,
    DAILY,
    QUARTERLY,
    WEEKLY,
    YEARLY,
)

_DAYS_PER_CHARGE = {DAILY: 1, WEEKLY: 7, BIWEEKLY: 14}
_MONTHS_PER_CHARGE = {QUARTERLY: 3, BIANNUALLY: 6}


def payments_since_start(subscription: Subscription, today: date) -> int:
    """
    Number of charges elapsed up to ``today``.

    Accrual stops at the end date when the subscription was cancelled.
    The result is never negative, even if ``today`` precedes the start.
    """
    start = subscription.start_date
    until = today
    if subscription.end_date is not None and subscription.end_date < until:
        until = subscription.end_date

    frequency = subscription.frequency
    charge_day = min(subscription.day_of_month, days_in_month(until.year, until.month))
    # The current month only counts once its charge day has arrived
    months = months_between(start, until)
    if until.day < charge_day:
        months -= 1

    if frequency in _DAYS_PER_CHARGE:
        count = (until - start).days // _DAYS_PER_CHARGE[frequency]
    elif frequency == YEARLY:
        anniversary_day = min(subscription.day_of_month, days_in_month(until.year, start.month))
        count = until.year - start.year
        if (until.month, until.day) < (start.month, anniversary_day):
            count -= 1
    elif frequency in _MONTHS_PER_CHARGE:
        count = months // _MONTHS_PER_CHARGE[frequency]
    else:
        # MONTHLY and anything unrecognised
        count = months

    return max(0, count)


def total_spent(subscription: Subscription, today: date) -> float:
    """Cumulative amount charged from the start date up to ``today``."""
    return round(payments_since_start(subscription, today) * subscription.amount, 2)

