"""
handlers/common.py
------------------
Objects and helpers shared by all handlers: the single in-memory
subscription store, the services built on it, and argument parsing.
"""

from datetime import MAXYEAR, MINYEAR, date

from telegram.ext import ContextTypes

from config import DEFAULT_LOCALE
from repositories.subscription_repo import SubscriptionRepository
from services.chart_service import ChartService
from services.export_service import ExportService
from services.subscription_service import SubscriptionService

LOCALE_KEY = "locale"

# One store for the whole bot; /refresh and the daily job replace its contents
subscription_repo = SubscriptionRepository()
subscription_service = SubscriptionService(repo=subscription_repo)
chart_service = ChartService(repo=subscription_repo)
export_service = ExportService(repo=subscription_repo)


def user_locale(context: ContextTypes.DEFAULT_TYPE) -> str:
    """The locale chosen with /locale, or the configured default."""
    if context.user_data is None:
        return DEFAULT_LOCALE
    return context.user_data.get(LOCALE_KEY, DEFAULT_LOCALE)


def parse_month_args(args: list[str], today: date) -> tuple[int, int]:
    """
    Read optional ``[month] [year]`` command arguments.

    Returns:
        (month, year), defaulting to the current month.

    Raises:
        ValueError: If an argument is not a number, the month is not 1-12
            or the year leaves no room for its neighbouring months.
    """
    month, year = today.month, today.year
    if args:
        month = int(args[0])
        if len(args) >= 2:
            year = int(args[1])
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    # The grid and the trend both look one year either side
    if not MINYEAR < year < MAXYEAR:
        raise ValueError(f"Invalid year: {year}")
    return month, year
