"""
handlers/calendar_handler.py
-----------------------------
Month views: calendar grid, monthly summary, single day and trends.
Delegates to SubscriptionService.
"""

from datetime import date

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import parse_month_args, subscription_service, user_locale
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from utils.logger import get_logger

logger = get_logger(__name__)


@authorized_only
@rate_limited
async def calendar_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /calendar - show the month grid with charge days marked.

    Usage:
        /calendar          → current month
        /calendar 3        → March current year
        /calendar 12 2025  → December 2025
    """
    today = date.today()
    try:
        month, year = parse_month_args(context.args, today)
    except ValueError:
        await update.message.reply_text("⚠️ Usage: /calendar [month] [year]")
        return

    text = subscription_service.calendar_text(month, year, user_locale(context), today)
    await update.message.reply_text(f"```\n{text}\n```", parse_mode="Markdown")


@authorized_only
@rate_limited
async def month_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /month [month] [year] - charges per day and the monthly total."""
    try:
        month, year = parse_month_args(context.args, date.today())
    except ValueError:
        await update.message.reply_text("⚠️ Usage: /month [month] [year]")
        return

    await update.message.reply_text(
        subscription_service.month_summary(month, year, user_locale(context))
    )


@authorized_only
@rate_limited
async def day_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /day <day> [month] [year] - subscriptions charging on one day.
    Usage: /day 7
    """
    if not context.args:
        await update.message.reply_text("⚠️ Usage: /day <day> [month] [year]\nExample: /day 7")
        return

    try:
        day = int(context.args[0])
        month, year = parse_month_args(context.args[1:], date.today())
    except ValueError:
        await update.message.reply_text("⚠️ Day, month and year must be numbers.")
        return

    await update.message.reply_text(
        subscription_service.day_detail(day, month, year, user_locale(context))
    )


@authorized_only
@rate_limited
async def trends_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /trends [month] [year] - previous, current and projected next month."""
    try:
        month, year = parse_month_args(context.args, date.today())
    except ValueError:
        await update.message.reply_text("⚠️ Usage: /trends [month] [year]")
        return

    await update.message.reply_text(
        subscription_service.trends(month, year, user_locale(context))
    )
