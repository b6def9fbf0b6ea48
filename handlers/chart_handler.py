"""
handlers/chart_handler.py
--------------------------
Handles chart generation commands.
Delegates to ChartService and sends images to the user.
"""

from datetime import date

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import chart_service, parse_month_args, user_locale
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from utils.date_utils import month_title
from utils.logger import get_logger

logger = get_logger(__name__)


@authorized_only
@rate_limited
async def chart_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /chart command - send a donut chart of the month's charges.

    Usage:
        /chart         → current month
        /chart 1       → January current year
        /chart 12 2025 → December 2025
    """
    try:
        month, year = parse_month_args(context.args, date.today())
    except ValueError:
        await update.message.reply_text("⚠️ Usage: /chart [month] [year]")
        return

    await update.message.reply_text("📊 Drawing chart...")

    buf = chart_service.generate_spending_pie(month, year, user_locale(context))
    if buf:
        await update.message.reply_photo(photo=buf, caption=f"📊 Subscriptions - {month_title(month, year)}")
    else:
        await update.message.reply_text("📭 No charges in that month.")


@authorized_only
@rate_limited
async def chart_trend_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /chart_trend [month] [year] - bar chart of monthly totals."""
    try:
        month, year = parse_month_args(context.args, date.today())
    except ValueError:
        await update.message.reply_text("⚠️ Usage: /chart_trend [month] [year]")
        return

    await update.message.reply_text("📈 Drawing chart...")

    buf = chart_service.generate_trend_bar(month, year, user_locale(context))
    if buf:
        await update.message.reply_photo(photo=buf, caption="📈 Monthly subscription spend")
    else:
        await update.message.reply_text("📭 No subscriptions loaded.")
