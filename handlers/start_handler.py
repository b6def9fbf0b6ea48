"""
handlers/start_handler.py
--------------------------
Handles /start, /help and /myid commands.
"""

from telegram import Update
from telegram.ext import ContextTypes

from security.auth import authorized_only
from security.rate_limiter import rate_limited
from utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = """
🤖 *Subscription Calendar*
See when every subscription charges and what it costs 💶

*📅 Calendar:*
/calendar \\[month] \\[year] - month grid with charge days
/month \\[month] \\[year] - charges per day and monthly total
/day <day> \\[month] \\[year] - charges on one day
/trends \\[month] \\[year] - previous / current / next month

*📋 Subscriptions:*
/subscriptions - all subscriptions
/sub <id> - details, next charge and total spent
/next - charges in the next 30 days

*📊 Charts & export:*
/chart \\[month] \\[year] - spending donut
/chart\\_trend \\[month] \\[year] - monthly totals
/export\\_csv \\[month] \\[year] - month as CSV
/export\\_excel \\[month] \\[year] - month as Excel

*⚙️ Settings:*
/refresh - reload the spreadsheet
/locale \\[tag] - show or set your locale (e.g. de-AT, en-US)
/myid - show your Telegram ID
"""


@authorized_only
@rate_limited
async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - show welcome message."""
    user = update.effective_user
    logger.info(f"User {user.id} ({user.first_name}) started the bot.")

    await update.message.reply_text(
        f"Hi {user.first_name}! 👋\n"
        f"I keep track of your subscriptions and when they charge.\n\n"
        f"Type /calendar for this month or /help for all commands."
    )


@authorized_only
@rate_limited
async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")


@authorized_only
async def myid_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /myid command - show user's Telegram ID for whitelisting."""
    user = update.effective_user
    await update.message.reply_text(
        f"🆔 Your ID: `{user.id}`\n"
        f"Add it to `ALLOWED_USER_IDS` in the `.env` file to restrict the bot.",
        parse_mode="Markdown",
    )
