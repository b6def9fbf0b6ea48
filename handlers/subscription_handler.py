"""
handlers/subscription_handler.py
---------------------------------
Subscription lists, details, upcoming charges and manual refresh.
"""

from datetime import date, datetime

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import subscription_service, user_locale
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from utils.logger import get_logger

logger = get_logger(__name__)

UPCOMING_DAYS = 30


@authorized_only
@rate_limited
async def subscriptions_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /subscriptions - list all subscriptions with their next charge."""
    await update.message.reply_text(
        subscription_service.list_subscriptions(user_locale(context), date.today())
    )


@authorized_only
@rate_limited
async def subscription_detail_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /sub <id> - show details of one subscription.
    Usage: /sub 3
    """
    if not context.args:
        await update.message.reply_text(
            "⚠️ Usage: /sub <id>\n"
            "Use /subscriptions to see the ids."
        )
        return

    try:
        subscription_id = int(context.args[0].lstrip("#"))
    except ValueError:
        await update.message.reply_text("⚠️ The subscription id must be a number.")
        return

    await update.message.reply_text(
        subscription_service.subscription_detail(subscription_id, user_locale(context), date.today())
    )


@authorized_only
@rate_limited
async def next_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /next - charges in the next 30 days."""
    await update.message.reply_text(
        subscription_service.upcoming(user_locale(context), date.today(), UPCOMING_DAYS)
    )


@authorized_only
@rate_limited
async def refresh_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /refresh - reload subscriptions from the spreadsheet."""
    await update.message.reply_text("🔄 Loading subscriptions...")
    msg = subscription_service.refresh(date.today(), datetime.now())
    logger.info(f"User {update.effective_user.id} refreshed subscriptions")
    await update.message.reply_text(msg)
