"""
handlers/settings_handler.py
-----------------------------
Per-user display settings. The locale is kept in the bot's in-memory
user data only and resets when the bot restarts.
"""

import re

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import LOCALE_KEY, user_locale
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.calendar_service import weekday_labels
from utils.logger import get_logger

logger = get_logger(__name__)

_LOCALE_RE = re.compile(r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$")


@authorized_only
@rate_limited
async def locale_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /locale [tag] - show or set the locale used for dates,
    amounts and the first day of the week.

    Usage:
        /locale        → show current locale
        /locale en-US  → Sunday-first weeks, MM/DD/YYYY dates
        /locale de-AT  → Monday-first weeks, DD.MM.YYYY dates
    """
    if not context.args:
        locale = user_locale(context)
        await update.message.reply_text(
            f"🌍 Locale: {locale}\n"
            f"Week: {' '.join(weekday_labels(locale))}"
        )
        return

    tag = context.args[0].strip()
    if not _LOCALE_RE.match(tag):
        await update.message.reply_text("⚠️ Not a locale tag. Example: /locale de-AT")
        return

    context.user_data[LOCALE_KEY] = tag
    logger.info(f"User {update.effective_user.id} set locale to {tag}")
    await update.message.reply_text(
        f"✅ Locale set to {tag}\n"
        f"Week: {' '.join(weekday_labels(tag))}"
    )
