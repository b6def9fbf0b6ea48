"""
security/auth.py
-----------------
Authentication middleware for the subscription calendar bot.
Blocks any user not in the allowed whitelist.
"""

from functools import wraps
from typing import Callable, Iterable, Optional

from telegram import Update
from telegram.ext import ContextTypes

from config import ALLOWED_USER_IDS
from utils.logger import get_logger

logger = get_logger(__name__)


def is_allowed(user_id: int, allowed: Optional[Iterable[int]] = None) -> bool:
    """
    Check a user against the whitelist.

    An empty whitelist allows everyone (dev mode).
    """
    allowed_ids = set(ALLOWED_USER_IDS if allowed is None else allowed)
    return not allowed_ids or user_id in allowed_ids


def authorized_only(func: Callable):
    """
    Decorator that restricts a handler to whitelisted users only.

    Usage:
        @authorized_only
        async def my_handler(update, context):
            ...

    Behavior:
        - If ALLOWED_USER_IDS is empty, ALL users are allowed (dev mode).
        - If the list is set, only those users can use the bot.
        - Unauthorized attempts are logged.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if not is_allowed(user.id):
            logger.warning(
                f"🚫 Unauthorized access attempt: user_id={user.id}, "
                f"username={user.username}, name={user.first_name}"
            )
            if update.effective_message:
                await update.effective_message.reply_text("⛔ Sorry, this bot is private.")
            return

        return await func(update, context, *args, **kwargs)

    return wrapper
