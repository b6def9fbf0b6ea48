"""
security/rate_limiter.py
-------------------------
Rate limiting middleware to keep users from flooding the bot.
Limits the number of commands a user can send within a time window.
"""

import time
from collections import defaultdict
from functools import wraps
from typing import Callable, Optional

from telegram import Update
from telegram.ext import ContextTypes

from config import RATE_LIMIT_MESSAGES, RATE_LIMIT_WINDOW_SECONDS
from utils.logger import get_logger

logger = get_logger(__name__)

# In-memory storage for rate tracking: {user_id: [timestamp1, timestamp2, ...]}
_user_timestamps: dict[int, list[float]] = defaultdict(list)


def _cleanup(user_id: int, now: float) -> None:
    """Remove expired timestamps for a user."""
    cutoff = now - RATE_LIMIT_WINDOW_SECONDS
    _user_timestamps[user_id] = [
        t for t in _user_timestamps[user_id] if t > cutoff
    ]


def register_hit(user_id: int, now: Optional[float] = None) -> bool:
    """
    Record one command from a user.

    Returns:
        False if the user is over the limit (the hit is not recorded).
    """
    now = time.time() if now is None else now
    _cleanup(user_id, now)

    if len(_user_timestamps[user_id]) >= RATE_LIMIT_MESSAGES:
        return False

    _user_timestamps[user_id].append(now)
    return True


def reset() -> None:
    """Forget all tracked timestamps."""
    _user_timestamps.clear()


def rate_limited(func: Callable):
    """
    Decorator that enforces rate limiting per user.

    Configuration (via .env):
        RATE_LIMIT_MESSAGES: Max commands per window (default: 30).
        RATE_LIMIT_WINDOW_SECONDS: Window duration in seconds (default: 60).

    Behavior:
        - Tracks command timestamps per user.
        - If exceeded, replies with a warning and blocks the handler.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if not register_hit(user.id):
            logger.warning(f"⚠️ Rate limit hit for user {user.id}")
            if update.effective_message:
                await update.effective_message.reply_text(
                    "⚠️ Too many messages. Please wait a moment and try again."
                )
            return

        return await func(update, context, *args, **kwargs)

    return wrapper
