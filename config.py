"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── Google Sheets ─────────────────────────────────────────
SHEETS_SPREADSHEET_ID: str = os.getenv("SHEETS_SPREADSHEET_ID", "")
SHEETS_API_KEY: str = os.getenv("SHEETS_API_KEY", "")
SHEETS_RANGE: str = os.getenv("SHEETS_RANGE", "A:I")
SHEETS_TIMEOUT_SECONDS: int = int(os.getenv("SHEETS_TIMEOUT_SECONDS", "10"))

# Without a spreadsheet the bot runs on the built-in demo subscriptions
DEMO_MODE: bool = _as_bool(os.getenv("DEMO_MODE", "false")) or not (
    SHEETS_SPREADSHEET_ID and SHEETS_API_KEY
)

# ── Locale ────────────────────────────────────────────────
DEFAULT_LOCALE: str = os.getenv("DEFAULT_LOCALE", "de-AT")
# Locale used to read dates written in the spreadsheet
SHEET_LOCALE: str = os.getenv("SHEET_LOCALE", DEFAULT_LOCALE)

# ── Security ──────────────────────────────────────────────
_raw_ids = os.getenv("ALLOWED_USER_IDS", "")
ALLOWED_USER_IDS: list[int] = (
    [int(uid.strip()) for uid in _raw_ids.split(",") if uid.strip()]
    if _raw_ids
    else []
)

# ── Rate Limiting ─────────────────────────────────────────
RATE_LIMIT_MESSAGES: int = int(os.getenv("RATE_LIMIT_MESSAGES", "30"))
RATE_LIMIT_WINDOW_SECONDS: int = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

# ── Reminders ─────────────────────────────────────────────
REMIND_DAYS_BEFORE: int = int(os.getenv("REMIND_DAYS_BEFORE", "2"))
REMINDER_HOUR: int = int(os.getenv("REMINDER_HOUR", "9"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
# Optional path of a rotating log file, in addition to stdout
LOG_FILE: str = os.getenv("LOG_FILE", "")

# ── Currency ──────────────────────────────────────────────
DEFAULT_CURRENCY: str = "EUR"
