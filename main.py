"""
main.py
-------
Entry point for the SubsCalendar Telegram bot.

Responsibilities:
    - Load the subscriptions (spreadsheet or demo data).
    - Configure and start the Telegram bot with all handlers.
    - Set up the daily refresh and upcoming charge reminder jobs.
"""

from datetime import date, datetime, time as dt_time

from telegram import BotCommand
from telegram.ext import Application, CommandHandler

from config import (
    ALLOWED_USER_IDS,
    DEFAULT_LOCALE,
    REMIND_DAYS_BEFORE,
    REMINDER_HOUR,
    TELEGRAM_BOT_TOKEN,
)
from handlers.calendar_handler import calendar_command, day_command, month_command, trends_command
from handlers.chart_handler import chart_command, chart_trend_command
from handlers.common import subscription_service
from handlers.export_handler import export_csv_command, export_excel_command
from handlers.settings_handler import locale_command
from handlers.start_handler import help_command, myid_command, start_command
from handlers.subscription_handler import (
    next_command,
    refresh_command,
    subscription_detail_command,
    subscriptions_command,
)
from utils.logger import get_logger

logger = get_logger(__name__)


async def refresh_subscriptions(context) -> None:
    """
    Scheduled job: reload the subscriptions from the spreadsheet.
    Runs daily, an hour before the reminders.
    """
    msg = subscription_service.refresh(date.today(), datetime.now())
    logger.info(f"Scheduled refresh: {msg}")


async def send_reminders(context) -> None:
    """
    Scheduled job: remind users of charges due in the next few days.
    Runs daily at REMINDER_HOUR.
    """
    today = date.today()
    due = subscription_service.get_due_reminders(today, REMIND_DAYS_BEFORE)
    if not due:
        logger.info("No upcoming charges to remind about.")
        return

    for user_id in ALLOWED_USER_IDS:
        for charge_date, sub in due:
            try:
                await context.bot.send_message(
                    chat_id=user_id,
                    text=subscription_service.format_reminder(charge_date, sub, DEFAULT_LOCALE, today),
                )
                logger.info(f"Sent reminder for '{sub.name}' to user {user_id}")
            except Exception as e:
                logger.error(f"Failed to send reminder for '{sub.name}' to {user_id}: {e}")


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "🚀 Start the bot"),
        BotCommand("help", "📖 Show help"),
        BotCommand("calendar", "📅 Month calendar"),
        BotCommand("month", "📊 Monthly summary"),
        BotCommand("day", "🗓️ Charges on a day"),
        BotCommand("trends", "📈 Spending trend"),
        BotCommand("subscriptions", "📋 All subscriptions"),
        BotCommand("sub", "📌 Subscription details"),
        BotCommand("next", "⏭️ Upcoming charges"),
        BotCommand("chart", "🍩 Spending chart"),
        BotCommand("chart_trend", "📊 Monthly totals chart"),
        BotCommand("export_csv", "📄 Export CSV"),
        BotCommand("export_excel", "📊 Export Excel"),
        BotCommand("refresh", "🔄 Reload the spreadsheet"),
        BotCommand("locale", "🌍 Date and week format"),
        BotCommand("myid", "🆔 Your user id"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Load subscriptions ─────────────────────────────
    logger.info("Loading subscriptions...")
    logger.info(subscription_service.refresh(date.today(), datetime.now()))

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    app = Application.builder().token(TELEGRAM_BOT_TOKEN).post_init(set_bot_commands).build()

    # ── 3. Register command handlers ──────────────────────
    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler("myid", myid_command))
    app.add_handler(CommandHandler("calendar", calendar_command))
    app.add_handler(CommandHandler("month", month_command))
    app.add_handler(CommandHandler("day", day_command))
    app.add_handler(CommandHandler("trends", trends_command))
    app.add_handler(CommandHandler("subscriptions", subscriptions_command))
    app.add_handler(CommandHandler("sub", subscription_detail_command))
    app.add_handler(CommandHandler("next", next_command))
    app.add_handler(CommandHandler("refresh", refresh_command))
    app.add_handler(CommandHandler("chart", chart_command))
    app.add_handler(CommandHandler("chart_trend", chart_trend_command))
    app.add_handler(CommandHandler("export_csv", export_csv_command))
    app.add_handler(CommandHandler("export_excel", export_excel_command))
    app.add_handler(CommandHandler("locale", locale_command))

    # ── 4. Schedule jobs ──────────────────────────────────
    job_queue = app.job_queue
    if job_queue:
        job_queue.run_daily(
            refresh_subscriptions,
            time=dt_time(hour=(REMINDER_HOUR - 1) % 24, minute=0),
            name="daily_refresh",
        )
        job_queue.run_daily(
            send_reminders,
            time=dt_time(hour=REMINDER_HOUR, minute=0),
            name="daily_reminders",
        )
        logger.info(f"Scheduled daily refresh + reminders ({REMINDER_HOUR:02d}:00)")

    # ── 5. Start polling ──────────────────────────────────
    logger.info("🚀 SubsCalendar is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message"])

    logger.info("SubsCalendar stopped.")


if __name__ == "__main__":
    main()
