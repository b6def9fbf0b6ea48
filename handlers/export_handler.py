"""
handlers/export_handler.py
---------------------------
Handles data export commands (CSV, Excel).
Delegates to ExportService.
"""

from datetime import date

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import export_service, parse_month_args
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from utils.logger import get_logger

logger = get_logger(__name__)


@authorized_only
@rate_limited
async def export_csv_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /export_csv command - send a month's charges as CSV.
    Optional: /export_csv 1 2026 (for January 2026).
    """
    today = date.today()
    try:
        month, year = parse_month_args(context.args, today)
    except ValueError:
        await update.message.reply_text("⚠️ Usage: /export_csv [month] [year]\nExample: /export_csv 1 2026")
        return

    await update.message.reply_text("📄 Preparing CSV file...")

    try:
        buffer = export_service.export_month_csv(year, month, today)
        filename = f"subscriptions_{year}_{month:02d}.csv"
        await update.message.reply_document(
            document=buffer,
            filename=filename,
            caption=f"📊 Charges {month}/{year} - CSV",
        )
    except Exception as e:
        logger.error(f"CSV export failed: {e}")
        await update.message.reply_text("❌ Export failed. Please try again.")


@authorized_only
@rate_limited
async def export_excel_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /export_excel command - send a month's charges as Excel.
    Optional: /export_excel 1 2026 (for January 2026).
    """
    today = date.today()
    try:
        month, year = parse_month_args(context.args, today)
    except ValueError:
        await update.message.reply_text("⚠️ Usage: /export_excel [month] [year]\nExample: /export_excel 1 2026")
        return

    await update.message.reply_text("📊 Preparing Excel file...")

    try:
        buffer = export_service.export_month_excel(year, month, today)
        filename = f"subscriptions_{year}_{month:02d}.xlsx"
        await update.message.reply_document(
            document=buffer,
            filename=filename,
            caption=f"📊 Charges {month}/{year} - Excel",
        )
    except Exception as e:
        logger.error(f"Excel export failed: {e}")
        await update.message.reply_text("❌ Export failed. Please try again.")
