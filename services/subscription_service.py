"""
services/subscription_service.py
--------------------------------
Business logic behind the bot commands.

Responsibilities:
    - Refresh the subscription list from the spreadsheet (or demo data).
    - Render the month calendar, summaries, trends and details as text.
    - Find upcoming charges for the reminder job.
"""

from datetime import date, datetime
from typing import Callable, Optional

from config import DEFAULT_CURRENCY, DEMO_MODE, SHEET_LOCALE
from models.subscription import Subscription
from repositories.demo_data import DEMO_SUBSCRIPTIONS
from repositories.subscription_repo import SubscriptionRepository
from services.accrual_service import payments_since_start, total_spent
from services.calendar_service import build_grid, grid_rows, weekday_labels
from services.ingestion_service import rows_to_subscriptions
from services.occurrence_service import next_charge_date, upcoming_charges
from services.summary_service import change_indicator, month_trend, subscriptions_by_day
from sheets.sheets_client import SheetsError, fetch_values
from utils.currency import format_currency
from utils.date_utils import days_in_month, format_date, month_title
from utils.frequency import describe_frequency, frequency_label
from utils.logger import get_logger

logger = get_logger(__name__)


def ordinal(day: int) -> str:
    """1 -> '1st', 22 -> '22nd', 13 -> '13th'."""
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


class SubscriptionService:
    """
    Handles all business logic for the subscription calendar.

    Args:
        repo: Store for the current subscription list.
        fetcher: Callable returning raw sheet values (defaults to the
            Google Sheets client).
        demo_mode: Serve the built-in demo subscriptions instead of fetching.
    """

    def __init__(self, repo: Optional[SubscriptionRepository] = None,
                 fetcher: Optional[Callable[[], list[list[str]]]] = None,
                 demo_mode: bool = DEMO_MODE):
        self.repo = repo or SubscriptionRepository()
        self.fetcher = fetcher or fetch_values
        self.demo_mode = demo_mode

    # ── DATA ──────────────────────────────────────────────

    def refresh(self, today: date, fetched_at: Optional[datetime] = None) -> str:
        """
        Reload subscriptions, replacing the in-memory list.

        On a fetch or data error the previous list is kept.

        Returns:
            A user-facing status message.
        """
        if self.demo_mode:
            count = self.repo.replace_all(DEMO_SUBSCRIPTIONS, fetched_at)
            return f"🧪 Demo mode: loaded {count} sample subscriptions."

        try:
            values = self.fetcher()
            subscriptions = rows_to_subscriptions(values, SHEET_LOCALE, today)
        except SheetsError as e:
            logger.error(f"Failed to refresh subscriptions: {e}")
            kept = self.repo.count()
            return f"❌ Could not load the spreadsheet: {e}\nKeeping {kept} previously loaded subscriptions."

        count = self.repo.replace_all(subscriptions, fetched_at)
        return f"🔄 Loaded {count} subscriptions from the spreadsheet."

    def _currency(self, subscriptions: list[Subscription]) -> str:
        # Totals are shown in the first subscription's currency
        return subscriptions[0].currency if subscriptions else DEFAULT_CURRENCY

    # ── LISTS & DETAILS ───────────────────────────────────

    def list_subscriptions(self, locale: str, today: date) -> str:
        """All subscriptions with their next charge date."""
        subs = self.repo.get_all()
        if not subs:
            return "📭 No subscriptions loaded. Use /refresh to fetch them."

        lines = ["📋 Subscriptions:\n"]
        for sub in subs:
            upcoming = next_charge_date(sub, today)
            when = format_date(upcoming, locale) if upcoming else "ended"
            lines.append(
                f"  #{sub.id} {sub.name}: "
                f"{describe_frequency(sub.frequency, sub.amount, sub.currency, locale)}"
                f" - next: {when}"
            )
        return "\n".join(lines)

    def subscription_detail(self, subscription_id: int, locale: str, today: date) -> str:
        """Detail card for one subscription."""
        sub = self.repo.get_by_id(subscription_id)
        if sub is None:
            return f"⚠️ Subscription #{subscription_id} not found."

        upcoming = next_charge_date(sub, today)
        lines = [
            f"📌 {sub.name} - {format_currency(sub.amount, sub.currency, locale)}",
            f"  📅 Every {ordinal(sub.day_of_month)} · {frequency_label(sub.frequency)}",
            f"  🔁 {describe_frequency(sub.frequency, sub.amount, sub.currency, locale)}",
            f"  ⏭️ Next: {format_date(upcoming, locale) if upcoming else 'no further charges'}",
            f"  🗓️ Since {format_date(sub.start_date, locale)}",
        ]
        if sub.end_date:
            lines.append(f"  🛑 Ends {format_date(sub.end_date, locale)}")
        lines.append(
            f"  💶 Total spent: {format_currency(total_spent(sub, today), sub.currency, locale)}"
            f" ({payments_since_start(sub, today)} payments)"
        )
        return "\n".join(lines)

    def upcoming(self, locale: str, today: date, days_ahead: int = 30) -> str:
        """Charges in the next ``days_ahead`` days."""
        charges = upcoming_charges(self.repo.get_all(), today, days_ahead)
        if not charges:
            return f"📭 No charges in the next {days_ahead} days."

        lines = [f"⏭️ Upcoming charges (next {days_ahead} days):\n"]
        for charge_date, sub in charges:
            lines.append(
                f"  {format_date(charge_date, locale)} | {sub.name}: "
                f"{format_currency(sub.amount, sub.currency, locale)}"
            )
        total = sum(sub.amount for _, sub in charges)
        lines.append(f"\n💶 Total: {format_currency(total, self._currency([s for _, s in charges]), locale)}")
        return "\n".join(lines)

    # ── MONTH VIEWS ───────────────────────────────────────

    def calendar_text(self, month: int, year: int, locale: str, today: date) -> str:
        """
        Month grid as monospace text.

        Charge days are marked with •, today with *, both with ✱.
        """
        subs = self.repo.get_all()
        by_day = subscriptions_by_day(subs, month, year)

        header = " ".join(f"{label[:2]:<3}" for label in weekday_labels(locale)).rstrip()
        rows = []
        for week in grid_rows(build_grid(month, year, locale, today)):
            cells = []
            for cell in week:
                if not cell.is_current_month:
                    cells.append("   ")
                    continue
                has_charge = bool(by_day[cell.day])
                if cell.is_today and has_charge:
                    marker = "✱"
                elif cell.is_today:
                    marker = "*"
                elif has_charge:
                    marker = "•"
                else:
                    marker = " "
                cells.append(f"{cell.day:>2}{marker}")
            rows.append(" ".join(cells))

        lines = [f"📅 {month_title(month, year)}", "", header, *rows, ""]
        charge_days = [day for day, day_subs in by_day.items() if day_subs]
        if not charge_days:
            lines.append("No charges this month.")
        for day in charge_days:
            names = ", ".join(sub.name for sub in by_day[day])
            lines.append(f"{day:>2}: {names}")
        return "\n".join(lines)

    def month_summary(self, month: int, year: int, locale: str) -> str:
        """Per-day charges and the month total."""
        subs = self.repo.get_all()
        by_day = subscriptions_by_day(subs, month, year)
        currency = self._currency(subs)

        lines = [f"📊 Monthly summary - {month_title(month, year)}:\n"]
        total = 0.0
        for day, day_subs in by_day.items():
            if not day_subs:
                continue
            day_total = sum(s.amount for s in day_subs)
            total += day_total
            names = ", ".join(s.name for s in day_subs)
            lines.append(f"  {day:>2}. {names}: {format_currency(day_total, currency, locale)}")

        if total == 0:
            lines.append("  No subscriptions this month.")
        lines.append(f"\n💶 Monthly total: {format_currency(total, currency, locale)}")
        return "\n".join(lines)

    def day_detail(self, day: int, month: int, year: int, locale: str) -> str:
        """Subscriptions charging on a single day."""
        subs = self.repo.get_all()
        if not 1 <= day <= days_in_month(year, month):
            return f"⚠️ {month_title(month, year)} has no day {day}."

        day_subs = subscriptions_by_day(subs, month, year)[day]
        if not day_subs:
            return f"📭 No charges on {day} {month_title(month, year)}."

        lines = [f"📅 {day} {month_title(month, year)}:\n"]
        for sub in day_subs:
            lines.append(f"  #{sub.id} {sub.name}: {format_currency(sub.amount, sub.currency, locale)}")
        total = sum(s.amount for s in day_subs)
        lines.append(f"\n💶 Daily total: {format_currency(total, self._currency(day_subs), locale)}")
        return "\n".join(lines)

    def trends(self, month: int, year: int, locale: str,
               last_fetch: Optional[datetime] = None) -> str:
        """Previous, current and projected next month totals."""
        subs = self.repo.get_all()
        currency = self._currency(subs)
        trend = month_trend(subs, month, year)

        def money(amount: float) -> str:
            return format_currency(amount, currency, locale)

        lines = [
            "📈 Spending trend:\n",
            f"  {month_title(trend.prev_month, trend.prev_year)}: {money(trend.prev_total)}",
            f"  {month_title(trend.month, trend.year)}: {money(trend.total)} "
            f"{change_indicator(trend.prev_to_current_change)} "
            f"{abs(trend.prev_to_current_change):.1f}%",
            f"  {month_title(trend.next_month, trend.next_year)} (projected): "
            f"{money(trend.next_total)} "
            f"{change_indicator(trend.current_to_next_change)} "
            f"{abs(trend.current_to_next_change):.1f}%",
        ]
        fetched = last_fetch or self.repo.last_fetch_time
        if fetched:
            lines.append(f"\n🕒 Updated: {format_date(fetched.date(), locale)} {fetched:%H:%M}")
        return "\n".join(lines)

    # ── REMINDERS ─────────────────────────────────────────

    def get_due_reminders(self, today: date, days_ahead: int) -> list[tuple[date, Subscription]]:
        """
        Get charges due within ``days_ahead`` days.
        Called by the scheduler.
        """
        return upcoming_charges(self.repo.get_all(), today, days_ahead)

    @staticmethod
    def format_reminder(charge_date: date, sub: Subscription, locale: str, today: date) -> str:
        days = (charge_date - today).days
        when = "today" if days == 0 else ("tomorrow" if days == 1 else f"in {days} days")
        return (
            f"⏰ Upcoming charge {when}!\n\n"
            f"📌 {sub.name}\n"
            f"💶 {format_currency(sub.amount, sub.currency, locale)}\n"
            f"📅 {format_date(charge_date, locale)}"
        )

