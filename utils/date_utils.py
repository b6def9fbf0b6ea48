"""
utils/date_utils.py
-------------------
Locale-aware date parsing and small calendar helpers shared by the
occurrence, accrual and calendar services.

Spreadsheet dates arrive as free text. ISO dates always win; dotted dates
are day-first; slashed dates are month-first only for ``en-US``. Anything
else goes through dateutil, and if that fails too the caller's ``today``
is returned so a single bad cell never breaks a month view.
"""

import calendar
import re
from datetime import date, datetime, time

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from utils.logger import get_logger

logger = get_logger(__name__)

_ISO_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_DOTTED_RE = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$")
_SLASHED_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def _is_us_locale(locale: str) -> bool:
    return (locale or "").lower().startswith("en-us")


def _build_date(year: int, month: int, day: int) -> date | None:
    """Return the date, or None when the parts are out of range."""
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        # e.g. 31.02.2024 passes the range check but is no real date
        return None


def parse_date(raw: str, locale: str, today: date) -> date:
    """
    Parse a spreadsheet date string into a calendar date.

    Args:
        raw: Date text, e.g. "2024-03-15", "15.03.2024", "03/15/2024".
        locale: IETF locale tag used to disambiguate slashed dates.
        today: Fallback returned when nothing can be parsed.

    Returns:
        The parsed date, or ``today`` if the input is unusable.
    """
    text = (raw or "").strip()

    match = _ISO_RE.match(text)
    if match:
        parsed = _build_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
        if parsed:
            return parsed

    match = _DOTTED_RE.match(text)
    if match:
        day, month, year = (int(g) for g in match.groups())
        parsed = _build_date(year, month, day)
        if parsed:
            return parsed

    match = _SLASHED_RE.match(text)
    if match:
        first, second, year = (int(g) for g in match.groups())
        if _is_us_locale(locale):
            parsed = _build_date(year, first, second)
        else:
            parsed = _build_date(year, second, first)
        if parsed:
            return parsed

    if text:
        try:
            return date_parser.parse(
                text,
                dayfirst=not _is_us_locale(locale),
                default=datetime.combine(today, time()),
            ).date()
        except (ValueError, OverflowError):
            pass

    logger.warning(f"Could not parse date '{raw}' (locale={locale}), using {today} instead")
    return today


def format_iso_date(value: date) -> str:
    """Format a date as zero-padded YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> date:
    """
    Build a date for ``day`` in the given month, clamped to the month's
    last day. A subscription billed on the 31st charges on Feb 28/29.
    """
    return date(year, month, max(1, min(day, days_in_month(year, month))))


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start``'s month to ``end``'s month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move (year, month) by ``offset`` months, rolling over years."""
    shifted = date(year, month, 1) + relativedelta(months=offset)
    return shifted.year, shifted.month


def month_title(month: int, year: int) -> str:
    """'March 2024'."""
    return f"{calendar.month_name[month]} {year}"


def format_date(value: date, locale: str) -> str:
    """Numeric date in the locale's usual order."""
    lowered = (locale or "").lower()
    if lowered.startswith("en-us"):
        return value.strftime("%m/%d/%Y")
    if lowered.startswith("en"):
        return value.strftime("%d/%m/%Y")
    return value.strftime("%d.%m.%Y")
