"""
utils/frequency.py
------------------
Maps free-text frequency labels from the spreadsheet onto the closed set
of canonical frequency codes, and describes them for display.
"""

from utils.currency import format_currency
from utils.logger import get_logger

logger = get_logger(__name__)

DAILY = "daily"
WEEKLY = "weekly"
BIWEEKLY = "biweekly"
MONTHLY = "monthly"
QUARTERLY = "quarterly"
BIANNUALLY = "biannually"
YEARLY = "yearly"

FREQUENCIES = (DAILY, WEEKLY, BIWEEKLY, MONTHLY, QUARTERLY, BIANNUALLY, YEARLY)

# Frequency mapping
_FREQ_MAP = {
    "yearly": YEARLY, "annual": YEARLY, "annually": YEARLY,
    "quarterly": QUARTERLY, "quarter": QUARTERLY,
    "biannually": BIANNUALLY, "semi-annually": BIANNUALLY, "half-yearly": BIANNUALLY,
    "weekly": WEEKLY,
    "biweekly": BIWEEKLY, "bi-weekly": BIWEEKLY, "fortnightly": BIWEEKLY,
    "daily": DAILY,
    "monthly": MONTHLY,
}

# Charges per month, used for the monthly-equivalent figure
_PER_MONTH = {
    DAILY: 365 / 12,
    WEEKLY: 52 / 12,
    BIWEEKLY: 26 / 12,
    MONTHLY: 1.0,
    QUARTERLY: 1 / 3,
    BIANNUALLY: 1 / 6,
    YEARLY: 1 / 12,
}

_LABELS = {
    DAILY: "Daily",
    WEEKLY: "Weekly",
    BIWEEKLY: "Every 2 weeks",
    MONTHLY: "Monthly",
    QUARTERLY: "Every 3 months",
    BIANNUALLY: "Every 6 months",
    YEARLY: "Yearly",
}


def normalize_frequency(raw: str) -> str:
    """
    Normalize a frequency label to its canonical code.

    Matching ignores case and surrounding whitespace. Unknown labels
    degrade to ``monthly`` so malformed rows still render.
    """
    key = (raw or "").strip().lower()
    frequency = _FREQ_MAP.get(key)
    if frequency is None:
        logger.debug(f"Unknown frequency '{raw}', treating as monthly")
        return MONTHLY
    return frequency


def frequency_label(frequency: str) -> str:
    return _LABELS.get(frequency, frequency.capitalize())


def monthly_equivalent(amount: float, frequency: str) -> float:
    """Average monthly cost of a charge of ``amount`` at ``frequency``."""
    return round(amount * _PER_MONTH.get(frequency, 1.0), 2)


def describe_frequency(frequency: str, amount: float, currency: str, locale: str) -> str:
    """
    Human-readable billing description, e.g. "€120.00 per year (€10.00/mo)".
    """
    formatted = format_currency(amount, currency, locale)
    if frequency == MONTHLY or frequency not in _PER_MONTH:
        return f"{formatted} monthly"

    per_month = format_currency(monthly_equivalent(amount, frequency), currency, locale)
    period = {
        YEARLY: "per year",
        QUARTERLY: "every 3 months",
        BIANNUALLY: "every 6 months",
        WEEKLY: "weekly",
        BIWEEKLY: "every 2 weeks",
        DAILY: "daily",
    }[frequency]
    return f"{formatted} {period} ({per_month}/mo)"
