"""
utils/locale_week.py
--------------------
First-day-of-week conventions per locale.
Weekday indices follow the Sunday = 0 convention.
"""

# Languages/regions whose calendars start on Monday
_MONDAY_FIRST = {
    "de", "fr", "es", "it", "pt", "nl", "be", "dk", "fi", "is", "no", "se",
    "al", "ba", "bg", "hr", "cz", "gr", "hu", "pl", "ro", "ru", "sk", "si", "rs",
    "ua", "tr", "cy", "il", "cn", "jp", "kr",
}

WEEKDAY_LABELS = ["SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"]


def first_day_of_week(locale: str) -> int:
    """Return 1 (Monday) for Monday-first locales, otherwise 0 (Sunday)."""
    prefix = (locale or "").split("-")[0].lower()
    return 1 if prefix in _MONDAY_FIRST else 0


def reorder_weekday_labels(labels: list[str], first_day: int) -> list[str]:
    """Rotate Sunday-first labels so the list starts at ``first_day``."""
    return list(labels[first_day:]) + list(labels[:first_day])


def adjust_day_of_week(day_of_week: int, first_day: int) -> int:
    """Column index of a Sunday = 0 weekday in a grid starting at ``first_day``."""
    return (day_of_week + 7 - first_day) % 7
