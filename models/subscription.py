"""
models/subscription.py
----------------------
Domain model for a recurring subscription read from the spreadsheet.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Subscription:
    """
    A normalized subscription (streaming service, software licence, etc.).

    Records are built once per spreadsheet fetch and never modified; a new
    fetch replaces the whole list.

    Attributes:
        id: Position of the data row in the sheet (0-based, header excluded).
        name: Display name (e.g., 'Netflix').
        amount: Amount charged per occurrence (not a monthly equivalent).
        currency: Currency code or symbol exactly as written in the sheet.
        frequency: Canonical frequency code (see utils.frequency).
        day_of_month: Nominal charge day, 1-31. Clamped in short months.
        start_date: Date of the first charge.
        end_date: Last day the subscription may charge, if cancelled.
        color: Brand color for charts.
        logo: Logo file name or short label.
    """
    id: int
    name: str
    amount: float
    currency: str
    frequency: str  # 'daily' | 'weekly' | 'biweekly' | 'monthly' | 'quarterly' | 'biannually' | 'yearly'
    day_of_month: int
    start_date: date
    end_date: Optional[date] = None
    color: str = ""
    logo: str = ""

    def is_active_on(self, day: date) -> bool:
        """True if ``day`` lies between the start and (optional) end date."""
        if day < self.start_date:
            return False
        return self.end_date is None or day <= self.end_date

    def __str__(self) -> str:
        return (
            f"#{self.id} {self.name}: {self.amount:.2f} {self.currency} "
            f"({self.frequency}, day {self.day_of_month}) since {self.start_date}"
        )
