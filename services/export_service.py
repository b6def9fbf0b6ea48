"""
services/export_service.py
---------------------------
Generates CSV and Excel exports of a month's subscription charges.
"""

import io
from datetime import date
from typing import Optional

import pandas as pd

from repositories.subscription_repo import SubscriptionRepository
from services.accrual_service import total_spent
from services.occurrence_service import charges_in_month, next_charge_date
from utils.currency import canonical_currency
from utils.date_utils import format_iso_date
from utils.frequency import monthly_equivalent
from utils.logger import get_logger

logger = get_logger(__name__)

COLUMNS = [
    "Date", "Name", "Amount", "Currency", "Frequency",
    "Monthly equivalent", "Next charge", "Total spent",
]


class ExportService:
    """Generates downloadable subscription reports in CSV and Excel formats."""

    def __init__(self, repo: Optional[SubscriptionRepository] = None):
        self.repo = repo or SubscriptionRepository()

    def month_frame(self, year: int, month: int, today: date) -> pd.DataFrame:
        """One row per charge falling in the month, ordered by date."""
        data = []
        for charge_date, sub in charges_in_month(self.repo.get_all(), month, year):
            upcoming = next_charge_date(sub, today)
            data.append({
                "Date": format_iso_date(charge_date),
                "Name": sub.name,
                "Amount": sub.amount,
                "Currency": canonical_currency(sub.currency),
                "Frequency": sub.frequency,
                "Monthly equivalent": monthly_equivalent(sub.amount, sub.frequency),
                "Next charge": format_iso_date(upcoming) if upcoming else "",
                "Total spent": total_spent(sub, today),
            })
        return pd.DataFrame(data, columns=COLUMNS)

    def export_month_csv(self, year: int, month: int, today: date) -> io.BytesIO:
        """
        Export a month's charges as a CSV file.

        Args:
            year: Year number.
            month: Month number (1-12).
            today: Reference date for next charge and total spent.

        Returns:
            A BytesIO buffer containing the CSV data.
        """
        df = self.month_frame(year, month, today)
        buffer = io.BytesIO()
        df.to_csv(buffer, index=False, encoding="utf-8-sig")
        buffer.seek(0)
        logger.info(f"Exported {len(df)} charges as CSV for {month}/{year}")
        return buffer

    def export_month_excel(self, year: int, month: int, today: date) -> io.BytesIO:
        """
        Export a month's charges as an Excel (.xlsx) file, with a summary
        sheet totalling the charges per frequency.

        Returns:
            A BytesIO buffer containing the Excel data.
        """
        df = self.month_frame(year, month, today)

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Charges", index=False)

            if not df.empty:
                summary = df.groupby("Frequency")["Amount"].sum().reset_index()
                summary.columns = ["Frequency", "Total"]
                summary.to_excel(writer, sheet_name="Summary", index=False)

        buffer.seek(0)
        logger.info(f"Exported {len(df)} charges as Excel for {month}/{year}")
        return buffer
