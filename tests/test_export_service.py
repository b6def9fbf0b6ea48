"""Tests for CSV and Excel exports of a month's charges."""

from datetime import date

import pandas as pd
import pytest

from repositories.subscription_repo import SubscriptionRepository
from services.export_service import COLUMNS, ExportService

TODAY = date(2024, 6, 10)


@pytest.fixture
def export_service(repo):
    return ExportService(repo=repo)


class TestMonthFrame:

    def test_one_row_per_charge(self, export_service):
        df = export_service.month_frame(2024, 7, TODAY)
        assert list(df.columns) == COLUMNS
        assert list(df["Name"]) == ["Netflix", "Domain", "Spotify", "Amazon Prime"]
        assert list(df["Date"]) == ["2024-07-07", "2024-07-12", "2024-07-12", "2024-07-31"]

    def test_derived_columns(self, export_service):
        df = export_service.month_frame(2024, 7, TODAY)
        netflix = df[df["Name"] == "Netflix"].iloc[0]
        assert netflix["Currency"] == "EUR"
        assert netflix["Next charge"] == "2024-07-07"
        assert netflix["Total spent"] == pytest.approx(4.33 * 41)

        domain = df[df["Name"] == "Domain"].iloc[0]
        assert domain["Monthly equivalent"] == pytest.approx(1.25)

    def test_empty_month_keeps_columns(self):
        df = ExportService(repo=SubscriptionRepository()).month_frame(2024, 7, TODAY)
        assert df.empty
        assert list(df.columns) == COLUMNS


class TestExportFiles:

    def test_csv(self, export_service):
        buffer = export_service.export_month_csv(2024, 7, TODAY)
        text = buffer.getvalue().decode("utf-8-sig")
        lines = text.strip().splitlines()
        assert lines[0] == ",".join(COLUMNS)
        assert len(lines) == 5
        assert lines[1].startswith("2024-07-07,Netflix,4.33,EUR,monthly")

    def test_excel_has_summary_sheet(self, export_service):
        buffer = export_service.export_month_excel(2024, 7, TODAY)
        sheets = pd.read_excel(buffer, sheet_name=None)
        assert set(sheets) == {"Charges", "Summary"}
        assert len(sheets["Charges"]) == 4

        summary = dict(zip(sheets["Summary"]["Frequency"], sheets["Summary"]["Total"]))
        assert summary["monthly"] == pytest.approx(22.31)
        assert summary["yearly"] == pytest.approx(15.0)

    def test_excel_empty_month(self):
        buffer = ExportService(repo=SubscriptionRepository()).export_month_excel(2024, 7, TODAY)
        sheets = pd.read_excel(buffer, sheet_name=None)
        assert list(sheets) == ["Charges"]
