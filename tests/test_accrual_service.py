"""Tests for cumulative spend since the start date."""

from datetime import date

import pytest

from services.accrual_service import payments_since_start, total_spent
from utils.frequency import (
    BIANNUALLY,
    BIWEEKLY,
    DAILY,
    FREQUENCIES,
    QUARTERLY,
    WEEKLY,
    YEARLY,
)


class TestMonthlyAccrual:
    """Netflix, 4.33 on the 7th since 2021-01-01."""

    def test_charge_day_reached(self, netflix):
        assert payments_since_start(netflix, date(2024, 6, 10)) == 41
        assert total_spent(netflix, date(2024, 6, 10)) == pytest.approx(4.33 * 41)

    def test_charge_day_not_yet_reached(self, netflix):
        assert payments_since_start(netflix, date(2024, 6, 5)) == 40
        assert total_spent(netflix, date(2024, 6, 5)) == pytest.approx(4.33 * 40)

    def test_charge_day_is_today(self, netflix):
        assert payments_since_start(netflix, date(2024, 6, 7)) == 41

    def test_clamped_charge_day(self, make_sub):
        sub = make_sub(day_of_month=31, start_date=date(2024, 1, 1))
        # Feb 29 is the last day of February 2024, so the charge is due
        assert payments_since_start(sub, date(2024, 2, 29)) == 1
        assert payments_since_start(sub, date(2024, 2, 28)) == 0

    def test_charge_day_before_start_day(self, make_sub):
        sub = make_sub(day_of_month=5, start_date=date(2024, 3, 10))
        assert payments_since_start(sub, date(2024, 3, 31)) == 0
        assert payments_since_start(sub, date(2024, 4, 4)) == 0
        assert payments_since_start(sub, date(2024, 4, 5)) == 1

    def test_total_is_rounded(self, make_sub):
        sub = make_sub(amount=0.1, day_of_month=1, start_date=date(2024, 1, 1))
        assert total_spent(sub, date(2024, 4, 1)) == 0.3


class TestOtherFrequencies:

    def test_yearly(self, make_sub):
        sub = make_sub(frequency=YEARLY, day_of_month=12, start_date=date(2022, 7, 12))
        assert payments_since_start(sub, date(2025, 7, 11)) == 2
        assert payments_since_start(sub, date(2025, 7, 12)) == 3
        assert payments_since_start(sub, date(2022, 12, 31)) == 0

    def test_quarterly(self, make_sub):
        sub = make_sub(frequency=QUARTERLY, day_of_month=10, start_date=date(2024, 1, 10))
        assert payments_since_start(sub, date(2024, 7, 15)) == 2
        assert payments_since_start(sub, date(2024, 3, 31)) == 0

    def test_biannually(self, make_sub):
        sub = make_sub(frequency=BIANNUALLY, day_of_month=1, start_date=date(2023, 5, 1))
        assert payments_since_start(sub, date(2024, 6, 1)) == 2

    def test_quarterly_counts_charge_only_from_its_day(self, make_sub):
        sub = make_sub(frequency=QUARTERLY, day_of_month=10, start_date=date(2024, 1, 10))
        assert payments_since_start(sub, date(2024, 4, 5)) == 0
        assert payments_since_start(sub, date(2024, 4, 9)) == 0
        assert payments_since_start(sub, date(2024, 4, 10)) == 1

    def test_biannually_counts_charge_only_from_its_day(self, make_sub):
        sub = make_sub(frequency=BIANNUALLY, day_of_month=20, start_date=date(2024, 1, 20))
        assert payments_since_start(sub, date(2024, 7, 1)) == 0
        assert payments_since_start(sub, date(2024, 7, 19)) == 0
        assert payments_since_start(sub, date(2024, 7, 20)) == 1

    def test_weekly(self, make_sub):
        sub = make_sub(frequency=WEEKLY, start_date=date(2024, 1, 1))
        assert payments_since_start(sub, date(2024, 1, 29)) == 4
        assert payments_since_start(sub, date(2024, 1, 28)) == 3

    def test_biweekly(self, make_sub):
        sub = make_sub(frequency=BIWEEKLY, start_date=date(2024, 1, 1))
        assert payments_since_start(sub, date(2024, 1, 29)) == 2

    def test_daily(self, make_sub):
        sub = make_sub(frequency=DAILY, amount=1.5, start_date=date(2024, 1, 1))
        assert payments_since_start(sub, date(2024, 1, 11)) == 10
        assert total_spent(sub, date(2024, 1, 11)) == 15.0


class TestAccrualBounds:

    @pytest.mark.parametrize("frequency", FREQUENCIES)
    def test_never_negative_before_start(self, make_sub, frequency):
        sub = make_sub(frequency=frequency, start_date=date(2025, 3, 15), day_of_month=15)
        assert payments_since_start(sub, date(2024, 1, 1)) == 0
        assert total_spent(sub, date(2024, 1, 1)) == 0

    def test_stops_at_end_date(self, make_sub):
        sub = make_sub(day_of_month=7, start_date=date(2021, 1, 1), end_date=date(2021, 6, 30))
        assert payments_since_start(sub, date(2024, 6, 10)) == 5

    def test_end_date_in_future_has_no_effect(self, netflix, make_sub):
        sub = make_sub(end_date=date(2030, 1, 1))
        assert payments_since_start(sub, date(2024, 6, 10)) == payments_since_start(netflix, date(2024, 6, 10))
