"""Tests for deciding when subscriptions charge."""

from datetime import date

import pytest

from services.occurrence_service import (
    charge_day_in_month,
    charges_in_month,
    charges_on,
    next_charge_date,
    occurs_in_month,
    subscriptions_for_day,
    subscriptions_in_month,
    upcoming_charges,
)
from utils.frequency import BIANNUALLY, FREQUENCIES, MONTHLY, QUARTERLY, WEEKLY, YEARLY


class TestOccursInMonth:
    """Tests for occurs_in_month."""

    def test_yearly_only_in_start_month(self):
        start = date(2021, 3, 15)
        assert occurs_in_month(YEARLY, start, 3, 2024) is True
        assert occurs_in_month(YEARLY, start, 4, 2024) is False

    def test_yearly_renewal_after_start(self):
        start = date(2022, 7, 12)
        assert occurs_in_month(YEARLY, start, 7, 2025) is True
        assert occurs_in_month(YEARLY, start, 8, 2025) is False

    def test_quarterly_aligned_to_start_month(self):
        start = date(2024, 1, 10)
        charging = [m for m in range(1, 13) if occurs_in_month(QUARTERLY, start, m, 2024)]
        assert charging == [1, 4, 7, 10]

    def test_quarterly_phase_from_odd_start(self):
        start = date(2023, 2, 1)
        charging = [m for m in range(1, 13) if occurs_in_month(QUARTERLY, start, m, 2024)]
        assert charging == [2, 5, 8, 11]

    def test_biannually(self):
        start = date(2023, 5, 1)
        charging = [m for m in range(1, 13) if occurs_in_month(BIANNUALLY, start, m, 2024)]
        assert charging == [5, 11]

    def test_sub_monthly_shows_every_month(self):
        start = date(2024, 1, 3)
        assert all(occurs_in_month(WEEKLY, start, m, 2024) for m in range(1, 13))

    @pytest.mark.parametrize("frequency", FREQUENCIES)
    def test_never_before_start(self, frequency):
        start = date(2021, 3, 15)
        assert occurs_in_month(frequency, start, 3, 2020) is False
        assert occurs_in_month(frequency, start, 2, 2021) is False

    def test_start_month_always_charges(self):
        start = date(2021, 3, 15)
        for frequency in FREQUENCIES:
            assert occurs_in_month(frequency, start, 3, 2021) is True

    def test_stops_after_end_date(self):
        start = date(2023, 1, 1)
        end = date(2023, 6, 15)
        assert occurs_in_month(MONTHLY, start, 6, 2023, end) is True
        assert occurs_in_month(MONTHLY, start, 7, 2023, end) is False

    def test_unknown_frequency_stays_visible(self):
        assert occurs_in_month("fortnightly-ish", date(2024, 1, 1), 5, 2024) is True


class TestChargeDays:
    """Tests for charge days within a month."""

    def test_day_of_month_clamped_in_february(self, make_sub):
        sub = make_sub(day_of_month=31)
        assert charge_day_in_month(sub, 2, 2024) == 29
        assert charge_day_in_month(sub, 2, 2023) == 28
        assert charge_day_in_month(sub, 3, 2024) == 31

    def test_charges_on_clamped_day(self, make_sub):
        sub = make_sub(day_of_month=30, start_date=date(2021, 11, 20))
        assert charges_on(sub, date(2024, 2, 29)) is True
        assert charges_on(sub, date(2024, 2, 28)) is False

    def test_start_month_charges_before_start_day(self, make_sub):
        sub = make_sub(day_of_month=5, start_date=date(2024, 3, 10))
        assert charges_on(sub, date(2024, 3, 5)) is True
        assert charges_on(sub, date(2024, 4, 5)) is True

    def test_no_charge_before_start_month(self, make_sub):
        sub = make_sub(day_of_month=5, start_date=date(2024, 3, 10))
        assert charges_on(sub, date(2024, 2, 5)) is False

    def test_no_charge_after_end_date(self, make_sub):
        sub = make_sub(day_of_month=20, end_date=date(2024, 3, 15))
        assert charges_on(sub, date(2024, 3, 20)) is False
        assert charges_on(sub, date(2024, 2, 20)) is True

    def test_subscriptions_for_day(self, repo):
        subs = repo.get_all()
        names = {s.name for s in subscriptions_for_day(12, subs, 7, 2024)}
        assert names == {"Spotify", "Domain"}
        assert subscriptions_for_day(12, subs, 8, 2024)[0].name == "Spotify"

    def test_subscriptions_in_month_skips_yearly_off_months(self, repo):
        names = {s.name for s in subscriptions_in_month(repo.get_all(), 8, 2024)}
        assert names == {"Netflix", "Spotify", "Amazon Prime"}

    def test_charges_in_month_sorted_by_date(self, repo):
        charges = charges_in_month(repo.get_all(), 7, 2024)
        assert [(d.day, s.name) for d, s in charges] == [
            (7, "Netflix"),
            (12, "Domain"),
            (12, "Spotify"),
            (31, "Amazon Prime"),
        ]


class TestNextChargeDate:
    """Tests for next_charge_date."""

    def test_monthly_later_this_month(self, make_sub):
        sub = make_sub(day_of_month=7)
        assert next_charge_date(sub, date(2024, 6, 5)) == date(2024, 6, 7)

    def test_monthly_due_today(self, make_sub):
        sub = make_sub(day_of_month=7)
        assert next_charge_date(sub, date(2024, 6, 7)) == date(2024, 6, 7)

    def test_monthly_already_passed(self, make_sub):
        sub = make_sub(day_of_month=7)
        assert next_charge_date(sub, date(2024, 6, 10)) == date(2024, 7, 7)

    def test_monthly_rolls_over_year(self, make_sub):
        sub = make_sub(day_of_month=7)
        assert next_charge_date(sub, date(2024, 12, 20)) == date(2025, 1, 7)

    def test_monthly_clamped(self, make_sub):
        sub = make_sub(day_of_month=31)
        assert next_charge_date(sub, date(2024, 2, 10)) == date(2024, 2, 29)

    def test_yearly(self, make_sub):
        sub = make_sub(frequency=YEARLY, day_of_month=12, start_date=date(2022, 7, 12))
        assert next_charge_date(sub, date(2025, 3, 1)) == date(2025, 7, 12)
        assert next_charge_date(sub, date(2025, 7, 12)) == date(2025, 7, 12)
        assert next_charge_date(sub, date(2025, 7, 13)) == date(2026, 7, 12)

    def test_quarterly(self, make_sub):
        sub = make_sub(frequency=QUARTERLY, day_of_month=10, start_date=date(2024, 1, 10))
        assert next_charge_date(sub, date(2024, 2, 15)) == date(2024, 4, 10)
        assert next_charge_date(sub, date(2024, 4, 10)) == date(2024, 4, 10)
        assert next_charge_date(sub, date(2024, 4, 11)) == date(2024, 7, 10)
        assert next_charge_date(sub, date(2024, 11, 20)) == date(2025, 1, 10)

    def test_biannually(self, make_sub):
        sub = make_sub(frequency=BIANNUALLY, day_of_month=1, start_date=date(2023, 5, 1))
        assert next_charge_date(sub, date(2024, 6, 10)) == date(2024, 11, 1)
        assert next_charge_date(sub, date(2024, 12, 1)) == date(2025, 5, 1)

    def test_before_start_date(self, make_sub):
        sub = make_sub(day_of_month=15, start_date=date(2025, 3, 1))
        assert next_charge_date(sub, date(2024, 6, 10)) == date(2025, 3, 15)

    def test_start_month_charge_before_start_day(self, make_sub):
        sub = make_sub(day_of_month=5, start_date=date(2025, 3, 10))
        assert next_charge_date(sub, date(2024, 6, 10)) == date(2025, 3, 5)

    def test_none_after_end_date(self, make_sub):
        sub = make_sub(day_of_month=7, start_date=date(2023, 1, 1), end_date=date(2024, 6, 1))
        assert next_charge_date(sub, date(2024, 6, 10)) is None


class TestUpcomingCharges:

    def test_within_horizon(self, repo):
        charges = upcoming_charges(repo.get_all(), date(2024, 6, 10), 5)
        assert [(d, s.name) for d, s in charges] == [(date(2024, 6, 12), "Spotify")]

    def test_horizon_is_inclusive(self, repo):
        charges = upcoming_charges(repo.get_all(), date(2024, 6, 10), 2)
        assert len(charges) == 1

    def test_sorted_by_date(self, repo):
        charges = upcoming_charges(repo.get_all(), date(2024, 6, 10), 40)
        dates = [d for d, _ in charges]
        assert dates == sorted(dates)
        assert {s.name for _, s in charges} == {"Netflix", "Spotify", "Domain", "Amazon Prime"}
