"""Tests for shared handler helpers."""

from datetime import date
from types import SimpleNamespace

import pytest

from config import DEFAULT_LOCALE
from handlers.common import LOCALE_KEY, parse_month_args, user_locale

TODAY = date(2024, 6, 10)


class TestParseMonthArgs:

    def test_defaults_to_current_month(self):
        assert parse_month_args([], TODAY) == (6, 2024)
        assert parse_month_args(None, TODAY) == (6, 2024)

    def test_month_only(self):
        assert parse_month_args(["3"], TODAY) == (3, 2024)

    def test_month_and_year(self):
        assert parse_month_args(["12", "2025"], TODAY) == (12, 2025)

    def test_year_bounds(self):
        assert parse_month_args(["1", "2"], TODAY) == (1, 2)
        assert parse_month_args(["12", "9998"], TODAY) == (12, 9998)

    @pytest.mark.parametrize("args", [
        ["13"], ["0"], ["march"], ["3", "next"], ["1", "0"], ["1", "1"], ["12", "9999"], ["1", "10000"],
    ])
    def test_invalid(self, args):
        with pytest.raises(ValueError):
            parse_month_args(args, TODAY)


class TestUserLocale:

    def test_default(self):
        assert user_locale(SimpleNamespace(user_data={})) == DEFAULT_LOCALE
        assert user_locale(SimpleNamespace(user_data=None)) == DEFAULT_LOCALE

    def test_chosen_locale(self):
        assert user_locale(SimpleNamespace(user_data={LOCALE_KEY: "en-US"})) == "en-US"
