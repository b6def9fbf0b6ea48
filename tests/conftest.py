"""Shared fixtures for the subscription calendar tests."""

from datetime import date

import pytest

from models.subscription import Subscription
from repositories.subscription_repo import SubscriptionRepository


def make_sub(id=1, name="Netflix", amount=4.33, currency="EUR", frequency="monthly",
             day_of_month=7, start_date=date(2021, 1, 1), end_date=None, color="#E50914"):
    return Subscription(
        id=id, name=name, amount=amount, currency=currency, frequency=frequency,
        day_of_month=day_of_month, start_date=start_date, end_date=end_date, color=color,
    )


@pytest.fixture
def netflix():
    return make_sub()


@pytest.fixture
def repo():
    return SubscriptionRepository([
        make_sub(id=1, name="Netflix", amount=4.33, day_of_month=7),
        make_sub(id=2, name="Spotify", amount=9.99, day_of_month=12, start_date=date(2022, 3, 15)),
        make_sub(id=3, name="Domain", amount=15.0, frequency="yearly", day_of_month=12,
                 start_date=date(2022, 7, 12)),
        make_sub(id=4, name="Amazon Prime", amount=7.99, day_of_month=31,
                 start_date=date(2021, 11, 20)),
    ])


@pytest.fixture(name="make_sub")
def make_sub_fixture():
    return make_sub
