"""
repositories/demo_data.py
-------------------------
Sample subscriptions used when no spreadsheet is configured (demo mode).
"""

from datetime import date

from models.subscription import Subscription
from utils.frequency import MONTHLY

DEMO_SUBSCRIPTIONS: tuple[Subscription, ...] = (
    Subscription(id=1, name="Netflix", amount=4.33, currency="€", frequency=MONTHLY,
                 day_of_month=7, start_date=date(2021, 1, 1), color="#E50914", logo="N"),
    Subscription(id=2, name="Spotify", amount=9.99, currency="€", frequency=MONTHLY,
                 day_of_month=12, start_date=date(2022, 3, 15), color="#1DB954", logo="S"),
    Subscription(id=3, name="Amazon Prime", amount=7.99, currency="€", frequency=MONTHLY,
                 day_of_month=30, start_date=date(2021, 11, 20), color="#FF9900", logo="a"),
    Subscription(id=4, name="LinkedIn", amount=29.99, currency="€", frequency=MONTHLY,
                 day_of_month=24, start_date=date(2023, 5, 1), color="#0077B5", logo="in"),
    Subscription(id=5, name="Airbnb", amount=12.99, currency="€", frequency=MONTHLY,
                 day_of_month=7, start_date=date(2022, 7, 12), color="#FF5A5F", logo="A"),
)
