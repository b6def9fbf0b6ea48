"""
repositories/subscription_repo.py
---------------------------------
In-memory store for the current subscription list.
Each spreadsheet fetch replaces the whole list; there are no partial
updates and nothing is persisted.
"""

from datetime import date, datetime
from typing import Iterable, Optional

from models.subscription import Subscription
from utils.logger import get_logger

logger = get_logger(__name__)


class SubscriptionRepository:
    """Holds the subscriptions of the last successful ingestion pass."""

    def __init__(self, subscriptions: Iterable[Subscription] = ()):
        self._subscriptions: list[Subscription] = list(subscriptions)
        self.last_fetch_time: Optional[datetime] = None

    # ── WRITE ─────────────────────────────────────────────

    def replace_all(self, subscriptions: Iterable[Subscription],
                    fetched_at: Optional[datetime] = None) -> int:
        """
        Replace the stored list with a freshly ingested one.

        Returns:
            The number of subscriptions now stored.
        """
        self._subscriptions = list(subscriptions)
        self.last_fetch_time = fetched_at
        logger.info(f"Loaded {len(self._subscriptions)} subscriptions")
        return len(self._subscriptions)

    # ── READ ──────────────────────────────────────────────

    def get_all(self, active_on: Optional[date] = None) -> list[Subscription]:
        """
        Get all subscriptions, optionally only those active on a date.

        Returns:
            Subscriptions ordered by day of month, then name.
        """
        subs = self._subscriptions
        if active_on is not None:
            subs = [s for s in subs if s.is_active_on(active_on)]
        return sorted(subs, key=lambda s: (s.day_of_month, s.name.lower()))

    def get_by_id(self, subscription_id: int) -> Optional[Subscription]:
        """Fetch a single subscription by its row id."""
        for sub in self._subscriptions:
            if sub.id == subscription_id:
                return sub
        return None

    def count(self) -> int:
        return len(self._subscriptions)
