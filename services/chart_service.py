"""
services/chart_service.py
--------------------------
Generates chart images for subscription spending.
Uses matplotlib to create donut/bar charts and returns them as BytesIO buffers.
"""

import io
from typing import Optional

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for server use
import matplotlib.pyplot as plt

from repositories.subscription_repo import SubscriptionRepository
from services.occurrence_service import subscriptions_in_month
from services.summary_service import chart_segments, monthly_total
from utils.currency import format_currency
from utils.date_utils import month_title, shift_month
from utils.logger import get_logger
from utils.service_mappings import DEFAULT_COLOR

logger = get_logger(__name__)

plt.rcParams["font.family"] = "DejaVu Sans"
plt.rcParams["figure.facecolor"] = "#1a1a2e"
plt.rcParams["text.color"] = "#e0e0e0"
plt.rcParams["axes.facecolor"] = "#1a1a2e"


def _to_png(fig) -> io.BytesIO:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=150, bbox_inches="tight",
                facecolor=fig.get_facecolor())
    buf.seek(0)
    plt.close(fig)
    return buf


class ChartService:
    """Generates visual charts for subscription data."""

    def __init__(self, repo: Optional[SubscriptionRepository] = None):
        self.repo = repo or SubscriptionRepository()

    def generate_spending_pie(self, month: int, year: int, locale: str) -> io.BytesIO | None:
        """
        Generate a donut chart of the charges falling in a month.

        Returns:
            BytesIO buffer with PNG image, or None if nothing charges.
        """
        subs = subscriptions_in_month(self.repo.get_all(), month, year)
        segments = chart_segments(subs)
        if not segments:
            return None

        currency = subs[0].currency
        total = sum(s.subscription.amount for s in segments)

        fig, ax = plt.subplots(figsize=(8, 6))

        wedges, _texts, autotexts = ax.pie(
            [s.percentage for s in segments],
            labels=None,
            autopct=lambda pct: f"{pct:.1f}%",
            colors=[s.color or DEFAULT_COLOR for s in segments],
            startangle=90,
            counterclock=False,
            pctdistance=0.78,
            wedgeprops=dict(width=0.45, edgecolor="#1a1a2e", linewidth=2),
        )

        for autotext in autotexts:
            autotext.set_color("white")
            autotext.set_fontsize(10)
            autotext.set_fontweight("bold")

        legend_labels = [
            f"{s.subscription.name}: {format_currency(s.subscription.amount, currency, locale)}"
            for s in segments
        ]
        ax.legend(
            wedges, legend_labels,
            loc="center left",
            bbox_to_anchor=(1, 0, 0.5, 1),
            fontsize=10,
            frameon=False,
        )

        ax.set_title(
            f"Subscriptions - {month_title(month, year)}\n"
            f"Total: {format_currency(total, currency, locale)}",
            fontsize=14,
            fontweight="bold",
            pad=20,
        )

        plt.tight_layout()
        logger.info(f"Generated spending chart for {month}/{year}")
        return _to_png(fig)

    def generate_trend_bar(self, month: int, year: int, locale: str,
                           span: int = 6) -> io.BytesIO | None:
        """
        Generate a bar chart of monthly totals for the ``span`` months
        ending with the given month; the following month is shown as a
        projection.

        Returns:
            BytesIO buffer with PNG image, or None if there is no data.
        """
        subs = self.repo.get_all()
        if not subs:
            return None

        currency = subs[0].currency
        months = [shift_month(year, month, offset) for offset in range(-(span - 1), 2)]
        totals = [monthly_total(subs, m, y) for y, m in months]
        labels = [f"{m:02d}/{str(y)[2:]}" for y, m in months]

        fig, ax = plt.subplots(figsize=(9, 5))

        colors = ["#4ECDC4"] * (len(months) - 2) + ["#FF6B6B", "#888888"]
        bars = ax.bar(
            range(len(months)), totals,
            color=colors,
            edgecolor="#1a1a2e",
            linewidth=1.5,
            width=0.6,
            zorder=3,
        )

        for bar, amount in zip(bars, totals):
            if amount > 0:
                ax.text(
                    bar.get_x() + bar.get_width() / 2, bar.get_height(),
                    format_currency(amount, currency, locale, decimals=0),
                    ha="center", va="bottom",
                    color="#e0e0e0", fontsize=9, fontweight="bold",
                )

        ax.set_xticks(range(len(months)))
        ax.set_xticklabels(labels, fontsize=9, color="#e0e0e0")
        ax.set_title(
            f"Monthly subscription spend up to {month_title(month, year)}\n"
            f"(last bar projected)",
            fontsize=13, fontweight="bold", pad=15,
        )

        ax.spines["top"].set_visible(False)
        ax.spines["right"].set_visible(False)
        ax.spines["left"].set_color("#444")
        ax.spines["bottom"].set_color("#444")
        ax.tick_params(colors="#e0e0e0")
        ax.grid(axis="y", alpha=0.2, color="#888")
        ax.set_axisbelow(True)

        plt.tight_layout()
        logger.info(f"Generated trend chart ending {month}/{year}")
        return _to_png(fig)
