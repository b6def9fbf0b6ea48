"""
services/ingestion_service.py
-----------------------------
Turns raw spreadsheet rows into Subscription records.

The header row is matched by name, so columns may appear in any order.
Rows that lack a required value or carry an unusable amount/day are
dropped with a warning; they never reach the calendar.
"""

import re
from datetime import date
from typing import Optional

from models.subscription import Subscription
from sheets.sheets_client import SheetsDataError
from utils.date_utils import parse_date
from utils.frequency import normalize_frequency
from utils.logger import get_logger
from utils.service_mappings import DEFAULT_COLOR, default_logo, find_mapping

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("name", "amount", "currency", "frequency", "dayofmonth", "startdate")
OPTIONAL_COLUMNS = ("color", "logo", "enddate")

_NOT_NUMERIC = re.compile(r"[^\d.,\-]")


def _header_key(header: str) -> str:
    """'Day of Month', 'dayOfMonth' and 'day_of_month' all become 'dayofmonth'."""
    return re.sub(r"[\s_\-]", "", (header or "").lower())


def parse_amount(raw: str) -> Optional[float]:
    """
    Parse an amount cell such as "9.99", "4,33" or "€12.50".

    A lone comma is read as the decimal separator; with both separators
    present the last one is the decimal mark.

    Returns:
        The amount, or None if the cell is not a number.
    """
    text = _NOT_NUMERIC.sub("", (raw or "").strip())
    if not text:
        return None
    if "," in text and "." in text:
        if text.rfind(",") > text.rfind("."):
            text = text.replace(".", "").replace(",", ".")
        else:
            text = text.replace(",", "")
    elif "," in text:
        text = text.replace(",", ".")
    try:
        return float(text)
    except ValueError:
        return None


def _parse_day(raw: str) -> Optional[int]:
    try:
        day = int(float((raw or "").strip()))
    except (ValueError, OverflowError):
        return None
    return day if 1 <= day <= 31 else None


def _column_index(headers: list[str]) -> dict[str, int]:
    index = {}
    for position, header in enumerate(headers):
        key = _header_key(header)
        if key in REQUIRED_COLUMNS + OPTIONAL_COLUMNS and key not in index:
            index[key] = position
    return index


def _row_to_subscription(row_id: int, row: list[str], columns: dict[str, int],
                         locale: str, today: date) -> Optional[Subscription]:
    def cell(key: str) -> str:
        position = columns.get(key)
        if position is None or position >= len(row):
            return ""
        return str(row[position]).strip()

    row_number = row_id + 1
    missing = [key for key in REQUIRED_COLUMNS if not cell(key)]
    if missing:
        logger.warning(f"Row {row_number} is missing {', '.join(missing)}, skipping")
        return None

    amount = parse_amount(cell("amount"))
    if amount is None or amount <= 0:
        logger.warning(f"Row {row_number} has invalid amount '{cell('amount')}', skipping")
        return None

    day_of_month = _parse_day(cell("dayofmonth"))
    if day_of_month is None:
        logger.warning(f"Row {row_number} has invalid day of month '{cell('dayofmonth')}', skipping")
        return None

    name = cell("name")
    mapping = find_mapping(name)
    end_raw = cell("enddate")

    return Subscription(
        id=row_id,
        name=name,
        amount=amount,
        currency=cell("currency"),
        frequency=normalize_frequency(cell("frequency")),
        day_of_month=day_of_month,
        start_date=parse_date(cell("startdate"), locale, today),
        end_date=parse_date(end_raw, locale, today) if end_raw else None,
        color=cell("color") or (mapping.color if mapping else DEFAULT_COLOR),
        logo=cell("logo") or (mapping.logo if mapping else default_logo(name)),
    )


def rows_to_subscriptions(values: list[list[str]], locale: str, today: date) -> list[Subscription]:
    """
    Convert sheet values (header row first) into Subscription records.

    Args:
        values: Rows of cell strings as returned by the Sheets API.
        locale: Locale the spreadsheet dates are written in.
        today: Fallback for unparseable dates.

    Returns:
        The valid subscriptions, in row order.

    Raises:
        SheetsDataError: If there are no data rows, required columns are
            missing, or not a single row is valid.
    """
    if not values or len(values) <= 1:
        raise SheetsDataError("No data found in the spreadsheet")

    columns = _column_index(values[0])
    missing = [key for key in REQUIRED_COLUMNS if key not in columns]
    if missing:
        raise SheetsDataError(f"Spreadsheet is missing required columns: {', '.join(missing)}")

    subscriptions = []
    for row_id, row in enumerate(values[1:]):
        subscription = _row_to_subscription(row_id, row, columns, locale, today)
        if subscription is not None:
            subscriptions.append(subscription)

    if not subscriptions:
        raise SheetsDataError("No valid subscription data found in the spreadsheet")

    logger.info(f"Ingested {len(subscriptions)} of {len(values) - 1} spreadsheet rows")
    return subscriptions
