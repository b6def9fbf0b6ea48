"""
sheets/sheets_client.py
-----------------------
Reads subscription rows from a Google Sheets spreadsheet through the
Sheets v4 REST API (values endpoint, API-key auth).

Responsibilities:
    - Build the request for a spreadsheet id and A1 range.
    - Translate HTTP and network failures into SheetsError subclasses.
    - Return the raw cell values; interpretation happens in ingestion.
"""

import requests

from config import SHEETS_API_KEY, SHEETS_RANGE, SHEETS_SPREADSHEET_ID, SHEETS_TIMEOUT_SECONDS
from utils.logger import get_logger

logger = get_logger(__name__)

BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"


class SheetsError(Exception):
    """Base error for anything that prevents reading the spreadsheet."""


class SheetsConfigError(SheetsError):
    """Spreadsheet id or API key missing."""


class SheetsAuthError(SheetsError):
    """API key rejected or spreadsheet not shared."""


class SheetsNotFoundError(SheetsError):
    """Spreadsheet or range does not exist."""


class SheetsAPIError(SheetsError):
    """Any other non-success response from the API."""


class SheetsNetworkError(SheetsError):
    """Timeout or connection failure."""


class SheetsDataError(SheetsError):
    """The sheet was read but holds no usable subscription data."""


def _error_message(response: requests.Response) -> str:
    """Extract Google's error message from a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return f"code {error.get('code')}: {error.get('message')}"
    return str(body)[:200]


def fetch_values(spreadsheet_id: str = SHEETS_SPREADSHEET_ID,
                 api_key: str = SHEETS_API_KEY,
                 range_: str = SHEETS_RANGE) -> list[list[str]]:
    """
    Fetch the cell values of a spreadsheet range.

    Args:
        spreadsheet_id: The id from the spreadsheet URL.
        api_key: Google API key with Sheets access.
        range_: A1 notation range, e.g. "A:I".

    Returns:
        Rows of cell strings; the first row is the header.

    Raises:
        SheetsError: Any failure, see the subclasses above.
    """
    if not spreadsheet_id or not api_key:
        raise SheetsConfigError("Missing spreadsheet id or API key")

    url = f"{BASE_URL}/{spreadsheet_id}/values/{range_}"
    logger.info(f"Fetching subscriptions from spreadsheet {spreadsheet_id} range {range_}")

    try:
        response = requests.get(url, params={"key": api_key}, timeout=SHEETS_TIMEOUT_SECONDS)
    except requests.exceptions.Timeout:
        logger.error("Sheets request timed out")
        raise SheetsNetworkError("Request to Google Sheets timed out")
    except requests.exceptions.RequestException as e:
        logger.error(f"Sheets request failed: {e}")
        raise SheetsNetworkError(f"Unable to reach Google Sheets: {e}")

    if response.status_code == 200:
        data = response.json()
        values = data.get("values") or []
        logger.info(f"Fetched {len(values)} rows from spreadsheet")
        return values

    message = _error_message(response)
    logger.error(f"Sheets API error {response.status_code}: {message}")
    if response.status_code in (401, 403):
        raise SheetsAuthError(f"Access denied ({message})")
    if response.status_code == 404:
        raise SheetsNotFoundError(f"Spreadsheet not found ({message})")
    raise SheetsAPIError(f"API request failed with status {response.status_code}, {message}")
