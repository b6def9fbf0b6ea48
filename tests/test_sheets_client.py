"""Tests for the Google Sheets REST client."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from sheets.sheets_client import (
    SheetsAPIError,
    SheetsAuthError,
    SheetsConfigError,
    SheetsError,
    SheetsNetworkError,
    SheetsNotFoundError,
    fetch_values,
)


def _response(status_code, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body if body is not None else {}
    response.text = str(body)
    return response


class TestFetchValues:

    @patch("sheets.sheets_client.requests.get")
    def test_returns_values(self, mock_get):
        rows = [["Name", "Amount"], ["Netflix", "4.33"]]
        mock_get.return_value = _response(200, {"range": "A1:B2", "values": rows})

        assert fetch_values("sheet-id", "key", "A:I") == rows

        args, kwargs = mock_get.call_args
        assert args[0].endswith("/spreadsheets/sheet-id/values/A:I")
        assert kwargs["params"] == {"key": "key"}
        assert "timeout" in kwargs

    @patch("sheets.sheets_client.requests.get")
    def test_empty_sheet(self, mock_get):
        mock_get.return_value = _response(200, {"range": "A1:I1"})
        assert fetch_values("sheet-id", "key") == []

    def test_missing_configuration(self):
        with pytest.raises(SheetsConfigError):
            fetch_values("", "key")
        with pytest.raises(SheetsConfigError):
            fetch_values("sheet-id", "")

    @pytest.mark.parametrize("status,error", [
        (401, SheetsAuthError),
        (403, SheetsAuthError),
        (404, SheetsNotFoundError),
        (500, SheetsAPIError),
    ])
    @patch("sheets.sheets_client.requests.get")
    def test_http_errors(self, mock_get, status, error):
        mock_get.return_value = _response(
            status, {"error": {"code": status, "message": "The caller does not have permission"}}
        )
        with pytest.raises(error) as excinfo:
            fetch_values("sheet-id", "key")
        assert isinstance(excinfo.value, SheetsError)

    @patch("sheets.sheets_client.requests.get")
    def test_api_error_message_included(self, mock_get):
        mock_get.return_value = _response(400, {"error": {"code": 400, "message": "Unable to parse range"}})
        with pytest.raises(SheetsAPIError, match="Unable to parse range"):
            fetch_values("sheet-id", "key")

    @patch("sheets.sheets_client.requests.get")
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()
        with pytest.raises(SheetsNetworkError, match="timed out"):
            fetch_values("sheet-id", "key")

    @patch("sheets.sheets_client.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("no route")
        with pytest.raises(SheetsNetworkError):
            fetch_values("sheet-id", "key")
