"""
utils/currency.py
-----------------
Display formatting for amounts. Spreadsheets often hold a symbol ("€")
instead of a code, so symbols are mapped to codes here at the formatting
boundary only; the Subscription keeps its source value.
"""

from config import DEFAULT_CURRENCY

_SYMBOL_TO_CODE = {"€": "EUR", "$": "USD", "£": "GBP", "¥": "JPY"}
_CODE_TO_SYMBOL = {"EUR": "€", "USD": "$", "GBP": "£", "JPY": "¥", "CHF": "CHF"}
_CONTINENTAL_SEPARATORS = str.maketrans(",.", ".,")


def canonical_currency(currency: str) -> str:
    """Return an ISO code for a currency code or symbol."""
    value = (currency or "").strip()
    if not value:
        return DEFAULT_CURRENCY
    return _SYMBOL_TO_CODE.get(value, value.upper())


def currency_symbol(currency: str) -> str:
    code = canonical_currency(currency)
    return _CODE_TO_SYMBOL.get(code, code)


def _continental(number: str) -> str:
    """Swap separators: "1,234.56" becomes "1.234,56"."""
    return number.translate(_CONTINENTAL_SEPARATORS)


def format_currency(amount: float, currency: str, locale: str, decimals: int = 2) -> str:
    """
    Format an amount for the given locale.

    English locales put the symbol first with a comma thousands separator
    ("€1,234.56"); other locales use a decimal comma and a trailing
    symbol ("1.234,56 €").
    """
    symbol = currency_symbol(currency)
    number = f"{abs(amount):,.{decimals}f}"
    sign = "-" if amount < 0 else ""

    if (locale or "").lower().startswith("en"):
        return f"{sign}{symbol}{number}"

    return f"{sign}{_continental(number)} {symbol}"
