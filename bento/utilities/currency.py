"""Currency formatting for ingredient and batch costs."""
from typing import Dict, Final, Union

from bento.utilities.parsing import coerce_float

CURRENCY_SYMBOLS: Final[Dict[str, str]] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "$",
    "CAD": "$",
    "CHF": "₣",
    "CNY": "¥",
    "INR": "₹",
    "PHP": "₱",
    "SGD": "$",
    "HKD": "$",
    "MXN": "$",
    "NZD": "$",
}


def get_currency_symbol(currency: str = "USD") -> str:
    """Symbol for a currency code; unknown codes are shown as the code itself."""
    return CURRENCY_SYMBOLS.get(currency, currency)


def format_currency(amount: Union[float, str], currency: str = "USD") -> str:
    number = coerce_float(amount, 0.0)
    return f"{get_currency_symbol(currency)}{number:.2f}"
