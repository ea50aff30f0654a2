"""Display formatting for amounts and percentages."""

from fintrack.formatting.currency import (
    CURRENCY_SYMBOLS,
    format_currency,
    format_currency_smart,
    format_number,
    format_percentage,
    get_currency_symbol,
    parse_currency,
)

__all__ = [
    "CURRENCY_SYMBOLS",
    "format_currency",
    "format_currency_smart",
    "format_number",
    "format_percentage",
    "get_currency_symbol",
    "parse_currency",
]
