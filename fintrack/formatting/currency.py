"""
Currency and Number Formatting

DESIGN DECISION: Separator conventions are a fixed table, one entry per
supported currency (and its display locale). There is no locale
machinery: the product only ever shows these four styles.

    TRY (tr-TR): ₺1.234,56     %12,5
    EUR (de-DE): 1.234,56 €    12,5 %
    USD (en-US): $1,234.56     12.5%
    GBP (en-GB): £1,234.56     12.5%

Rounding is half away from zero on the decimal value, so 2.675 shows as
2.68 rather than the 2.67 that binary float formatting would give.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from fintrack.models.records import Currency


CURRENCY_SYMBOLS = {
    Currency.TRY: "₺",
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
}

CURRENCY_LOCALES = {
    Currency.TRY: "tr-TR",
    Currency.USD: "en-US",
    Currency.EUR: "de-DE",
    Currency.GBP: "en-GB",
}

# locale -> (thousands separator, decimal separator)
LOCALE_SEPARATORS = {
    "tr-TR": (".", ","),
    "de-DE": (".", ","),
    "en-US": (",", "."),
    "en-GB": (",", "."),
}

DEFAULT_LOCALE = "tr-TR"

_NUMBER_PREFIX = re.compile(r"-?(\d+(\.\d*)?|\.\d+)")


def _currency(currency: Union[Currency, str]) -> Currency:
    return Currency(currency)


def _separators(locale: str) -> tuple[str, str]:
    try:
        return LOCALE_SEPARATORS[locale]
    except KeyError:
        raise ValueError(f"Unsupported locale: {locale}") from None


def _fixed(value: float, decimals: int) -> str:
    """Plain fixed-point text with '.' as decimal point, half away from zero."""
    quantized = Decimal(str(value)).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    if quantized == 0:
        quantized = abs(quantized)
    return f"{quantized:.{decimals}f}"


def _grouped(value: float, decimals: int, locale: str) -> tuple[str, str]:
    """
    Split a number into (sign, digits) with the locale's separators.

    Non-finite values render as '∞' or 'NaN'.
    """
    if math.isnan(value):
        return "", "NaN"
    sign = "-" if value < 0 else ""
    if math.isinf(value):
        return sign, "∞"

    quantized = Decimal(str(abs(value))).quantize(
        Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP
    )
    if quantized == 0:
        sign = ""

    thousands, decimal_point = _separators(locale)
    text = f"{quantized:,.{decimals}f}"
    text = text.replace(",", "\0").replace(".", decimal_point).replace("\0", thousands)
    return sign, text


def get_currency_symbol(currency: Union[Currency, str]) -> str:
    return CURRENCY_SYMBOLS[_currency(currency)]


def format_currency(
    amount: float,
    currency: Union[Currency, str] = Currency.TRY,
    compact: bool = False,
) -> str:
    """
    Format an amount with its currency symbol.

    compact=True abbreviates from one thousand up: ₺1.5M, $12.3K.
    Compact text always uses '.' as the decimal point.
    """
    currency = _currency(currency)
    symbol = CURRENCY_SYMBOLS[currency]

    if compact and math.isfinite(amount) and abs(amount) >= 1_000_000:
        return f"{symbol}{_fixed(amount / 1_000_000, 1)}M"

    if compact and math.isfinite(amount) and abs(amount) >= 1_000:
        return f"{symbol}{_fixed(amount / 1_000, 1)}K"

    sign, digits = _grouped(amount, 2, CURRENCY_LOCALES[currency])
    if currency is Currency.EUR:
        return f"{sign}{digits} {symbol}"
    return f"{sign}{symbol}{digits}"


def format_currency_smart(amount: float, currency: Union[Currency, str] = Currency.TRY) -> str:
    """Compact only for millions and up."""
    return format_currency(amount, currency, compact=abs(amount) >= 1_000_000)


def format_number(value: float, decimals: int = 0, locale: str = DEFAULT_LOCALE) -> str:
    sign, digits = _grouped(value, decimals, locale)
    return f"{sign}{digits}"


def format_percentage(value: float, decimals: int = 1, locale: str = DEFAULT_LOCALE) -> str:
    """
    Format a value already expressed in percent (12.5 -> '%12,5').

    Turkish puts the sign first, German separates it with a space.
    """
    sign, digits = _grouped(value, decimals, locale)
    if locale == "tr-TR":
        return f"{sign}%{digits}"
    if locale == "de-DE":
        return f"{sign}{digits} %"
    return f"{sign}{digits}%"


def parse_currency(text: str, currency: Optional[Union[Currency, str]] = None) -> float:
    """
    Read a number back out of formatted text. Unreadable text gives 0.

    With a currency, its separators are honored ('₺1.234,56' -> 1234.56).
    Without one, the first comma is read as a decimal point and parsing
    stops at the first character that cannot continue the number.
    """
    cleaned = re.sub(r"[^\d,.\-]", "", text)

    if currency is not None:
        thousands, decimal_point = _separators(CURRENCY_LOCALES[_currency(currency)])
        normalized = cleaned.replace(thousands, "").replace(decimal_point, ".")
    else:
        normalized = cleaned.replace(",", ".", 1)

    match = _NUMBER_PREFIX.match(normalized)
    if not match:
        return 0.0
    return float(match.group())
