from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    getcontext,
    localcontext,
)
from typing import Callable

import pyperclip
from babel.core import Locale, UnknownLocaleError
from babel.numbers import format_currency


# --- Money helpers & constants ---
CENT = Decimal("0.01")
HUNDRED = Decimal("100")
PERCENT_STEP = Decimal("0.01")  # display percent with up to 2 decimals

DEFAULT_CURRENCY = "USD"
DEFAULT_LOCALE = "en_US"
STYLES = ("locale", "simple")
# fraction digits plus slack kept beyond the integer part when quantizing
QUANTIZE_HEADROOM = 8

CurrencyFormatter = Callable[[Decimal], str]


def to_cents(value: Decimal) -> Decimal:
    """Round a Decimal to two fractional digits using banker's rounding."""
    return value.quantize(CENT, rounding=ROUND_HALF_EVEN)


def money_context(value: Decimal) -> Context:
    """Decimal context wide enough to quantize ``value`` to its smallest unit."""
    ctx = getcontext().copy()
    ctx.Emax = MAX_EMAX
    ctx.Emin = MIN_EMIN
    if value.is_finite() and value:
        ctx.prec = max(ctx.prec, value.adjusted() + QUANTIZE_HEADROOM)
    return ctx


# --- Formatting ---
def currency_symbol(code: str) -> str:
    code = (code or DEFAULT_CURRENCY).upper()
    return {
        "USD": "$",
        "EUR": "€",
        "GBP": "£",
        "CAD": "C$",
        "JPY": "¥",
    }.get(code, "$")


def simple_money(value: Decimal, *, symbol: str = "$") -> str:
    with localcontext(money_context(value)):
        amount = to_cents(value)
        sign = "-" if amount < 0 else ""
        return f"{sign}{symbol}{abs(amount):,.2f}"


def make_formatter(
    currency: str = DEFAULT_CURRENCY,
    locale: str = DEFAULT_LOCALE,
    style: str = "locale",
) -> CurrencyFormatter:
    """Build the currency formatting capability handed to the calculator.

    - ``locale`` style uses Babel's CLDR data, so symbol placement, digit
      grouping and the currency's own number of fraction digits follow the
      locale (``$1,234.50`` for en_US, ``1.234,50 €`` for de_DE).
    - ``simple`` style puts the symbol first with commas and two decimals,
      independent of any locale.
    """
    code = (currency or DEFAULT_CURRENCY).upper()
    if style == "simple":
        symbol = currency_symbol(code)
        return lambda value: simple_money(value, symbol=symbol)
    if style != "locale":
        raise ValueError(f"Unknown format style: {style} (choose from {', '.join(STYLES)})")
    try:
        parsed = Locale.parse(locale or DEFAULT_LOCALE)
    except (UnknownLocaleError, ValueError) as exc:
        raise ValueError(f"Unknown locale: {locale}") from exc

    def _format(value: Decimal) -> str:
        with localcontext(money_context(value)):
            return format_currency(value, code, locale=parsed)

    return _format


def fmt_percent(value: Decimal) -> str:
    """Format a percentage with up to two decimals, trimming zeros."""
    with localcontext(money_context(value)):
        q = value.quantize(PERCENT_STEP, rounding=ROUND_HALF_UP)
    return f"{q:.2f}".rstrip("0").rstrip(".")


def copy_to_clipboard(text: str) -> bool:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException:
        return False
    return True
