from __future__ import annotations

import re
from decimal import Decimal

ZERO = Decimal("0")
# Largest finite double; anything beyond reads as infinity in a numeric field.
MAX_FIELD_VALUE = Decimal("1.7976931348623157e308")

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)

_TRUE_WORDS = {"y", "yes", "on", "true", "1"}
_FALSE_WORDS = {"n", "no", "off", "false", "0"}


def coerce_number(text: str) -> Decimal:
    """Turn raw field text into a number, falling back to zero.

    Only a plain decimal number (optional sign and exponent, surrounding
    whitespace allowed) is read. Currency symbols, grouping or decimal
    commas, percent signs and out-of-range magnitudes all give zero.
    """
    raw = (text or "").strip()
    if not _NUMBER_RE.match(raw):
        return ZERO
    try:
        value = Decimal(raw)
    except ArithmeticError:
        return ZERO
    if value.copy_abs() > MAX_FIELD_VALUE:
        return ZERO
    return value


def parse_toggle(text: str) -> bool:
    s = text.strip().lower()
    if s in _TRUE_WORDS:
        return True
    if s in _FALSE_WORDS:
        return False
    raise ValueError("Answer on or off (y/n)")
