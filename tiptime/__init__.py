from .formats import (
    CENT,
    HUNDRED,
    PERCENT_STEP,
    CurrencyFormatter,
    currency_symbol,
    fmt_percent,
    make_formatter,
    simple_money,
    to_cents,
)
from .parsing import coerce_number, parse_toggle
from .screen import QuitScreen, TipState, apply_command, render
from .tip_core import DEFAULT_TIP_PERCENT, TipResult, calculate_tip, compute_tip, tip_result

__all__ = [
    "TipResult",
    "calculate_tip",
    "compute_tip",
    "tip_result",
    "DEFAULT_TIP_PERCENT",
    "coerce_number",
    "parse_toggle",
    "CENT",
    "HUNDRED",
    "PERCENT_STEP",
    "to_cents",
    "CurrencyFormatter",
    "currency_symbol",
    "make_formatter",
    "simple_money",
    "fmt_percent",
    "TipState",
    "QuitScreen",
    "apply_command",
    "render",
]
