from __future__ import annotations

from dataclasses import dataclass
from decimal import MAX_EMAX, MIN_EMIN, ROUND_CEILING, Decimal, localcontext
from typing import Optional, Union

from .formats import HUNDRED, CurrencyFormatter, make_formatter

Number = Union[Decimal, int, float]

DEFAULT_TIP_PERCENT = Decimal("15")


@dataclass(frozen=True)
class TipResult:
    amount: Decimal
    tip_percent: Decimal
    round_up: bool
    tip: Decimal
    formatted: str


def _as_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_tip(
    amount: Number,
    tip_percent: Number = DEFAULT_TIP_PERCENT,
    round_up: bool = False,
) -> Decimal:
    with localcontext() as ctx:
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        tip = _as_decimal(tip_percent) / HUNDRED * _as_decimal(amount)
        if round_up:
            tip = tip.to_integral_value(rounding=ROUND_CEILING)
    # no negative zero on screen
    if tip.is_zero():
        tip = tip.copy_abs()
    return tip


def calculate_tip(
    amount: Number,
    tip_percent: Number = DEFAULT_TIP_PERCENT,
    round_up: bool = False,
    *,
    formatter: Optional[CurrencyFormatter] = None,
) -> str:
    """Return the tip on ``amount`` as a display string.

    Rounding to cents is left to ``formatter``; only ``round_up`` rounds,
    and it goes to the next whole currency unit.
    """
    fmt = formatter or make_formatter()
    return fmt(compute_tip(amount, tip_percent, round_up))


def tip_result(
    amount: Number,
    tip_percent: Number = DEFAULT_TIP_PERCENT,
    round_up: bool = False,
    *,
    formatter: Optional[CurrencyFormatter] = None,
) -> TipResult:
    fmt = formatter or make_formatter()
    tip = compute_tip(amount, tip_percent, round_up)
    return TipResult(
        amount=_as_decimal(amount),
        tip_percent=_as_decimal(tip_percent),
        round_up=round_up,
        tip=tip,
        formatted=fmt(tip),
    )
