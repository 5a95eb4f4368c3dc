from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import List

from .formats import CurrencyFormatter
from .parsing import coerce_number, parse_toggle
from .tip_core import calculate_tip

TITLE = "Calculate Tip"
BILL_LABEL = "Bill Amount"
TIP_LABEL = "Tip Percentage"
ROUND_LABEL = "Round up tip?"
HELP_TEXT = "Commands: a <amount>, t <percent>, r [on|off], q to quit"


class QuitScreen(Exception):
    """Raised when the user asks to leave the screen."""


@dataclass(frozen=True)
class TipState:
    amount_input: str = ""
    tip_input: str = ""
    round_up: bool = False

    @property
    def amount(self) -> Decimal:
        return coerce_number(self.amount_input)

    @property
    def tip_percent(self) -> Decimal:
        return coerce_number(self.tip_input)

    def with_amount(self, text: str) -> "TipState":
        return replace(self, amount_input=text)

    def with_tip(self, text: str) -> "TipState":
        return replace(self, tip_input=text)

    def with_round_up(self, value: bool) -> "TipState":
        return replace(self, round_up=value)

    def toggled(self) -> "TipState":
        return replace(self, round_up=not self.round_up)


def render(state: TipState, formatter: CurrencyFormatter) -> str:
    tip = calculate_tip(state.amount, state.tip_percent, state.round_up, formatter=formatter)
    width = max(len(TITLE), len(HELP_TEXT))
    lines: List[str] = [
        "",
        TITLE,
        "=" * len(TITLE),
        f"{BILL_LABEL:<16}[{state.amount_input}]",
        f"{TIP_LABEL:<16}[{state.tip_input}]",
        f"{ROUND_LABEL:<16}{'[x]' if state.round_up else '[ ]'}",
        "",
        f"Tip Amount: {tip}",
        "-" * width,
    ]
    return "\n".join(lines) + "\n"


def apply_command(state: TipState, line: str) -> TipState:
    """Reduce one line of user input into the next screen state."""
    text = line.strip()
    if not text:
        return state
    head, _, rest = text.partition(" ")
    cmd = head.lower()
    rest = rest.strip()
    if cmd in {"q", "quit", "exit"}:
        raise QuitScreen()
    if cmd in {"a", "amount", "bill"}:
        return state.with_amount(rest)
    if cmd in {"t", "tip", "percent"}:
        return state.with_tip(rest)
    if cmd in {"r", "round"}:
        if not rest:
            return state.toggled()
        return state.with_round_up(parse_toggle(rest))
    raise ValueError(f"Unknown command: {head}")
