from __future__ import annotations

import argparse
import json
import os
import sys
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, List, Optional

from .formats import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    STYLES,
    CurrencyFormatter,
    copy_to_clipboard,
    fmt_percent,
    make_formatter,
)
from .parsing import coerce_number, parse_toggle
from .screen import HELP_TEXT, QuitScreen, TipState, apply_command, render
from .tip_core import DEFAULT_TIP_PERCENT, tip_result

CONFIG_FILENAME = "tipconfig.json"
ENV_FILENAME = ".env"
CURRENCIES = ["USD", "EUR", "GBP", "CAD", "JPY"]
HIGH_TIP_WARNING = Decimal("50")


class ConfigError(RuntimeError):
    """Raised when a config file or variable cannot be used."""


@dataclass
class AppConfig:
    default_tip_percent: Decimal = DEFAULT_TIP_PERCENT
    currency: str = DEFAULT_CURRENCY
    locale: str = DEFAULT_LOCALE
    round_up: bool = False
    style: str = "locale"


def _apply_setting(cfg: AppConfig, key: str, value: str, *, origin: str) -> None:
    try:
        if key == "TIP_DEFAULT_PERCENT":
            cfg.default_tip_percent = Decimal(value.replace("%", "").strip())
        elif key == "TIP_CURRENCY":
            cfg.currency = value.strip().upper()
        elif key == "TIP_LOCALE":
            cfg.locale = value.strip()
        elif key == "TIP_ROUND_UP":
            cfg.round_up = parse_toggle(value)
        elif key == "TIP_FORMAT":
            cfg.style = value.strip().lower()
    except (InvalidOperation, ValueError) as exc:
        raise ConfigError(f"Invalid {key} in {origin}: {value!r}") from exc


def _read_env_file(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, v = line.split("=", 1)
        values[k.strip().upper()] = v.strip().strip('"').strip("'")
    return values


def _load_json_config(cfg: AppConfig, path: Path) -> None:
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse config file: {path}") from exc
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a JSON object")
    mapping = {
        "default_tip_percent": "TIP_DEFAULT_PERCENT",
        "currency": "TIP_CURRENCY",
        "locale": "TIP_LOCALE",
        "round_up": "TIP_ROUND_UP",
        "format": "TIP_FORMAT",
    }
    for field, key in mapping.items():
        if field in data:
            raw = data[field]
            if isinstance(raw, bool):
                raw = "true" if raw else "false"
            _apply_setting(cfg, key, str(raw), origin=str(path))


def load_config(path: Optional[str] = None) -> AppConfig:
    cfg = AppConfig()

    json_candidates: List[Path] = []
    if path:
        explicit = Path(path).expanduser()
        if not explicit.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        json_candidates.append(explicit)
    json_candidates.append(Path.cwd() / CONFIG_FILENAME)
    for p in json_candidates:
        if p.is_file():
            _load_json_config(cfg, p)
            break

    env_path = Path.cwd() / ENV_FILENAME
    if env_path.is_file():
        for k, v in _read_env_file(env_path).items():
            _apply_setting(cfg, k, v, origin=str(env_path))

    for key in ("TIP_DEFAULT_PERCENT", "TIP_CURRENCY", "TIP_LOCALE", "TIP_ROUND_UP", "TIP_FORMAT"):
        env_val = os.environ.get(key)
        if env_val:
            _apply_setting(cfg, key, env_val, origin="environment")
    return cfg


def run_interactive(state: TipState, formatter: CurrencyFormatter) -> None:
    print("--- Tip Time ---")
    print(HELP_TEXT)
    print(render(state, formatter), end="")
    while True:
        try:
            state = apply_command(state, input("> "))
        except QuitScreen:
            break
        except ValueError as e:
            print(f"Error: {e}")
            continue
        print(render(state, formatter), end="")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tip Time: compute a tip from a bill amount and a tip percentage, optionally rounded up to a whole unit."
    )
    parser.add_argument("--amount", help="Bill amount, e.g. 45.50 or $45.50. Unreadable values count as 0")
    parser.add_argument("--tip", default=None, help="Tip percentage, e.g. 18 or 18%%. Default comes from config (15)")
    parser.add_argument("--round-up", action="store_true", default=None, help="Round the tip up to the next whole currency unit")
    parser.add_argument("--currency", choices=CURRENCIES, default=None, help="Currency code for display")
    parser.add_argument("--locale", help="Locale for currency formatting (e.g., en_US, de_DE)")
    parser.add_argument("--format", choices=list(STYLES), default=None, help="Output formatting style: locale-aware or simple symbol + amount")
    parser.add_argument("--json", action="store_true", help="Output the result as JSON")
    parser.add_argument("--copy", action="store_true", help="Copy the output to clipboard")
    parser.add_argument("--config", help="Path to a JSON config with default_tip_percent, currency, locale, round_up, format")
    parser.add_argument("--interactive", action="store_true", help="Open the calculator screen even when --amount is given.")
    return parser


def run_cli(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.error(str(exc))

    currency = args.currency or config.currency
    locale = args.locale or config.locale
    style = args.format or config.style
    round_up = config.round_up if args.round_up is None else args.round_up
    tip_text = args.tip if args.tip is not None else fmt_percent(config.default_tip_percent)

    try:
        formatter = make_formatter(currency, locale, style)
    except ValueError as exc:
        parser.error(str(exc))

    state = TipState(amount_input=args.amount or "", tip_input=tip_text, round_up=round_up)

    if args.interactive or args.amount is None:
        try:
            run_interactive(state, formatter)
        except (KeyboardInterrupt, EOFError):
            pass
        print("\nGoodbye!")
        return 0

    tip_percent = coerce_number(tip_text)
    if tip_percent > HIGH_TIP_WARNING:
        print("Warning: Tip percentage exceeds 50%.", file=sys.stderr)

    result = tip_result(state.amount, tip_percent, round_up, formatter=formatter)
    if args.json:
        out = json.dumps(
            {
                "amount": str(result.amount),
                "tip_percent": fmt_percent(result.tip_percent),
                "round_up": result.round_up,
                "tip": str(result.tip),
                "tip_display": result.formatted,
                "currency": currency,
                "locale": locale if style == "locale" else None,
            }
        )
    else:
        out = f"Tip Amount: {result.formatted}"
    print(out)
    if args.copy:
        if not copy_to_clipboard(out):
            print("(Could not copy to clipboard on this system)", file=sys.stderr)
    return 0
