"""Public API and CLI entrypoint for Tip Time.

Re-exports the main API from `tiptime` so that

    import tip_time

gives the calculator, the screen state and the formatter in one place.
Also provides the `python tip_time.py` entry.
"""

from __future__ import annotations

import importlib.metadata as importlib_metadata
import sys

from tiptime import (
    DEFAULT_TIP_PERCENT,
    QuitScreen,
    TipResult,
    TipState,
    apply_command,
    calculate_tip,
    coerce_number,
    compute_tip,
    fmt_percent,
    make_formatter,
    render,
    tip_result,
)
from tiptime.cli import run_cli

try:
    _distribution_version = importlib_metadata.version("tip-time")
except importlib_metadata.PackageNotFoundError:
    __version__ = "0+unknown"
else:
    __version__ = _distribution_version or "0+unknown"

__all__ = [
    "__version__",
    "TipResult",
    "calculate_tip",
    "compute_tip",
    "tip_result",
    "DEFAULT_TIP_PERCENT",
    "coerce_number",
    "make_formatter",
    "fmt_percent",
    "TipState",
    "QuitScreen",
    "apply_command",
    "render",
    "run_cli",
]

if __name__ == "__main__":
    sys.exit(run_cli())
