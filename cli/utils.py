"""Shared CLI utility functions for Quill Cloud commands.

Updates:
  v0.1.1 - 2026-10-16 - Add size and width parsers for arrangement commands.
  v0.1.0 - 2026-10-16 - Extract stdout logging, input readers, and metric formatting.
"""

from __future__ import annotations

import argparse
import math
import re
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from logging import Logger
else:  # pragma: no cover - runtime placeholders for type-only imports
    Logger = Any

_SIZE_PATTERN = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*[xX]\s*([0-9]*\.?[0-9]+)\s*$")


def print_and_log(logger: Logger, level: int, message: str) -> None:
    """Log *message* at *level* and mirror it to stdout."""
    logger.log(level, message)
    print(message)


def read_text_input(path: Path) -> str:
    """Return the UTF-8 contents of *path*, reading stdin when *path* is ``-``."""
    if str(path) == "-":
        return sys.stdin.read()
    return path.expanduser().read_text(encoding="utf-8")


def parse_item_size(value: str) -> tuple[float, float]:
    """Parse ``WIDTHxHEIGHT`` into a ``(width, height)`` pair for argparse."""
    match = _SIZE_PATTERN.fullmatch(value)
    if match is None:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT such as 50x20, got {value!r}")
    return (float(match.group(1)), float(match.group(2)))


def parse_line_width(value: str) -> float | None:
    """Parse a positive line width; ``inf`` or ``none`` mean no wrapping."""
    text = value.strip().lower()
    if text in {"inf", "infinity", "none", "unbounded"}:
        return None
    try:
        width = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid width {value!r}") from exc
    if math.isinf(width):
        return None
    if math.isnan(width) or width <= 0:
        raise argparse.ArgumentTypeError("width must be greater than zero")
    return width


def format_metric(value: float | None, *, suffix: str = "") -> str:
    """Return display-friendly metric text with optional *suffix*."""
    if value is None:
        return "n/a"
    if math.isinf(value):
        return "unbounded"
    formatted = f"{value:.2f}" if abs(value) < 1000 else f"{value:.0f}"
    return f"{formatted}{suffix}" if suffix else formatted
