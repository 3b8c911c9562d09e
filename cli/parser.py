"""Argument parser for the Quill Cloud CLI.

Updates:
  v0.1.1 - 2026-10-16 - Add cloud command with Qt font metric toggle.
  v0.1.0 - 2026-10-16 - Provide analyze and arrange subcommands.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .utils import parse_item_size, parse_line_width


def build_parser() -> argparse.ArgumentParser:
    """Return the configured argument parser for the Quill Cloud launcher."""
    parser = argparse.ArgumentParser(description="Quill Cloud word cloud layout tools")
    parser.add_argument(
        "--logging-config",
        type=Path,
        default=None,
        help="Path to logging configuration file (INI format)",
    )
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print resolved settings and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="List the most frequent significant words in a text file.",
    )
    analyze_parser.add_argument("path", type=Path, help="Text file to analyse ('-' for stdin)")
    analyze_parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Number of words to list (defaults to the top_n setting).",
    )

    arrange_parser = subparsers.add_parser(
        "arrange",
        help="Arrange WIDTHxHEIGHT items with the flow layout and print their positions.",
    )
    arrange_parser.add_argument(
        "sizes",
        type=parse_item_size,
        nargs="*",
        metavar="WIDTHxHEIGHT",
        help="Item sizes in display order, e.g. 50x20 60x20.",
    )
    arrange_parser.add_argument(
        "--width",
        type=parse_line_width,
        default=None,
        help="Maximum line width ('inf' disables wrapping; defaults to layout_width).",
    )
    arrange_parser.add_argument(
        "--spacing",
        type=float,
        default=None,
        help="Gap between items and lines (defaults to the spacing setting).",
    )
    arrange_parser.add_argument("--json", action="store_true", help="Emit JSON output.")

    cloud_parser = subparsers.add_parser(
        "cloud",
        help="Analyse a text file and lay out its word cloud badges.",
    )
    cloud_parser.add_argument("path", type=Path, help="Text file to analyse ('-' for stdin)")
    cloud_parser.add_argument(
        "--width",
        type=parse_line_width,
        default=None,
        help="Maximum line width ('inf' disables wrapping; defaults to layout_width).",
    )
    cloud_parser.add_argument("--json", action="store_true", help="Emit JSON output.")
    cloud_parser.add_argument(
        "--qt-metrics",
        action="store_true",
        help="Measure badges with Qt font metrics instead of the built-in estimate.",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Return parsed CLI arguments for the Quill Cloud launcher."""
    return build_parser().parse_args(argv)
