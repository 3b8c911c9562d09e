"""CLI command handlers for Quill Cloud.

Updates:
  v0.1.1 - 2026-10-16 - Add cloud command combining analysis, sizing, and arrangement.
  v0.1.0 - 2026-10-16 - Provide analyze and arrange handlers with shared dispatch table.
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from core import (
    EstimatedTextMeasurer,
    QuillCloudError,
    TextMeasurer,
    analyze_word_frequencies,
    arrange_flow,
    build_word_cloud,
)

from .utils import format_metric, print_and_log, read_text_input

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from config import QuillCloudSettings
    from models.layout_model import FlowArrangement

CommandHandler = Callable[["QuillCloudSettings", argparse.Namespace, logging.Logger], int]

EXIT_OK = 0
EXIT_INPUT_ERROR = 5


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for dispatching CLI command handlers."""

    handler: CommandHandler
    description: str = ""


def _load_text(path: Path, logger: logging.Logger) -> str | None:
    try:
        return read_text_input(path)
    except (OSError, UnicodeDecodeError) as exc:
        print_and_log(logger, logging.ERROR, f"Unable to read {path}: {exc}")
        return None


def _resolve_width(args: argparse.Namespace, settings: QuillCloudSettings) -> float | None:
    width = getattr(args, "width", None)
    return width if width is not None else settings.layout_width


def _render_arrangement(arrangement: FlowArrangement) -> list[str]:
    lines = [
        f"{index:>3}  x={format_metric(position.x):>8}  y={format_metric(position.y):>8}  "
        f"size={format_metric(size.width)}x{format_metric(size.height)}"
        for index, (position, size) in enumerate(arrangement.frames())
    ]
    lines.append(
        f"Bounding size: {format_metric(arrangement.width)} x {format_metric(arrangement.height)}"
        f" ({arrangement.line_count()} line(s))"
    )
    return lines


def run_analyze(
    settings: QuillCloudSettings,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    text = _load_text(args.path, logger)
    if text is None:
        return EXIT_INPUT_ERROR
    top_n = args.top if args.top is not None else settings.top_n
    try:
        frequencies = analyze_word_frequencies(
            text,
            top_n,
            min_length=settings.min_word_length,
        )
    except QuillCloudError as exc:
        print_and_log(logger, logging.ERROR, f"Word frequency analysis failed: {exc}")
        return EXIT_INPUT_ERROR
    if not frequencies:
        print("No significant words found.")
        return EXIT_OK
    for entry in frequencies:
        print(f"{entry.word:<24} {entry.count:>6}  {entry.percentage:5.1f}%")
    return EXIT_OK


def run_arrange(
    settings: QuillCloudSettings,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    spacing = args.spacing if args.spacing is not None else settings.spacing
    try:
        arrangement = arrange_flow(
            args.sizes,
            max_width=_resolve_width(args, settings),
            spacing=spacing,
        )
    except QuillCloudError as exc:
        print_and_log(logger, logging.ERROR, f"Arrangement failed: {exc}")
        return EXIT_INPUT_ERROR
    if args.json:
        print(json.dumps(arrangement.to_record(), indent=2))
        return EXIT_OK
    for line in _render_arrangement(arrangement):
        print(line)
    return EXIT_OK


def _select_measurer(
    settings: QuillCloudSettings,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> TextMeasurer | None:
    if not getattr(args, "qt_metrics", False):
        return EstimatedTextMeasurer()
    import gui

    try:
        return gui.QtTextMeasurer(settings.font_family)
    except gui.GuiDependencyError as exc:
        print_and_log(logger, logging.ERROR, str(exc))
        return None


def run_cloud(
    settings: QuillCloudSettings,
    args: argparse.Namespace,
    logger: logging.Logger,
) -> int:
    text = _load_text(args.path, logger)
    if text is None:
        return EXIT_INPUT_ERROR
    measurer = _select_measurer(settings, args, logger)
    if measurer is None:
        return EXIT_INPUT_ERROR
    try:
        frequencies = analyze_word_frequencies(
            text,
            settings.top_n,
            min_length=settings.min_word_length,
        )
        layout = build_word_cloud(
            frequencies,
            settings,
            measurer=measurer,
            max_width=_resolve_width(args, settings),
        )
    except QuillCloudError as exc:
        print_and_log(logger, logging.ERROR, f"Word cloud layout failed: {exc}")
        return EXIT_INPUT_ERROR

    if args.json:
        print(json.dumps(layout.to_record(), indent=2))
        return EXIT_OK
    if layout.placeholder is not None:
        print(layout.placeholder)
        return EXIT_OK
    for badge, position in layout.placements():
        print(
            f"{badge.word:<24} x={format_metric(position.x):>8} y={format_metric(position.y):>8}  "
            f"font={format_metric(badge.font_size)}  opacity={format_metric(badge.opacity)}  "
            f"{badge.color}"
        )
    arrangement = layout.arrangement
    print(
        f"Bounding size: {format_metric(arrangement.width)} x {format_metric(arrangement.height)}"
        f" ({arrangement.line_count()} line(s))"
    )
    return EXIT_OK


COMMAND_SPECS: dict[str | None, CommandSpec] = {
    "analyze": CommandSpec(run_analyze, "List frequent words."),
    "arrange": CommandSpec(run_arrange, "Arrange item sizes."),
    "cloud": CommandSpec(run_cloud, "Lay out a word cloud."),
}
