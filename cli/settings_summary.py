"""Printable summaries for Quill Cloud configuration.

Updates:
  v0.1.0 - 2026-10-16 - Extract CLI settings summary rendering.
"""

from __future__ import annotations

import os

from config import CONFIG_JSON_ENV_VAR, QuillCloudSettings

from .utils import format_metric


def settings_summary_lines(settings: QuillCloudSettings) -> list[str]:
    """Return a readable summary of the resolved word cloud configuration."""
    config_source = os.getenv(CONFIG_JSON_ENV_VAR) or "config/config.json (if present)"
    layout_width = settings.layout_width
    return [
        "Quill Cloud configuration",
        f"  Config file:       {config_source}",
        f"  Spacing:           {format_metric(settings.spacing)}",
        f"  Layout width:      {format_metric(layout_width) if layout_width else 'unbounded'}",
        f"  Max words:         {settings.max_words}",
        f"  Top words:         {settings.top_n}",
        f"  Min word length:   {settings.min_word_length}",
        (
            f"  Font size range:   {format_metric(settings.min_font_size)}"
            f" - {format_metric(settings.max_font_size)}"
        ),
        (
            f"  Opacity range:     {format_metric(settings.min_opacity)}"
            f" - {format_metric(settings.max_opacity)}"
        ),
        (
            f"  Badge padding:     {format_metric(settings.badge_padding_x)} x "
            f"{format_metric(settings.badge_padding_y)}"
        ),
        f"  Font family:       {settings.font_family}",
        f"  Palette:           {', '.join(settings.palette)}",
    ]


def print_settings_summary(settings: QuillCloudSettings) -> None:
    """Emit a readable summary of the resolved configuration."""
    for line in settings_summary_lines(settings):
        print(line)
