"""Word cloud badge sizing and arrangement.

Each displayed word becomes a badge whose font size and opacity scale with
its count relative to the other displayed words. Badges are measured through
a :class:`TextMeasurer` and positioned with :func:`core.flow_arranger.arrange_flow`.

Updates:
  v0.1.1 - 2026-10-16 - Accept pluggable text measurers for toolkit font metrics.
  v0.1.0 - 2026-10-16 - Provide font/opacity scaling and palette cycling for word badges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from models.layout_model import ItemSize
from models.word_cloud_model import WordBadge, WordCloudLayout, WordFrequency

from .exceptions import WordCloudError
from .flow_arranger import arrange_flow

if TYPE_CHECKING:
    from collections.abc import Sequence

    from config import QuillCloudSettings

logger = logging.getLogger(__name__)


class TextMeasurer(Protocol):
    """Return the rendered ``(width, height)`` of *text* at *font_size* points."""

    def measure(self, text: str, font_size: float) -> tuple[float, float]: ...


@dataclass(frozen=True, slots=True)
class EstimatedTextMeasurer:
    """Toolkit-free measurer using average glyph proportions."""

    advance_ratio: float = 0.6
    line_height_ratio: float = 1.2

    def measure(self, text: str, font_size: float) -> tuple[float, float]:
        return (len(text) * font_size * self.advance_ratio, font_size * self.line_height_ratio)


def normalized_weight(count: int, min_count: int, max_count: int) -> float:
    """Return *count*'s position between *min_count* and *max_count* in ``[0, 1]``.

    A flat distribution (all counts equal) maps every word to the midpoint.
    """
    spread = max_count - min_count
    if spread <= 0:
        return 0.5
    return min(max((count - min_count) / spread, 0.0), 1.0)


def font_size_for(weight: float, settings: QuillCloudSettings) -> float:
    return settings.min_font_size + weight * (settings.max_font_size - settings.min_font_size)


def opacity_for(weight: float, settings: QuillCloudSettings) -> float:
    return settings.min_opacity + weight * (settings.max_opacity - settings.min_opacity)


def color_for(index: int, palette: Sequence[str]) -> str:
    if not palette:
        raise WordCloudError("palette must contain at least one colour")
    return palette[index % len(palette)]


def build_word_badges(
    frequencies: Sequence[WordFrequency],
    settings: QuillCloudSettings,
    measurer: TextMeasurer | None = None,
) -> tuple[WordBadge, ...]:
    """Return sized badges for the first ``settings.max_words`` entries of *frequencies*."""
    for entry in frequencies:
        if entry.count < 0:
            raise WordCloudError(f"word {entry.word!r} has a negative count ({entry.count})")
    if not frequencies:
        return ()

    text_measurer = measurer or EstimatedTextMeasurer()
    displayed = frequencies[: settings.max_words]
    max_count = frequencies[0].count
    min_count = displayed[-1].count

    badges: list[WordBadge] = []
    for index, entry in enumerate(displayed):
        weight = normalized_weight(entry.count, min_count, max_count)
        font_size = font_size_for(weight, settings)
        text_width, text_height = text_measurer.measure(entry.word, font_size)
        badges.append(
            WordBadge(
                frequency=entry,
                font_size=font_size,
                opacity=opacity_for(weight, settings),
                color=color_for(index, settings.palette),
                size=ItemSize(
                    text_width + 2 * settings.badge_padding_x,
                    text_height + 2 * settings.badge_padding_y,
                ),
            )
        )
    return tuple(badges)


def build_word_cloud(
    frequencies: Sequence[WordFrequency],
    settings: QuillCloudSettings,
    *,
    measurer: TextMeasurer | None = None,
    max_width: float | None = None,
) -> WordCloudLayout:
    """Size and arrange a word cloud for *frequencies* (most frequent first).

    Raises:
        WordCloudError: A frequency entry is unusable.
        InvalidArrangementInputError: *max_width* or measured sizes are invalid.
    """
    badges = build_word_badges(frequencies, settings, measurer)
    arrangement = arrange_flow(
        (badge.size for badge in badges),
        max_width=max_width,
        spacing=settings.spacing,
    )
    logger.debug(
        "Built word cloud with %d badge(s) on %d line(s)",
        len(badges),
        arrangement.line_count(),
    )
    return WordCloudLayout(badges=badges, arrangement=arrangement)


__all__ = [
    "EstimatedTextMeasurer",
    "TextMeasurer",
    "build_word_badges",
    "build_word_cloud",
    "color_for",
    "font_size_for",
    "normalized_weight",
    "opacity_for",
]
