"""Tests for word cloud badge sizing and arrangement.

Updates:
  v0.1.0 - 2026-10-16 - Cover font/opacity scaling, palette cycling, and flow placement.
"""

from __future__ import annotations

import pytest

from config import QuillCloudSettings
from core import (
    EstimatedTextMeasurer,
    InvalidArrangementInputError,
    WordCloudError,
    build_word_badges,
    build_word_cloud,
)
from core.word_cloud import color_for, normalized_weight
from models.word_cloud_model import EMPTY_CLOUD_MESSAGE, WordFrequency


class _FixedMeasurer:
    def __init__(self, width: float, height: float) -> None:
        self.calls: list[tuple[str, float]] = []
        self._size = (width, height)

    def measure(self, text: str, font_size: float) -> tuple[float, float]:
        self.calls.append((text, font_size))
        return self._size


def _freq(word: str, count: int) -> WordFrequency:
    return WordFrequency(word, count, float(count))


def test_font_size_and_opacity_scale_with_count(settings: QuillCloudSettings) -> None:
    frequencies = [_freq("love", 15), _freq("heart", 12), _freq("dream", 10), _freq("moon", 3)]

    badges = build_word_badges(frequencies, settings)

    love, heart, _, moon = badges
    assert love.font_size == pytest.approx(40)
    assert love.opacity == pytest.approx(1.0)
    assert heart.font_size == pytest.approx(33)
    assert heart.opacity == pytest.approx(0.9)
    assert moon.font_size == pytest.approx(12)
    assert moon.opacity == pytest.approx(0.6)


def test_badge_size_adds_padding_to_measured_text(settings: QuillCloudSettings) -> None:
    badges = build_word_badges([_freq("love", 15), _freq("moon", 3)], settings)

    assert badges[0].size.as_tuple() == pytest.approx((4 * 40 * 0.6 + 12, 40 * 1.2 + 4))
    assert badges[1].size.as_tuple() == pytest.approx((4 * 12 * 0.6 + 12, 12 * 1.2 + 4))


def test_flat_distribution_uses_midpoint(settings: QuillCloudSettings) -> None:
    badges = build_word_badges([_freq("alpha", 4), _freq("beta", 4)], settings)

    assert [badge.font_size for badge in badges] == pytest.approx([26, 26])
    assert [badge.opacity for badge in badges] == pytest.approx([0.8, 0.8])


def test_only_max_words_are_displayed(settings: QuillCloudSettings) -> None:
    limited = settings.model_copy(update={"max_words": 2})
    frequencies = [_freq("alpha", 10), _freq("beta", 5), _freq("gamma", 1)]

    badges = build_word_badges(frequencies, limited)

    assert [badge.word for badge in badges] == ["alpha", "beta"]
    assert badges[1].font_size == pytest.approx(12)


def test_palette_cycles_in_display_order(settings: QuillCloudSettings) -> None:
    two_colours = settings.model_copy(update={"palette": ["#111111", "#222222"]})
    frequencies = [_freq("alpha", 3), _freq("beta", 2), _freq("gamma", 1)]

    badges = build_word_badges(frequencies, two_colours)

    assert [badge.color for badge in badges] == ["#111111", "#222222", "#111111"]


def test_cloud_is_arranged_with_configured_spacing(settings: QuillCloudSettings) -> None:
    measurer = _FixedMeasurer(10, 10)
    frequencies = [_freq("alpha", 3), _freq("beta", 2), _freq("gamma", 1)]

    layout = build_word_cloud(frequencies, settings, measurer=measurer, max_width=60)

    assert [position.as_tuple() for position in layout.arrangement.positions] == [
        (0, 0),
        (30, 0),
        (0, 22),
    ]
    assert (layout.arrangement.width, layout.arrangement.height) == (52, 36)
    assert [text for text, _ in measurer.calls] == ["alpha", "beta", "gamma"]
    assert [badge.word for badge, _ in layout.placements()] == ["alpha", "beta", "gamma"]


def test_empty_cloud_reports_placeholder(settings: QuillCloudSettings) -> None:
    layout = build_word_cloud([], settings, max_width=300)

    assert layout.is_empty
    assert layout.placeholder == EMPTY_CLOUD_MESSAGE
    assert (layout.arrangement.width, layout.arrangement.height) == (0, 0)
    assert layout.to_record() == {"width": 0.0, "height": 0.0, "words": []}


def test_find_returns_badge_for_hovered_word(settings: QuillCloudSettings) -> None:
    layout = build_word_cloud([_freq("alpha", 3), _freq("beta", 2)], settings)

    badge = layout.find("beta")
    assert badge is not None
    assert badge.frequency.caption() == '"beta": 2 occurrences (2.0%)'
    assert layout.find("gamma") is None


def test_to_record_includes_badge_attributes(settings: QuillCloudSettings) -> None:
    layout = build_word_cloud(
        [_freq("alpha", 3)], settings, measurer=_FixedMeasurer(20, 10), max_width=100
    )

    record = layout.to_record()
    assert record["width"] == 32
    assert record["height"] == 14
    assert record["words"] == [
        {
            "word": "alpha",
            "count": 3,
            "percentage": 3.0,
            "font_size": 26.0,
            "opacity": 0.8,
            "color": settings.palette[0],
            "x": 0.0,
            "y": 0.0,
            "width": 32.0,
            "height": 14.0,
        }
    ]


def test_negative_count_is_rejected(settings: QuillCloudSettings) -> None:
    with pytest.raises(WordCloudError):
        build_word_cloud([_freq("alpha", -1)], settings)


def test_invalid_width_propagates_arrangement_error(settings: QuillCloudSettings) -> None:
    with pytest.raises(InvalidArrangementInputError):
        build_word_cloud([_freq("alpha", 1)], settings, max_width=0)


def test_normalized_weight_is_clamped() -> None:
    assert normalized_weight(20, 5, 10) == 1.0
    assert normalized_weight(1, 5, 10) == 0.0
    assert normalized_weight(7, 7, 7) == 0.5


def test_color_for_requires_palette() -> None:
    with pytest.raises(WordCloudError):
        color_for(0, [])


def test_estimated_measurer_scales_with_font_size() -> None:
    measurer = EstimatedTextMeasurer()

    assert measurer.measure("abcde", 10) == pytest.approx((30.0, 12.0))
    assert measurer.measure("", 10) == pytest.approx((0.0, 12.0))
