"""Core layout and word cloud services for Quill Cloud.

Updates:
  v0.2.0 - 2026-10-16 - Export word frequency analysis and word cloud builders.
  v0.1.0 - 2026-10-16 - Surface the flow arranger and exception hierarchy.
"""

from models.layout_model import FlowArrangement, ItemSize, Point
from models.word_cloud_model import WordBadge, WordCloudLayout, WordFrequency

from .exceptions import InvalidArrangementInputError, QuillCloudError, WordCloudError
from .flow_arranger import arrange_flow
from .word_cloud import (
    EstimatedTextMeasurer,
    TextMeasurer,
    build_word_badges,
    build_word_cloud,
)
from .word_frequency import STOPWORDS, analyze_word_frequencies

__all__ = [
    "EstimatedTextMeasurer",
    "FlowArrangement",
    "InvalidArrangementInputError",
    "ItemSize",
    "Point",
    "QuillCloudError",
    "STOPWORDS",
    "TextMeasurer",
    "WordBadge",
    "WordCloudError",
    "WordCloudLayout",
    "WordFrequency",
    "analyze_word_frequencies",
    "arrange_flow",
    "build_word_badges",
    "build_word_cloud",
]
