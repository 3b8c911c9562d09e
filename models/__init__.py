"""Data models for Quill Cloud.

Updates: v0.2.0 - 2026-10-16 - Export word cloud dataclasses.
Updates: v0.1.0 - 2026-10-16 - Export flow layout value types.
"""

from .layout_model import FlowArrangement, ItemSize, Point
from .word_cloud_model import EMPTY_CLOUD_MESSAGE, WordBadge, WordCloudLayout, WordFrequency

__all__ = [
    "EMPTY_CLOUD_MESSAGE",
    "FlowArrangement",
    "ItemSize",
    "Point",
    "WordBadge",
    "WordCloudLayout",
    "WordFrequency",
]
