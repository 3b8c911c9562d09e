"""Word cloud data model definitions.

Updates: v0.1.0 - 2026-10-16 - Introduce WordFrequency, WordBadge, and WordCloudLayout dataclasses.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from .layout_model import FlowArrangement, ItemSize, Point

EMPTY_CLOUD_MESSAGE = "No significant words found"


@dataclass(frozen=True, slots=True)
class WordFrequency:
    """Occurrence statistics for a single word."""

    word: str
    count: int
    percentage: float

    def caption(self) -> str:
        """Return the hover caption shown beneath the cloud."""
        return f'"{self.word}": {self.count} occurrences ({self.percentage:.1f}%)'

    def to_record(self) -> dict[str, Any]:
        return {"word": self.word, "count": self.count, "percentage": self.percentage}

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> WordFrequency:
        """Hydrate a WordFrequency from a mapping."""
        return cls(
            word=str(data.get("word") or ""),
            count=int(data.get("count") or 0),
            percentage=float(data.get("percentage") or 0.0),
        )


@dataclass(frozen=True, slots=True)
class WordBadge:
    """Display attributes computed for one word of the cloud."""

    frequency: WordFrequency
    font_size: float
    opacity: float
    color: str
    size: ItemSize

    @property
    def word(self) -> str:
        return self.frequency.word


@dataclass(frozen=True, slots=True)
class WordCloudLayout:
    """Badges paired with the flow arrangement that positions them."""

    badges: tuple[WordBadge, ...] = ()
    arrangement: FlowArrangement = field(default_factory=FlowArrangement)

    @property
    def is_empty(self) -> bool:
        return not self.badges

    @property
    def placeholder(self) -> str | None:
        """Return the message shown in place of an empty cloud."""
        return EMPTY_CLOUD_MESSAGE if self.is_empty else None

    def placements(self) -> Iterator[tuple[WordBadge, Point]]:
        """Yield each badge with its position in display order."""
        return zip(self.badges, self.arrangement.positions, strict=True)

    def find(self, word: str) -> WordBadge | None:
        """Return the badge displaying *word*, if present."""
        for badge in self.badges:
            if badge.word == word:
                return badge
        return None

    def to_record(self) -> dict[str, Any]:
        """Return a JSON-serialisable mapping of the cloud layout."""
        return {
            "width": self.arrangement.width,
            "height": self.arrangement.height,
            "words": [
                {
                    **badge.frequency.to_record(),
                    "font_size": round(badge.font_size, 2),
                    "opacity": round(badge.opacity, 3),
                    "color": badge.color,
                    "x": position.x,
                    "y": position.y,
                    "width": badge.size.width,
                    "height": badge.size.height,
                }
                for badge, position in self.placements()
            ],
        }


__all__ = ["EMPTY_CLOUD_MESSAGE", "WordBadge", "WordCloudLayout", "WordFrequency"]
