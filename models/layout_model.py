"""Value types describing flow-layout input and output.

Updates:
  v0.1.1 - 2026-10-16 - Reject text and byte strings passed as item sizes.
  v0.1.0 - 2026-10-16 - Introduce ItemSize, Point, and FlowArrangement dataclasses.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ItemSize:
    """Measured width and height of a single arranged item."""

    width: float
    height: float

    @classmethod
    def coerce(cls, value: ItemSize | Sequence[float]) -> ItemSize:
        """Return *value* as an ItemSize, accepting plain ``(width, height)`` pairs."""
        if isinstance(value, ItemSize):
            return value
        if isinstance(value, (str, bytes, bytearray)):
            raise TypeError(f"expected a (width, height) pair, got {type(value).__name__}")
        width, height = value
        return cls(float(width), float(height))

    def as_tuple(self) -> tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True, slots=True)
class Point:
    """Top-left corner of a placed item relative to the arrangement origin."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class FlowArrangement:
    """Result of a flow-layout pass.

    ``positions`` and ``sizes`` share the index order of the input items;
    ``width`` and ``height`` describe the rectangle enclosing every item.
    """

    positions: tuple[Point, ...] = ()
    sizes: tuple[ItemSize, ...] = ()
    width: float = 0.0
    height: float = 0.0

    def __len__(self) -> int:
        return len(self.positions)

    def frames(self) -> Iterator[tuple[Point, ItemSize]]:
        """Yield ``(position, size)`` pairs in input order."""
        return zip(self.positions, self.sizes, strict=True)

    def line_count(self) -> int:
        """Return the number of distinct lines the items were wrapped onto."""
        return len({position.y for position in self.positions})

    def to_record(self) -> dict[str, object]:
        """Return a JSON-serialisable mapping of the arrangement."""
        return {
            "width": self.width,
            "height": self.height,
            "items": [
                {
                    "x": position.x,
                    "y": position.y,
                    "width": size.width,
                    "height": size.height,
                }
                for position, size in self.frames()
            ],
        }


__all__ = ["FlowArrangement", "ItemSize", "Point"]
