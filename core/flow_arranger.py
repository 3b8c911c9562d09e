"""Flow layout arrangement shared by the word cloud and the Qt flow layout.

Items are placed left-to-right and wrap onto a new line whenever the next
item would overflow the available width. A line is never wrapped while it is
still empty, so an item wider than the available width is placed alone at the
start of its own line instead of being rejected.

Updates:
  v0.1.1 - 2026-10-16 - Validate sizes and constraints before arranging.
  v0.1.0 - 2026-10-16 - Extract toolkit-independent arrangement from FlowLayout.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from models.layout_model import FlowArrangement, ItemSize, Point

from .exceptions import InvalidArrangementInputError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)


def _require_non_negative(value: float, label: str) -> float:
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise InvalidArrangementInputError(
            f"{label} must be a finite non-negative number, got {value!r}"
        )
    return value


def _resolve_max_width(max_width: float | None) -> float:
    """Return the wrap limit, mapping ``None`` to an unbounded line."""
    if max_width is None:
        return math.inf
    limit = float(max_width)
    if math.isnan(limit) or limit <= 0:
        raise InvalidArrangementInputError(
            f"max_width must be positive or unbounded, got {max_width!r}"
        )
    return limit


def _coerce_sizes(sizes: Iterable[ItemSize | Sequence[float]]) -> tuple[ItemSize, ...]:
    coerced: list[ItemSize] = []
    for index, raw in enumerate(sizes):
        try:
            size = ItemSize.coerce(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidArrangementInputError(
                f"item {index} is not a (width, height) pair: {raw!r}"
            ) from exc
        _require_non_negative(size.width, f"item {index} width")
        _require_non_negative(size.height, f"item {index} height")
        coerced.append(size)
    return tuple(coerced)


def arrange_flow(
    sizes: Iterable[ItemSize | Sequence[float]],
    max_width: float | None = None,
    spacing: float = 0.0,
) -> FlowArrangement:
    """Return positions for *sizes* wrapped within *max_width*.

    Args:
        sizes: Item sizes in display order; ``ItemSize`` or ``(width, height)`` pairs.
        max_width: Available line width. ``None`` or ``math.inf`` disables wrapping.
        spacing: Gap inserted between items on a line and between lines.

    Returns:
        A FlowArrangement whose positions follow the input order.

    Raises:
        InvalidArrangementInputError: A size or constraint is negative, NaN or
            otherwise outside the accepted domain.
    """
    items = _coerce_sizes(sizes)
    limit = _resolve_max_width(max_width)
    gap = _require_non_negative(float(spacing), "spacing")

    positions: list[Point] = []
    cursor_x = 0.0
    cursor_y = 0.0
    line_height = 0.0
    max_right = 0.0

    for size in items:
        if cursor_x > 0 and cursor_x + size.width > limit:
            cursor_x = 0.0
            cursor_y += line_height + gap
            line_height = 0.0

        positions.append(Point(cursor_x, cursor_y))

        cursor_x += size.width + gap
        line_height = max(line_height, size.height)
        max_right = max(max_right, cursor_x - gap)

    arrangement = FlowArrangement(
        positions=tuple(positions),
        sizes=items,
        width=max_right,
        height=cursor_y + line_height,
    )
    logger.debug(
        "Arranged %d item(s) within width %s: bounding size %.1fx%.1f",
        len(items),
        limit,
        arrangement.width,
        arrangement.height,
    )
    return arrangement


__all__ = ["arrange_flow"]
