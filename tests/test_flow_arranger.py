"""Tests for the flow layout arranger.

Updates:
  v0.1.1 - 2026-10-16 - Cover boundary validation of sizes and constraints.
  v0.1.0 - 2026-10-16 - Cover wrapping, bounding size, and oversized items.
"""

from __future__ import annotations

import math

import pytest

from core import InvalidArrangementInputError, arrange_flow
from models.layout_model import FlowArrangement, ItemSize, Point


def _xy(arrangement: FlowArrangement) -> list[tuple[float, float]]:
    return [position.as_tuple() for position in arrangement.positions]


def test_empty_input_yields_empty_arrangement() -> None:
    """No items produce no positions and a zero bounding size."""
    arrangement = arrange_flow([], max_width=100, spacing=10)

    assert arrangement.positions == ()
    assert arrangement.sizes == ()
    assert (arrangement.width, arrangement.height) == (0.0, 0.0)
    assert len(arrangement) == 0
    assert arrangement.line_count() == 0


def test_wraps_when_next_item_would_overflow() -> None:
    """Each 60-wide item overflows a 100-wide line once the cursor sits past 40."""
    arrangement = arrange_flow([(50, 20), (60, 20), (60, 20)], max_width=100, spacing=10)

    assert _xy(arrangement) == [(0, 0), (0, 30), (0, 60)]
    assert arrangement.width == 60
    assert arrangement.height == 80
    assert arrangement.line_count() == 3


def test_items_share_a_line_when_they_fit() -> None:
    arrangement = arrange_flow([(30, 10), (30, 25), (30, 10), (50, 15)], max_width=100, spacing=5)

    assert _xy(arrangement) == [(0, 0), (35, 0), (70, 0), (0, 30)]
    assert arrangement.width == 100
    assert arrangement.height == 45


def test_item_ending_exactly_at_max_width_stays_on_line() -> None:
    arrangement = arrange_flow([(40, 10), (50, 10)], max_width=100, spacing=10)

    assert _xy(arrangement) == [(0, 0), (50, 0)]
    assert arrangement.width == 100


def test_unbounded_width_keeps_single_line() -> None:
    sizes = [(200, 10), (300, 12), (400, 8)]

    for limit in (None, math.inf):
        arrangement = arrange_flow(sizes, max_width=limit, spacing=4)
        assert _xy(arrangement) == [(0, 0), (204, 0), (508, 0)]
        assert arrangement.width == 908
        assert arrangement.height == 12
        assert arrangement.line_count() == 1


def test_single_item_unbounded() -> None:
    arrangement = arrange_flow([(40, 15)])

    assert _xy(arrangement) == [(0, 0)]
    assert (arrangement.width, arrangement.height) == (40, 15)


def test_oversized_item_is_placed_alone_on_fresh_line() -> None:
    """An item wider than the line is never dropped and never loops."""
    arrangement = arrange_flow([(30, 10), (250, 20), (30, 10)], max_width=100, spacing=10)

    assert _xy(arrangement) == [(0, 0), (0, 20), (0, 50)]
    assert arrangement.width == 250
    assert arrangement.height == 60


def test_oversized_first_item_does_not_wrap_empty_line() -> None:
    arrangement = arrange_flow([(500, 40)], max_width=100, spacing=10)

    assert _xy(arrangement) == [(0, 0)]
    assert (arrangement.width, arrangement.height) == (500, 40)


def test_zero_width_items_advance_by_spacing_only() -> None:
    arrangement = arrange_flow([(0, 0), (0, 0), (0, 0)], max_width=100, spacing=5)

    assert _xy(arrangement) == [(0, 0), (5, 0), (10, 0)]
    assert arrangement.width == 10
    assert arrangement.height == 0


def test_line_height_is_tallest_item_on_the_line() -> None:
    arrangement = arrange_flow([(40, 10), (40, 35), (40, 5), (40, 5)], max_width=90, spacing=3)

    assert _xy(arrangement) == [(0, 0), (43, 0), (0, 38), (43, 38)]
    assert arrangement.height == 43


def test_same_line_items_never_overlap_and_gap_equals_spacing() -> None:
    spacing = 7.5
    sizes = [(13, 8), (27, 9), (8, 14), (31, 7), (19, 11), (22, 6), (5, 5), (40, 12)]
    arrangement = arrange_flow(sizes, max_width=80, spacing=spacing)

    frames = list(arrangement.frames())
    for (left_pos, left_size), (right_pos, _) in zip(frames, frames[1:]):
        if left_pos.y != right_pos.y:
            continue
        assert right_pos.x - (left_pos.x + left_size.width) == pytest.approx(spacing)
    for position, size in frames:
        assert position.x + size.width <= 80


def test_preserves_input_order_and_sizes() -> None:
    sizes = [(10 + index, 5 + index % 3) for index in range(12)]
    arrangement = arrange_flow(sizes, max_width=60, spacing=2)

    assert len(arrangement) == len(sizes)
    assert [size.as_tuple() for size in arrangement.sizes] == [
        (float(w), float(h)) for w, h in sizes
    ]
    ordered = sorted(arrangement.positions, key=lambda point: (point.y, point.x))
    assert list(arrangement.positions) == ordered


def test_accepts_item_size_instances() -> None:
    arrangement = arrange_flow([ItemSize(10, 10), (20, 5)], max_width=100, spacing=1)

    assert arrangement.positions == (Point(0, 0), Point(11, 0))
    assert arrangement.sizes == (ItemSize(10, 10), ItemSize(20, 5))


def test_repeated_calls_are_identical() -> None:
    sizes = [(33.3, 12.1), (47.9, 9.4), (21.0, 15.5), (60.2, 10.0)]

    first = arrange_flow(sizes, max_width=90, spacing=6.5)
    second = arrange_flow(sizes, max_width=90, spacing=6.5)

    assert first == second


def test_accepts_generators() -> None:
    arrangement = arrange_flow(((width, 10) for width in (10, 20, 30)), max_width=35, spacing=0)

    assert _xy(arrangement) == [(0, 0), (10, 0), (0, 10)]


def test_to_record_lists_items_in_order() -> None:
    record = arrange_flow([(10, 4), (6, 8)], spacing=2).to_record()

    assert record == {
        "width": 18.0,
        "height": 8.0,
        "items": [
            {"x": 0.0, "y": 0.0, "width": 10.0, "height": 4.0},
            {"x": 12.0, "y": 0.0, "width": 6.0, "height": 8.0},
        ],
    }


@pytest.mark.parametrize(
    "sizes",
    [
        [(-1, 10)],
        [(10, -0.5)],
        [(math.nan, 10)],
        [(10, math.inf)],
        [(10,)],
        [(1, 2, 3)],
        [5],
        [("wide", "tall")],
        ["12"],
        [b"12"],
        [bytearray(b"12")],
    ],
)
def test_rejects_malformed_sizes(sizes: list[object]) -> None:
    with pytest.raises(InvalidArrangementInputError):
        arrange_flow(sizes, max_width=100)  # type: ignore[arg-type]


@pytest.mark.parametrize("spacing", [-1.0, math.nan, math.inf])
def test_rejects_invalid_spacing(spacing: float) -> None:
    with pytest.raises(InvalidArrangementInputError):
        arrange_flow([(10, 10)], max_width=100, spacing=spacing)


@pytest.mark.parametrize("max_width", [0, -5, math.nan])
def test_rejects_invalid_max_width(max_width: float) -> None:
    with pytest.raises(InvalidArrangementInputError):
        arrange_flow([(10, 10)], max_width=max_width)


def test_invalid_input_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="item 1 width"):
        arrange_flow([(10, 10), (-3, 10)])
