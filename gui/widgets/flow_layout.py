"""Flow layout that positions child widgets with the shared flow arranger.

Updates:
  v0.2.0 - 2026-10-16 - Delegate wrapping to core.flow_arranger.arrange_flow.
  v0.1.1 - 2026-10-16 - Align layout overrides with PySide6 typing requirements.
  v0.1.0 - 2026-10-16 - Extract FlowLayout for word badge containers.
"""

from __future__ import annotations

from PySide6.QtCore import QPoint, QRect, QSize, Qt
from PySide6.QtWidgets import QLayout, QLayoutItem, QWidget, QWidgetItem

from core.flow_arranger import arrange_flow
from models.layout_model import FlowArrangement, ItemSize


class FlowLayout(QLayout):
    """Layout that arranges widgets left-to-right and wraps on overflow."""

    def __init__(
        self, parent: QWidget | None = None, *, margin: int = 0, spacing: int = -1
    ) -> None:
        """Initialise the layout with optional *margin* and *spacing* overrides."""
        super().__init__(parent)
        self.setContentsMargins(margin, margin, margin, margin)
        self._item_list: list[QLayoutItem] = []
        self._arrangement = FlowArrangement()
        default_spacing = spacing if spacing >= 0 else self.spacing()
        self.setSpacing(default_spacing if default_spacing >= 0 else 0)

    def addItem(self, item: QLayoutItem) -> None:
        """Qt hook that inserts a layout item."""
        self._item_list.append(item)

    def addWidget(self, widget: QWidget) -> None:
        """Convenience helper to add a QWidget."""
        self.addChildWidget(widget)
        self.addItem(QWidgetItem(widget))

    def count(self) -> int:
        """Return the number of managed items."""
        return len(self._item_list)

    def itemAt(self, index: int) -> QLayoutItem | None:
        """Return the item at *index* if it exists."""
        if 0 <= index < len(self._item_list):
            return self._item_list[index]
        return None

    def takeAt(self, index: int) -> QLayoutItem:
        """Remove and return the item at *index*."""
        if 0 <= index < len(self._item_list):
            return self._item_list.pop(index)
        raise IndexError("FlowLayout index out of range")

    def expandingDirections(self) -> Qt.Orientation:
        """FlowLayout never expands to fill space."""
        return Qt.Orientation(0)

    def hasHeightForWidth(self) -> bool:
        """Report that height depends on width."""
        return True

    def heightForWidth(self, width: int) -> int:
        """Return required height for a given *width*."""
        return self._do_layout(QRect(0, 0, width, 0), test_only=True)

    def setGeometry(self, rect: QRect) -> None:
        """Position child widgets within *rect*."""
        super().setGeometry(rect)
        self._do_layout(rect, test_only=False)

    def sizeHint(self) -> QSize:
        """Return the preferred size for the layout."""
        return self.minimumSize()

    def minimumSize(self) -> QSize:
        """Return the minimum size derived from child widgets."""
        size = QSize()
        for item in self._item_list:
            size = size.expandedTo(item.minimumSize())
        left, top, right, bottom = self.getContentsMargins()
        size += QSize(left + right, top + bottom)
        return size

    def arrangement(self) -> FlowArrangement:
        """Return the arrangement applied by the most recent geometry update."""
        return self._arrangement

    def _visible_items(self) -> list[QLayoutItem]:
        visible: list[QLayoutItem] = []
        for item in self._item_list:
            widget = item.widget()
            if widget is None or widget.isHidden():
                continue
            visible.append(item)
        return visible

    def _do_layout(self, rect: QRect, *, test_only: bool) -> int:
        """Lay out items either virtually (when *test_only*) or for rendering."""
        left, top, right, bottom = self.getContentsMargins()
        effective_rect = rect.adjusted(left, top, -right, -bottom)
        items = self._visible_items()
        hints = [item.sizeHint() for item in items]
        arrangement = arrange_flow(
            (ItemSize(hint.width(), hint.height()) for hint in hints),
            max_width=max(effective_rect.width(), 1),
            spacing=max(self.spacing(), 0),
        )

        if not test_only:
            self._arrangement = arrangement
            for item, hint, position in zip(items, hints, arrangement.positions, strict=True):
                origin = QPoint(
                    effective_rect.x() + round(position.x),
                    effective_rect.y() + round(position.y),
                )
                item.setGeometry(QRect(origin, hint))

        return round(arrangement.height) + top + bottom


__all__ = ["FlowLayout"]
