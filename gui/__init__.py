"""GUI module namespace for Quill Cloud.

Updates: v0.2.0 - 2026-10-16 - Expose Qt text measurement for word badges.
Updates: v0.1.0 - 2026-10-16 - Handle missing PySide6 dependency with friendly error.
"""

from __future__ import annotations

from typing import NoReturn


class GuiDependencyError(RuntimeError):
    """Raised when Qt-backed features are requested but PySide6 is absent."""


_MISSING_PYSIDE6_MESSAGE = (
    "PySide6 is not installed. Install dependencies with `pip install -e .` "
    "before using Qt font metrics, or rerun without --qt-metrics."
)

try:
    from .text_metrics import QtTextMeasurer
except ModuleNotFoundError as exc:  # pragma: no cover - exercised when PySide6 is missing
    if exc.name is None or not exc.name.startswith("PySide6"):
        raise

    def _raise_missing_pyside(*_: object, **__: object) -> NoReturn:
        raise GuiDependencyError(_MISSING_PYSIDE6_MESSAGE)

    QtTextMeasurer = _raise_missing_pyside  # type: ignore[assignment,misc]


__all__ = ["GuiDependencyError", "QtTextMeasurer"]
