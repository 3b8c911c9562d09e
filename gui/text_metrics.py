"""Qt font metrics adapter for word badge measurement.

Updates:
  v0.1.1 - 2026-10-16 - Bound the font metrics cache.
  v0.1.0 - 2026-10-16 - Measure badge text with QFontMetricsF.
"""

from __future__ import annotations

import functools
import logging
import os
import sys
from collections.abc import MutableMapping

from PySide6.QtGui import QFont, QFontMetricsF, QGuiApplication

_DISPLAY_ENV_VARS = ("DISPLAY", "WAYLAND_DISPLAY", "MIR_SOCKET")
METRICS_CACHE_SIZE = 32
logger = logging.getLogger("quill_cloud.gui.text_metrics")


def _should_force_offscreen(env: MutableMapping[str, str]) -> bool:
    """Return True when we should default Qt to the offscreen platform plugin."""
    if env.get("QT_QPA_PLATFORM"):
        return False

    if sys.platform.startswith(("win", "cygwin")) or sys.platform == "darwin":
        return False

    return not any(env.get(var) for var in _DISPLAY_ENV_VARS)


def ensure_gui_application() -> QGuiApplication:
    """Return the running Qt application, creating a headless-safe one when absent."""
    app = QGuiApplication.instance()
    if app is None:
        if _should_force_offscreen(os.environ):
            logger.debug("No display server detected; using the offscreen Qt platform")
            os.environ["QT_QPA_PLATFORM"] = "offscreen"
        app = QGuiApplication([])
    return app  # type: ignore[return-value]


class QtTextMeasurer:
    """Measure text with the metrics of *font_family* at the requested point size.

    Font sizes are rounded to hundredths of a point and at most
    ``METRICS_CACHE_SIZE`` metrics objects are kept alive per measurer.
    """

    def __init__(self, font_family: str, *, weight: QFont.Weight = QFont.Weight.Medium) -> None:
        ensure_gui_application()
        self._font_family = font_family
        self._weight = weight
        self._metrics_for = functools.lru_cache(maxsize=METRICS_CACHE_SIZE)(self._build_metrics)

    @property
    def font_family(self) -> str:
        return self._font_family

    def _build_metrics(self, font_size: float) -> QFontMetricsF:
        font = QFont(self._font_family)
        font.setPointSizeF(font_size)
        font.setWeight(self._weight)
        return QFontMetricsF(font)

    def measure(self, text: str, font_size: float) -> tuple[float, float]:
        metrics = self._metrics_for(round(font_size, 2))
        return (metrics.horizontalAdvance(text), metrics.height())


__all__ = ["QtTextMeasurer", "ensure_gui_application"]
