"""Reusable Qt widgets and layouts shared across Quill Cloud.

Updates:
  v0.1.0 - 2026-10-16 - Introduce widgets package for the flow layout.
"""

from .flow_layout import FlowLayout

__all__ = ["FlowLayout"]
