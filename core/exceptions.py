"""Common exception classes for the core package.

All exceptions ultimately inherit from :class:`QuillCloudError`, allowing
callers to catch a single base class for any layout or word cloud failure
while still distinguishing individual error categories when needed.

Updates:
  v0.2.0 - 2026-10-16 - Add word cloud exception for analysis input problems.
  v0.1.0 - 2026-10-16 - Created module with arrangement validation errors.
"""

from __future__ import annotations


class QuillCloudError(Exception):
    """Base exception for Quill Cloud failures."""


class InvalidArrangementInputError(QuillCloudError, ValueError):
    """Raised when item sizes or layout constraints violate the arranger contract."""


class WordCloudError(QuillCloudError):
    """Raised when word frequency analysis or badge sizing receives unusable input."""


__all__ = [
    "InvalidArrangementInputError",
    "QuillCloudError",
    "WordCloudError",
]
