"""Configuration helpers for Quill Cloud.

Updates: v0.1.1 - 2026-10-16 - Expose word cloud defaults alongside the settings loader.
Updates: v0.1.0 - 2026-10-16 - Package scaffold.
"""

from .settings import (
    CONFIG_JSON_ENV_VAR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_MAX_WORDS,
    DEFAULT_PALETTE,
    DEFAULT_SPACING,
    DEFAULT_TOP_N,
    QuillCloudSettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "CONFIG_JSON_ENV_VAR",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_MAX_WORDS",
    "DEFAULT_PALETTE",
    "DEFAULT_SPACING",
    "DEFAULT_TOP_N",
    "QuillCloudSettings",
    "SettingsError",
    "load_settings",
]
