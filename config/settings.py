"""Settings management utilities for Quill Cloud configuration.

Updates:
  v0.1.3 - 2026-10-16 - Read comma-separated palettes from environment variables.
  v0.1.2 - 2026-10-16 - Validate palette colours and font/opacity ranges.
  v0.1.1 - 2026-10-16 - Load optional JSON configuration ahead of environment variables.
  v0.1.0 - 2026-10-16 - Introduce word cloud and flow layout settings.
"""

from __future__ import annotations

import json
import logging
import math
import os
import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Annotated, Any, cast

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    NoDecode,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

CONFIG_JSON_ENV_VAR = "QUILL_CLOUD_CONFIG_JSON"
DEFAULT_CONFIG_PATH = Path("config") / "config.json"

DEFAULT_SPACING = 8.0
DEFAULT_MAX_WORDS = 40
DEFAULT_TOP_N = 50
DEFAULT_MIN_WORD_LENGTH = 3
DEFAULT_MIN_FONT_SIZE = 12.0
DEFAULT_MAX_FONT_SIZE = 40.0
DEFAULT_MIN_OPACITY = 0.6
DEFAULT_MAX_OPACITY = 1.0
DEFAULT_BADGE_PADDING_X = 6.0
DEFAULT_BADGE_PADDING_Y = 2.0
DEFAULT_FONT_FAMILY = "Helvetica"
DEFAULT_PALETTE: tuple[str, ...] = (
    "#007aff",  # blue
    "#af52de",  # purple
    "#ff2d55",  # pink
    "#ff9500",  # orange
    "#34c759",  # green
    "#30b0c7",  # teal
    "#5856d6",  # indigo
    "#32ade6",  # cyan
    "#00c7be",  # mint
    "#ff3b30",  # red
)

_HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_UNBOUNDED_WIDTH_TOKENS = {"", "none", "inf", "infinity", "unbounded"}

_JSON_CONFIG_KEYS = (
    "spacing",
    "max_words",
    "top_n",
    "min_word_length",
    "min_font_size",
    "max_font_size",
    "min_opacity",
    "max_opacity",
    "badge_padding_x",
    "badge_padding_y",
    "palette",
    "font_family",
    "layout_width",
)


class SettingsError(Exception):
    """Raised when Quill Cloud configuration cannot be loaded or validated."""


def _normalise_hex_color(value: object) -> str:
    text = str(value).strip()
    if _HEX_COLOR_PATTERN.fullmatch(text) is None:
        raise ValueError(f"palette entries must be hex colours such as #007aff, got {value!r}")
    if len(text) == 4:
        r, g, b = text[1], text[2], text[3]
        text = f"#{r}{r}{g}{g}{b}{b}"
    return text.lower()


class QuillCloudSettings(BaseSettings):
    """Application configuration sourced from keyword overrides, JSON files, or the environment."""

    spacing: float = Field(
        default=DEFAULT_SPACING,
        ge=0,
        description="Gap between neighbouring word badges and between wrapped lines.",
    )
    max_words: int = Field(
        default=DEFAULT_MAX_WORDS,
        ge=1,
        description="Maximum number of words displayed in a cloud.",
    )
    top_n: int = Field(
        default=DEFAULT_TOP_N,
        ge=1,
        description="Number of most frequent words returned by frequency analysis.",
    )
    min_word_length: int = Field(
        default=DEFAULT_MIN_WORD_LENGTH,
        ge=1,
        description="Shortest word counted by frequency analysis.",
    )
    min_font_size: float = Field(default=DEFAULT_MIN_FONT_SIZE, gt=0)
    max_font_size: float = Field(default=DEFAULT_MAX_FONT_SIZE, gt=0)
    min_opacity: float = Field(default=DEFAULT_MIN_OPACITY, ge=0, le=1)
    max_opacity: float = Field(default=DEFAULT_MAX_OPACITY, ge=0, le=1)
    badge_padding_x: float = Field(
        default=DEFAULT_BADGE_PADDING_X,
        ge=0,
        description="Horizontal padding added on each side of a word badge.",
    )
    badge_padding_y: float = Field(
        default=DEFAULT_BADGE_PADDING_Y,
        ge=0,
        description="Vertical padding added above and below a word badge.",
    )
    palette: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_PALETTE),
        description="Badge colours cycled in display order (hex).",
    )
    font_family: str = Field(
        default=DEFAULT_FONT_FAMILY,
        description="Font family used when measuring badges with Qt font metrics.",
    )
    layout_width: float | None = Field(
        default=None,
        description="Default line width for command line arrangements (unset for no wrapping).",
    )

    model_config = cast(
        "SettingsConfigDict",
        {
            "env_prefix": "QUILL_CLOUD_",
            "case_sensitive": False,
            "env_file": ".env",
            "env_file_encoding": "utf-8",
            "extra": "ignore",
        },
    )

    @field_validator("palette", mode="before")
    def _normalise_palette(cls, value: object) -> list[str]:
        """Accept JSON arrays, comma-separated strings, or sequences of hex colours."""
        if value in (None, "", [], ()):  # type: ignore[comparison-overlap]
            return list(DEFAULT_PALETTE)
        if isinstance(value, str):
            stripped = value.strip()
            try:
                parsed = json.loads(stripped)
            except json.JSONDecodeError:
                entries: Sequence[object] = [item for item in stripped.split(",") if item.strip()]
            else:
                if not isinstance(parsed, list):
                    raise ValueError("palette must be a list of hex colours")
                entries = cast("Sequence[object]", parsed)
        elif isinstance(value, Sequence):
            entries = cast("Sequence[object]", value)
        else:
            raise ValueError("palette must be a list of hex colours")
        colours = [_normalise_hex_color(entry) for entry in entries]
        if not colours:
            raise ValueError("palette must contain at least one colour")
        return colours

    @field_validator("font_family", mode="before")
    def _strip_font_family(cls, value: object) -> str:
        if value is None:
            return DEFAULT_FONT_FAMILY
        text = str(value).strip()
        return text or DEFAULT_FONT_FAMILY

    @field_validator("layout_width", mode="before")
    def _normalise_layout_width(cls, value: object) -> float | None:
        """Map empty or unbounded markers to ``None`` and reject non-positive widths."""
        if value is None:
            return None
        if isinstance(value, str):
            text = value.strip().lower()
            if text in _UNBOUNDED_WIDTH_TOKENS:
                return None
            value = text
        try:
            width = float(cast("Any", value))
        except (TypeError, ValueError) as exc:
            raise ValueError("layout_width must be a number") from exc
        if math.isinf(width):
            return None
        if math.isnan(width) or width <= 0:
            raise ValueError("layout_width must be greater than zero")
        return width

    @model_validator(mode="after")
    def _validate_ranges(self) -> QuillCloudSettings:
        if self.max_font_size < self.min_font_size:
            raise ValueError("max_font_size must not be smaller than min_font_size")
        if self.max_opacity < self.min_opacity:
            raise ValueError("max_opacity must not be smaller than min_opacity")
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Define configuration source precedence.

        Order (highest → lowest):
            1. Explicit keyword arguments (e.g. load_settings(spacing=4)).
            2. JSON configuration file.
            3. Environment variables prefixed with ``QUILL_CLOUD_``.
            4. ``.env`` file entries.
            5. File secrets.
        """
        return (
            init_settings,
            cls._json_config_settings_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    @classmethod
    def _json_config_settings_source(
        cls,
        _: type[BaseSettings],
    ) -> PydanticBaseSettingsSource:
        """Return settings extracted from an optional JSON config file."""

        def _loader(_: BaseSettings | None = None) -> dict[str, Any]:
            explicit_path = os.getenv(CONFIG_JSON_ENV_VAR)
            if explicit_path:
                path = Path(explicit_path).expanduser()
                if not path.exists():
                    raise SettingsError(f"Configuration file not found: {path}")
            else:
                path = DEFAULT_CONFIG_PATH
                if not path.exists():
                    return {}
            try:
                raw_contents = path.read_text(encoding="utf-8")
            except OSError as exc:  # pragma: no cover - filesystem failure is env-specific
                raise SettingsError(f"Unable to read configuration file: {path}") from exc
            try:
                data = json.loads(raw_contents)
            except json.JSONDecodeError as exc:
                raise SettingsError(f"Invalid JSON in configuration file: {path}") from exc
            if not isinstance(data, dict):
                raise SettingsError(f"Configuration file {path} must contain a JSON object")
            mapping_data = cast("Mapping[object, Any]", data)
            data_dict = {str(key): value for key, value in mapping_data.items()}
            unknown = sorted(set(data_dict) - set(_JSON_CONFIG_KEYS))
            if unknown:
                logger.warning(
                    "Ignoring unknown key(s) %s in configuration file %s",
                    ", ".join(unknown),
                    path,
                )
            return {key: data_dict[key] for key in _JSON_CONFIG_KEYS if key in data_dict}

        return cast("PydanticBaseSettingsSource", _loader)


def load_settings(**overrides: Any) -> QuillCloudSettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return QuillCloudSettings(**overrides)
    except SettingsError:
        raise
    except ValidationError as exc:
        raise SettingsError("Invalid Quill Cloud configuration") from exc
    except ValueError as exc:
        # pydantic-settings reports undecodable environment values as ValueError.
        raise SettingsError(f"Invalid Quill Cloud configuration: {exc}") from exc


logger = logging.getLogger("quill_cloud.settings")
