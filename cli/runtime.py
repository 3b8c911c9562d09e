"""Runtime boot helpers for the Quill Cloud CLI.

Updates:
  v0.1.0 - 2026-10-16 - Extract logging configuration helpers.
"""

from __future__ import annotations

import configparser
import logging
import logging.config
from pathlib import Path

DEFAULT_LOGGING_CONFIG = Path("config/logging.conf")


def setup_logging(logging_conf_path: Path | None) -> None:
    """Configure logging using *logging_conf_path* when available."""
    path = logging_conf_path or DEFAULT_LOGGING_CONFIG
    if path.exists():
        try:
            logging.config.fileConfig(path, disable_existing_loggers=False)
            return
        except (OSError, KeyError, ValueError, configparser.Error) as exc:  # pragma: no cover
            logging.getLogger("quill_cloud.runtime").warning(
                "Ignoring unusable logging configuration %s: %s", path, exc
            )
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
