"""Pytest configuration for shared test fixtures and environment hooks.

Updates:
  v0.1.1 - 2026-10-16 - Isolate tests from local config files and QUILL_CLOUD_ variables.
  v0.1.0 - 2026-10-16 - Force Qt offscreen platform for headless test runs.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest
from pytest import MonkeyPatch

from config import QuillCloudSettings, load_settings


def pytest_configure(config: Any) -> None:
    """Ensure Qt uses the offscreen platform during tests to avoid GUI aborts."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: MonkeyPatch, tmp_path: Path) -> Path:
    """Run each test from an empty directory without QUILL_CLOUD_ overrides."""
    for name in list(os.environ):
        if name.upper().startswith("QUILL_CLOUD_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings() -> QuillCloudSettings:
    """Return default settings resolved without any external configuration."""
    return load_settings()
