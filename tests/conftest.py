"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from giv.config import ZoomConfig
from tests.fixtures.images import BLUE, RED, write_png


@pytest.fixture
def zoom_config() -> ZoomConfig:
    return ZoomConfig()


@pytest.fixture
def red_png(tmp_path: Path) -> Path:
    """A 4x4 solid red PNG."""
    return write_png(tmp_path / "red.png", 4, 4, RED)


@pytest.fixture
def large_png(tmp_path: Path) -> Path:
    """A 200x200 solid blue PNG, larger than any test viewport."""
    return write_png(tmp_path / "large.png", 200, 200, BLUE)


@pytest.fixture
def broken_png(tmp_path: Path) -> Path:
    """A file with an image extension that is not an image."""
    path = tmp_path / "broken.png"
    path.write_text("not really a png", encoding="utf-8")
    return path
