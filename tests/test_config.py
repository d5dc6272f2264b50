"""Tests for config loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from giv.config import GivConfig, ZoomConfig


class TestGivConfig:
    def test_defaults(self) -> None:
        cfg = GivConfig()
        assert cfg.zoom.coarse_step == 0.25
        assert cfg.zoom.fine_step == 0.01
        assert cfg.zoom.min_zoom == 0.01
        assert cfg.batch.reserved_rows == 1

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "giv.yaml"
        config_file.write_text(
            """\
zoom:
  coarse_step: 0.5
  fine_step: 0.05
  min_zoom: 0.1
batch:
  reserved_rows: 0
""",
            encoding="utf-8",
        )
        cfg = GivConfig.load(config_file)
        assert cfg.zoom.coarse_step == 0.5
        assert cfg.zoom.fine_step == 0.05
        assert cfg.zoom.min_zoom == 0.1
        assert cfg.batch.reserved_rows == 0

    def test_search_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "giv.yaml").write_text("zoom:\n  coarse_step: 1.0\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert GivConfig.load().zoom.coarse_step == 1.0

    def test_no_file_returns_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        cfg = GivConfig.load(None)
        assert cfg.zoom.coarse_step == 0.25

    def test_empty_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "giv.yaml"
        config_file.write_text("", encoding="utf-8")
        assert GivConfig.load(config_file) == GivConfig()

    def test_partial_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "giv.yaml"
        config_file.write_text("zoom:\n  fine_step: 0.02\n", encoding="utf-8")
        cfg = GivConfig.load(config_file)
        assert cfg.zoom.fine_step == 0.02
        assert cfg.zoom.coarse_step == 0.25  # default preserved
        assert cfg.batch.reserved_rows == 1  # default preserved


class TestZoomConfig:
    def test_zero_floor_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ZoomConfig(min_zoom=0)

    def test_negative_step_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ZoomConfig(fine_step=-0.01)
