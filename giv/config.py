"""Pydantic configuration model with YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

_DEFAULT_CONFIG_NAME = "giv.yaml"


class ZoomConfig(BaseModel):
    """Interactive zoom settings, as fractions of native resolution."""

    coarse_step: float = Field(0.25, gt=0)
    fine_step: float = Field(0.01, gt=0)
    min_zoom: float = Field(0.01, gt=0)


class BatchConfig(BaseModel):
    """Settings for printing images straight to the terminal."""

    # The shell prompt line would otherwise scroll the top rows away.
    reserved_rows: int = Field(1, ge=0)


class GivConfig(BaseModel):
    """Top-level configuration for giv."""

    zoom: ZoomConfig = Field(default_factory=ZoomConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> GivConfig:
        """Load config from a YAML file.

        Search order when *path* is None:
          1. ./giv.yaml
          2. ~/.config/giv/giv.yaml

        Returns default config if no file is found.
        """
        if path is not None:
            return cls._from_yaml(path)

        candidates = [
            Path.cwd() / _DEFAULT_CONFIG_NAME,
            Path.home() / ".config" / "giv" / _DEFAULT_CONFIG_NAME,
        ]
        for candidate in candidates:
            if candidate.is_file():
                return cls._from_yaml(candidate)

        return cls()

    @classmethod
    def _from_yaml(cls, path: Path) -> GivConfig:
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw)
