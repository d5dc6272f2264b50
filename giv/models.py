"""Shared data models used across the giv renderer and viewer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union


class ScaleMode(str, enum.Enum):
    """How source pixels are mapped onto output cells."""

    BLOCK = "block"
    CONTINUOUS = "continuous"


class ZoomStep(str, enum.Enum):
    """Size of a single zoom increment."""

    COARSE = "coarse"
    FINE = "fine"


class Direction(str, enum.Enum):
    """Pan direction, named after the arrow key that triggers it."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DIRECTION_DELTAS[self]


_DIRECTION_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class ViewportSize:
    """Text viewport dimensions in character cells."""

    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class PanOffset:
    """Pixel offset applied to source coordinates before sampling."""

    x: int = 0
    y: int = 0

    def moved(self, dx: int, dy: int) -> PanOffset:
        return PanOffset(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class RenderFrame:
    """Output of a single render pass."""

    text: str
    block_size: int
    continuous_factor: float
    viewport_used: ViewportSize

    @property
    def rows(self) -> list[str]:
        """Rendered rows, without line breaks. Empty for an empty frame."""
        if not self.text:
            return []
        return self.text.split("\n")


@dataclass(frozen=True)
class ControllerState:
    """Interaction state of a viewing session.

    ``zoom`` is a fraction of native resolution; ``None`` until the first
    resize auto-fits the image to the window.
    """

    zoom: float | None = None
    offset: PanOffset = field(default_factory=PanOffset)
    last_window: ViewportSize = field(default_factory=lambda: ViewportSize(0, 0))


# -- Input events -----------------------------------------------------------


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class ZoomIn:
    step: ZoomStep = ZoomStep.COARSE


@dataclass(frozen=True)
class ZoomOut:
    step: ZoomStep = ZoomStep.COARSE


@dataclass(frozen=True)
class Pan:
    direction: Direction


@dataclass(frozen=True)
class Quit:
    pass


Event = Union[Resize, ZoomIn, ZoomOut, Pan, Quit]
