"""Scale factor between image space and the two-rows-per-cell text grid."""

from __future__ import annotations

import math
from dataclasses import dataclass


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's ``round`` rounds halves to even, which would make sampling
    coordinates depend on the parity of the row or column index.
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Scale:
    """How many source pixels map onto one output pixel.

    ``factor`` is the continuous ratio, ``block_size`` its integer form used
    for grid-aligned sampling.
    """

    block_size: int
    factor: float

    @classmethod
    def from_factor(cls, factor: float) -> Scale:
        # ceil below 1 so a sampling window is never zero pixels wide
        if factor < 1:
            block_size = math.ceil(factor)
        else:
            block_size = round_half_up(factor)
        return cls(block_size=max(1, block_size), factor=factor)


def calculate_scale(
    image_height: int,
    image_width: int,
    viewport_height: int,
    viewport_width: int,
) -> Scale:
    """Compute the scale that fits an image into a viewport of text cells.

    Each cell shows two source rows (foreground and background colors), so
    the vertical extent compared against the image is ``viewport_height * 2``.
    The viewport must be non-empty.
    """
    width_ratio = image_width / viewport_width
    height_ratio = image_height / (viewport_height * 2)
    return Scale.from_factor(max(width_ratio, height_ratio))
