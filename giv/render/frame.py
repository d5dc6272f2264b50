"""Terminal frame rendering using half-block characters.

Each character cell represents two vertical source rows: the foreground
color of the upper half block (U+2580) shows the top row, the background
color shows the bottom row.
"""

from __future__ import annotations

from giv.image import Raster
from giv.models import PanOffset, RenderFrame, ScaleMode, ViewportSize
from giv.render.sampler import RGB, sample
from giv.render.scale import Scale, calculate_scale, round_half_up

UPPER_HALF_BLOCK = "▀"
RESET = "\x1b[0m"


def _fg(color: RGB) -> str:
    r, g, b = color
    return f"\x1b[38;2;{r};{g};{b}m"


def _bg(color: RGB) -> str:
    r, g, b = color
    return f"\x1b[48;2;{r};{g};{b}m"


def render_frame(
    raster: Raster,
    viewport: ViewportSize,
    mode: ScaleMode = ScaleMode.BLOCK,
    offset: PanOffset | None = None,
    factor: float | None = None,
) -> RenderFrame:
    """Render the visible part of a raster into a block of ANSI-colored text.

    Args:
        raster: The decoded source image.
        viewport: Available size in character cells.
        mode: ``BLOCK`` samples on an integer grid fitted to the viewport;
            ``CONTINUOUS`` samples with ``factor`` source pixels per output
            pixel, shifted by ``offset``.
        offset: Pan offset in source pixels (continuous mode only).
        factor: Source pixels per output pixel. Defaults to the fit factor.

    Returns:
        A RenderFrame. Rows are separated by newlines; the last row has no
        trailing newline. An empty viewport yields empty text.
    """
    if viewport.is_empty:
        return RenderFrame(
            text="",
            block_size=1,
            continuous_factor=factor if factor else 1.0,
            viewport_used=viewport,
        )

    if mode is ScaleMode.CONTINUOUS and factor is not None:
        scale = Scale.from_factor(factor)
    else:
        scale = calculate_scale(raster.height, raster.width, viewport.height, viewport.width)

    if mode is ScaleMode.BLOCK:
        text = _render_blocks(raster, viewport, scale.block_size)
    else:
        text = _render_continuous(raster, viewport, scale.factor, offset or PanOffset())

    return RenderFrame(
        text=text,
        block_size=scale.block_size,
        continuous_factor=scale.factor,
        viewport_used=viewport,
    )


def _render_blocks(raster: Raster, viewport: ViewportSize, block_size: int) -> str:
    bounds = raster.bounds
    lines: list[str] = []

    for vy in range(viewport.height):
        y = vy * block_size * 2 + bounds.min_y
        if y >= bounds.max_y:
            continue

        parts: list[str] = []
        for vx in range(viewport.width):
            x = vx * block_size + bounds.min_x
            if x >= bounds.max_x:
                continue
            parts.append(_fg(sample(raster, x, y, block_size)))
            bottom = y + block_size
            if bottom < bounds.max_y:
                parts.append(_bg(sample(raster, x, bottom, block_size)))
            parts.append(UPPER_HALF_BLOCK)
        parts.append(RESET)
        lines.append("".join(parts))

    return "\n".join(lines)


def _render_continuous(
    raster: Raster, viewport: ViewportSize, factor: float, offset: PanOffset
) -> str:
    bounds = raster.bounds
    lines: list[str] = []

    for vy in range(viewport.height):
        y = round_half_up(vy * factor * 2) + bounds.min_y + offset.y
        if y >= bounds.max_y or y < bounds.min_y:
            continue

        parts: list[str] = []
        for vx in range(viewport.width):
            x = round_half_up(vx * factor) + bounds.min_x + offset.x
            if x >= bounds.max_x or x < bounds.min_x:
                continue
            parts.append(_fg(sample(raster, x, y, factor)))
            bottom = round_half_up(y + factor)
            if bottom < bounds.max_y:
                parts.append(_bg(sample(raster, x, bottom, factor)))
            parts.append(UPPER_HALF_BLOCK)
        parts.append(RESET)
        lines.append("".join(parts))

    return "\n".join(lines)
