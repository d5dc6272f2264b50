"""Box-average sampling of source pixel windows."""

from __future__ import annotations

from giv.image import Raster
from giv.render.scale import round_half_up

RGB = tuple[int, int, int]


def _window_span(window: int | float) -> int:
    if isinstance(window, int):
        return window
    return round_half_up(window)


def sample(raster: Raster, start_x: int, start_y: int, window: int | float) -> RGB:
    """Average the window starting at (start_x, start_y) into one 8-bit color.

    ``window`` is either an integer block size or a continuous scale factor.
    The window is clipped to the raster bounds and the average is taken over
    the pixels actually inside it, so edge windows are not darkened.
    """
    if window <= 1:
        r, g, b = raster.pixel_at(start_x, start_y)
        return r >> 8, g >> 8, b >> 8

    span = max(1, _window_span(window))
    bounds = raster.bounds
    x_upper = min(bounds.max_x, start_x + span)
    y_upper = min(bounds.max_y, start_y + span)

    count = (x_upper - start_x) * (y_upper - start_y)
    r_sum, g_sum, b_sum = raster.region_sum(start_x, start_y, x_upper, y_upper)

    # narrow to 8 bits only after averaging
    return (r_sum // count) >> 8, (g_sum // count) >> 8, (b_sum // count) >> 8
