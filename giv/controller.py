"""Interactive zoom and pan state for a viewing session.

State transitions are a pure reducer (``reduce``) over immutable
``ControllerState`` values. ``ViewportController`` owns the current state and
the last rendered frame, and re-renders after every transition that changes
the state.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import assert_never

from giv.config import ZoomConfig
from giv.image import Raster
from giv.models import (
    ControllerState,
    Event,
    Pan,
    PanOffset,
    Quit,
    RenderFrame,
    Resize,
    ScaleMode,
    ViewportSize,
    ZoomIn,
    ZoomOut,
    ZoomStep,
)
from giv.render.frame import render_frame
from giv.render.scale import calculate_scale

logger = logging.getLogger(__name__)

# Absorbs float error in zoom * size products (e.g. 3 * (7 / 3) > 7).
_EPSILON = 1e-9

ImageSize = tuple[int, int]


@dataclass(frozen=True)
class ViewLayout:
    """Geometry of the zoomed image against the available window."""

    scaled_width: float
    scaled_height: float
    fits_horizontally: bool
    fits_vertically: bool
    viewport: ViewportSize
    max_offset: PanOffset

    @property
    def fits(self) -> bool:
        """True when the whole zoomed image is visible (whole-image-fit)."""
        return self.fits_horizontally and self.fits_vertically


def _ceil(value: float) -> int:
    return math.ceil(value - _EPSILON)


def compute_layout(zoom: float, window: ViewportSize, image_size: ImageSize) -> ViewLayout:
    """Lay out an image at ``zoom`` inside ``window``.

    Sizes are in output pixels: one per cell horizontally, two per cell
    vertically.
    """
    image_width, image_height = image_size
    scaled_width = image_width * zoom
    scaled_height = image_height * zoom
    window_pixel_height = window.height * 2

    fits_h = scaled_width <= window.width + _EPSILON
    fits_v = scaled_height <= window_pixel_height + _EPSILON

    viewport = ViewportSize(
        width=max(0, min(window.width, _ceil(scaled_width))),
        height=max(0, min(window.height, _ceil(scaled_height / 2))),
    )
    max_offset = PanOffset(
        x=0 if fits_h else max(0, _ceil(image_width - window.width / zoom)),
        y=0 if fits_v else max(0, _ceil(image_height - window_pixel_height / zoom)),
    )
    return ViewLayout(
        scaled_width=scaled_width,
        scaled_height=scaled_height,
        fits_horizontally=fits_h,
        fits_vertically=fits_v,
        viewport=viewport,
        max_offset=max_offset,
    )


def initial_zoom(image_size: ImageSize, window: ViewportSize, min_zoom: float) -> float | None:
    """Zoom that fits the whole image into ``window``, or None for an empty window."""
    if window.is_empty:
        return None
    image_width, image_height = image_size
    factor = calculate_scale(image_height, image_width, window.height, window.width).factor
    if factor <= 0:
        return 1.0
    return max(min_zoom, 1 / factor)


def _step_size(step: ZoomStep, config: ZoomConfig) -> float:
    if step is ZoomStep.FINE:
        return config.fine_step
    return config.coarse_step


def _clamp(value: int, upper: int) -> int:
    return max(0, min(upper, value))


def _normalize(state: ControllerState, image_size: ImageSize | None) -> ControllerState:
    """Reset or clamp the pan offset for the current zoom and window."""
    if image_size is None or state.zoom is None:
        return state

    layout = compute_layout(state.zoom, state.last_window, image_size)
    if layout.fits:
        offset = PanOffset()
    else:
        offset = PanOffset(
            x=_clamp(state.offset.x, layout.max_offset.x),
            y=_clamp(state.offset.y, layout.max_offset.y),
        )
    if offset == state.offset:
        return state
    return replace(state, offset=offset)


def reduce(
    state: ControllerState,
    event: Event,
    image_size: ImageSize | None,
    config: ZoomConfig,
) -> ControllerState:
    """Return the state that follows ``state`` after ``event``.

    ``image_size`` is ``(width, height)``, or None when no image is loaded;
    zoom and pan are then no-ops. Quit does not change the state.
    """
    if isinstance(event, Resize):
        window = ViewportSize(max(0, event.width), max(0, event.height))
        zoom = state.zoom
        if zoom is None and image_size is not None:
            zoom = initial_zoom(image_size, window, config.min_zoom)
        new_state = replace(state, zoom=zoom, last_window=window)
    elif isinstance(event, ZoomIn):
        if image_size is None or state.zoom is None:
            return state
        new_state = replace(state, zoom=state.zoom + _step_size(event.step, config))
    elif isinstance(event, ZoomOut):
        if image_size is None or state.zoom is None:
            return state
        zoom = max(config.min_zoom, state.zoom - _step_size(event.step, config))
        new_state = replace(state, zoom=zoom)
    elif isinstance(event, Pan):
        if image_size is None or state.zoom is None:
            return state
        layout = compute_layout(state.zoom, state.last_window, image_size)
        dx, dy = event.direction.delta
        if layout.fits_horizontally:
            dx = 0
        if layout.fits_vertically:
            dy = 0
        new_state = replace(state, offset=state.offset.moved(dx, dy))
    elif isinstance(event, Quit):
        return state
    else:
        assert_never(event)

    return _normalize(new_state, image_size)


class ViewportController:
    """Holds the interaction state of one session and the frame it produced."""

    def __init__(
        self,
        raster: Raster | None,
        config: ZoomConfig | None = None,
        *,
        error: str | None = None,
        zoom: float | None = None,
    ) -> None:
        self.raster = raster
        self.error = error
        self.config = config or ZoomConfig()
        self.state = ControllerState(zoom=zoom)
        self.frame: RenderFrame | None = None
        self.finished = False

    @property
    def image_size(self) -> ImageSize | None:
        if self.raster is None:
            return None
        return self.raster.width, self.raster.height

    @property
    def layout(self) -> ViewLayout | None:
        image_size = self.image_size
        if image_size is None or self.state.zoom is None:
            return None
        return compute_layout(self.state.zoom, self.state.last_window, image_size)

    @property
    def centered(self) -> bool:
        """Whether the frame should be centered (whole-image-fit)."""
        layout = self.layout
        return layout is not None and layout.fits

    @property
    def text(self) -> str:
        """Text to show in the image area: the frame or an error placeholder."""
        if self.raster is None:
            return f"[Could not load image: {self.error or 'no image'}]"
        if self.frame is None:
            return ""
        return self.frame.text

    def dispatch(self, event: Event) -> RenderFrame | None:
        """Apply an event and return the resulting frame.

        Returns None once the session has quit or while nothing can be rendered.
        """
        if self.finished:
            logger.debug("Session finished, ignoring %r", event)
            return None
        if isinstance(event, Quit):
            self.finished = True
            return None

        new_state = reduce(self.state, event, self.image_size, self.config)
        if new_state == self.state and self.frame is not None:
            return self.frame

        logger.debug("%r: %r -> %r", event, self.state, new_state)
        self.state = new_state
        self.frame = self._render()
        return self.frame

    def _render(self) -> RenderFrame | None:
        layout = self.layout
        if self.raster is None or layout is None or self.state.zoom is None:
            return None
        return render_frame(
            self.raster,
            layout.viewport,
            ScaleMode.CONTINUOUS,
            self.state.offset,
            factor=1 / self.state.zoom,
        )
