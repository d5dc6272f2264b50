"""Textual TUI app for viewing a single image with zoom and pan."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from giv.config import ZoomConfig
from giv.controller import ViewportController
from giv.image import ImageLoadError, load_image
from giv.models import Direction, Event, Pan, Quit, Resize, ZoomIn, ZoomOut, ZoomStep
from giv.viewer.widgets import ImageView, frame_summary_text

logger = logging.getLogger(__name__)


class ViewerApp(App):
    """Full-screen viewer that re-renders the image on every input event."""

    TITLE = "giv"

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("plus", "zoom_in('fine')", "Zoom in"),
        Binding("equals_sign", "zoom_in('coarse')", "Zoom in x25", show=False),
        Binding("minus", "zoom_out('fine')", "Zoom out"),
        Binding("underscore", "zoom_out('coarse')", "Zoom out x25", show=False),
        Binding("up", "pan('up')", "Pan", show=False),
        Binding("down", "pan('down')", "Pan", show=False),
        Binding("left", "pan('left')", "Pan", show=False),
        Binding("right", "pan('right')", "Pan"),
    ]

    def __init__(
        self,
        image_path: Path,
        zoom_config: ZoomConfig | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(**kwargs)
        self.image_path = image_path
        self.controller = self._load_controller(image_path, zoom_config)

    @staticmethod
    def _load_controller(path: Path, zoom_config: ZoomConfig | None) -> ViewportController:
        """Decode the image; a failure still yields a controller with no image."""
        try:
            raster = load_image(path)
        except ImageLoadError as exc:
            logger.warning("Could not load %s: %s", path, exc.reason)
            return ViewportController(None, zoom_config, error=exc.reason)
        return ViewportController(raster, zoom_config)

    def compose(self) -> ComposeResult:
        yield Header()
        yield ImageView(id="image-view")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_view()

    def _dispatch(self, event: Event) -> None:
        self.controller.dispatch(event)
        self._refresh_view()

    def _refresh_view(self) -> None:
        """Push the controller's current frame and summary to the screen."""
        view = self.query_one("#image-view", ImageView)
        view.show(self.controller.text, centered=self.controller.centered)

        raster = self.controller.raster
        if raster is None:
            self.sub_title = self.image_path.name
        else:
            summary = frame_summary_text(raster.width, raster.height, self.controller.state.zoom)
            self.sub_title = f"{self.image_path.name} | {summary}"

    def on_image_view_viewport_changed(self, message: ImageView.ViewportChanged) -> None:
        self._dispatch(Resize(message.width, message.height))

    def action_zoom_in(self, step: str) -> None:
        """Zoom in by a fine or coarse step."""
        self._dispatch(ZoomIn(ZoomStep(step)))

    def action_zoom_out(self, step: str) -> None:
        """Zoom out by a fine or coarse step, never below the zoom floor."""
        self._dispatch(ZoomOut(ZoomStep(step)))

    def action_pan(self, direction: str) -> None:
        """Move the view by one pixel."""
        self._dispatch(Pan(Direction(direction)))

    async def action_quit(self) -> None:
        """End the session."""
        self.controller.dispatch(Quit())
        self.exit()
