"""Textual widgets for the interactive image viewer."""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Static


class ImageView(Static):
    """Displays a rendered frame and reports its own size as the window."""

    DEFAULT_CSS = """
    ImageView {
        width: 1fr;
        height: 1fr;
        padding: 0;
        content-align: left top;
    }
    ImageView.-centered {
        content-align: center middle;
    }
    """

    class ViewportChanged(Message):
        """Posted when the widget's size in cells changes."""

        def __init__(self, width: int, height: int) -> None:
            super().__init__()
            self.width = width
            self.height = height

    frame_text: reactive[str] = reactive("")

    def on_resize(self, event: events.Resize) -> None:
        self.post_message(self.ViewportChanged(event.size.width, event.size.height))

    def show(self, text: str, *, centered: bool) -> None:
        self.set_class(centered, "-centered")
        self.frame_text = text

    def render(self) -> Text:
        return Text.from_ansi(self.frame_text, no_wrap=True, overflow="crop", end="")


def frame_summary_text(width: int, height: int, zoom: float | None) -> str:
    """Format image size and zoom for the title bar."""
    if zoom is None:
        return f"{width}x{height}"
    return f"{width}x{height} | {zoom * 100:.0f}%"
