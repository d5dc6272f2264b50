"""giv: render images in the terminal with truecolor half-block glyphs."""

__version__ = "0.1.0"
