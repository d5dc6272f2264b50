"""Decode image files into read-only rasters for sampling."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageStat, UnidentifiedImageError

logger = logging.getLogger(__name__)

# Widens an 8-bit channel to 16 bits (0xff -> 0xffff).
_WIDEN = 0x101


class ImageLoadError(Exception):
    """Raised when an image file cannot be opened or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class Bounds:
    """Half-open pixel rectangle ``[min_x, max_x) x [min_y, max_y)``."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y


def _to_rgb(image: Image.Image) -> Image.Image:
    """Convert to 8-bit RGB, scaling 16- and 32-bit integer samples down first."""
    if image.mode == "I" or image.mode.startswith("I;16"):
        # convert("RGB") clips integer samples at 255 instead of scaling them
        image = image.convert("I").point(lambda v: v * (1 / 257) + 0.5).convert("L")
    return image.convert("RGB")


class Raster:
    """Read-only RGB raster backed by a Pillow image.

    Pixel values are reported with 16-bit channels so callers can sum at
    full precision before narrowing back to 8 bits.
    """

    def __init__(self, image: Image.Image, origin: tuple[int, int] = (0, 0)) -> None:
        self._image = _to_rgb(image)
        self._pixels = self._image.load()
        ox, oy = origin
        self.bounds = Bounds(ox, oy, ox + self._image.width, oy + self._image.height)

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def pixel_at(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the 16-bit (r, g, b) value at image coordinates (x, y)."""
        r, g, b = self._pixels[x - self.bounds.min_x, y - self.bounds.min_y]
        return r * _WIDEN, g * _WIDEN, b * _WIDEN

    def region_sum(self, x0: int, y0: int, x1: int, y1: int) -> tuple[int, int, int]:
        """Sum 16-bit channel values over ``[x0, x1) x [y0, y1)``."""
        box = (
            x0 - self.bounds.min_x,
            y0 - self.bounds.min_y,
            x1 - self.bounds.min_x,
            y1 - self.bounds.min_y,
        )
        stat = ImageStat.Stat(self._image.crop(box))
        r, g, b = (int(s) for s in stat.sum)
        return r * _WIDEN, g * _WIDEN, b * _WIDEN


def load_image(path: Path) -> Raster:
    """Open and fully decode an image file.

    Raises:
        ImageLoadError: if the file is missing, unreadable or not an image.
    """
    try:
        with Image.open(path) as img:
            img.load()
            raster = Raster(img)
    except FileNotFoundError as exc:
        raise ImageLoadError(path, "file not found") from exc
    except UnidentifiedImageError as exc:
        raise ImageLoadError(path, "unrecognized image format") from exc
    except Image.DecompressionBombError as exc:
        raise ImageLoadError(path, str(exc)) from exc
    except OSError as exc:
        raise ImageLoadError(path, exc.strerror or str(exc)) from exc

    logger.debug("Decoded %s (%dx%d)", path, raster.width, raster.height)
    return raster
