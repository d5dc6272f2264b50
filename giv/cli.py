"""Command-line interface: batch printing and the interactive viewer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from giv import __version__
from giv.config import GivConfig
from giv.controller import ViewportController
from giv.image import ImageLoadError, load_image
from giv.models import Resize, ViewportSize
from giv.render.frame import render_frame
from giv.terminal import TerminalSizeError, get_terminal_size

app = typer.Typer(
    name="giv",
    help="Render images in the terminal with truecolor half-block characters.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"giv {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_config(path: Optional[Path]) -> GivConfig:  # noqa: UP007
    if path is not None and not path.is_file():
        console.print(f"[red]Config file not found:[/red] {path}")
        raise typer.Exit(code=1)
    return GivConfig.load(path)


def _require_paths(paths: Optional[List[Path]]) -> List[Path]:  # noqa: UP006, UP007
    if not paths:
        console.print("[red]Error:[/red] at least one image path is required")
        raise typer.Exit(code=1)
    return paths


@app.callback()
def main(
    version: Optional[bool] = typer.Option(  # noqa: UP007
        None, "--version", "-V", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Terminal image viewer."""
    _configure_logging(verbose)


@app.command()
def show(
    paths: Optional[List[Path]] = typer.Argument(  # noqa: UP006, UP007
        None, help="Image files to print.", show_default=False,
    ),
    width: Optional[int] = typer.Option(  # noqa: UP007
        None, "--width", "-W", min=0, help="Viewport width in columns. Defaults to the terminal width.",
    ),
    height: Optional[int] = typer.Option(  # noqa: UP007
        None, "--height", "-H", min=0, help="Viewport height in rows. Defaults to the terminal height.",
    ),
    zoom: Optional[float] = typer.Option(  # noqa: UP007
        None, "--zoom", "-z", help="Render at this fraction of native size instead of fitting.",
    ),
    config: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--config", "-c", help="Path to a giv.yaml config file.",
    ),
) -> None:
    """Print images to standard output, scaled to the terminal."""
    paths = _require_paths(paths)
    cfg = _load_config(config)

    if zoom is not None and zoom <= 0:
        console.print("[red]Error:[/red] --zoom must be greater than 0")
        raise typer.Exit(code=1)

    viewport = _batch_viewport(width, height, cfg.batch.reserved_rows)

    for path in paths:
        if len(paths) > 1:
            sys.stdout.write(f"==> {path} <==\n")
            sys.stdout.flush()

        try:
            raster = load_image(path)
        except ImageLoadError as exc:
            logger.warning("Could not load %s: %s", path, exc.reason)
            console.print(f"[red]Error:[/red] {path}: {exc.reason}", soft_wrap=True)
            continue

        if zoom is None:
            text = render_frame(raster, viewport).text
        else:
            controller = ViewportController(raster, cfg.zoom, zoom=zoom)
            controller.dispatch(Resize(viewport.width, viewport.height))
            text = controller.text

        if text:
            sys.stdout.write(text + "\n")
            sys.stdout.flush()


def _batch_viewport(width: Optional[int], height: Optional[int], reserved_rows: int) -> ViewportSize:  # noqa: UP007
    """Resolve the batch viewport from options, falling back to ``stty size``."""
    if width is not None and height is not None:
        return ViewportSize(width, height)

    try:
        term = get_terminal_size()
    except TerminalSizeError as exc:
        console.print(f"[red]Cannot determine terminal size:[/red] {exc}")
        console.print("[dim]Pass --width and --height to render without a terminal.[/dim]")
        raise typer.Exit(code=1)

    return ViewportSize(
        width=width if width is not None else term.width,
        height=height if height is not None else max(0, term.height - reserved_rows),
    )


@app.command()
def view(
    paths: Optional[List[Path]] = typer.Argument(  # noqa: UP006, UP007
        None, help="Image file to open. Only the first path is shown.", show_default=False,
    ),
    config: Optional[Path] = typer.Option(  # noqa: UP007
        None, "--config", "-c", help="Path to a giv.yaml config file.",
    ),
) -> None:
    """Open an image in the interactive viewer (zoom with +/-, pan with arrows)."""
    paths = _require_paths(paths)
    cfg = _load_config(config)

    from giv.viewer.app import ViewerApp

    ViewerApp(image_path=paths[0], zoom_config=cfg.zoom).run()
