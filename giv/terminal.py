"""Terminal size discovery."""

from __future__ import annotations

import logging
import subprocess
import sys

from giv.models import ViewportSize

logger = logging.getLogger(__name__)


class TerminalSizeError(Exception):
    """Raised when the terminal size cannot be determined."""


def parse_stty_size(output: str) -> ViewportSize:
    """Parse ``stty size`` output (``"<rows> <cols>"``)."""
    parts = output.split()
    if len(parts) != 2:
        raise TerminalSizeError(f"unexpected 'stty size' output: {output.strip()!r}")
    try:
        rows, cols = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise TerminalSizeError(f"unexpected 'stty size' output: {output.strip()!r}") from exc
    return ViewportSize(width=cols, height=rows)


def get_terminal_size() -> ViewportSize:
    """Query the controlling terminal's size via ``stty size``.

    Raises:
        TerminalSizeError: if ``stty`` is unavailable or stdin is not a terminal.
    """
    try:
        result = subprocess.run(
            ["stty", "size"],
            stdin=sys.stdin,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, ValueError, subprocess.CalledProcessError) as exc:
        raise TerminalSizeError(f"error calling 'stty size': {exc}") from exc

    size = parse_stty_size(result.stdout)
    logger.debug("Terminal size: %dx%d", size.width, size.height)
    return size
