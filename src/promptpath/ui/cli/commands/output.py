"""Terminal sink construction shared by CLI commands."""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console

from promptpath.platform.terminal import AnsiStyleSink
from promptpath.ui.cli.args.options import ColorMode


def create_sink(color: ColorMode, stream: TextIO | None = None) -> AnsiStyleSink:
    """Create a stdout sink honoring ``--color``.

    ``auto`` leaves terminal and ``NO_COLOR`` detection to rich.
    """

    file = stream if stream is not None else sys.stdout
    if color == "never":
        return AnsiStyleSink(file, None)
    console = Console(file=file, force_terminal=True if color == "always" else None)
    return AnsiStyleSink.from_console(console)
