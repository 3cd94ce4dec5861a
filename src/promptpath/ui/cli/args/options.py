"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from promptpath.features.render import JoinerPolicy, StyleDescriptor

ColorMode = Literal["auto", "always", "never"]


@final
@dataclass(slots=True)
class PathArgs:
    """Command line arguments for the ``path`` subcommand."""

    command: Literal["path"]
    path: Path
    show_home: bool
    home: Path | None
    policy: JoinerPolicy
    style: StyleDescriptor | None
    color: ColorMode
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class TimeArgs:
    """Command line arguments for the ``time`` subcommand."""

    command: Literal["time"]
    time_format: str
    style: StyleDescriptor | None
    color: ColorMode
    verbose: bool
    quiet: bool


CLIArgs = PathArgs | TimeArgs
