"""Command execution package for CLI."""

from promptpath.ui.cli.commands.output import create_sink
from promptpath.ui.cli.commands.path import PathCommand
from promptpath.ui.cli.commands.clock import TimeCommand

__all__ = [
    "PathCommand",
    "TimeCommand",
    "create_sink",
]
