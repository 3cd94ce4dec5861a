"""Command line interface package."""

from promptpath.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
