"""Command line argument handling package."""

from promptpath.ui.cli.args.parser import ArgumentParser
from promptpath.ui.cli.args.options import CLIArgs, ColorMode, PathArgs, TimeArgs

__all__ = ["ArgumentParser", "CLIArgs", "ColorMode", "PathArgs", "TimeArgs"]
