"""Command line interface for promptpath."""

import sys
from typing import final

from promptpath.platform.logging import logger
from promptpath.ui.cli.args import ArgumentParser
from promptpath.ui.cli.args.options import CLIArgs, PathArgs, TimeArgs
from promptpath.ui.cli.commands import PathCommand, TimeCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, PathArgs):
                _ = PathCommand(args).execute()
                return

            assert isinstance(args, TimeArgs)
            _ = TimeCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except OSError as e:
            logger.error("Failed to write prompt: %s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
