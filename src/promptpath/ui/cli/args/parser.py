"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Mapping, Sequence
from dataclasses import replace
from pathlib import Path
from typing import final

from promptpath.config.paths import resolve_log_file
from promptpath.config.settings import Settings, SettingsError, parse_max_elems
from promptpath.features.render import (
    InvalidJoinerPolicyError,
    InvalidStyleError,
    JoinerPolicy,
    StyleDescriptor,
)
from promptpath.platform.environment import current_directory, resolve_home
from promptpath.platform.logging import logger, setup_logger
from promptpath.ui.cli.args.options import CLIArgs, ColorMode, PathArgs, TimeArgs

EXIT_FAILURE: int = 1
EXIT_USAGE: int = 2


def _max_elems_type(value: str) -> int | None:
    try:
        return parse_max_elems("--max-elems", value)
    except SettingsError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="promptpath",
            description="promptpath - Render the current directory as a compact, colored prompt segment.",
            epilog="Defaults can be set with PROMPTPATH_* environment variables.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        path_parser = subparsers.add_parser(
            "path",
            help="Render a path (the working directory by default)",
        )
        _ = path_parser.add_argument(
            "path",
            nargs="?",
            type=str,
            help="Path to render (defaults to the current working directory)",
            metavar="PATH",
        )
        _ = path_parser.add_argument(
            "--separator",
            type=str,
            help="Text written between elements",
        )
        bound_group = path_parser.add_mutually_exclusive_group()
        _ = bound_group.add_argument(
            "--max-elems",
            type=_max_elems_type,
            default=argparse.SUPPRESS,
            metavar="N",
            help="Show at most N elements from the root ('unbounded' for all)",
        )
        _ = bound_group.add_argument(
            "--unbounded",
            action="store_true",
            help="Show every element",
        )
        _ = path_parser.add_argument(
            "--no-home",
            action="store_true",
            help="Do not collapse the home directory into '~'",
        )
        _ = path_parser.add_argument(
            "--log-file",
            type=str,
            metavar="LOG_FILE",
            help="Also write debug logs to LOG_FILE",
        )
        ArgumentParser._configure_output_options(path_parser)

        time_parser = subparsers.add_parser(
            "time",
            help="Render the current local time",
        )
        _ = time_parser.add_argument(
            "--format",
            dest="time_format",
            type=str,
            help="strftime format of the timestamp",
        )
        ArgumentParser._configure_output_options(time_parser)

        return parser

    @staticmethod
    def process_args(
        args_list: Sequence[str] | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
            env: Environment mapping to read settings from (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the settings or colors are invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        try:
            settings = Settings.from_env(env)
        except SettingsError as exc:
            _ = setup_logger(console_level=log_level)
            logger.error("Invalid setting: %s", exc)
            sys.exit(EXIT_USAGE)

        log_file_path = resolve_log_file(getattr(parsed_args, "log_file", None), env) or settings.log_file
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "path":
            return ArgumentParser._process_path(parsed_args, settings)

        if command == "time":
            return ArgumentParser._process_time(parsed_args, settings)

        logger.error("Unsupported command: %s", command)
        sys.exit(EXIT_USAGE)

    @staticmethod
    def _configure_output_options(parser: argparse.ArgumentParser) -> None:
        """Apply shared styling and verbosity options to a subparser."""

        _ = parser.add_argument(
            "--fg",
            type=str,
            metavar="COLOR",
            help="Foreground color (rich color name, color(N) or #rrggbb)",
        )
        _ = parser.add_argument(
            "--bg",
            type=str,
            metavar="COLOR",
            help="Background color (rich color name, color(N) or #rrggbb)",
        )
        _ = parser.add_argument(
            "--plain",
            action="store_true",
            help="Write the text without any color",
        )
        _ = parser.add_argument(
            "--color",
            choices=("auto", "always", "never"),
            default="always",
            help="When to emit color escape sequences (default: %(default)s)",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Log debugging information to stderr",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )

    @staticmethod
    def _build_style(parsed_args: argparse.Namespace, settings: Settings) -> StyleDescriptor | None:
        if parsed_args.plain:
            return None
        styled = settings.with_overrides(foreground=parsed_args.fg, background=parsed_args.bg)
        try:
            return styled.style()
        except InvalidStyleError as exc:
            logger.error("%s", exc)
            sys.exit(EXIT_USAGE)

    @staticmethod
    def _process_path(parsed_args: argparse.Namespace, settings: Settings) -> PathArgs:
        if parsed_args.path:
            path = Path(parsed_args.path)
        else:
            try:
                path = current_directory()
            except FileNotFoundError as exc:
                logger.error("Working directory is unavailable and PWD is unset: %s", exc)
                sys.exit(EXIT_FAILURE)

        settings = settings.with_overrides(separator=parsed_args.separator)
        if parsed_args.unbounded:
            settings = replace(settings, max_elems=None)
        elif hasattr(parsed_args, "max_elems"):
            settings = replace(settings, max_elems=parsed_args.max_elems)
        try:
            policy: JoinerPolicy = settings.policy()
        except InvalidJoinerPolicyError as exc:
            logger.error("%s", exc)
            sys.exit(EXIT_USAGE)

        show_home = settings.show_home and not parsed_args.no_home
        color: ColorMode = parsed_args.color

        return PathArgs(
            command="path",
            path=path,
            show_home=show_home,
            home=resolve_home() if show_home else None,
            policy=policy,
            style=ArgumentParser._build_style(parsed_args, settings),
            color=color,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_time(parsed_args: argparse.Namespace, settings: Settings) -> TimeArgs:
        color: ColorMode = parsed_args.color
        return TimeArgs(
            command="time",
            time_format=parsed_args.time_format or settings.time_format,
            style=ArgumentParser._build_style(parsed_args, settings),
            color=color,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
