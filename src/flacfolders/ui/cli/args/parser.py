"""Command line argument parser."""

import argparse
import glob
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from flacfolders import __version__
from flacfolders.config import Config, default_log_file
from flacfolders.platform.logging import logger, setup_logger
from flacfolders.ui.cli.args.options import OrganizeArgs

_GLOB_CHARACTERS = frozenset("*?[")


def expand_arguments(raw_arguments: Sequence[str]) -> list[Path]:
    """Expand shell-style patterns the shell left untouched.

    An argument that exists literally is kept as is. Otherwise, if it holds
    glob characters, it is replaced by its sorted matches. A pattern with no
    matches stays as a literal argument so it is reported as a failure later.

    Args:
        raw_arguments: Positional arguments in the order given.

    Returns:
        list[Path]: Paths to process, preserving argument order.
    """
    paths: list[Path] = []
    for argument in raw_arguments:
        candidate = Path(argument).expanduser()
        if candidate.exists() or not _GLOB_CHARACTERS.intersection(argument):
            paths.append(candidate)
            continue

        matches = sorted(glob.glob(str(candidate)))
        if not matches:
            logger.debug("Pattern %s matched nothing", argument)
            paths.append(candidate)
            continue
        logger.debug("Pattern %s matched %d paths", argument, len(matches))
        paths.extend(Path(match) for match in matches)
    return paths


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
            prog="flac-folders",
            description=(
                "Organize FLAC files into Artist/Album (Year)/NN - Title.flac, "
                "filling missing metadata from filenames and MusicBrainz."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "files",
            nargs="+",
            help="FLAC files or glob patterns to organize",
            metavar="FILE_OR_GLOB",
        )
        _ = parser.add_argument(
            "--library",
            type=str,
            help="Library root for complete files (overrides library_path)",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--check",
            type=str,
            help="Review folder for unsure and failed files (overrides check_path)",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Configuration file to use instead of the default location",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--rate-limit",
            type=float,
            help="Minimum seconds between MusicBrainz requests",
            metavar="SECONDS",
        )
        _ = parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show where files would go without copying or deleting anything",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> OrganizeArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            OrganizeArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors (argparse exits with status 2).
            ConfigError: If the configuration file or an override is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_file = Path(parsed_args.config).expanduser() if parsed_args.config else None
        configuration = Config.load(config_file).with_overrides(
            library_path=parsed_args.library,
            check_path=parsed_args.check,
            rate_limit_seconds=parsed_args.rate_limit,
        )
        _ = setup_logger(
            log_file=configuration.log_file or default_log_file(),
            console_level=log_level,
        )
        logger.debug(
            "Library: %s, check folder: %s",
            configuration.resolved_library_path,
            configuration.resolved_check_path,
        )

        return OrganizeArgs(
            paths=expand_arguments(parsed_args.files),
            config=configuration,
            dry_run=parsed_args.dry_run,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )


__all__ = ["ArgumentParser", "expand_arguments"]
