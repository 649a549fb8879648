"""Command line interface for flac-folders."""

from typing import final

from flacfolders.application.services import OrganizeFlacService, OrganizeRequest
from flacfolders.platform.logging import logger
from flacfolders.shared.errors import ConfigError
from flacfolders.ui.cli.args import ArgumentParser, OrganizeArgs
from flacfolders.ui.cli.display import ResultDisplay

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Per-file failures are reported in the summary and do not change the
        exit status.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        try:
            args: OrganizeArgs = ArgumentParser.process_args(args_list)
            service = OrganizeFlacService(
                args.config,
                OrganizeRequest(dry_run=args.dry_run),
            )
            results = service.process_paths(args.paths)
            ResultDisplay().show_results(results, quiet=args.quiet)
            return EXIT_OK

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return EXIT_INTERRUPTED
        except ConfigError as e:
            logger.error("Configuration error: %s", e)
            return EXIT_ERROR
        except Exception as e:
            logger.exception("An unexpected error occurred: %s", e)
            return EXIT_ERROR


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command()


__all__ = ["CommandProcessor", "main"]
