"""src/flacfolders/ui/cli/display/result.py
What: Render per-file outcomes and the run summary for the CLI.
Why: Keep console output formatting out of the command processor.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape

from flacfolders.application.services import ProcessResult

from .summary import render_processing_summary


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_results(self, results: Sequence[ProcessResult], quiet: bool = False) -> None:
        """Display processing results.

        Args:
            results: List of processing results.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        for result in results:
            self.console.print(self._format_line(result))

        render_processing_summary(self.console, results)

    @staticmethod
    def _format_line(result: ProcessResult) -> str:
        source = escape(result.source_path.name or str(result.source_path))
        if not result.success:
            return f"[red]FAIL[/red] {source}: {escape(result.error_message or 'unknown error')}"

        prefix = "[cyan]PLAN[/cyan]" if result.dry_run else "[green]OK[/green]"
        label = f" ({result.classification})" if result.classification else ""
        return f"{prefix} {source} -> {escape(str(result.target_path))}{escape(label)}"


__all__ = ["ResultDisplay"]
