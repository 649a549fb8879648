"""Utilities for rendering the run summary."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from flacfolders.application.services import ProcessResult


def render_processing_summary(console: Console, results: Sequence[ProcessResult]) -> None:
    """Render ``Processed: X/Y files`` and, when needed, the failed paths.

    Args:
        console: Rich console instance used to render output.
        results: Sequence of processing results to summarize.
    """
    success_count = sum(1 for result in results if result.success)
    failure_results = [result for result in results if not result.success]

    console.print("\n[bold]Summary:[/bold]")
    console.print(f"[green]Processed: {success_count}/{len(results)} files[/green]")

    if not failure_results:
        return

    console.print(f"[red]Failed: {len(failure_results)} files[/red]")
    for failed_result in failure_results:
        console.print(
            f"[red]  - {escape(str(failed_result.source_path))}: "
            f"{escape(failed_result.error_message or 'unknown error')}[/red]"
        )


__all__ = ["render_processing_summary"]
