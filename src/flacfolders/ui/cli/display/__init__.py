"""Display management for CLI interface."""

from flacfolders.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
