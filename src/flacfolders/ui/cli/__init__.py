"""Command line interface for flac-folders."""

from flacfolders.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
