"""Summary: Exception hierarchy for per-file and startup failures.
Why: Let the organize loop tell hard per-file failures apart from routing outcomes.
"""

from __future__ import annotations

from pathlib import Path


class FlacFoldersError(Exception):
    """Base class for errors raised by flac-folders."""


class TagReadError(FlacFoldersError):
    """Raised when embedded tags cannot be read from a source file."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read tags from {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


class CopyValidationError(FlacFoldersError):
    """Raised when a copied file does not match its source."""

    def __init__(self, source: Path, destination: Path, reason: str) -> None:
        super().__init__(f"Copy of {source} to {destination} failed validation: {reason}")
        self.source: Path = source
        self.destination: Path = destination
        self.reason: str = reason


class ConfigError(FlacFoldersError):
    """Raised when the configuration file cannot be parsed."""


__all__ = ["ConfigError", "CopyValidationError", "FlacFoldersError", "TagReadError"]
