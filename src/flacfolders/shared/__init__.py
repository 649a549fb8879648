"""Shared primitives reused across feature slices."""

from .errors import ConfigError, CopyValidationError, FlacFoldersError, TagReadError

__all__ = [
    "ConfigError",
    "CopyValidationError",
    "FlacFoldersError",
    "TagReadError",
]
