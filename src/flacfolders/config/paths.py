"""Shared path utilities for configuration and log locations.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml``
- Logs: repository-root ``<repo_root>/logs/flac-folders.log``
- Library: ``~/Music`` unless configured otherwise.
"""

from __future__ import annotations

from pathlib import Path


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path() -> Path:
    """Get the default path to the main TOML config file."""

    return (_detect_repo_root() / "config" / "config.toml").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (_detect_repo_root() / "logs" / "flac-folders.log").resolve()


def default_library_path() -> Path:
    """Get the default output directory for organised music."""

    return (Path.home() / "Music").resolve()


__all__ = [
    "default_config_path",
    "default_library_path",
    "default_log_file",
]
