"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from flacfolders.config import Config


@final
@dataclass(slots=True)
class OrganizeArgs:
    """Parsed command line for one organize run."""

    paths: list[Path]
    config: Config
    dry_run: bool
    verbose: bool
    quiet: bool


__all__ = ["OrganizeArgs"]
