"""src/flacfolders/application/services/processing_types.py
What: Shared enums and dataclasses for the per-file organize flow.
Why: Keep the service lean by centralising type definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from flacfolders.features.metadata import ResolutionClass, TrackMetadata


class ProcessingEvent(StrEnum):
    """Structured event identifiers for organize logs."""

    FILE_START = "processing.file.start"
    FILE_SKIPPED = "processing.file.skipped"
    FILE_PLACED = "processing.file.placed"
    FILE_ERROR = "processing.file.error"
    RUN_COMPLETE = "processing.run.complete"


@dataclass
class ProcessResult:
    """Result of processing a single command line argument."""

    source_path: Path
    target_path: Path | None = None
    success: bool = False
    error_message: str | None = None
    dry_run: bool = False
    metadata: TrackMetadata | None = None
    classification: ResolutionClass | None = None


__all__ = ["ProcessResult", "ProcessingEvent"]
