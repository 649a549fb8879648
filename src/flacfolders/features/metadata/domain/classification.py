"""Summary: Three-way routing decision for a resolved track.
Why: Placement only needs to know whether a file is complete, unsure, or failed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final

from .track_metadata import TrackMetadata

# Placeholder some rippers write when the artist is unknown.
UNKNOWN_ARTIST: Final[str] = "Unknown Artist"


class ResolutionClass(StrEnum):
    """Placement class of a resolved file."""

    COMPLETE = "complete"
    UNSURE = "unsure"
    FAILED = "failed"


def classify(metadata: TrackMetadata) -> ResolutionClass:
    """Classify resolved metadata.

    Title, year and track number never affect the class.

    Args:
        metadata: Fully resolved metadata.

    Returns:
        ResolutionClass: ``FAILED`` without a usable artist, ``UNSURE``
        without an album, ``COMPLETE`` otherwise.
    """
    if metadata.artist is None or metadata.artist == UNKNOWN_ARTIST:
        return ResolutionClass.FAILED
    if metadata.album is None:
        return ResolutionClass.UNSURE
    return ResolutionClass.COMPLETE


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving one source file."""

    source_path: Path
    metadata: TrackMetadata
    classification: ResolutionClass


__all__ = ["Resolution", "ResolutionClass", "UNKNOWN_ARTIST", "classify"]
