"""Summary: Destination path rules for each resolution class.
Why: Keep naming policy pure so it can be previewed and tested without copying.
"""

from __future__ import annotations

from pathlib import Path

from flacfolders.features.metadata.domain import Resolution, ResolutionClass, TrackMetadata
from flacfolders.features.metadata.usecases.filename_parser import FLAC_EXTENSION

from ..domain.sanitizer import Sanitizer


class DestinationPlanner:
    """Compute where a resolved file belongs.

    - complete: ``library/Artist/Album (Year)/NN - Title.flac``
    - unsure: ``unsure/Artist/<original name>``
    - failed: ``failed/<original name>``
    """

    def __init__(self, library_path: Path, unsure_path: Path, failed_path: Path) -> None:
        self.library_path: Path = library_path
        self.unsure_path: Path = unsure_path
        self.failed_path: Path = failed_path

    def destination_for(self, resolution: Resolution) -> Path:
        source = resolution.source_path
        metadata = resolution.metadata
        match resolution.classification:
            case ResolutionClass.COMPLETE:
                return self.library_path / self.album_directory(metadata) / self.track_file_name(
                    metadata, fallback_stem=source.stem
                )
            case ResolutionClass.UNSURE:
                return self.unsure_path / Sanitizer.clean_segment(metadata.artist) / source.name
            case ResolutionClass.FAILED:
                return self.failed_path / source.name

    @staticmethod
    def album_directory(metadata: TrackMetadata) -> Path:
        """``Artist/Album (Year)``, or ``Artist/Album`` without a year."""

        album = Sanitizer.clean_segment(metadata.album)
        if metadata.year:
            album = f"{album} ({metadata.year})"
        return Path(Sanitizer.clean_segment(metadata.artist)) / album

    @staticmethod
    def track_file_name(metadata: TrackMetadata, *, fallback_stem: str) -> str:
        """``NN - Title.flac``; the source stem stands in for a missing title."""

        title = Sanitizer.clean_segment(metadata.title or fallback_stem)
        track = metadata.padded_track_number
        if track:
            return f"{Sanitizer.clean_segment(track)} - {title}{FLAC_EXTENSION}"
        return f"{title}{FLAC_EXTENSION}"


__all__ = ["DestinationPlanner"]
