"""Summary: Ordered, fill-missing metadata resolution for a single FLAC file.
Why: Tags, filename, album context and remote lookup each fill only what earlier
     sources left empty, and the result is classified once for placement.
"""

from __future__ import annotations

from pathlib import Path

from flacfolders.platform.logging import logger

from ..domain.classification import Resolution, classify
from ..domain.track_metadata import MetadataSource, TrackMetadata
from .album_context import AlbumContextResolver
from .extraction.tag_metadata import metadata_from_tags
from .filename_parser import parse_artist_title, parse_track_format
from .ports import LookupStatus, MetadataLookupPort, TagReaderPort


class MetadataResolutionPipeline:
    """Resolve metadata for one file at a time, strictly in priority order."""

    def __init__(
        self,
        tag_reader: TagReaderPort,
        lookup: MetadataLookupPort,
        album_context: AlbumContextResolver,
    ) -> None:
        self._tag_reader: TagReaderPort = tag_reader
        self._lookup: MetadataLookupPort = lookup
        self._album_context: AlbumContextResolver = album_context

    def resolve(self, file_path: Path) -> Resolution:
        """Resolve and classify ``file_path``.

        Args:
            file_path: Source FLAC file.

        Returns:
            Resolution: Metadata plus its placement class.

        Raises:
            TagReadError: If embedded tags cannot be read. No other source is
                consulted in that case.
        """
        metadata = metadata_from_tags(self._tag_reader.read(file_path))
        logger.debug("Embedded metadata for %s: %s", file_path.name, metadata.as_dict())

        if metadata.missing("artist", "title", "album"):
            self._apply_filename(file_path, metadata)

        if (
            metadata.artist is not None
            and metadata.title is not None
            and metadata.album is None
        ):
            self._apply_recording_lookup(metadata)

        classification = classify(metadata)
        logger.debug(
            "Resolved %s as %s (sources: %s)",
            file_path.name,
            classification,
            {name: str(source) for name, source in metadata.provenance.items()},
        )
        return Resolution(
            source_path=file_path,
            metadata=metadata,
            classification=classification,
        )

    def _apply_filename(self, file_path: Path, metadata: TrackMetadata) -> None:
        track_match = parse_track_format(file_path.name)
        if track_match is not None:
            logger.debug("Detected track number format: %s", file_path.name)
            _ = metadata.fill_missing(
                MetadataSource.FILENAME,
                track_number=track_match.track_number,
                title=track_match.title,
            )
            if metadata.missing("artist", "album"):
                context = self._album_context.resolve(file_path)
                _ = metadata.fill_missing(
                    MetadataSource.ALBUM_CONTEXT,
                    artist=context.artist,
                    album=context.album,
                    year=context.year,
                )
            return

        artist_title = parse_artist_title(file_path.name)
        if artist_title is None:
            logger.debug("No artist/title pattern in %s", file_path.name)
            return
        filled = metadata.fill_missing(
            MetadataSource.FILENAME,
            artist=artist_title.artist,
            title=artist_title.title,
        )
        logger.debug("Filename supplied %s for %s", filled or "nothing", file_path.name)

    def _apply_recording_lookup(self, metadata: TrackMetadata) -> None:
        assert metadata.artist is not None and metadata.title is not None
        logger.debug(
            "Looking up album for '%s - %s' on MusicBrainz", metadata.artist, metadata.title
        )
        result = self._lookup.search_by_recording(metadata.artist, metadata.title)
        if result.status is LookupStatus.ERROR:
            logger.warning(
                "Recording lookup for '%s - %s' failed: %s",
                metadata.artist,
                metadata.title,
                result.error,
            )
            return
        if not result.found:
            logger.debug("No recording match for '%s - %s'", metadata.artist, metadata.title)
            return
        filled = metadata.fill_missing(
            MetadataSource.LOOKUP,
            album=result.match.album,
            year=result.match.year,
            track_number=result.match.track_number,
        )
        logger.debug("Recording lookup supplied %s", filled or "nothing")


__all__ = ["MetadataResolutionPipeline"]
