"""Use cases for metadata resolution."""

from .album_context import AlbumContextResolver
from .extraction import FlacTagReader, metadata_from_tags
from .filename_parser import (
    ArtistTitleMatch,
    TrackFormatMatch,
    is_track_format,
    parse_artist_title,
    parse_track_format,
)
from .pipeline import MetadataResolutionPipeline
from .ports import (
    LookupMatch,
    LookupResult,
    LookupStatus,
    MetadataLookupPort,
    TagReaderPort,
)

__all__ = [
    "AlbumContextResolver",
    "ArtistTitleMatch",
    "FlacTagReader",
    "LookupMatch",
    "LookupResult",
    "LookupStatus",
    "MetadataLookupPort",
    "MetadataResolutionPipeline",
    "TagReaderPort",
    "TrackFormatMatch",
    "is_track_format",
    "metadata_from_tags",
    "parse_artist_title",
    "parse_track_format",
]
