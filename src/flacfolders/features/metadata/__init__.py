"""Metadata feature exports.

Where: features/metadata/__init__.py
What: Re-export the resolution pipeline and its value objects.
Why: Callers import from one place instead of reaching into submodules.
"""

from .domain import (
    UNKNOWN_ARTIST,
    AlbumContext,
    MetadataSource,
    RawTags,
    Resolution,
    ResolutionClass,
    TrackMetadata,
    classify,
)
from .usecases import (
    AlbumContextResolver,
    FlacTagReader,
    LookupMatch,
    LookupResult,
    LookupStatus,
    MetadataLookupPort,
    MetadataResolutionPipeline,
    TagReaderPort,
    metadata_from_tags,
)

__all__ = [
    "AlbumContext",
    "AlbumContextResolver",
    "FlacTagReader",
    "LookupMatch",
    "LookupResult",
    "LookupStatus",
    "MetadataLookupPort",
    "MetadataResolutionPipeline",
    "MetadataSource",
    "RawTags",
    "Resolution",
    "ResolutionClass",
    "TagReaderPort",
    "TrackMetadata",
    "UNKNOWN_ARTIST",
    "classify",
    "metadata_from_tags",
]
