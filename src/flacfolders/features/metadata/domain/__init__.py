"""Summary: Value objects for metadata resolution.
Why: Share one structured record between every resolution stage.
"""

from .album_context import AlbumContext
from .classification import UNKNOWN_ARTIST, Resolution, ResolutionClass, classify
from .track_metadata import MetadataSource, RawTags, TrackMetadata

__all__ = [
    "AlbumContext",
    "MetadataSource",
    "RawTags",
    "Resolution",
    "ResolutionClass",
    "TrackMetadata",
    "UNKNOWN_ARTIST",
    "classify",
]
