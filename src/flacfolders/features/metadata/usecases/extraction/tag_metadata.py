"""Summary: Apply embedded-tag precedence rules to produce TrackMetadata.
Why: Both resolution and copy validation must interpret tags identically.
"""

from __future__ import annotations

from ...domain.track_metadata import MetadataSource, RawTags, TrackMetadata, clean_value
from ._tag_utils import leading_year, strip_track_total


def metadata_from_tags(tags: RawTags) -> TrackMetadata:
    """Build the priority-one metadata from raw tags.

    ALBUMARTIST beats ARTIST, YEAR beats the year taken from DATE, and
    TRACKNUMBER beats TRACK with any ``/total`` suffix removed.

    Args:
        tags: Raw tag values.

    Returns:
        TrackMetadata: Metadata with provenance ``tags`` on every set field.
    """
    metadata = TrackMetadata()
    _ = metadata.fill_missing(
        MetadataSource.TAGS,
        artist=clean_value(tags.album_artist) or tags.artist,
        title=tags.title,
        album=tags.album,
        year=leading_year(tags.year) or leading_year(tags.date),
        track_number=strip_track_total(clean_value(tags.track_number) or tags.track),
    )
    return metadata


__all__ = ["metadata_from_tags"]
