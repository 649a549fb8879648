# Where: flacfolders.features.metadata.domain.track_metadata
# What: TrackMetadata record with fill-missing semantics plus the raw tag bag.
# Why: Resolution is additive; a field set by an earlier source is never replaced.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

_METADATA_FIELDS: tuple[str, ...] = ("artist", "title", "album", "year", "track_number")


class MetadataSource(StrEnum):
    """Where a resolved field came from, in descending priority."""

    TAGS = "tags"
    FILENAME = "filename"
    ALBUM_CONTEXT = "album_context"
    LOOKUP = "lookup"


def clean_value(value: str | None) -> str | None:
    """Return ``value`` stripped, or ``None`` when it is empty."""

    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(slots=True)
class RawTags:
    """Embedded tag fields as read from the file, before any precedence rules."""

    artist: str | None = None
    album_artist: str | None = None
    title: str | None = None
    album: str | None = None
    date: str | None = None
    year: str | None = None
    track_number: str | None = None
    track: str | None = None


@dataclass
class TrackMetadata:
    """Best-effort metadata for a single track."""

    artist: str | None = None
    title: str | None = None
    album: str | None = None
    year: str | None = None
    track_number: str | None = None
    provenance: dict[str, MetadataSource] = field(
        default_factory=dict, compare=False, repr=False
    )

    def fill_missing(
        self,
        source: MetadataSource,
        *,
        artist: str | None = None,
        title: str | None = None,
        album: str | None = None,
        year: str | None = None,
        track_number: str | None = None,
    ) -> list[str]:
        """Fill fields that are still empty from ``source``.

        Args:
            source: Origin of the supplied values, recorded as provenance.
            artist: Candidate artist.
            title: Candidate title.
            album: Candidate album.
            year: Candidate year.
            track_number: Candidate track number.

        Returns:
            list[str]: Names of the fields that were filled.
        """
        candidates = {
            "artist": artist,
            "title": title,
            "album": album,
            "year": year,
            "track_number": track_number,
        }
        filled: list[str] = []
        for name, candidate in candidates.items():
            value = clean_value(candidate)
            if value is None or getattr(self, name) is not None:
                continue
            setattr(self, name, value)
            self.provenance[name] = source
            filled.append(name)
        return filled

    def missing(self, *names: str) -> bool:
        """Return True when any of the named fields is empty."""

        return any(getattr(self, name) is None for name in names)

    @property
    def padded_track_number(self) -> str | None:
        """Track number left-padded to two digits when numeric."""

        if self.track_number is None:
            return None
        if self.track_number.isdigit():
            return self.track_number.zfill(2)
        return self.track_number

    def as_dict(self) -> dict[str, str | None]:
        return {name: getattr(self, name) for name in _METADATA_FIELDS}


__all__ = ["MetadataSource", "RawTags", "TrackMetadata", "clean_value"]
