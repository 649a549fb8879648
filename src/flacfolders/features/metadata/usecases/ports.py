"""Summary: Ports defining metadata use case dependencies.
Why: Decouple resolution from mutagen and MusicBrainz so tests and swaps stay simple."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..domain.track_metadata import RawTags


class LookupStatus(StrEnum):
    """Outcome of one remote lookup."""

    MATCH = "match"
    NO_MATCH = "no_match"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class LookupMatch:
    """Fields taken from the best-ranked remote result; absent fields stay ``None``."""

    artist: str | None = None
    album: str | None = None
    year: str | None = None
    track_number: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.artist or self.album or self.year or self.track_number)


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Status-bearing wrapper so callers can tell "nothing found" from "failed"."""

    status: LookupStatus
    match: LookupMatch = field(default_factory=LookupMatch)
    error: str | None = None

    @classmethod
    def no_match(cls) -> "LookupResult":
        return cls(status=LookupStatus.NO_MATCH)

    @classmethod
    def failed(cls, error: str) -> "LookupResult":
        return cls(status=LookupStatus.ERROR, error=error)

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.MATCH and not self.match.is_empty


@runtime_checkable
class TagReaderPort(Protocol):
    """Port for reading embedded tags from an audio file."""

    def read(self, path: Path) -> RawTags:
        """Return the embedded tags, raising ``TagReadError`` when unreadable."""
        ...


@runtime_checkable
class MetadataLookupPort(Protocol):
    """Port for the rate-limited remote catalogue."""

    def search_by_recording(self, artist: str, title: str) -> LookupResult:
        """Best match for a recording: artist, album, year, track number."""
        ...

    def search_by_release(self, artist: str, album: str) -> LookupResult:
        """Best match for a release: artist, album, year."""
        ...


__all__ = [
    "LookupMatch",
    "LookupResult",
    "LookupStatus",
    "MetadataLookupPort",
    "TagReaderPort",
]
