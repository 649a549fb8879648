# Where: flacfolders.features.metadata.domain.album_context
# What: Directory-level (artist, album, year) inferred from siblings or the folder name.
# Why: Numbered tracks rarely carry an artist; their folder usually does.

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AlbumContext:
    """Shared album facts for every track in one directory."""

    artist: str | None = None
    album: str | None = None
    year: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.artist is None and self.album is None and self.year is None


__all__ = ["AlbumContext"]
