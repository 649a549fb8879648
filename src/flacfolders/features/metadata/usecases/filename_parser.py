"""Filename heuristics for tracks that lack embedded tags.

Where: src/flacfolders/features/metadata/usecases/filename_parser.py
What: Recognise ``NN - Title`` and ``Artist - Title`` style file names.
Why: The numeric prefix must be tried first, otherwise ``01 - Song - Remix``
     would be read as artist ``01``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

FLAC_EXTENSION: Final[str] = ".flac"

_TRACK_FORMAT: Final[re.Pattern[str]] = re.compile(r"^(\d{1,2})\s*[-._]\s*(.+)$")

# Checked in order; the first one present in the name wins.
ARTIST_TITLE_DELIMITERS: Final[tuple[str, ...]] = (" - ", " – ", "_-_")


@dataclass(frozen=True, slots=True)
class TrackFormatMatch:
    """Track number and title parsed from a numbered file name."""

    track_number: str
    title: str


@dataclass(frozen=True, slots=True)
class ArtistTitleMatch:
    """Artist and title parsed from an ``Artist - Title`` file name."""

    artist: str
    title: str


def strip_extension(filename: str, extension: str = FLAC_EXTENSION) -> str:
    """Drop a trailing ``extension`` (case-insensitive) from ``filename``."""

    if filename.lower().endswith(extension.lower()):
        return filename[: -len(extension)]
    return filename


def parse_track_format(filename: str) -> TrackFormatMatch | None:
    """Parse ``01 - Title``, ``1. Title``, ``01_Title`` and similar names.

    Args:
        filename: Bare file name, with or without extension.

    Returns:
        TrackFormatMatch | None: Track number and title, or ``None`` when the
        name does not start with a one or two digit track number.
    """
    match = _TRACK_FORMAT.match(strip_extension(filename))
    if match is None:
        return None
    return TrackFormatMatch(track_number=match.group(1), title=match.group(2))


def is_track_format(filename: str) -> bool:
    """Return True when ``filename`` starts with a track number."""

    return parse_track_format(filename) is not None


def parse_artist_title(filename: str) -> ArtistTitleMatch | None:
    """Split ``Artist - Title`` style names on the first known delimiter.

    Args:
        filename: Bare file name, with or without extension.

    Returns:
        ArtistTitleMatch | None: Split fields, or ``None`` when no delimiter
        is present.
    """
    base = strip_extension(filename)
    for delimiter in ARTIST_TITLE_DELIMITERS:
        if delimiter in base:
            artist, title = base.split(delimiter, 1)
            return ArtistTitleMatch(artist=artist, title=title)
    return None


__all__ = [
    "ARTIST_TITLE_DELIMITERS",
    "ArtistTitleMatch",
    "FLAC_EXTENSION",
    "TrackFormatMatch",
    "is_track_format",
    "parse_artist_title",
    "parse_track_format",
    "strip_extension",
]
