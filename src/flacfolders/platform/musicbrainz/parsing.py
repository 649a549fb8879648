"""Where: src/flacfolders/platform/musicbrainz/parsing.py
What: Helpers that reduce WS2 search payloads to the best-ranked hit.
Why: Separate payload interpretation from HTTP concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast


@dataclass(frozen=True, slots=True)
class MusicBrainzHit:
    """Fields taken from the first search result. Missing values stay ``None``."""

    artist: str | None = None
    album: str | None = None
    year: str | None = None
    track_number: str | None = None


def _dict_entries(value: Any) -> list[dict[str, Any]]:
    """Filter a raw JSON list down to its dictionary entries."""

    if not isinstance(value, list):
        return []
    entries: list[dict[str, Any]] = []
    for entry in cast(list[object], value):
        if isinstance(entry, dict):
            entries.append(cast(dict[str, Any], entry))
    return entries


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def first_credited_artist(entity: dict[str, Any]) -> str | None:
    """Name of the first ``artist-credit`` entry."""

    credits = _dict_entries(entity.get("artist-credit"))
    if not credits:
        return None
    return _text(credits[0].get("name"))


def year_from_date(value: Any) -> str | None:
    """Leading four characters of a MusicBrainz date when it is long enough."""

    date = _text(value)
    if date is None or len(date) < 4:
        return None
    return date[:4]


def first_track_number(release: dict[str, Any]) -> str | None:
    """Track ``number`` of the first track on the first medium of ``release``."""

    media = _dict_entries(release.get("media"))
    if not media:
        return None
    tracks = _dict_entries(media[0].get("track"))
    if not tracks:
        return None
    return _text(tracks[0].get("number"))


def parse_recording_payload(payload: dict[str, Any]) -> MusicBrainzHit | None:
    """Reduce a ``/recording`` search payload to its first recording."""

    recordings = _dict_entries(payload.get("recordings"))
    if not recordings:
        return None
    recording = recordings[0]

    album: str | None = None
    year: str | None = None
    track_number: str | None = None
    releases = _dict_entries(recording.get("releases"))
    if releases:
        release = releases[0]
        album = _text(release.get("title"))
        year = year_from_date(release.get("date"))
        track_number = first_track_number(release)

    return MusicBrainzHit(
        artist=first_credited_artist(recording),
        album=album,
        year=year,
        track_number=track_number,
    )


def parse_release_payload(payload: dict[str, Any]) -> MusicBrainzHit | None:
    """Reduce a ``/release`` search payload to its first release."""

    releases = _dict_entries(payload.get("releases"))
    if not releases:
        return None
    release = releases[0]
    return MusicBrainzHit(
        artist=first_credited_artist(release),
        album=_text(release.get("title")),
        year=year_from_date(release.get("date")),
    )


__all__ = [
    "MusicBrainzHit",
    "first_credited_artist",
    "first_track_number",
    "parse_recording_payload",
    "parse_release_payload",
    "year_from_date",
]
