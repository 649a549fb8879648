"""Tests for filename heuristics."""

import pytest

from flacfolders.features.metadata.usecases.filename_parser import (
    ArtistTitleMatch,
    TrackFormatMatch,
    is_track_format,
    parse_artist_title,
    parse_track_format,
    strip_extension,
)


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("01 - Mother.flac", TrackFormatMatch(track_number="01", title="Mother")),
        ("1. Intro.flac", TrackFormatMatch(track_number="1", title="Intro")),
        ("07_Outro.FLAC", TrackFormatMatch(track_number="07", title="Outro")),
        ("12-Closing Time.flac", TrackFormatMatch(track_number="12", title="Closing Time")),
    ],
)
def test_parse_track_format_accepts_numbered_names(
    filename: str, expected: TrackFormatMatch
) -> None:
    assert parse_track_format(filename) == expected


@pytest.mark.parametrize(
    "filename",
    ["Pink Floyd - Mother.flac", "123 - Too Many Digits.flac", "01.flac", "Mother.flac"],
)
def test_parse_track_format_rejects_other_names(filename: str) -> None:
    assert parse_track_format(filename) is None
    assert not is_track_format(filename)


def test_track_format_wins_over_artist_title() -> None:
    """A numeric prefix is never read as an artist."""

    name = "01 - Track - Remix.flac"
    assert parse_track_format(name) == TrackFormatMatch(track_number="01", title="Track - Remix")


def test_parse_artist_title_splits_on_first_delimiter() -> None:
    assert parse_artist_title("Pink Floyd - Mother - Live.flac") == ArtistTitleMatch(
        artist="Pink Floyd", title="Mother - Live"
    )


def test_parse_artist_title_tries_delimiters_in_order() -> None:
    assert parse_artist_title("Sigur Rós – Hoppípolla.flac") == ArtistTitleMatch(
        artist="Sigur Rós", title="Hoppípolla"
    )
    assert parse_artist_title("Daft_Punk_-_Around_the_World.flac") == ArtistTitleMatch(
        artist="Daft_Punk", title="Around_the_World"
    )
    # " - " is checked before "_-_" even when both appear.
    assert parse_artist_title("A_-_B - C.flac") == ArtistTitleMatch(artist="A_-_B", title="C")


def test_parse_artist_title_without_delimiter() -> None:
    assert parse_artist_title("Mother.flac") is None
    assert parse_artist_title("Pink Floyd-Mother.flac") is None


def test_strip_extension_is_case_insensitive() -> None:
    assert strip_extension("Song.FLAC") == "Song"
    assert strip_extension("Song.flac") == "Song"
    assert strip_extension("Song.mp3") == "Song.mp3"
