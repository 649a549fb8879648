"""Tests for directory-level album context inference."""

from pathlib import Path

import pytest

from fakes import FakeLookup, matched
from flacfolders.features.metadata.domain import AlbumContext
from flacfolders.features.metadata.usecases import AlbumContextResolver, LookupResult


def _touch(directory: Path, *names: str) -> list[Path]:
    directory.mkdir(parents=True, exist_ok=True)
    paths = [directory / name for name in names]
    for path in paths:
        path.touch()
    return paths


def test_sibling_with_artist_title_name_supplies_context(
    tmp_path: Path, fake_lookup: FakeLookup
) -> None:
    album_dir = tmp_path / "rip"
    track, _ = _touch(album_dir, "01 - Intro.flac", "Pink Floyd - Mother.flac")
    fake_lookup.recordings[("Pink Floyd", "Mother")] = matched(
        artist="Pink Floyd", album="The Wall", year="1979", track_number="5"
    )

    context = AlbumContextResolver(fake_lookup).resolve(track)

    assert context == AlbumContext(artist="Pink Floyd", album="The Wall", year="1979")
    assert fake_lookup.recording_calls == [("Pink Floyd", "Mother")]
    assert fake_lookup.release_calls == []


def test_siblings_skip_numbered_names_digit_artists_and_other_extensions(
    tmp_path: Path, fake_lookup: FakeLookup
) -> None:
    album_dir = tmp_path / "rip"
    track, *_ = _touch(
        album_dir,
        "01 - Intro.flac",
        "02 - Song - Remix.flac",
        "2020 - Something.flac",
        "Artist - Title.mp3",
    )

    context = AlbumContextResolver(fake_lookup).resolve(track)

    assert context.is_empty
    assert fake_lookup.recording_calls == []


def test_first_recognised_sibling_wins(tmp_path: Path, fake_lookup: FakeLookup) -> None:
    album_dir = tmp_path / "rip"
    track, *_ = _touch(
        album_dir, "01 - Intro.flac", "A - First.flac", "B - Second.flac", "C - Third.flac"
    )
    fake_lookup.recordings[("B", "Second")] = matched(artist="B", album="Record")
    fake_lookup.recordings[("C", "Third")] = matched(artist="C", album="Other")

    context = AlbumContextResolver(fake_lookup).resolve(track)

    assert context == AlbumContext(artist="B", album="Record")
    assert fake_lookup.recording_calls == [("A", "First"), ("B", "Second")]


def test_lookup_error_on_one_sibling_continues_scan(
    tmp_path: Path, fake_lookup: FakeLookup, caplog: pytest.LogCaptureFixture
) -> None:
    album_dir = tmp_path / "rip"
    track, *_ = _touch(album_dir, "01 - Intro.flac", "A - First.flac", "B - Second.flac")
    fake_lookup.recordings[("A", "First")] = LookupResult.failed("HTTP 503")
    fake_lookup.recordings[("B", "Second")] = matched(artist="B", album="Record", year="2001")

    with caplog.at_level("WARNING", logger="flacfolders"):
        context = AlbumContextResolver(fake_lookup).resolve(track)

    assert context == AlbumContext(artist="B", album="Record", year="2001")
    assert "HTTP 503" in caplog.text


def test_parent_directory_name_is_confirmed_by_release_search(
    tmp_path: Path, fake_lookup: FakeLookup
) -> None:
    album_dir = tmp_path / "Pink Floyd - The Wall"
    track, _ = _touch(album_dir, "01 - In the Flesh.flac", "02 - The Thin Ice.flac")
    fake_lookup.releases[("Pink Floyd", "The Wall")] = matched(
        artist="Pink Floyd", album="The Wall", year="1979"
    )

    context = AlbumContextResolver(fake_lookup).resolve(track)

    assert context == AlbumContext(artist="Pink Floyd", album="The Wall", year="1979")
    assert fake_lookup.release_calls == [("Pink Floyd", "The Wall")]


def test_unconfirmed_directory_name_gives_empty_context(
    tmp_path: Path, fake_lookup: FakeLookup
) -> None:
    album_dir = tmp_path / "Nobody - Nothing"
    (track,) = _touch(album_dir, "01 - Song.flac")

    context = AlbumContextResolver(fake_lookup).resolve(track)

    assert context.is_empty
    assert fake_lookup.release_calls == [("Nobody", "Nothing")]


def test_directory_without_delimiter_is_not_queried(
    tmp_path: Path, fake_lookup: FakeLookup
) -> None:
    (track,) = _touch(tmp_path / "Downloads", "01 - Song.flac")

    assert AlbumContextResolver(fake_lookup).resolve(track).is_empty
    assert fake_lookup.call_count == 0


def test_context_is_cached_per_directory_including_empty_results(
    tmp_path: Path, fake_lookup: FakeLookup
) -> None:
    album_dir = tmp_path / "Nobody - Nothing"
    first, second = _touch(album_dir, "01 - One.flac", "02 - Two.flac")
    resolver = AlbumContextResolver(fake_lookup)

    first_context = resolver.resolve(first)
    calls_after_first = fake_lookup.call_count
    second_context = resolver.resolve(second)

    assert first_context == second_context
    assert fake_lookup.call_count == calls_after_first == 1
    assert resolver.cache == {album_dir.resolve(): AlbumContext()}
