"""Tests for the per-run organize service."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from fakes import FakeLookup, FakeTagReader, matched, write_flac
from flacfolders.application.services import OrganizeFlacService, OrganizeRequest
from flacfolders.config import Config
from flacfolders.features.metadata import RawTags, Resolution, ResolutionClass


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(library_path=tmp_path / "Music", rate_limit_seconds=0.0)


def _service(
    config: Config, lookup: FakeLookup, *, dry_run: bool = False
) -> OrganizeFlacService:
    return OrganizeFlacService(
        config, OrganizeRequest(dry_run=dry_run), lookup_factory=lambda _config: lookup
    )


def test_routes_each_class_to_its_destination(
    tmp_path: Path, config: Config, fake_lookup: FakeLookup
) -> None:
    incoming = tmp_path / "Downloads"
    tagged = write_flac(
        incoming / "a.flac",
        artist="Pink Floyd",
        title="Hey You",
        album="The Wall",
        date="1979",
        tracknumber="1/13",
    )
    looked_up = write_flac(incoming / "Pink Floyd - Mother.flac")
    unsure = write_flac(incoming / "Obscure Band - Demo.flac")
    failed = write_flac(incoming / "01 - Song.flac")
    fake_lookup.recordings[("Pink Floyd", "Mother")] = matched(
        artist="Pink Floyd", album="The Wall", year="1979", track_number="5"
    )

    results = _service(config, fake_lookup).process_paths([tagged, looked_up, unsure, failed])

    library = config.resolved_library_path
    assert [result.success for result in results] == [True, True, True, True]
    assert [result.classification for result in results] == [
        ResolutionClass.COMPLETE,
        ResolutionClass.COMPLETE,
        ResolutionClass.UNSURE,
        ResolutionClass.FAILED,
    ]
    assert [result.target_path for result in results] == [
        library / "Pink Floyd" / "The Wall (1979)" / "01 - Hey You.flac",
        library / "Pink Floyd" / "The Wall (1979)" / "05 - Mother.flac",
        config.unsure_path / "Obscure Band" / "Obscure Band - Demo.flac",
        config.failed_path / "01 - Song.flac",
    ]
    assert all(result.target_path and result.target_path.exists() for result in results)
    assert not any(path.exists() for path in (tagged, looked_up, unsure, failed))


def test_invalid_arguments_fail_without_stopping_the_run(
    tmp_path: Path, config: Config, fake_lookup: FakeLookup
) -> None:
    text_file = tmp_path / "notes.txt"
    _ = text_file.write_text("hello")
    corrupt = tmp_path / "corrupt.flac"
    _ = corrupt.write_bytes(b"garbage")
    good = write_flac(tmp_path / "good.flac", artist="A", album="B", title="C")

    results = _service(config, fake_lookup).process_paths(
        [tmp_path / "missing.flac", tmp_path, text_file, corrupt, good]
    )

    assert [result.success for result in results] == [False, False, False, False, True]
    assert results[0].error_message == "not a FLAC file"
    assert results[2].error_message == "not a FLAC file"
    assert results[3].target_path is None
    assert corrupt.exists()
    assert not good.exists()


def test_numbered_album_queries_context_once(
    tmp_path: Path, config: Config, fake_lookup: FakeLookup
) -> None:
    album_dir = tmp_path / "Pink Floyd - The Wall"
    tracks = [write_flac(album_dir / f"0{n} - Track {n}.flac") for n in (1, 2, 3)]
    fake_lookup.releases[("Pink Floyd", "The Wall")] = matched(
        artist="Pink Floyd", album="The Wall", year="1979"
    )

    results = _service(config, fake_lookup).process_paths(tracks)

    assert fake_lookup.release_calls == [("Pink Floyd", "The Wall")]
    assert all(result.classification is ResolutionClass.COMPLETE for result in results)
    assert results[2].target_path == (
        config.resolved_library_path / "Pink Floyd" / "The Wall (1979)" / "03 - Track 3.flac"
    )


def test_dry_run_reports_targets_without_moving(
    tmp_path: Path, config: Config, fake_lookup: FakeLookup
) -> None:
    source = write_flac(tmp_path / "a.flac", artist="A", album="B", title="C")

    (result,) = _service(config, fake_lookup, dry_run=True).process_paths([source])

    assert result.success and result.dry_run
    assert result.target_path == config.resolved_library_path / "A" / "B" / "C.flac"
    assert source.exists()
    assert not config.resolved_library_path.exists()


def test_unexpected_error_is_contained(
    tmp_path: Path, config: Config, fake_lookup: FakeLookup, mocker: MockerFixture
) -> None:
    first = write_flac(tmp_path / "first.flac", artist="A", album="B", title="C")
    second = write_flac(tmp_path / "second.flac", artist="A", album="B", title="D")
    service = _service(config, fake_lookup)
    original_resolve = service.pipeline.resolve

    def _resolve(path: Path) -> Resolution:
        if path == first:
            raise RuntimeError("boom")
        return original_resolve(path)

    _ = mocker.patch.object(service.pipeline, "resolve", side_effect=_resolve)

    results = service.process_paths([first, second])

    assert not results[0].success
    assert results[0].error_message == "unexpected error: boom"
    assert results[1].success
    assert first.exists()


def test_copy_that_fails_validation_leaves_source_in_place(
    tmp_path: Path, config: Config, fake_lookup: FakeLookup
) -> None:
    source = write_flac(tmp_path / "track.flac")
    reader = FakeTagReader(
        tags={
            "track.flac": RawTags(
                artist="Pink Floyd", title="Mother", album="The Wall", date="1979", track_number="5"
            ),
            "05 - Mother.flac": RawTags(artist="Pink Floyd", title="Mother", album="Animals"),
        }
    )
    service = OrganizeFlacService(
        config, tag_reader=reader, lookup_factory=lambda _config: fake_lookup
    )

    (result,) = service.process_paths([source])

    assert not result.success
    assert result.target_path is None
    assert result.error_message is not None and "album" in result.error_message
    assert source.exists()
    assert not list(config.resolved_library_path.rglob("*.flac"))
