"""Shared pytest fixtures for flac-folders tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from fakes import FakeLookup, FakeTagReader
from flacfolders.platform.logging import LOGGER_NAME


@pytest.fixture
def fake_lookup() -> FakeLookup:
    return FakeLookup()


@pytest.fixture
def fake_tag_reader() -> FakeTagReader:
    return FakeTagReader()


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point default config and log locations at a temporary repository root."""

    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    _ = (repo_root / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import flacfolders.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return repo_root

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return repo_root


@pytest.fixture(autouse=True)
def reset_logger_handlers() -> Iterator[None]:
    """Drop handlers installed by ``setup_logger`` so tests stay independent."""

    yield
    app_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
