"""Test configuration management."""

from pathlib import Path

import pytest

from flacfolders.config import Config, default_config_path
from flacfolders.shared.errors import ConfigError


def test_default_config(portable_repo_root: Path) -> None:
    """Defaults follow the library and write a commented file on first load."""

    config = Config.load()

    assert default_config_path() == (portable_repo_root / "config" / "config.toml").resolve()
    assert default_config_path().exists()
    assert config.library_path is None
    assert config.rate_limit_seconds == 1.0
    assert config.mb_contact == "https://github.com/colby-int/flac-folders"
    text = default_config_path().read_text(encoding="utf-8")
    assert text.startswith("# flac-folders configuration file")


def test_check_paths_derive_from_library(tmp_path: Path) -> None:
    config = Config(library_path=tmp_path / "Music")

    assert config.resolved_library_path == tmp_path / "Music"
    assert config.resolved_check_path == tmp_path / "Music" / "!CHECK"
    assert config.unsure_path == tmp_path / "Music" / "!CHECK" / "Unsure"
    assert config.failed_path == tmp_path / "Music" / "!CHECK" / "Failed"


def test_explicit_check_path_wins(tmp_path: Path) -> None:
    config = Config(library_path=tmp_path / "Music", check_path=tmp_path / "Review")
    assert config.failed_path == tmp_path / "Review" / "Failed"


def test_save_load_toml(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"
    original = Config(
        library_path=Path("/music/library"),
        log_file=Path("/music/logs/flac-folders.log"),
        rate_limit_seconds=2.5,
        mb_contact='mailto:"me"@example.com',
    )

    _ = original.save(target)
    loaded = Config.load(target)

    assert loaded == original
    assert loaded.check_path is None


def test_string_paths_are_converted() -> None:
    config = Config(library_path="~/Music", check_path="")  # pyright: ignore[reportArgumentType]
    assert config.library_path == Path("~/Music").expanduser()
    assert config.check_path is None


def test_integer_rate_limit_is_accepted(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text("rate_limit_seconds = 2\n", encoding="utf-8")
    assert Config.load(target).rate_limit_seconds == 2.0


def test_with_overrides_ignores_none(tmp_path: Path) -> None:
    base = Config(library_path=tmp_path / "a", rate_limit_seconds=1.0)

    assert base.with_overrides(library_path=None, rate_limit_seconds=None) is base

    changed = base.with_overrides(library_path=str(tmp_path / "b"), rate_limit_seconds=0.0)
    assert changed.library_path == tmp_path / "b"
    assert changed.rate_limit_seconds == 0.0
    assert base.library_path == tmp_path / "a"


@pytest.mark.parametrize(
    "content",
    [
        "library_path = \n",
        "unknown_key = 1\n",
        'rate_limit_seconds = "fast"\n',
        "rate_limit_seconds = -1\n",
    ],
)
def test_invalid_files_raise_config_error(tmp_path: Path, content: str) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        _ = Config.load(target)
