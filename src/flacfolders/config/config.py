"""Configuration management for flac-folders."""

import tomllib
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from flacfolders import __version__
from flacfolders.config.file_ops import write_text_file
from flacfolders.config.paths import default_config_path, default_library_path
from flacfolders.platform.logging import logger
from flacfolders.shared.errors import ConfigError

CHECK_DIR_NAME = "!CHECK"
UNSURE_DIR_NAME = "Unsure"
FAILED_DIR_NAME = "Failed"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass(frozen=True)
class Config:
    """Run configuration, built once at startup and passed to every component."""

    # Root of the organised library
    library_path: Path | None = _path_field()

    # Holding area for unsure/failed files (defaults to <library>/!CHECK)
    check_path: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # MusicBrainz settings
    rate_limit_seconds: float = 1.0
    musicbrainz_url: str = "https://musicbrainz.org/ws/2/"
    mb_app_name: str = "flac-folders"
    mb_app_version: str = __version__
    mb_contact: str = "https://github.com/colby-int/flac-folders"

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                object.__setattr__(self, f.name, Path(value).expanduser() if value.strip() else None)

        if self.rate_limit_seconds < 0:
            raise ConfigError(
                f"rate_limit_seconds must not be negative (got {self.rate_limit_seconds})"
            )

    @property
    def resolved_library_path(self) -> Path:
        """Library root, falling back to ``~/Music``."""
        return self.library_path or default_library_path()

    @property
    def resolved_check_path(self) -> Path:
        """Check root, falling back to ``<library>/!CHECK``."""
        return self.check_path or (self.resolved_library_path / CHECK_DIR_NAME)

    @property
    def unsure_path(self) -> Path:
        return self.resolved_check_path / UNSURE_DIR_NAME

    @property
    def failed_path(self) -> Path:
        return self.resolved_check_path / FAILED_DIR_NAME

    def with_overrides(self, **changes: Any) -> "Config":
        """Return a copy with every non-``None`` override applied.

        Args:
            **changes: Field values, typically taken from CLI flags.

        Returns:
            Config: New configuration instance.
        """
        applied = {key: value for key, value in changes.items() if value is not None}
        if not applied:
            return self
        return replace(self, **applied)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# flac-folders configuration file")
        lines.append("")

        lines.append("# Where organised files are written (default: ~/Music)")
        lines.append('# Example: library_path = "/path/to/Music"')
        if config["library_path"] is not None:
            lines.append(f"library_path = {self._format_toml_value(config['library_path'])}")
        lines.append("")

        lines.append("# Where files needing review go (default: <library_path>/!CHECK)")
        lines.append("# Files land in its Unsure/ and Failed/ subfolders")
        if config["check_path"] is not None:
            lines.append(f"check_path = {self._format_toml_value(config['check_path'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# MusicBrainz asks for at most one request per second")
        lines.append(
            f"rate_limit_seconds = {self._format_toml_value(config['rate_limit_seconds'])}"
        )
        lines.append(f"musicbrainz_url = {self._format_toml_value(config['musicbrainz_url'])}")
        lines.append("")

        lines.append("# Sent as the User-Agent: AppName/Version (contact)")
        lines.append(f"mb_app_name = {self._format_toml_value(config['mb_app_name'])}")
        lines.append(f"mb_app_version = {self._format_toml_value(config['mb_app_version'])}")
        lines.append(f"mb_contact = {self._format_toml_value(config['mb_contact'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file, writing a default file when absent.

        Args:
            config_file: Explicit config location. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or holds unknown keys.
        """
        source = config_file or default_config_path()

        if not source.exists():
            config = cls()
            _ = config.save(source)
            logger.info("Created default configuration at %s", source)
            return config

        try:
            with open(source, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {source}: {e}") from e

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys in {source}: {', '.join(unknown)}")

        if "rate_limit_seconds" in config_dict:
            try:
                config_dict["rate_limit_seconds"] = float(config_dict["rate_limit_seconds"])
            except (TypeError, ValueError) as e:
                raise ConfigError(f"rate_limit_seconds must be a number in {source}") from e

        logger.info("Configuration loaded from %s", source)
        return cls(**config_dict)


__all__ = ["Config", "CHECK_DIR_NAME", "UNSURE_DIR_NAME", "FAILED_DIR_NAME"]
