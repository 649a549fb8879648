"""FLAC tag reader.

Where: src/flacfolders/features/metadata/usecases/extraction/flac_reader.py
What: Read Vorbis comments from FLAC files with mutagen.
Why: The pipeline only sees ``RawTags``; mutagen stays behind this adapter.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from mutagen import MutagenError
from mutagen.flac import FLAC

from flacfolders.platform.logging import logger
from flacfolders.shared.errors import TagReadError

from ...domain.track_metadata import RawTags
from ._tag_utils import safe_get_first


class FlacTagReader:
    """Extract the tag fields flac-folders cares about from a FLAC file."""

    # RawTags field -> Vorbis comment key (keys are case-insensitive)
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "artist": "artist",
        "album_artist": "albumartist",
        "title": "title",
        "album": "album",
        "date": "date",
        "year": "year",
        "track_number": "tracknumber",
        "track": "track",
    }

    def read(self, path: Path) -> RawTags:
        """Read embedded tags.

        Args:
            path: FLAC file to inspect.

        Returns:
            RawTags: Tag values; fields missing from the file are ``None``.

        Raises:
            TagReadError: If the file does not exist or is not a readable FLAC.
        """
        if not path.is_file():
            raise TagReadError(path, "file does not exist")

        try:
            audio = FLAC(path)
        except (MutagenError, OSError) as exc:
            logger.debug("mutagen rejected %s: %s", path, exc)
            raise TagReadError(path, str(exc)) from exc

        tags = audio.tags
        if tags is None:
            logger.debug("No Vorbis comment block in %s", path)
            return RawTags()

        values: dict[str, str | None] = {}
        for name, key in self.TAG_MAPPING.items():
            raw = tags.get(key)
            values[name] = safe_get_first(raw) if isinstance(raw, list) else None

        raw_tags = RawTags(**values)
        logger.debug("Read tags from %s: %s", path, raw_tags)
        return raw_tags


__all__ = ["FlacTagReader"]
