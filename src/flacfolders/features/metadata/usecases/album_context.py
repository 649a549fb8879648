"""Album context inference for numbered tracks.

Where: src/flacfolders/features/metadata/usecases/album_context.py
What: Infer a shared (artist, album, year) for a directory from sibling file
      names or from an ``Artist - Album`` folder name, confirmed remotely.
Why: ``01 - Title.flac`` carries no artist; its neighbours or folder often do.

Results are memoised per directory for the lifetime of the resolver, so a
directory costs at most one round of remote lookups per run.
"""

from __future__ import annotations

from pathlib import Path

from flacfolders.platform.logging import logger

from ..domain.album_context import AlbumContext
from .filename_parser import FLAC_EXTENSION, is_track_format, strip_extension
from .ports import LookupResult, LookupStatus, MetadataLookupPort

_DELIMITER = " - "


class AlbumContextResolver:
    """Resolve and cache album context per directory."""

    def __init__(self, lookup: MetadataLookupPort, *, extension: str = FLAC_EXTENSION) -> None:
        self._lookup: MetadataLookupPort = lookup
        self._extension: str = extension.lower()
        self._cache: dict[Path, AlbumContext] = {}

    @property
    def cache(self) -> dict[Path, AlbumContext]:
        """Expose the per-directory cache for diagnostics and tests."""

        return self._cache

    def resolve(self, file_path: Path) -> AlbumContext:
        """Return the album context of the directory holding ``file_path``.

        Args:
            file_path: Any file inside the directory of interest.

        Returns:
            AlbumContext: Inferred context, possibly empty.
        """
        directory = file_path.resolve().parent
        cached = self._cache.get(directory)
        if cached is not None:
            logger.debug("Album context cache hit for %s", directory)
            return cached

        logger.debug("Analysing %s for album context", directory)
        context = self._from_siblings(directory)
        if context.is_empty:
            context = self._from_directory_name(directory)

        self._cache[directory] = context
        if context.is_empty:
            logger.debug("No album context found for %s", directory)
        else:
            logger.info(
                "Album context for %s: artist=%s album=%s year=%s",
                directory.name,
                context.artist,
                context.album,
                context.year,
            )
        return context

    def _sibling_names(self, directory: Path) -> list[str]:
        try:
            entries = sorted(directory.iterdir())
        except OSError as exc:
            logger.warning("Cannot list %s for album context: %s", directory, exc)
            return []
        return [
            entry.name
            for entry in entries
            if entry.suffix.lower() == self._extension and entry.is_file()
        ]

    def _from_siblings(self, directory: Path) -> AlbumContext:
        """Use the first ``Artist - Title`` sibling that MusicBrainz recognises."""

        for name in self._sibling_names(directory):
            if _DELIMITER not in name or is_track_format(name):
                continue

            artist, remainder = name.split(_DELIMITER, 1)
            if artist.strip().isdigit():
                continue
            title = strip_extension(remainder, self._extension)

            logger.debug("Checking sibling %s (artist=%s, title=%s)", name, artist, title)
            result = self._lookup.search_by_recording(artist, title)
            if self._log_failure(result, name) or not result.found:
                continue
            context = AlbumContext(
                artist=result.match.artist,
                album=result.match.album,
                year=result.match.year,
            )
            if not context.is_empty:
                logger.debug("Album context taken from sibling %s", name)
                return context
        return AlbumContext()

    def _from_directory_name(self, directory: Path) -> AlbumContext:
        """Confirm an ``Artist - Album`` folder name against MusicBrainz releases."""

        name = directory.name
        if _DELIMITER not in name:
            return AlbumContext()

        artist, album = name.split(_DELIMITER, 1)
        logger.debug("Checking parent directory %s (artist=%s, album=%s)", name, artist, album)
        result = self._lookup.search_by_release(artist, album)
        if self._log_failure(result, name) or not result.found:
            return AlbumContext()
        return AlbumContext(
            artist=result.match.artist,
            album=result.match.album,
            year=result.match.year,
        )

    @staticmethod
    def _log_failure(result: LookupResult, subject: str) -> bool:
        if result.status is not LookupStatus.ERROR:
            return False
        logger.warning("Album context lookup for '%s' failed: %s", subject, result.error)
        return True


__all__ = ["AlbumContextResolver"]
