"""Summary: Copy-validate-delete placement of resolved files.
Why: A source is only removed once an identical copy exists at its destination.
"""

from __future__ import annotations

from pathlib import Path

from flacfolders.features.metadata.domain import Resolution, ResolutionClass
from flacfolders.features.metadata.usecases.extraction import metadata_from_tags
from flacfolders.features.metadata.usecases.ports import TagReaderPort
from flacfolders.platform.logging import logger
from flacfolders.shared.errors import CopyValidationError, TagReadError

from .file_operations import copy_file, discard_file, files_identical, find_available_path
from .path_builder import DestinationPlanner

_COMPARED_FIELDS: tuple[str, ...] = ("artist", "title", "album")


class PlacementEngine:
    """Move resolved files to their destination with verification."""

    def __init__(
        self,
        planner: DestinationPlanner,
        *,
        tag_reader: TagReaderPort,
        dry_run: bool = False,
    ) -> None:
        self.planner: DestinationPlanner = planner
        self.dry_run: bool = dry_run
        self._tag_reader: TagReaderPort = tag_reader
        # Destinations handed out by dry runs, which never reach the disk
        self._planned: set[Path] = set()

    def plan(self, resolution: Resolution) -> Path:
        """Return the collision-free destination without touching the disk."""

        return find_available_path(self.planner.destination_for(resolution), self._planned)

    def place(self, resolution: Resolution) -> Path:
        """Copy, validate and remove the source.

        Args:
            resolution: Classified metadata for one source file.

        Returns:
            Path: Final destination of the file.

        Raises:
            CopyValidationError: If the copy differs from the source. The copy
                is removed and the source left untouched.
            OSError: If copying or removing the source fails. The copy is
                removed in both cases so the file exists exactly once.
        """
        source = resolution.source_path
        destination = self.plan(resolution)

        if self.dry_run:
            self._planned.add(destination)
            logger.info("[dry-run] %s -> %s", source.name, destination)
            return destination

        try:
            copy_file(source, destination)
        except OSError:
            discard_file(destination)
            raise

        try:
            if resolution.classification is ResolutionClass.COMPLETE:
                self._validate_tags(source, destination)
            self._validate_bytes(source, destination)
        except CopyValidationError as exc:
            logger.error("Validation failed, keeping original %s: %s", source, exc.reason)
            discard_file(destination)
            raise

        try:
            source.unlink()
        except OSError:
            logger.error("Cannot remove original %s; discarding copy %s", source, destination)
            discard_file(destination)
            raise
        logger.debug("Removed original %s", source)
        return destination

    def _validate_tags(self, source: Path, destination: Path) -> None:
        try:
            expected = metadata_from_tags(self._tag_reader.read(source)).as_dict()
            actual = metadata_from_tags(self._tag_reader.read(destination)).as_dict()
        except TagReadError as exc:
            raise CopyValidationError(source, destination, exc.reason) from exc

        for name in _COMPARED_FIELDS:
            if expected[name] != actual[name]:
                raise CopyValidationError(
                    source,
                    destination,
                    f"{name} tag mismatch ({expected[name]!r} != {actual[name]!r})",
                )

    @staticmethod
    def _validate_bytes(source: Path, destination: Path) -> None:
        if not files_identical(source, destination):
            raise CopyValidationError(source, destination, "checksum mismatch")


__all__ = ["PlacementEngine"]
