"""Application service for organizing FLAC files.

This layer centralizes construction of the per-run collaborators (one lookup
client, one album context cache, one placement engine) and runs the
per-file loop so that no exception crosses a file boundary.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import final

from flacfolders.config import Config
from flacfolders.features.metadata import (
    AlbumContextResolver,
    FlacTagReader,
    MetadataLookupPort,
    MetadataResolutionPipeline,
    TagReaderPort,
)
from flacfolders.features.metadata.adapters import MusicBrainzLookupAdapter
from flacfolders.features.metadata.domain import ResolutionClass, TrackMetadata
from flacfolders.features.metadata.usecases.filename_parser import FLAC_EXTENSION
from flacfolders.features.placement import DestinationPlanner, PlacementEngine
from flacfolders.platform.logging import logger
from flacfolders.platform.musicbrainz import MusicBrainzClient
from flacfolders.shared.errors import CopyValidationError, TagReadError

from .processing_types import ProcessingEvent, ProcessResult


@dataclass(frozen=True)
class OrganizeRequest:
    """Input parameters for organizing operations.

    Attributes:
        dry_run: If True, resolve and plan destinations without moving files.
    """

    dry_run: bool = False


def _default_lookup(config: Config) -> MetadataLookupPort:
    client = MusicBrainzClient(
        config.mb_app_name,
        config.mb_app_version,
        config.mb_contact,
        base_url=config.musicbrainz_url,
        rate_limit_seconds=config.rate_limit_seconds,
    )
    return MusicBrainzLookupAdapter(client)


@final
class OrganizeFlacService:
    """Resolve and place FLAC files one at a time, in the order given."""

    def __init__(
        self,
        config: Config,
        request: OrganizeRequest | None = None,
        *,
        tag_reader: TagReaderPort | None = None,
        lookup_factory: Callable[[Config], MetadataLookupPort] | None = None,
    ) -> None:
        """Create a service for a single run.

        Tests can inject a fake tag reader and lookup while production code
        relies on mutagen and MusicBrainz.
        """

        self.config: Config = config
        self.request: OrganizeRequest = request or OrganizeRequest()
        self.tag_reader: TagReaderPort = tag_reader or FlacTagReader()
        self.lookup: MetadataLookupPort = (lookup_factory or _default_lookup)(config)
        self.album_context: AlbumContextResolver = AlbumContextResolver(self.lookup)
        self.pipeline: MetadataResolutionPipeline = MetadataResolutionPipeline(
            self.tag_reader, self.lookup, self.album_context
        )
        self.placement: PlacementEngine = PlacementEngine(
            DestinationPlanner(
                config.resolved_library_path,
                config.unsure_path,
                config.failed_path,
            ),
            tag_reader=self.tag_reader,
            dry_run=self.request.dry_run,
        )

    def process_paths(self, paths: Iterable[Path]) -> list[ProcessResult]:
        """Process every path sequentially; failures never stop the loop."""

        results: list[ProcessResult] = []
        for path in paths:
            try:
                results.append(self.process_file(path))
            except Exception as exc:
                logger.exception("Unexpected error while processing %s", path)
                results.append(self._failure(path, f"unexpected error: {exc}"))
        failed = sum(1 for result in results if not result.success)
        logger.debug(
            "Run complete: %d processed, %d failed",
            len(results) - failed,
            failed,
            extra={"processing_event": ProcessingEvent.RUN_COMPLETE},
        )
        return results

    def process_file(self, path: Path) -> ProcessResult:
        """Resolve and place one file.

        Args:
            path: Source path supplied by the user.

        Returns:
            ProcessResult: Outcome; ``success`` is False for skipped,
            unreadable or invalid copies.
        """
        if not path.is_file() or path.suffix.lower() != FLAC_EXTENSION:
            logger.warning(
                "Skipping %s (not a FLAC file)",
                path,
                extra={"processing_event": ProcessingEvent.FILE_SKIPPED},
            )
            return ProcessResult(
                source_path=path,
                error_message="not a FLAC file",
                dry_run=self.request.dry_run,
            )

        started = time.perf_counter()
        logger.info(
            "Processing: %s",
            path.name,
            extra={"processing_event": ProcessingEvent.FILE_START},
        )
        try:
            resolution = self.pipeline.resolve(path)
        except TagReadError as exc:
            return self._failure(path, exc.reason)

        try:
            target = self.placement.place(resolution)
        except CopyValidationError as exc:
            return self._failure(path, exc.reason, resolution.metadata, resolution.classification)
        except OSError as exc:
            logger.exception("Filesystem error while placing %s", path)
            return self._failure(path, str(exc), resolution.metadata, resolution.classification)

        logger.info(
            "%s -> %s (%s, %.1f ms)",
            path.name,
            target,
            resolution.classification,
            (time.perf_counter() - started) * 1000,
            extra={"processing_event": ProcessingEvent.FILE_PLACED},
        )
        return ProcessResult(
            source_path=path,
            target_path=target,
            success=True,
            dry_run=self.request.dry_run,
            metadata=resolution.metadata,
            classification=resolution.classification,
        )

    def _failure(
        self,
        path: Path,
        message: str,
        metadata: TrackMetadata | None = None,
        classification: ResolutionClass | None = None,
    ) -> ProcessResult:
        logger.error(
            "Failed to organise %s: %s",
            path,
            message,
            extra={"processing_event": ProcessingEvent.FILE_ERROR},
        )
        return ProcessResult(
            source_path=path,
            error_message=message,
            dry_run=self.request.dry_run,
            metadata=metadata,
            classification=classification,
        )


__all__ = ["OrganizeFlacService", "OrganizeRequest"]
