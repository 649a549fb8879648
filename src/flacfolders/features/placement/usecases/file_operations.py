"""Summary: Hashing, collision and copy helpers supporting placement.
Why: Keep filesystem operations isolated from routing policy."""

from __future__ import annotations

import hashlib
import shutil
from collections.abc import Collection
from pathlib import Path
from typing import Final

from flacfolders.platform.filesystem import ensure_parent_directory
from flacfolders.platform.logging import logger

FILE_HASH_CHUNK_SIZE: Final[int] = 1024 * 1024


def calculate_file_hash(file_path: Path) -> str:
    """Calculate SHA-256 hash of a file."""

    sha256_hash = hashlib.sha256()
    with open(file_path, "rb") as handle:
        for byte_block in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            sha256_hash.update(byte_block)
    return sha256_hash.hexdigest()


def files_identical(first: Path, second: Path) -> bool:
    """Compare sizes first, then SHA-256 digests."""

    if not first.is_file() or not second.is_file():
        return False
    if first.stat().st_size != second.stat().st_size:
        return False
    return calculate_file_hash(first) == calculate_file_hash(second)


def find_available_path(target_path: Path, reserved: Collection[Path] = ()) -> Path:
    """Find an available file path by appending a number if needed.

    Paths in ``reserved`` count as taken even though they are not on disk yet.
    """

    def _taken(candidate: Path) -> bool:
        return candidate in reserved or candidate.exists()

    if not _taken(target_path):
        return target_path

    parent = target_path.parent
    stem = target_path.stem
    extension = target_path.suffix
    counter = 1

    while True:
        candidate = parent / f"{stem} ({counter}){extension}"
        if not _taken(candidate):
            return candidate
        counter += 1


def copy_file(src_path: Path, dest_path: Path) -> None:
    """Copy ``src_path`` to ``dest_path``, creating parent directories."""

    _ = ensure_parent_directory(dest_path)
    logger.debug("Copying %s -> %s", src_path, dest_path)
    _ = shutil.copy2(src_path, dest_path)


def discard_file(path: Path) -> None:
    """Remove ``path`` if it exists, logging instead of raising."""

    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.error("Failed to remove %s: %s", path, exc)


__all__ = [
    "calculate_file_hash",
    "copy_file",
    "discard_file",
    "files_identical",
    "find_available_path",
]
