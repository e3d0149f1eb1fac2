"""Build a media tree from a directory on disk."""

from __future__ import annotations

import hashlib
import logging
import mimetypes
from pathlib import Path
from typing import List

from .nodes import MediaDirectory, MediaFile, MediaNode


logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def file_digest(path: Path) -> str:
    """SHA-256 of the file content, read in chunks."""

    hasher = hashlib.sha256()
    with path.open("rb") as fh:
        for chunk in iter(lambda: fh.read(CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def build_file(path: Path) -> MediaFile:
    mime_type, _ = mimetypes.guess_type(path.name)
    return MediaFile(
        filename=path,
        hash=file_digest(path),
        mime_type=mime_type,
        extension=path.suffix.lower(),
    )


def scan_tree(root: Path, *, exclude: Path | None = None) -> List[MediaNode]:
    """Return the children of ``root`` as media nodes.

    Entries are sorted by name. Hidden entries and symlinked directories are
    skipped, as is ``exclude`` (typically the thumbs directory).
    """

    root = Path(root)
    excluded = exclude.resolve() if exclude else None
    nodes: List[MediaNode] = []

    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.name.startswith("."):
            continue
        if excluded is not None and entry.resolve() == excluded:
            continue
        if entry.is_dir():
            if entry.is_symlink():
                logger.debug("Skipping symlinked directory %s", entry)
                continue
            nodes.append(MediaDirectory(path=entry, children=scan_tree(entry, exclude=exclude)))
        elif entry.is_file():
            nodes.append(build_file(entry))

    return nodes
