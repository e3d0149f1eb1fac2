"""File and directory nodes handed to the thumbnail pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Union


IMAGE_MIME_TYPES = frozenset({"image/jpeg", "image/png"})
VIDEO_MIME_TYPES = frozenset({"video/mp4", "video/quicktime", "video/ogg", "video/webm"})


class MediaKind(Enum):
    IMAGE = "image"
    VIDEO = "video"
    UNSUPPORTED = "unsupported"


def classify(mime_type: str | None) -> MediaKind:
    """Map a mime type onto the kinds we know how to thumbnail."""

    if mime_type in IMAGE_MIME_TYPES:
        return MediaKind.IMAGE
    if mime_type in VIDEO_MIME_TYPES:
        return MediaKind.VIDEO
    return MediaKind.UNSUPPORTED


@dataclass(eq=False)
class MediaFile:
    """A source file plus the slot for its generated thumbnail.

    Only ``thumbnail_filename`` is meant to change once the node is built.
    """

    filename: Path
    hash: str
    mime_type: str | None
    extension: str
    thumbnail_filename: Path | None = None

    def __post_init__(self) -> None:
        self.filename = Path(self.filename)

    @property
    def kind(self) -> MediaKind:
        return classify(self.mime_type)


@dataclass(eq=False)
class MediaDirectory:
    path: Path
    children: List["MediaNode"] = field(default_factory=list)


MediaNode = Union[MediaFile, MediaDirectory]


def iter_files(nodes: Iterable[MediaNode]) -> Iterator[MediaFile]:
    """Yield every file in ``nodes`` in pre-order, children in order."""

    for node in nodes:
        if isinstance(node, MediaFile):
            yield node
        elif isinstance(node, MediaDirectory):
            yield from iter_files(node.children)
