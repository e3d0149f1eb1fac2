"""Flatten a media tree into an ordered list of thumbnail jobs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Tuple

from media_tree import MediaDirectory, MediaFile, MediaKind, MediaNode

from .errors import UnsupportedFormatError


logger = logging.getLogger(__name__)

Action = Callable[[MediaFile, Path], Path]
Report = Callable[[str], None]


@dataclass(frozen=True)
class Job:
    file: MediaFile
    kind: MediaKind
    output_path: Path
    action: Action

    def __call__(self) -> Path:
        return self.action(self.file, self.output_path)


def output_path_for(file: MediaFile, kind: MediaKind, thumbs_dir: Path) -> Path:
    """Images keep their extension; video frames are always JPEG."""

    if kind is MediaKind.VIDEO:
        return Path(thumbs_dir) / f"{file.hash}.jpg"
    return Path(thumbs_dir) / f"{file.hash}{file.extension}"


def plan_jobs(
    nodes: Iterable[MediaNode],
    thumbs_dir: Path,
    *,
    image_action: Action,
    video_action: Action,
    report: Report,
) -> Tuple[Job, ...]:
    """Return one job per convertible file, in tree order.

    Unsupported files are reported and produce no job. Nothing here touches
    the filesystem or the cache.
    """

    actions = {MediaKind.IMAGE: image_action, MediaKind.VIDEO: video_action}

    def _fold(level: Iterable[MediaNode]) -> Tuple[Job, ...]:
        jobs: Tuple[Job, ...] = ()
        for node in level:
            if isinstance(node, MediaDirectory):
                jobs += _fold(node.children)
                continue
            if not isinstance(node, MediaFile):
                continue

            kind = node.kind
            if kind is MediaKind.UNSUPPORTED:
                report(str(UnsupportedFormatError(node)))
                continue
            jobs += (Job(node, kind, output_path_for(node, kind, thumbs_dir), actions[kind]),)
        return jobs

    jobs = _fold(nodes)
    logger.debug("Planned %d thumbnail jobs", len(jobs))
    return jobs
