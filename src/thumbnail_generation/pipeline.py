"""Generate thumbnails for a whole media tree."""

from __future__ import annotations

import logging
from typing import Callable, Sequence, Tuple

from freshness_cache import FreshnessCache
from media_codecs import encode_image_thumbnail, encode_video_thumbnail
from media_tree import MediaNode

from .config import ThumbnailConfig
from .converters import ImageCodec, Progress, ThumbnailConverters, VideoCodec
from .errors import DirectoryCreationError
from .planner import Job, Report, plan_jobs
from .runner import run_all


logger = logging.getLogger(__name__)


def _log_diagnostic(message: str) -> None:
    logger.warning(message)


class ThumbnailPipeline:
    """Plan one job per media file and run them in tree order.

    The pipeline holds only configuration and the injected cache; the node
    tree is mutated in place (``thumbnail_filename``) and handed back.
    """

    def __init__(
        self,
        config: ThumbnailConfig,
        cache: FreshnessCache,
        *,
        progress: Progress | None = None,
        report: Report | None = None,
        image_codec: ImageCodec = encode_image_thumbnail,
        video_codec: VideoCodec = encode_video_thumbnail,
    ):
        self.config = config
        self.cache = cache
        self.report: Callable[[str], None] = report or _log_diagnostic
        self.converters = ThumbnailConverters(
            config,
            cache,
            progress=progress,
            image_codec=image_codec,
            video_codec=video_codec,
        )

    def prepare_thumbs_dir(self) -> None:
        try:
            self.config.thumbs_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationError(f"Could not create output directory: {exc}") from exc

    def plan(self, nodes: Sequence[MediaNode]) -> Tuple[Job, ...]:
        return plan_jobs(
            nodes,
            self.config.thumbs_dir,
            image_action=self.converters.image_thumbnail,
            video_action=self.converters.video_thumbnail,
            report=self.report,
        )

    def generate(self, nodes: Sequence[MediaNode]) -> Sequence[MediaNode]:
        """Thumbnail every supported file in ``nodes`` and return ``nodes``.

        Raises:
            ConversionError: For the first file whose conversion failed.
                Thumbnails produced before it are kept.
        """

        try:
            self.prepare_thumbs_dir()
        except DirectoryCreationError as exc:
            self.report(str(exc))

        jobs = self.plan(nodes)
        run_all(jobs)
        return nodes
