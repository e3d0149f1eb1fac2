"""Cache-gated wrappers around the image and video codecs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from freshness_cache import DEFAULT_CATEGORY, FreshnessCache
from media_codecs import CodecError, encode_image_thumbnail, encode_video_thumbnail
from media_tree import MediaFile

from .config import ThumbnailConfig
from .errors import ConversionError, InvalidInputError


logger = logging.getLogger(__name__)

ImageCodec = Callable[[Path, Path, int, int], Path]
VideoCodec = Callable[[Path, Path, str, int], Path]
Progress = Callable[[str, MediaFile], None]


class ThumbnailConverters:
    """Skip files whose thumbnail is fresh, otherwise call the codec.

    A conversion counts as skippable only when the cache says the file is
    valid for the category AND the output file is present on disk.
    """

    def __init__(
        self,
        config: ThumbnailConfig,
        cache: FreshnessCache,
        *,
        progress: Progress | None = None,
        image_codec: ImageCodec = encode_image_thumbnail,
        video_codec: VideoCodec = encode_video_thumbnail,
    ):
        self.config = config
        self.cache = cache
        self.progress = progress
        self.image_codec = image_codec
        self.video_codec = video_codec

    def image_thumbnail(self, file: MediaFile, output_path: Path, category: str = DEFAULT_CATEGORY) -> Path:
        return self._convert_if_stale(
            file,
            output_path,
            category,
            "Creating image thumbnail",
            lambda: self.image_codec(file.filename, output_path, self.config.width, self.config.height),
        )

    def video_thumbnail(self, file: MediaFile, output_path: Path, category: str = DEFAULT_CATEGORY) -> Path:
        output_path = Path(output_path)
        return self._convert_if_stale(
            file,
            output_path,
            category,
            "Creating video thumbnail",
            lambda: self.video_codec(file.filename, output_path.parent, output_path.name, self.config.width),
        )

    def _convert_if_stale(
        self,
        file: MediaFile,
        output_path: Path,
        category: str,
        message: str,
        encode: Callable[[], Path],
    ) -> Path:
        if not isinstance(file, MediaFile):
            raise InvalidInputError(f"Expected a MediaFile, got {type(file).__name__}")

        output_path = Path(output_path)
        if self.cache.is_valid(file, category) and output_path.exists():
            logger.debug("Cache hit for %s -> %s", file.filename, output_path)
            file.thumbnail_filename = output_path
            return output_path

        if self.progress:
            self.progress(message, file)
        logger.info("%s for %s", message, file.filename)

        try:
            encode()
        except CodecError as exc:
            raise ConversionError(file, str(exc)) from exc

        self.cache.mark_valid(file, category)
        file.thumbnail_filename = output_path
        return output_path
