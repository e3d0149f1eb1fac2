"""Error taxonomy for thumbnail generation."""

from __future__ import annotations

from media_tree import MediaFile


class ThumbnailError(RuntimeError):
    pass


class ConversionError(ThumbnailError):
    """A codec failed for one file; halts the remaining jobs."""

    def __init__(self, file: MediaFile, message: str):
        super().__init__(f"Cannot create thumbnail for {file.filename}: {message}")
        self.file = file
        self.message = message


class InvalidInputError(ThumbnailError, TypeError):
    """A converter was handed something that is not a MediaFile."""


class DirectoryCreationError(ThumbnailError):
    pass


class UnsupportedFormatError(ThumbnailError):
    def __init__(self, file: MediaFile):
        super().__init__(f"Format {file.mime_type} not supported. Thumb for {file.filename} not generated.")
        self.file = file
