"""Package for cache-aware thumbnail generation over a media tree."""

from .config import ThumbnailConfig, load_config
from .converters import ThumbnailConverters
from .errors import (
    ConversionError,
    DirectoryCreationError,
    InvalidInputError,
    ThumbnailError,
    UnsupportedFormatError,
)
from .pipeline import ThumbnailPipeline
from .planner import Job, output_path_for, plan_jobs
from .runner import run_all

__all__ = [
    "ConversionError",
    "DirectoryCreationError",
    "InvalidInputError",
    "Job",
    "ThumbnailConfig",
    "ThumbnailConverters",
    "ThumbnailError",
    "ThumbnailPipeline",
    "UnsupportedFormatError",
    "load_config",
    "output_path_for",
    "plan_jobs",
    "run_all",
]
