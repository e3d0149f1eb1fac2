"""Configuration for the thumbnail pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_THUMBS_DIR = "thumbs"
DEFAULT_WIDTH = 320
DEFAULT_HEIGHT = 320


def _load_env_file() -> None:
    """Best-effort load MEDIATHUMBS_* values from a .env in the cwd or HOME.

    Values already in the environment are never overwritten.
    """

    for path in (Path.cwd() / ".env", Path.home() / ".env"):
        if not path.exists():
            continue
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line.startswith("MEDIATHUMBS_") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class ThumbnailConfig:
    thumbs_dir: Path
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    def __post_init__(self) -> None:
        object.__setattr__(self, "thumbs_dir", Path(self.thumbs_dir))
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Thumbnail dimensions must be positive, got {self.width}x{self.height}")


def load_config(
    *,
    thumbs_dir: Path | str | None = None,
    width: int | None = None,
    height: int | None = None,
) -> ThumbnailConfig:
    """Build a config from explicit overrides, then env vars, then defaults."""

    _load_env_file()
    return ThumbnailConfig(
        thumbs_dir=Path(
            thumbs_dir if thumbs_dir is not None else os.environ.get("MEDIATHUMBS_THUMBS_DIR", DEFAULT_THUMBS_DIR)
        ),
        width=width if width is not None else int(os.environ.get("MEDIATHUMBS_WIDTH", DEFAULT_WIDTH)),
        height=height if height is not None else int(os.environ.get("MEDIATHUMBS_HEIGHT", DEFAULT_HEIGHT)),
    )
