"""Track which source files already have an up-to-date artifact.

Entries are keyed by the file's content hash. Each entry remembers the source
mtime at the time the artifact was produced plus a set of category flags
("thumb", ...). An entry is only considered valid for a category when the
flag is set and the source has not been modified since.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from media_tree import MediaFile


logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "thumb"
CACHE_VERSION = 1


class CacheLoadError(RuntimeError):
    pass


def _source_mtime(file: MediaFile) -> float | None:
    try:
        return file.filename.stat().st_mtime
    except OSError:
        return None


def _valid_entry(entry: Any) -> bool:
    if not isinstance(entry, dict) or not isinstance(entry.get("categories"), dict):
        return False
    mtime = entry.get("mtime", 0)
    return isinstance(mtime, (int, float)) and not isinstance(mtime, bool)


class FreshnessCache:
    def __init__(self, path: Path | str | None = None, entries: Dict[str, Dict[str, Any]] | None = None):
        self.path = Path(path) if path else None
        self._entries: Dict[str, Dict[str, Any]] = dict(entries or {})

    @classmethod
    def load(cls, path: Path | str) -> "FreshnessCache":
        """Read a cache document; a missing file yields an empty cache."""

        path = Path(path)
        if not path.exists():
            return cls(path)

        try:
            data = json.loads(path.read_text())
        except (OSError, ValueError) as exc:
            raise CacheLoadError(f"Cannot read cache {path}: {exc}") from exc

        if not isinstance(data, dict) or not isinstance(data.get("entries"), dict):
            raise CacheLoadError(f"Unexpected cache schema in {path}")

        for key, entry in data["entries"].items():
            if not _valid_entry(entry):
                raise CacheLoadError(f"Malformed cache entry {key!r} in {path}")

        return cls(path, data["entries"])

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, file: MediaFile) -> bool:
        return file.hash in self._entries

    def is_valid(self, file: MediaFile, category: str = DEFAULT_CATEGORY) -> bool:
        entry = self._entries.get(file.hash)
        if not entry or not entry.get("categories", {}).get(category):
            return False

        current = _source_mtime(file)
        if current is None:
            return False
        # Source touched after the artifact was recorded
        return current <= entry.get("mtime", 0)

    def mark_valid(self, file: MediaFile, category: str = DEFAULT_CATEGORY) -> None:
        entry = self._entries.setdefault(file.hash, {"categories": {}})
        entry["filename"] = str(file.filename)
        entry["mtime"] = _source_mtime(file) or 0
        entry["categories"][category] = True

    def save(self) -> None:
        if self.path is None:
            return

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps({"version": CACHE_VERSION, "entries": self._entries}, indent=2))
        os.replace(tmp_path, self.path)
        logger.debug("Saved %d cache entries to %s", len(self._entries), self.path)
