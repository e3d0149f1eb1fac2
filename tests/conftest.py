from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest

from media_codecs import CodecError
from media_tree import MediaFile


class RecordingCodec:
    """Stand-in for a codec adapter that writes a placeholder output."""

    def __init__(self, fail_for: set[str] | None = None):
        self.calls: List[Tuple] = []
        self.fail_for = fail_for or set()

    def image(self, source: Path, output: Path, max_width: int, max_height: int) -> Path:
        return self._record(("image", source, output, max_width, max_height), Path(output))

    def video(self, source: Path, output_dir: Path, output_filename: str, width: int) -> Path:
        return self._record(("video", source, output_dir, output_filename, width), Path(output_dir) / output_filename)

    def _record(self, call: Tuple, output: Path) -> Path:
        self.calls.append(call)
        if Path(call[1]).name in self.fail_for:
            raise CodecError(f"decoder exploded on {Path(call[1]).name}")
        output.write_bytes(b"thumb")
        return output


@pytest.fixture
def codec() -> RecordingCodec:
    return RecordingCodec()


@pytest.fixture
def failing_codec():
    def _make(*names: str) -> RecordingCodec:
        return RecordingCodec(fail_for=set(names))

    return _make


@pytest.fixture
def make_file(tmp_path):
    """Create a real source file on disk and its MediaFile node."""

    src_dir = tmp_path / "src"
    src_dir.mkdir()

    def _make(name: str, mime_type: str | None, hash_: str | None = None) -> MediaFile:
        path = src_dir / name
        path.write_bytes(b"source-" + name.encode())
        return MediaFile(
            filename=path,
            hash=hash_ or Path(name).stem,
            mime_type=mime_type,
            extension=path.suffix.lower(),
        )

    return _make
