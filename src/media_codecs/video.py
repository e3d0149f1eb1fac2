"""Grab a single mid-point frame from a video using ffmpeg."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from .errors import CodecError


EXECUTABLE_ENV = {"ffmpeg": "MEDIATHUMBS_FFMPEG", "ffprobe": "MEDIATHUMBS_FFPROBE"}
STDERR_TAIL_LINES = 5


def _executable(name: str) -> str:
    """Resolve ffmpeg/ffprobe at call time so a late .env load still applies."""

    return os.environ.get(EXECUTABLE_ENV[name], name)


def _stderr_tail(stderr: str | bytes | None) -> str:
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    lines = [line for line in (stderr or "").splitlines() if line.strip()]
    return "\n".join(lines[-STDERR_TAIL_LINES:])


def _run(cmd: list[str]) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(cmd, check=True, capture_output=True, text=True)
    except FileNotFoundError as exc:
        raise CodecError(f"{cmd[0]} not found; install ffmpeg or set MEDIATHUMBS_FFMPEG/MEDIATHUMBS_FFPROBE") from exc
    except subprocess.CalledProcessError as exc:
        detail = _stderr_tail(exc.stderr) or f"exit status {exc.returncode}"
        raise CodecError(f"{Path(cmd[0]).name} failed: {detail}") from exc


def probe_duration(video_path: Path) -> float:
    """Return the container duration in seconds."""

    result = _run(
        [
            _executable("ffprobe"),
            "-v",
            "error",
            "-show_entries",
            "format=duration",
            "-of",
            "default=noprint_wrappers=1:nokey=1",
            str(video_path),
        ]
    )
    try:
        return float(result.stdout.strip())
    except ValueError as exc:
        raise CodecError(f"Cannot determine duration of {video_path}: {result.stdout.strip()!r}") from exc


def encode_video_thumbnail(
    source_path: Path,
    output_dir: Path,
    output_filename: str,
    width: int,
) -> Path:
    """Write the frame at 50% of the video, scaled to ``width``, into ``output_dir``."""

    output_path = Path(output_dir) / output_filename
    midpoint = probe_duration(source_path) / 2

    _run(
        [
            _executable("ffmpeg"),
            "-v",
            "error",
            "-ss",
            f"{midpoint:.3f}",
            "-i",
            str(source_path),
            "-frames:v",
            "1",
            "-vf",
            f"scale={width}:-2",
            "-y",
            str(output_path),
        ]
    )

    if not output_path.exists():
        raise CodecError(f"ffmpeg produced no frame for {source_path}")
    return output_path
