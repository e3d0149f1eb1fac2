"""CLI entry point: scan a directory and thumbnail its media files."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from freshness_cache import CacheLoadError, FreshnessCache
from media_tree import MediaFile, iter_files, scan_tree
from thumbnail_generation import ConversionError, ThumbnailPipeline, load_config
from . import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate thumbnails for images and videos")
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    generate = sub.add_parser("generate", help="Create thumbnails for every media file under ROOT")
    generate.add_argument("root", type=Path, help="Directory to scan")
    generate.add_argument(
        "--thumbs-dir",
        type=Path,
        default=None,
        help="Output directory (default: $MEDIATHUMBS_THUMBS_DIR or ./thumbs)",
    )
    generate.add_argument("--width", type=int, default=None, help="Maximum thumbnail width")
    generate.add_argument("--height", type=int, default=None, help="Maximum thumbnail height")
    generate.add_argument(
        "--cache", type=Path, default=None, help="Cache file (default: <thumbs-dir>/cache.json)"
    )
    generate.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def _print_progress(message: str, file: MediaFile) -> None:
    print(f"[thumbs] {message}: {file.filename}")


def run_generate(args: argparse.Namespace) -> int:
    try:
        config = load_config(thumbs_dir=args.thumbs_dir, width=args.width, height=args.height)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 2

    if not args.root.is_dir():
        print(f"Error: {args.root} is not a directory")
        return 2

    try:
        cache = FreshnessCache.load(args.cache or config.thumbs_dir / "cache.json")
    except CacheLoadError as exc:
        print(f"Error: {exc}")
        return 2

    nodes = scan_tree(args.root, exclude=config.thumbs_dir)
    pipeline = ThumbnailPipeline(config, cache, progress=_print_progress)

    try:
        pipeline.generate(nodes)
    except ConversionError as exc:
        print(f"Error: {exc}")
        return 1
    finally:
        cache.save()

    done = sum(1 for f in iter_files(nodes) if f.thumbnail_filename)
    print(f"[thumbs] {done} thumbnails in {config.thumbs_dir}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if args.command == "generate":
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )
        return run_generate(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
