"""Package for the in-memory media file tree."""

from .nodes import MediaDirectory, MediaFile, MediaKind, MediaNode, classify, iter_files
from .scanner import scan_tree

__all__ = [
    "MediaDirectory",
    "MediaFile",
    "MediaKind",
    "MediaNode",
    "classify",
    "iter_files",
    "scan_tree",
]
