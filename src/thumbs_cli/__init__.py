"""Command-line entry point for media thumbnail generation."""

__version__ = "0.1.0"
