"""Resize still images with Pillow."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageOps

from .errors import CodecError


JPEG_QUALITY = 85


def encode_image_thumbnail(
    source_path: Path,
    output_path: Path,
    max_width: int,
    max_height: int,
) -> Path:
    """Fit the image inside ``max_width`` x ``max_height`` and save it.

    Aspect ratio is preserved and images smaller than the box are not
    upscaled. The output format follows the output suffix.

    Returns:
        ``output_path``.

    Raises:
        CodecError: If the source cannot be decoded or the output written.
    """

    output_path = Path(output_path)
    try:
        with Image.open(source_path) as img:
            img = ImageOps.exif_transpose(img)
            img.thumbnail((max_width, max_height), Image.Resampling.LANCZOS)
            if output_path.suffix.lower() in (".jpg", ".jpeg"):
                if img.mode not in ("RGB", "L"):
                    img = img.convert("RGB")
                img.save(output_path, format="JPEG", quality=JPEG_QUALITY)
            else:
                img.save(output_path)
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise CodecError(f"Cannot process image {source_path}: {exc}") from exc

    return output_path
