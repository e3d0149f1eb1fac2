"""Package for the external codec adapters."""

from .errors import CodecError
from .image import encode_image_thumbnail
from .video import encode_video_thumbnail, probe_duration

__all__ = ["CodecError", "encode_image_thumbnail", "encode_video_thumbnail", "probe_duration"]
