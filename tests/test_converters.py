from __future__ import annotations

import pytest

from freshness_cache import FreshnessCache
from media_tree import MediaDirectory
from thumbnail_generation import ConversionError, InvalidInputError, ThumbnailConfig, ThumbnailConverters


@pytest.fixture
def config(tmp_path):
    thumbs = tmp_path / "thumbs"
    thumbs.mkdir()
    return ThumbnailConfig(thumbs_dir=thumbs, width=200, height=150)


def _converters(config, cache, codec, progress=None):
    return ThumbnailConverters(
        config, cache, progress=progress, image_codec=codec.image, video_codec=codec.video
    )


def test_image_miss_converts_and_records(config, codec, make_file) -> None:
    f = make_file("abc.jpg", "image/jpeg")
    cache = FreshnessCache()
    events = []
    out = config.thumbs_dir / "abc.jpg"

    result = _converters(config, cache, codec, lambda m, fl: events.append((m, fl))).image_thumbnail(f, out)

    assert result == out
    assert codec.calls == [("image", f.filename, out, 200, 150)]
    assert events == [("Creating image thumbnail", f)]
    assert f.thumbnail_filename == out
    assert cache.is_valid(f, "thumb")


def test_video_uses_width_and_hash_filename(config, codec, make_file) -> None:
    f = make_file("clip.mp4", "video/mp4", hash_="xyz")
    cache = FreshnessCache()
    out = config.thumbs_dir / "xyz.jpg"

    _converters(config, cache, codec).video_thumbnail(f, out)

    assert codec.calls == [("video", f.filename, config.thumbs_dir, "xyz.jpg", 200)]
    assert f.thumbnail_filename == out
    assert cache.is_valid(f)


def test_hit_with_existing_output_skips_codec(config, codec, make_file) -> None:
    f = make_file("clip.mp4", "video/mp4", hash_="xyz")
    cache = FreshnessCache()
    cache.mark_valid(f)
    out = config.thumbs_dir / "xyz.jpg"
    out.write_bytes(b"old")
    events = []

    result = _converters(config, cache, codec, lambda m, fl: events.append(m)).video_thumbnail(f, out)

    assert result == out
    assert codec.calls == []
    assert events == []
    assert f.thumbnail_filename == out
    assert out.read_bytes() == b"old"


def test_hit_without_output_file_regenerates(config, codec, make_file) -> None:
    f = make_file("abc.png", "image/png")
    cache = FreshnessCache()
    cache.mark_valid(f)

    _converters(config, cache, codec).image_thumbnail(f, config.thumbs_dir / "abc.png")

    assert len(codec.calls) == 1


def test_miss_with_existing_output_regenerates(config, codec, make_file) -> None:
    f = make_file("abc.png", "image/png")
    out = config.thumbs_dir / "abc.png"
    out.write_bytes(b"old")

    _converters(config, FreshnessCache(), codec).image_thumbnail(f, out)

    assert len(codec.calls) == 1
    assert out.read_bytes() == b"thumb"


def test_other_category_does_not_count(config, codec, make_file) -> None:
    f = make_file("abc.png", "image/png")
    cache = FreshnessCache()
    cache.mark_valid(f, "preview")
    out = config.thumbs_dir / "abc.png"
    out.write_bytes(b"old")

    _converters(config, cache, codec).image_thumbnail(f, out)

    assert len(codec.calls) == 1


@pytest.mark.parametrize("kind", ["image", "video"])
def test_codec_failure_raises_without_mutation(config, make_file, failing_codec, kind) -> None:
    name = "bad.jpg" if kind == "image" else "bad.mp4"
    f = make_file(name, "image/jpeg" if kind == "image" else "video/mp4")
    codec = failing_codec(name)
    cache = FreshnessCache()
    converters = _converters(config, cache, codec)
    convert = converters.image_thumbnail if kind == "image" else converters.video_thumbnail

    with pytest.raises(ConversionError) as excinfo:
        convert(f, config.thumbs_dir / "bad.jpg")

    assert excinfo.value.file is f
    assert "decoder exploded" in excinfo.value.message
    assert f.thumbnail_filename is None
    assert not cache.is_valid(f)
    assert f not in cache


def test_directory_is_invalid_input(config, codec, tmp_path) -> None:
    with pytest.raises(InvalidInputError):
        _converters(config, FreshnessCache(), codec).image_thumbnail(
            MediaDirectory(tmp_path), config.thumbs_dir / "x.jpg"
        )
    assert codec.calls == []
