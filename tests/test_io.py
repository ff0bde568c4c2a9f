"""
Tests for image decoding, encoding and description.
"""
import cv2
import numpy as np
import pytest
from PIL import Image

from pixel_watermark.core.validation import validate_image
from pixel_watermark.errors import ImageNotFoundError, InvalidFormatError
from pixel_watermark.models.image import ImageBuffer, Pixel, Transparency
from pixel_watermark.utils.io import ImageLoader, ResultExporter, describe_image


def test_load_rgb_png(write_image):
    path = write_image("base.png", "RGB", (3, 2), (10, 20, 30))

    image = ImageLoader().load_image(path)

    assert image.size == (3, 2)
    assert image.bit_depth == 24
    assert image.color_components == 3
    assert image.num_components == 3
    assert image.transparency == Transparency.OPAQUE
    assert image.pixel(2, 1) == (10, 20, 30, 255)


def test_load_rgba_png_is_translucent(write_image):
    path = write_image("mark.png", "RGBA", (2, 2), (1, 2, 3, 0))

    image = ImageLoader().load_image(path)

    assert image.bit_depth == 32
    assert image.num_components == 4
    assert image.transparency == Transparency.TRANSLUCENT
    assert image.pixel(0, 0) == (1, 2, 3, 0)


def test_load_grayscale_png(write_image):
    image = ImageLoader().load_image(write_image("gray.png", "L", (2, 2), 128))

    assert image.color_components == 1
    assert image.bit_depth == 8


def test_palette_with_transparent_index_is_bitmask(tmp_path):
    path = tmp_path / "palette.png"
    Image.new("P", (2, 2), 0).save(path, transparency=0)

    assert ImageLoader().load_image(path).transparency == Transparency.BITMASK


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.png"
    with pytest.raises(ImageNotFoundError) as exc:
        ImageLoader().load_image(missing)
    assert exc.value.message == f"The file {missing} doesn't exist."


@pytest.mark.parametrize("channels,depth", [(3, 48), (4, 64)])
def test_sixteen_bit_png_reports_real_depth(tmp_path, channels, depth):
    path = tmp_path / "deep.png"
    cv2.imwrite(str(path), np.full((2, 2, channels), 40000, dtype=np.uint16))

    image = ImageLoader().load_image(path)

    assert image.bit_depth == depth
    with pytest.raises(InvalidFormatError) as exc:
        validate_image(image, "image")
    assert exc.value.message == "The image isn't 24 or 32-bit."


def test_eight_bit_png_written_by_opencv_passes(tmp_path):
    path = tmp_path / "plain.png"
    cv2.imwrite(str(path), np.zeros((2, 2, 3), dtype=np.uint8))

    image = ImageLoader().load_image(path)

    assert image.bit_depth == 24
    validate_image(image, "image")


@pytest.mark.parametrize("name", ["./missing.png", "dir//missing.png", ""])
def test_missing_file_named_as_typed(monkeypatch, tmp_path, name):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ImageNotFoundError) as exc:
        ImageLoader().load_image(name)
    assert exc.value.message == f"The file {name} doesn't exist."


def test_undecodable_file_reported_as_missing(tmp_path):
    path = tmp_path / "junk.png"
    path.write_text("not an image")
    with pytest.raises(ImageNotFoundError):
        ImageLoader().load_image(path)


def test_png_round_trip_with_alpha(tmp_path):
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(5, 4, 4), dtype=np.uint8)
    original = ImageBuffer(pixels=pixels)

    path = ResultExporter().export(original, "png", tmp_path / "out.png")
    decoded = ImageLoader().load_image(path)

    assert decoded.size == (4, 5)
    assert np.array_equal(decoded.pixels, pixels)


def test_png_round_trip_opaque(tmp_path):
    rng = np.random.default_rng(3)
    pixels = rng.integers(0, 256, size=(3, 6, 4), dtype=np.uint8)
    pixels[:, :, 3] = 255
    original = ImageBuffer(
        pixels=pixels,
        bit_depth=24,
        num_components=3,
        transparency=Transparency.OPAQUE
    )

    path = ResultExporter().export(original, "png", tmp_path / "out.png")
    decoded = ImageLoader().load_image(path)

    assert decoded.bit_depth == 24
    assert np.array_equal(decoded.pixels, pixels)


def test_jpg_export_is_rgb(tmp_path):
    original = ImageBuffer.filled(8, 8, Pixel(200, 100, 50))

    path = ResultExporter(jpeg_quality=95).export(original, "jpg", tmp_path / "out.jpg")

    with Image.open(path) as image:
        assert image.format == "JPEG"
        assert image.mode == "RGB"
        assert image.size == (8, 8)


def test_export_to_name_without_extension(tmp_path):
    path = ResultExporter().export(ImageBuffer.filled(1, 1, Pixel(0, 0, 0)), "png", tmp_path / "png")

    with Image.open(path) as image:
        assert image.format == "PNG"


def test_describe_image():
    lines = describe_image(ImageBuffer.filled(3, 2, Pixel(0, 0, 0)), "base.png")

    assert lines == [
        "Image file: base.png",
        "Width: 3",
        "Height: 2",
        "Number of components: 3",
        "Number of color components: 3",
        "Bits per pixel: 24",
        "Transparency: OPAQUE",
    ]
