"""Tests for turning image bytes into RGBA pixel buffers."""

from __future__ import annotations

from io import BytesIO

import pytest
from PIL import Image

from dominant_color.imgproc.normalize import ImageDecodeError, ImageNormalizer


def _encode(image: Image.Image, fmt: str = "PNG") -> bytes:
    buffer = BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def test_pixels_are_row_major_rgba() -> None:
    image = Image.new("RGBA", (3, 2), (0, 0, 0, 0))
    image.putpixel((2, 0), (10, 20, 30, 255))
    image.putpixel((0, 1), (40, 50, 60, 128))

    pixels = ImageNormalizer().normalize(_encode(image))

    assert len(pixels) == 6
    assert pixels[2] == (10, 20, 30, 255)
    assert pixels[3] == (40, 50, 60, 128)
    assert pixels[0] == (0, 0, 0, 0)


def test_rgb_images_become_opaque() -> None:
    image = Image.new("RGB", (2, 2), (200, 100, 50))

    pixels = ImageNormalizer().normalize(_encode(image, "BMP"))

    assert pixels == [(200, 100, 50, 255)] * 4


def test_max_side_downscales_large_images() -> None:
    image = Image.new("RGB", (64, 32), (0, 128, 255))

    normalizer = ImageNormalizer(max_side=16)
    rgba = normalizer.to_rgba(_encode(image))

    assert rgba.size == (16, 8)
    assert len(normalizer.normalize(_encode(image))) == 16 * 8


def test_small_images_are_left_alone() -> None:
    image = Image.new("RGB", (8, 4), (0, 128, 255))

    assert ImageNormalizer(max_side=16).to_rgba(_encode(image)).size == (8, 4)


@pytest.mark.parametrize("payload", [b"", b"not an image"])
def test_undecodable_bytes_raise(payload: bytes) -> None:
    with pytest.raises(ImageDecodeError):
        ImageNormalizer().normalize(payload)
