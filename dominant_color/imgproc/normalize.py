"""Image rasterisation helpers."""

from __future__ import annotations

from io import BytesIO

from PIL import Image, UnidentifiedImageError


class ImageDecodeError(ValueError):
    """Raised when image bytes cannot be decoded into pixels."""


class ImageNormalizer:
    """Turns encoded image bytes into an ordered RGBA pixel buffer."""

    def __init__(self, max_side: int = 0) -> None:
        self._max_side = max_side

    def to_rgba(self, image_bytes: bytes) -> Image.Image:
        """Decode the first frame of an image and convert it to RGBA."""

        try:
            with Image.open(BytesIO(image_bytes)) as img:
                img.seek(0)
                rgba = img.convert("RGBA")
        except (UnidentifiedImageError, Image.DecompressionBombError) as exc:
            raise ImageDecodeError(f"Unsupported or unsafe image: {exc}") from exc
        except (OSError, EOFError) as exc:
            raise ImageDecodeError(f"Corrupt image data: {exc}") from exc

        if self._max_side > 0 and max(rgba.size) > self._max_side:
            rgba.thumbnail((self._max_side, self._max_side))
        return rgba

    def normalize(self, image_bytes: bytes) -> list[tuple[int, int, int, int]]:
        """Return row-major ``(r, g, b, a)`` samples for the given image."""

        data = self.to_rgba(image_bytes).tobytes()
        # Group each run of 4 bytes into one pixel
        return [tuple(data[i : i + 4]) for i in range(0, len(data), 4)]  # type: ignore[misc]
