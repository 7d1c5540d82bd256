"""Dominant colour extraction utilities."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Sequence

QUANTIZATION_STEP = 8
ALPHA_THRESHOLD = 40
DARK_THRESHOLD = 40
LIGHT_THRESHOLD = 216

_CHANNEL_MAX = 255
_BUCKET_MAX = _CHANNEL_MAX // QUANTIZATION_STEP * QUANTIZATION_STEP


class InvalidPixelData(ValueError):
    """Raised when a pixel sample is not four integer channels in [0, 255]."""

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"pixel {index}: {message}"
        super().__init__(message)


class RGBColor(NamedTuple):
    """Quantized colour bucket returned as the dominant colour."""

    red: int
    green: int
    blue: int

    @property
    def label(self) -> str:
        return f"{self.red},{self.green},{self.blue}"

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def rgba(self, alpha: float) -> str:
        """Return a CSS ``rgba()`` expression with the given opacity."""

        return f"rgba({self.label},{alpha:g})"


def quantize_channel(value: int) -> int:
    """Snap a channel to the nearest multiple of 8, rounding halves up.

    252-255 would round to 256; they are clamped to 248 so every bucket stays a
    valid 8-bit value. Filter outcomes are identical either way, but the clamp
    merges the 244-251 and 252-255 buckets, so vote totals (and occasionally
    the winner) differ from an unclamped count when both ranges occur.
    """

    return min((value + QUANTIZATION_STEP // 2) // QUANTIZATION_STEP * QUANTIZATION_STEP, _BUCKET_MAX)


def quantize_pixel(pixel: Sequence[int], index: int | None = None) -> tuple[int, int, int, int]:
    """Validate one RGBA sample and return its quantized channels."""

    try:
        size = len(pixel)
    except TypeError:
        raise InvalidPixelData(f"expected an RGBA sequence, got {type(pixel).__name__}", index) from None
    if size != 4:
        raise InvalidPixelData(f"expected 4 channels, got {size}", index)

    for value in pixel:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidPixelData(f"channel {value!r} is not an integer", index)
        if not 0 <= value <= _CHANNEL_MAX:
            raise InvalidPixelData(f"channel {value} is outside [0, {_CHANNEL_MAX}]", index)

    red, green, blue, alpha = pixel
    return quantize_channel(red), quantize_channel(green), quantize_channel(blue), quantize_channel(alpha)


def dominant_color(pixels: Iterable[Sequence[int]]) -> RGBColor | None:
    """Return the most voted quantized colour, or ``None`` if no pixel qualifies.

    Transparent, near-black and near-white samples are skipped. The leader only
    changes when a bucket strictly exceeds its count, so among tied buckets the
    one that reached the count first wins.
    """

    counts: dict[tuple[int, int, int], int] = {}
    leader: tuple[int, int, int] | None = None
    leader_count = 0

    for index, pixel in enumerate(pixels):
        red, green, blue, alpha = quantize_pixel(pixel, index)

        if alpha <= ALPHA_THRESHOLD:
            continue
        if max(red, green, blue) <= DARK_THRESHOLD or min(red, green, blue) >= LIGHT_THRESHOLD:
            continue

        bucket = (red, green, blue)
        count = counts.get(bucket, 0) + 1
        counts[bucket] = count

        if count > leader_count:
            leader_count = count
            leader = bucket

    if leader is None:
        return None
    return RGBColor(*leader)


class ColorExtractor:
    """Quantize-and-vote dominant colour detector."""

    def dominant_color(self, pixels: Iterable[Sequence[int]]) -> RGBColor | None:
        """Return the dominant colour of an RGBA pixel sequence."""

        return dominant_color(pixels)
