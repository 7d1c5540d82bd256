"""Find the single colour that best represents an image."""

from .imgproc.color_extract import ColorExtractor, InvalidPixelData, RGBColor, dominant_color

__all__ = [
    "ColorExtractor",
    "InvalidPixelData",
    "RGBColor",
    "dominant_color",
]
