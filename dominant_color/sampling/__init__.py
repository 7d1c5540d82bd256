"""Pointer-driven image sampling."""

from .controller import PreviewPanel, SamplingController
from .loader import ImageLoader, ImageLoadError
from .resolver import PointerEvent, PointerTarget, resolve_image_url

__all__ = [
    "ImageLoadError",
    "ImageLoader",
    "PointerEvent",
    "PointerTarget",
    "PreviewPanel",
    "SamplingController",
    "resolve_image_url",
]
