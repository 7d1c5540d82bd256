"""Pointer-driven preview of an image's dominant colour."""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass, field

from dominant_color.imgproc.normalize import ImageDecodeError
from dominant_color.metrics.prometheus_exporter import preview_open
from dominant_color.preview.theme import ColorTheme
from dominant_color.sampling.loader import ImageLoader, ImageLoadError
from dominant_color.sampling.resolver import PointerEvent, PointerTarget, resolve_image_url
from dominant_color.services.extraction import DominantColorService, ExtractionResult

logger = logging.getLogger(__name__)

# Recently sampled images kept for re-pointing after a dismiss
RESULT_CACHE_SIZE = 8


@dataclass(slots=True)
class PreviewPanel:
    """State of the floating panel that shows the image and its colour."""

    is_open: bool = False
    src: str = ""
    anchor: PointerTarget | None = None
    label: str = ""
    theme: ColorTheme | None = None

    def open(self, src: str, anchor: PointerTarget) -> None:
        self.src = src
        self.anchor = anchor
        self.label = ""
        self.theme = None
        self.is_open = True
        preview_open.set(1)

    def hide(self) -> None:
        self.is_open = False
        preview_open.set(0)

    def apply(self, result: ExtractionResult) -> None:
        """Tint the panel; an image without a dominant colour stays plain."""

        if result.color is None or result.theme is None:
            return
        self.label = result.theme.label
        self.theme = result.theme


@dataclass(slots=True)
class SamplingController:
    """Reacts to shift+pointer moves by previewing the pointed-at image."""

    service: DominantColorService
    loader: ImageLoader
    panel: PreviewPanel = field(default_factory=PreviewPanel)
    _results: OrderedDict[str, ExtractionResult] = field(default_factory=OrderedDict)

    async def handle_pointer_move(self, event: PointerEvent) -> PreviewPanel | None:
        """Show the preview for the image under the pointer.

        Returns the panel when it was (re)opened, ``None`` when the event was
        ignored.
        """

        if not event.shift_key:
            return None

        image = resolve_image_url(event.target)
        if not image:
            return None

        if self.panel.is_open and self.panel.src == image:
            return None

        # Close first so the panel reopens next to the new target
        if self.panel.is_open:
            self.panel.hide()

        self.panel.open(image, anchor=event.target)

        result = await self._extract(image)

        # A later pointer move may have swapped the image while we were loading
        if not self.panel.is_open or self.panel.src != image:
            return None

        if result is not None:
            self.panel.apply(result)
        return self.panel

    def dismiss(self) -> None:
        """Hide the panel, as a pointer press on it does."""

        self.panel.hide()

    async def _extract(self, image: str) -> ExtractionResult | None:
        cached = self._results.get(image)
        if cached is not None:
            self._results.move_to_end(image)
            return cached

        try:
            image_bytes = await self.loader.load(image)
            result = self.service.from_image(image_bytes)
        except (ImageLoadError, ImageDecodeError) as exc:
            logger.warning("Could not sample %s: %s", image, exc)
            return None

        self._results[image] = result
        while len(self._results) > RESULT_CACHE_SIZE:
            self._results.popitem(last=False)
        return result
