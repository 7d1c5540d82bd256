"""Business logic tying rasterisation, voting and preview styling together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from dominant_color.config.settings import Settings, get_settings
from dominant_color.imgproc.color_extract import ColorExtractor, RGBColor
from dominant_color.imgproc.normalize import ImageNormalizer
from dominant_color.metrics.prometheus_exporter import extractions_total, pixels_scanned_total
from dominant_color.preview.theme import ColorTheme, build_theme

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExtractionResult:
    """Dominant colour of one image together with its preview styling."""

    color: RGBColor | None
    pixel_count: int
    theme: ColorTheme | None = None

    @property
    def found(self) -> bool:
        return self.color is not None


class DominantColorService:
    """Facade over the rasteriser and the quantize-and-vote extractor."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        normalizer: ImageNormalizer | None = None,
        extractor: ColorExtractor | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._normalizer = normalizer or ImageNormalizer(max_side=self._settings.sample_max_side)
        self._extractor = extractor or ColorExtractor()

    def from_image(self, image_bytes: bytes) -> ExtractionResult:
        """Decode ``image_bytes`` and return its dominant colour."""

        pixels = self._normalizer.normalize(image_bytes)
        return self.from_pixels(pixels)

    def from_pixels(self, pixels: Sequence[Sequence[int]]) -> ExtractionResult:
        """Run the extractor over an already rasterised pixel buffer."""

        color = self._extractor.dominant_color(pixels)
        pixels_scanned_total.inc(len(pixels))

        if color is None:
            extractions_total.labels(outcome="empty").inc()
            logger.debug("No dominant colour among %d pixels", len(pixels))
            return ExtractionResult(color=None, pixel_count=len(pixels))

        extractions_total.labels(outcome="found").inc()
        logger.debug("Dominant colour %s among %d pixels", color.hex, len(pixels))
        return ExtractionResult(color=color, pixel_count=len(pixels), theme=build_theme(color))
